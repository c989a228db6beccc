"""
Cross-app read queries behind the aggregation endpoints.

Nothing here writes or caches: every call recomputes from the current
rows of the forum, content and events apps.
"""
from itertools import chain
from typing import Iterable, List

from django.contrib.auth import get_user_model
from django.db.models import F
from django.http import Http404

from content.models import Post
from events.models import Event
from forum.models import ForumReply, ForumThread
from tenants.models import TenantMembership

User = get_user_model()

HIGHLIGHT_SIZE = 8
NEEDS_ANSWER_SIZE = 10
PROFILE_ITEMS = 10

KIND_THREAD = "thread"
KIND_REPLY = "reply"
KIND_POST = "post"
KIND_EVENT = "event"


def merge_activity(sources: Iterable[Iterable[dict]], limit: int) -> List[dict]:
    """
    Merge already-tagged activity rows from several sources, newest first.

    Rows whose ``created_at`` is missing are dropped.  Python's sort is
    stable, so rows with equal timestamps keep their source order.
    """
    rows = [row for row in chain.from_iterable(sources) if row.get("created_at") is not None]
    rows.sort(key=lambda row: row["created_at"], reverse=True)
    return rows[:limit]


def _window(qs, limit, offset):
    return qs[offset:offset + limit]


def thread_activity(tenant, limit, offset=0):
    qs = (
        ForumThread.objects.filter(tenant=tenant)
        .order_by(F("last_activity_at").desc(nulls_last=True), "-id")
        .values("id", "title", "last_activity_at")
    )
    return [
        {"id": row["id"], "title": row["title"], "created_at": row["last_activity_at"],
         "type": KIND_THREAD, "ref_id": row["id"]}
        for row in _window(qs, limit, offset)
    ]


def reply_activity(tenant, limit, offset=0):
    qs = (
        ForumReply.objects.filter(thread__tenant=tenant)
        .order_by("-created_at", "-id")
        .values("id", "body", "created_at", "thread_id")
    )
    return [
        {"id": row["id"], "title": row["body"], "created_at": row["created_at"],
         "type": KIND_REPLY, "ref_id": row["thread_id"]}
        for row in _window(qs, limit, offset)
    ]


def post_activity(tenant, limit, offset=0):
    qs = (
        Post.objects.filter(tenant=tenant)
        .published()
        .with_activity_at()
        .order_by("-activity_at", "-id")
        .values("id", "title", "slug", "activity_at")
    )
    return [
        {"id": row["id"], "title": row["title"], "created_at": row["activity_at"],
         "type": KIND_POST, "ref_id": row["slug"]}
        for row in _window(qs, limit, offset)
    ]


def event_activity(tenant, limit, offset=0):
    qs = (
        Event.objects.filter(tenant=tenant)
        .with_activity_at()
        .order_by("-activity_at", "-id")
        .values("id", "title", "activity_at")
    )
    return [
        {"id": row["id"], "title": row["title"], "created_at": row["activity_at"],
         "type": KIND_EVENT, "ref_id": row["id"]}
        for row in _window(qs, limit, offset)
    ]


def activity_feed(tenant, limit=20, page=1) -> List[dict]:
    """Top ``limit`` items across threads, replies, published posts and events."""
    offset = (page - 1) * limit
    sources = [
        thread_activity(tenant, limit, offset),
        reply_activity(tenant, limit, offset),
        post_activity(tenant, limit, offset),
        event_activity(tenant, limit, offset),
    ]
    return merge_activity(sources, limit)


def _threads_with_refs(tenant):
    return ForumThread.objects.filter(tenant=tenant).select_related("category", "author__profile")


def forum_highlights(tenant, size=HIGHLIGHT_SIZE) -> dict:
    threads = _threads_with_refs(tenant)
    return {
        "newest": list(threads.order_by("-created_at", "-id")[:size]),
        "most_answered": list(threads.order_by("-replies_count", "-last_activity_at", "-id")[:size]),
        "most_viewed": list(threads.order_by("-views_count", "-last_activity_at", "-id")[:size]),
    }


def needs_answers(tenant, size=NEEDS_ANSWER_SIZE):
    return list(
        _threads_with_refs(tenant).filter(replies_count=0).order_by("-created_at", "-id")[:size]
    )


def member_profile(tenant, username) -> dict:
    """
    The public profile of ``username`` within ``tenant``.

    Raises ``Http404`` when the user does not exist or never joined the
    tenant, so profiles never leak across communities.
    """
    user = User.objects.select_related("profile").filter(username=username).first()
    if user is None:
        raise Http404("User not found.")
    if not TenantMembership.objects.filter(tenant=tenant, user=user).exists():
        raise Http404("User is not a member of this community.")

    threads = (
        ForumThread.objects.filter(tenant=tenant, author=user)
        .select_related("category", "author__profile")
        .order_by("-created_at", "-id")[:PROFILE_ITEMS]
    )
    replies = (
        ForumReply.objects.filter(thread__tenant=tenant, author=user)
        .select_related("thread", "author__profile")
        .order_by("-created_at", "-id")[:PROFILE_ITEMS]
    )
    return {"user": user, "threads": list(threads), "replies": list(replies)}
