"""
Write paths for the forum.

Thread counters are changed with single ``UPDATE ... SET col = col + 1``
statements so concurrent replies or views never lose an increment.
Notifications and audit rows are written after the primary change and
may fail without affecting it.
"""
import logging

from django.db import IntegrityError, transaction
from django.db.models import DateTimeField, F, Value
from django.db.models.functions import Greatest

from common.text import slugify_title
from moderation.models import ModerationLog
from moderation.services import log_audit
from notifications.models import Notification
from notifications.services import notify

from .models import ForumReaction, ForumReply, ForumSubscription, ForumThread

logger = logging.getLogger(__name__)


def create_thread(category, author, title, body) -> ForumThread:
    return ForumThread.objects.create(
        tenant_id=category.tenant_id,
        category=category,
        author=author,
        title=title,
        slug=slugify_title(title, fallback_prefix="thread"),
        body=body,
    )


def record_thread_view(thread: ForumThread) -> ForumThread:
    ForumThread.objects.filter(pk=thread.pk).update(views_count=F("views_count") + 1)
    thread.refresh_from_db(fields=["views_count"])
    return thread


def add_reply(thread: ForumThread, author, body) -> ForumReply:
    """
    Store a reply, bump the thread counters and notify the thread author
    (unless they replied to themselves).
    """
    with transaction.atomic():
        reply = ForumReply.objects.create(thread=thread, author=author, body=body)
        ForumThread.objects.filter(pk=thread.pk).update(
            replies_count=F("replies_count") + 1,
            last_activity_at=Greatest(
                "last_activity_at", Value(reply.created_at, output_field=DateTimeField())
            ),
        )

    logger.debug("Reply %s added to thread %s by user=%s", reply.pk, thread.pk, author.pk)
    if thread.author_id != author.pk:
        notify(
            thread.author_id,
            Notification.TYPE_REPLY,
            thread_id=thread.pk,
            reply_id=reply.pk,
            tenant_id=thread.tenant_id,
            message="New reply to your thread.",
        )
    return reply


def delete_reply(reply: ForumReply, actor, tenant) -> None:
    thread_id = reply.thread_id
    reply_id = reply.pk
    with transaction.atomic():
        reply.delete()
        ForumThread.objects.filter(pk=thread_id, replies_count__gt=0).update(
            replies_count=F("replies_count") - 1
        )

    if reply.author_id != actor.pk:
        notify(
            reply.author_id,
            Notification.TYPE_MOD_ACTION,
            action="reply_deleted",
            reply_id=reply_id,
            thread_id=thread_id,
            tenant_id=tenant.pk,
        )
    log_audit(
        actor, ModerationLog.ACTION_REPLY_DELETE, "forum_reply", reply_id,
        tenant=tenant, thread_id=thread_id,
    )


def set_thread_lock(thread: ForumThread, locked: bool, actor) -> ForumThread:
    ForumThread.objects.filter(pk=thread.pk).update(is_locked=locked)
    thread.is_locked = locked
    log_audit(
        actor, ModerationLog.ACTION_THREAD_LOCK, "forum_thread", thread.pk,
        tenant=thread.tenant, locked=locked,
    )
    return thread


def delete_thread(thread: ForumThread, actor) -> None:
    thread_id, tenant = thread.pk, thread.tenant
    thread.delete()
    log_audit(actor, ModerationLog.ACTION_THREAD_DELETE, "forum_thread", thread_id, tenant=tenant)


def add_reaction(user, target_type, target_id, reaction_type) -> bool:
    """Insert-or-ignore; returns True when a new row was created."""
    try:
        with transaction.atomic():
            _, created = ForumReaction.objects.get_or_create(
                user=user, target_type=target_type, target_id=target_id, reaction_type=reaction_type
            )
    except IntegrityError:
        return False
    return created


def remove_reaction(user, target_type, target_id, reaction_type) -> bool:
    deleted, _ = ForumReaction.objects.filter(
        user=user, target_type=target_type, target_id=target_id, reaction_type=reaction_type
    ).delete()
    return bool(deleted)


def subscribe(user, thread) -> bool:
    try:
        with transaction.atomic():
            _, created = ForumSubscription.objects.get_or_create(user=user, thread=thread)
    except IntegrityError:
        return False
    return created


def unsubscribe(user, thread) -> bool:
    deleted, _ = ForumSubscription.objects.filter(user=user, thread=thread).delete()
    return bool(deleted)
