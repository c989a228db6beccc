"""
API tests for the forum app.

Covers thread creation and listing, the view counter, replies with their
counters and notifications, moderation (lock/delete) and the saved /
followed bookmarks.
"""
import pytest
from django.test import Client

from forum import services
from forum.models import ForumCategory, ForumReaction, ForumReply, ForumThread
from moderation.models import ModerationLog
from notifications.models import Notification


@pytest.fixture
def thread(category, owner):
    return services.create_thread(category, owner, "Hoş geldiniz", "İlk konu")


@pytest.mark.django_db
def test_member_opens_thread(client_for, member, category):
    resp = client_for(member).post(
        f"/api/forum/categories/{category.id}/threads",
        {"title": "Merhaba dünya", "body": "Selam"},
        content_type="application/json",
    )
    assert resp.status_code == 201
    data = resp.json()["thread"]
    assert data["slug"] == "merhaba-dünya"
    assert data["author"]["username"] == "member1"
    assert data["replies_count"] == 0


@pytest.mark.django_db
def test_anonymous_cannot_open_thread(category):
    resp = Client().post(
        f"/api/forum/categories/{category.id}/threads",
        {"title": "Merhaba", "body": "Selam"},
        content_type="application/json",
    )
    assert resp.status_code == 401


@pytest.mark.django_db
def test_locked_category_rejects_threads(client_for, member, category):
    ForumCategory.objects.filter(pk=category.pk).update(is_locked=True)
    resp = client_for(member).post(
        f"/api/forum/categories/{category.id}/threads",
        {"title": "Merhaba", "body": "Selam"},
        content_type="application/json",
    )
    assert resp.status_code == 403
    assert resp.json()["message"]


@pytest.mark.django_db
def test_thread_list_pinned_first_and_paginated(category, owner):
    pinned = services.create_thread(category, owner, "Kurallar", "Okuyun")
    ForumThread.objects.filter(pk=pinned.pk).update(is_pinned=True)
    for i in range(3):
        services.create_thread(category, owner, f"Konu {i}", "...")

    resp = Client().get(f"/api/forum/categories/{category.id}/threads?limit=2")
    assert resp.status_code == 200
    page = resp.json()["threads"]
    assert page["count"] == 4
    assert page["limit"] == 2
    assert [t["title"] for t in page["results"]] == ["Kurallar", "Konu 2"]


@pytest.mark.django_db
def test_categories_carry_last_thread(category, owner):
    services.create_thread(category, owner, "Eski", "...")
    newest = services.create_thread(category, owner, "Yeni", "...")
    resp = Client().get("/api/forum/categories")
    rows = resp.json()["categories"]
    assert rows[0]["last_thread"]["id"] == newest.id


@pytest.mark.django_db
def test_two_reads_add_two_views(thread):
    Client().get(f"/api/forum/threads/{thread.id}")
    resp = Client().get(f"/api/forum/threads/{thread.id}")
    assert resp.status_code == 200
    assert resp.json()["thread"]["views_count"] == 2
    thread.refresh_from_db()
    assert thread.views_count == 2


@pytest.mark.django_db
def test_thread_from_other_tenant_is_404(thread, other_tenant):
    assert Client().get(f"/other/api/forum/threads/{thread.id}").status_code == 404


@pytest.mark.django_db
def test_reply_bumps_counter_and_notifies_author(client_for, member, thread):
    """A member's reply bumps the counters and notifies the thread author."""
    resp = client_for(member).post(
        f"/api/forum/threads/{thread.id}/replies", {"body": "Katılıyorum"}, content_type="application/json"
    )
    assert resp.status_code == 201
    reply = ForumReply.objects.get(pk=resp.json()["reply"]["id"])

    thread.refresh_from_db()
    assert thread.replies_count == 1
    assert thread.last_activity_at == reply.created_at

    notification = Notification.objects.get(user=thread.author)
    assert notification.type == Notification.TYPE_REPLY
    assert notification.payload["thread_id"] == thread.id
    assert notification.payload["reply_id"] == reply.id


@pytest.mark.django_db
def test_self_reply_does_not_notify(client_for, owner, thread):
    client_for(owner).post(
        f"/api/forum/threads/{thread.id}/replies", {"body": "Ek bilgi"}, content_type="application/json"
    )
    assert not Notification.objects.exists()


@pytest.mark.django_db
def test_replies_count_matches_number_of_replies(make_user, tenant, thread):
    authors = [make_user(f"u{i}", tenant) for i in range(5)]
    for author in authors:
        services.add_reply(thread, author, "+1")
    thread.refresh_from_db()
    assert thread.replies_count == 5
    latest = ForumReply.objects.filter(thread=thread).order_by("-created_at").first()
    assert thread.last_activity_at == latest.created_at


@pytest.mark.django_db
def test_lock_blocks_replies(client_for, moderator, member, thread):
    assert client_for(member).post(
        f"/api/forum/threads/{thread.id}/lock", {}, content_type="application/json"
    ).status_code == 403

    resp = client_for(moderator).post(
        f"/api/forum/threads/{thread.id}/lock", {}, content_type="application/json"
    )
    assert resp.status_code == 200
    assert resp.json()["thread"]["is_locked"] is True
    assert ModerationLog.objects.filter(action_type=ModerationLog.ACTION_THREAD_LOCK).count() == 1

    resp = client_for(member).post(
        f"/api/forum/threads/{thread.id}/replies", {"body": "Geç kaldım"}, content_type="application/json"
    )
    assert resp.status_code == 403

    client_for(moderator).post(
        f"/api/forum/threads/{thread.id}/lock", {"locked": False}, content_type="application/json"
    )
    thread.refresh_from_db()
    assert not thread.is_locked


@pytest.mark.django_db
def test_moderator_deletes_reply(client_for, moderator, member, thread):
    reply = services.add_reply(thread, member, "spam")
    Notification.objects.all().delete()

    resp = client_for(moderator).delete(f"/api/forum/replies/{reply.id}")
    assert resp.status_code == 200
    thread.refresh_from_db()
    assert thread.replies_count == 0

    notification = Notification.objects.get(user=member)
    assert notification.type == Notification.TYPE_MOD_ACTION
    log = ModerationLog.objects.get(action_type=ModerationLog.ACTION_REPLY_DELETE)
    assert log.target_id == str(reply.id)


@pytest.mark.django_db
def test_member_cannot_delete_thread(client_for, member, moderator, thread):
    assert client_for(member).delete(f"/api/forum/threads/{thread.id}").status_code == 403
    assert client_for(moderator).delete(f"/api/forum/threads/{thread.id}").status_code == 200
    assert not ForumThread.objects.filter(pk=thread.id).exists()


@pytest.mark.django_db
def test_subscribe_and_save_are_idempotent(client_for, member, thread):
    client = client_for(member)
    for _ in range(2):
        assert client.post(f"/api/forum/threads/{thread.id}/subscribe").status_code == 200
        assert client.post(f"/api/forum/threads/{thread.id}/save").status_code == 200

    detail = client.get(f"/api/forum/threads/{thread.id}").json()["thread"]
    assert detail["is_subscribed"] is True
    assert detail["is_saved"] is True

    saved = client.get("/api/forum/saved").json()["threads"]
    assert [t["id"] for t in saved] == [thread.id]
    assert saved[0]["category"]["name"] == "General"

    client.delete(f"/api/forum/threads/{thread.id}/save")
    client.delete(f"/api/forum/threads/{thread.id}/save")
    assert client.get("/api/forum/saved").json()["threads"] == []


@pytest.mark.django_db
def test_thread_save_shows_up_in_saved_items(client_for, member, thread):
    client = client_for(member)
    client.post(f"/api/forum/threads/{thread.id}/save")
    saved = client.get("/api/saved").json()["saved"]
    assert saved == [{"target_type": "thread", "target_id": thread.id, "title": thread.title}]


@pytest.mark.django_db
def test_follow_category(client_for, member, category):
    client = client_for(member)
    payload = {"target_type": "category", "target_id": category.id}
    assert client.post("/api/follows", payload, content_type="application/json").status_code == 200
    assert client.post("/api/follows", payload, content_type="application/json").status_code == 200
    assert ForumReaction.objects.filter(reaction_type=ForumReaction.REACTION_FOLLOW).count() == 1

    follows = client.get("/api/follows?target_type=category").json()["follows"]
    assert follows == [{"target_type": "category", "target_id": category.id, "title": "General"}]

    client.delete("/api/follows", payload, content_type="application/json")
    assert client.get("/api/follows").json()["follows"] == []


@pytest.mark.django_db
def test_follow_unknown_target_is_404(client_for, member, tenant):
    resp = client_for(member).post(
        "/api/follows", {"target_type": "thread", "target_id": 9999}, content_type="application/json"
    )
    assert resp.status_code == 404
