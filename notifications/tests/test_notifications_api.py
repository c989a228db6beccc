from unittest import mock

import pytest
from django.test import Client

from notifications.models import Notification
from notifications.services import notify


@pytest.mark.django_db
def test_list_and_mark_read(client_for, member, owner):
    notify(member.id, Notification.TYPE_REPLY, thread_id=1)
    notify(member.id, Notification.TYPE_MOD_ACTION, action="reply_deleted")
    notify(owner.id, Notification.TYPE_REPLY, thread_id=2)

    client = client_for(member)
    body = client.get("/api/notifications").json()
    assert body["unread_count"] == 2
    assert [n["type"] for n in body["notifications"]] == ["mod_action", "reply"]

    resp = client.post("/api/notifications/read")
    assert resp.json()["updated"] == 2
    assert client.get("/api/notifications?unread=1").json()["notifications"] == []
    assert Notification.objects.filter(user=owner, is_read=False).count() == 1


@pytest.mark.django_db
def test_notifications_require_sign_in(tenant):
    assert Client().get("/api/notifications").status_code == 401


@pytest.mark.django_db
def test_notify_failure_returns_none(member):
    with mock.patch.object(Notification.objects, "create", side_effect=RuntimeError("boom")):
        assert notify(member.id, Notification.TYPE_REPLY) is None
