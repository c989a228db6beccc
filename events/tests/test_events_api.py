"""
API tests for the events app.

Events are public to read and managed by tenant admins; every admin
change is audited.
"""
from datetime import timedelta

import pytest
from django.test import Client
from django.utils import timezone

from events.models import Event
from moderation.models import ModerationLog


@pytest.mark.django_db
def test_events_ordered_by_event_date_or_created(tenant, other_tenant):
    now = timezone.now()
    Event.objects.create(tenant=tenant, title="Geçmiş", event_date=now - timedelta(days=30))
    Event.objects.create(tenant=tenant, title="Tarihsiz")
    Event.objects.create(tenant=tenant, title="Gelecek", event_date=now + timedelta(days=10))
    Event.objects.create(tenant=other_tenant, title="Başka")

    resp = Client().get("/api/events")
    assert resp.status_code == 200
    assert [e["title"] for e in resp.json()["events"]] == ["Gelecek", "Tarihsiz", "Geçmiş"]


@pytest.mark.django_db
def test_event_detail_is_tenant_scoped(tenant, other_tenant):
    event = Event.objects.create(tenant=other_tenant, title="Başka")
    assert Client().get(f"/api/events/{event.id}").status_code == 404
    assert Client().get(f"/other/api/events/{event.id}").json()["event"]["title"] == "Başka"


@pytest.mark.django_db
def test_admin_event_crud(client_for, tenant_admin, tenant):
    client = client_for(tenant_admin)
    resp = client.post(
        "/api/admin/events",
        {"title": "Buluşma", "location": "İstanbul", "capacity": 50},
        content_type="application/json",
    )
    assert resp.status_code == 201
    event_id = resp.json()["id"]
    assert Event.objects.get(pk=event_id).tenant == tenant

    resp = client.patch(f"/api/admin/events/{event_id}", {"capacity": 80}, content_type="application/json")
    assert resp.status_code == 200
    assert resp.json()["capacity"] == 80

    assert client.delete(f"/api/admin/events/{event_id}").status_code == 204
    assert not Event.objects.filter(pk=event_id).exists()
    assert ModerationLog.objects.filter(target_type="event", target_id=str(event_id)).count() == 3


@pytest.mark.django_db
def test_admin_event_validation(client_for, tenant_admin):
    resp = client_for(tenant_admin).post(
        "/api/admin/events", {"title": "Buluşma", "capacity": 0}, content_type="application/json"
    )
    assert resp.status_code == 422
    assert "capacity" in resp.json()["errors"]


@pytest.mark.django_db
def test_moderator_cannot_manage_events(client_for, moderator):
    resp = client_for(moderator).post("/api/admin/events", {"title": "X"}, content_type="application/json")
    assert resp.status_code == 403
