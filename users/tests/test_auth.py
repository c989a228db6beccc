"""
Tests for session authentication in the users app.

Covers registration (including the 409 on duplicates), login failures for
blocked accounts and non-members, the ``/auth/me`` contract, password
change and the auth rate limit.
"""
import pytest
from django.conf import settings
from django.test import Client

from moderation.models import ModerationLog
from tenants.models import TenantMembership
from tenants.roles import TenantRole
from users.models import UserProfile


def _register(client, **overrides):
    payload = {
        "username": "zeynep",
        "email": "zeynep@akincilar.org",
        "password": "gizli123",
        "display_name": "Zeynep",
    }
    payload.update(overrides)
    return client.post("/api/auth/register", payload, content_type="application/json")


@pytest.mark.django_db
def test_register_creates_member_and_signs_in(tenant):
    client = Client()
    resp = _register(client)
    assert resp.status_code == 201
    body = resp.json()
    assert body["user"]["username"] == "zeynep"
    assert body["user"]["display_name"] == "Zeynep"
    assert body["user"]["tenant_role"] == "member"
    assert body["tenant"]["slug"] == "akincilar"

    membership = TenantMembership.objects.get(user__username="zeynep")
    assert membership.tenant == tenant
    assert membership.role == TenantRole.MEMBER

    me = client.get("/api/auth/me")
    assert me.status_code == 200
    assert me.json()["user"]["username"] == "zeynep"
    assert ModerationLog.objects.filter(action_type=ModerationLog.ACTION_REGISTER).exists()


@pytest.mark.django_db
def test_register_duplicate_username_or_email_is_409(tenant):
    assert _register(Client()).status_code == 201
    assert _register(Client(), email="other@akincilar.org").status_code == 409
    resp = _register(Client(), username="zeynep2", email="ZEYNEP@akincilar.org")
    assert resp.status_code == 409
    assert resp.json()["message"]


@pytest.mark.django_db
def test_register_validation_is_422(tenant):
    resp = _register(Client(), username="ab", email="not-an-email", password="123")
    assert resp.status_code == 422
    errors = resp.json()["errors"]
    assert set(errors) == {"username", "email", "password"}


@pytest.mark.django_db
def test_register_on_unknown_tenant_is_404(tenant):
    resp = Client().post(
        "/nowhere/api/auth/register",
        {"username": "zeynep", "email": "zeynep@akincilar.org", "password": "gizli123"},
        content_type="application/json",
    )
    assert resp.status_code == 404


@pytest.mark.django_db
def test_login_success_updates_last_login(member):
    client = Client()
    resp = client.post(
        "/api/auth/login", {"username": "member1", "password": "pass12345"}, content_type="application/json"
    )
    assert resp.status_code == 200
    assert resp.json()["user"]["tenant_role"] == "member"
    assert settings.SESSION_COOKIE_NAME in resp.cookies
    assert UserProfile.objects.get(user=member).last_login_at is not None


@pytest.mark.django_db
def test_login_wrong_password_is_401(member):
    resp = Client().post(
        "/api/auth/login", {"username": "member1", "password": "nope"}, content_type="application/json"
    )
    assert resp.status_code == 401


@pytest.mark.django_db
def test_login_missing_fields_is_422(tenant):
    resp = Client().post("/api/auth/login", {}, content_type="application/json")
    assert resp.status_code == 422


@pytest.mark.django_db
def test_banned_user_cannot_sign_in(make_user, tenant):
    """A banned account is refused with 401 and no session cookie is issued."""
    make_user("banned1", tenant, TenantRole.MEMBER, status=UserProfile.STATUS_BANNED)
    client = Client()
    resp = client.post(
        "/api/auth/login", {"username": "banned1", "password": "pass12345"}, content_type="application/json"
    )
    assert resp.status_code == 401
    assert settings.SESSION_COOKIE_NAME not in resp.cookies
    assert client.get("/api/auth/me").status_code == 401


@pytest.mark.django_db
def test_suspended_user_cannot_sign_in(make_user, tenant):
    make_user("susp", tenant, TenantRole.MEMBER, status=UserProfile.STATUS_SUSPENDED)
    resp = Client().post(
        "/api/auth/login", {"username": "susp", "password": "pass12345"}, content_type="application/json"
    )
    assert resp.status_code == 401


@pytest.mark.django_db
def test_login_without_membership_is_403(make_user, tenant):
    make_user("drifter")
    resp = Client().post(
        "/api/auth/login", {"username": "drifter", "password": "pass12345"}, content_type="application/json"
    )
    assert resp.status_code == 403


@pytest.mark.django_db
def test_me_when_signed_out(tenant):
    resp = Client().get("/api/auth/me")
    assert resp.status_code == 401
    assert resp.json()["user"] is None


@pytest.mark.django_db
def test_logout_clears_session(client_for, member):
    client = client_for(member)
    assert client.post("/api/auth/logout").status_code == 200
    assert client.get("/api/auth/me").status_code == 401


@pytest.mark.django_db
def test_change_password(client_for, member):
    client = client_for(member)
    resp = client.post(
        "/api/auth/change-password",
        {"current_password": "wrong", "new_password": "brandnew123"},
        content_type="application/json",
    )
    assert resp.status_code == 401

    resp = client.post(
        "/api/auth/change-password",
        {"current_password": "pass12345", "new_password": "short"},
        content_type="application/json",
    )
    assert resp.status_code == 422

    resp = client.post(
        "/api/auth/change-password",
        {"current_password": "pass12345", "new_password": "brandnew123"},
        content_type="application/json",
    )
    assert resp.status_code == 200
    member.refresh_from_db()
    assert member.check_password("brandnew123")
    assert client.get("/api/auth/me").status_code == 200


@pytest.mark.django_db
def test_login_is_rate_limited(member):
    client = Client()
    for _ in range(settings.AUTH_RATE_LIMIT_MAX):
        resp = client.post(
            "/api/auth/login", {"username": "member1", "password": "bad"}, content_type="application/json"
        )
        assert resp.status_code == 401
    resp = client.post(
        "/api/auth/login", {"username": "member1", "password": "pass12345"}, content_type="application/json"
    )
    assert resp.status_code == 429
    assert resp.json()["message"]
