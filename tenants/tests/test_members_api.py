"""
API tests for tenant resolution and the admin member console.

Covers the 404 for unknown tenants, membership gating, and the rule that
a tenant never loses its last owner.
"""
import pytest
from django.test import Client

from moderation.models import ModerationLog
from tenants.models import TenantMembership, TenantSettings
from tenants.roles import GlobalRole, TenantRole


@pytest.mark.django_db
def test_unknown_tenant_is_404(tenant):
    resp = Client().get("/nope/api/tenant")
    assert resp.status_code == 404
    assert resp.json()["message"]


@pytest.mark.django_db
def test_bare_api_prefix_uses_default_tenant(tenant):
    resp = Client().get("/api/tenant")
    assert resp.status_code == 200
    assert resp.json()["tenant"]["slug"] == "akincilar"

    resp = Client().get("/akincilar/api/tenant")
    assert resp.json()["tenant"]["id"] == tenant.id


@pytest.mark.django_db
def test_member_list_requires_sign_in(tenant):
    resp = Client().get("/api/admin/members")
    assert resp.status_code == 401


@pytest.mark.django_db
def test_member_list_forbidden_for_plain_member(client_for, member):
    resp = client_for(member).get("/api/admin/members")
    assert resp.status_code == 403


@pytest.mark.django_db
def test_non_member_gets_403_and_superadmin_gets_through(client_for, make_user, owner):
    outsider = make_user("outsider")
    assert client_for(outsider).get("/api/admin/members").status_code == 403

    root = make_user("root", global_role=GlobalRole.SUPERADMIN)
    resp = client_for(root).get("/api/admin/members")
    assert resp.status_code == 200
    assert [m["username"] for m in resp.json()["members"]] == ["owner"]


@pytest.mark.django_db
def test_admin_cannot_demote_sole_owner(client_for, owner, tenant_admin):
    """An admin demoting the only owner is refused with 400 and nothing changes."""
    resp = client_for(tenant_admin).patch(
        f"/api/admin/members/{owner.id}/role", {"role": "member"}, content_type="application/json"
    )
    assert resp.status_code == 400
    assert TenantMembership.objects.get(user=owner).role == TenantRole.OWNER


@pytest.mark.django_db
def test_owner_cannot_remove_themselves_when_last(client_for, owner):
    resp = client_for(owner).delete(f"/api/admin/members/{owner.id}")
    assert resp.status_code == 400
    assert TenantMembership.objects.filter(user=owner).exists()


@pytest.mark.django_db
def test_second_owner_can_be_demoted(client_for, make_user, tenant, owner):
    co_owner = make_user("coowner", tenant, TenantRole.OWNER)
    resp = client_for(owner).patch(
        f"/api/admin/members/{co_owner.id}/role", {"role": "admin"}, content_type="application/json"
    )
    assert resp.status_code == 200
    assert resp.json()["member"]["role"] == "admin"

    log = ModerationLog.objects.get(action_type=ModerationLog.ACTION_ROLE_CHANGE)
    assert log.metadata == {"from": "owner", "to": "admin"}
    assert log.target_id == str(co_owner.id)


@pytest.mark.django_db
def test_admin_cannot_promote_to_admin(client_for, owner, tenant_admin, member):
    resp = client_for(tenant_admin).patch(
        f"/api/admin/members/{member.id}/role", {"role": "admin"}, content_type="application/json"
    )
    assert resp.status_code == 403

    resp = client_for(tenant_admin).patch(
        f"/api/admin/members/{member.id}/role", {"role": "moderator"}, content_type="application/json"
    )
    assert resp.status_code == 200


@pytest.mark.django_db
def test_role_change_is_scoped_to_tenant(client_for, make_user, other_tenant, owner):
    stranger = make_user("stranger", other_tenant, TenantRole.MEMBER)
    resp = client_for(owner).patch(
        f"/api/admin/members/{stranger.id}/role", {"role": "moderator"}, content_type="application/json"
    )
    assert resp.status_code == 404
    assert TenantMembership.objects.get(user=stranger).role == TenantRole.MEMBER


@pytest.mark.django_db
def test_invalid_role_is_422(client_for, owner, member):
    resp = client_for(owner).patch(
        f"/api/admin/members/{member.id}/role", {"role": "king"}, content_type="application/json"
    )
    assert resp.status_code == 422
    assert "role" in resp.json()["errors"]


@pytest.mark.django_db
def test_site_content_upsert(client_for, make_user, tenant, member):
    assert Client().get("/api/site-content").json() == {"content": None}
    assert client_for(member).patch(
        "/api/site-content", {"hero_title": "Hi"}, content_type="application/json"
    ).status_code == 403

    editor = make_user("editor1", tenant, TenantRole.EDITOR)
    resp = client_for(editor).patch(
        "/api/site-content", {"hero_title": "Merhaba"}, content_type="application/json"
    )
    assert resp.status_code == 200
    assert resp.json()["content"]["hero_title"] == "Merhaba"
    assert TenantSettings.objects.get(tenant=tenant).hero_title == "Merhaba"
    assert ModerationLog.objects.filter(action_type=ModerationLog.ACTION_SITE_CONTENT_UPDATE).count() == 1
