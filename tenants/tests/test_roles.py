"""
Unit tests for the role model: effective role resolution and the rules
for who may change whose membership.
"""
from tenants.roles import (
    ADMIN_ROLES,
    MODERATION_ROLES,
    GlobalRole,
    TenantRole,
    can_manage_membership,
    resolve_effective_role,
)


def test_missing_global_role_defaults_to_user():
    role = resolve_effective_role(None, TenantRole.MEMBER)
    assert role.global_role == GlobalRole.USER
    assert role.is_member


def test_non_member_is_rejected_by_every_gate():
    role = resolve_effective_role(GlobalRole.USER, None)
    assert not role.is_member
    assert not role.allows(MODERATION_ROLES)


def test_global_superadmin_passes_without_membership():
    role = resolve_effective_role(GlobalRole.SUPERADMIN, None)
    assert role.is_platform_superadmin
    assert role.allows(ADMIN_ROLES)


def test_member_is_not_a_moderator():
    assert not resolve_effective_role(None, TenantRole.MEMBER).allows(MODERATION_ROLES)
    assert resolve_effective_role(None, TenantRole.MODERATOR).allows(MODERATION_ROLES)


def test_admin_may_only_shuffle_manageable_roles():
    admin = resolve_effective_role(None, TenantRole.ADMIN)
    assert can_manage_membership(admin, TenantRole.MEMBER, TenantRole.MODERATOR)
    assert can_manage_membership(admin, TenantRole.EDITOR)
    assert not can_manage_membership(admin, TenantRole.MEMBER, TenantRole.ADMIN)
    assert not can_manage_membership(admin, TenantRole.OWNER, TenantRole.MEMBER)
    assert not can_manage_membership(admin, TenantRole.ADMIN)


def test_owner_and_superadmin_may_change_anything():
    owner = resolve_effective_role(None, TenantRole.OWNER)
    superadmin = resolve_effective_role(GlobalRole.SUPERADMIN, None)
    for actor in (owner, superadmin):
        assert can_manage_membership(actor, TenantRole.ADMIN, TenantRole.OWNER)
        assert can_manage_membership(actor, TenantRole.OWNER)


def test_moderator_cannot_manage_members():
    moderator = resolve_effective_role(None, TenantRole.MODERATOR)
    assert not can_manage_membership(moderator, TenantRole.MEMBER, TenantRole.EDITOR)
