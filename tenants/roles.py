"""
Two-tier role model: a platform-wide global role on the user profile and a
per-community tenant role on the membership row.

``resolve_effective_role`` folds both into a single value so permission
checks never have to repeat the global-override rule.
"""
from dataclasses import dataclass
from typing import Iterable, Optional

from django.db import models


class GlobalRole(models.TextChoices):
    USER = "user", "User"
    MODERATOR = "moderator", "Moderator"
    ADMIN = "admin", "Admin"
    SUPERADMIN = "superadmin", "Superadmin"


class TenantRole(models.TextChoices):
    MEMBER = "member", "Member"
    MODERATOR = "moderator", "Moderator"
    EDITOR = "editor", "Editor"
    ADMIN = "admin", "Admin"
    OWNER = "owner", "Owner"
    SUPERADMIN = "superadmin", "Superadmin"


# Roles that keep a community administrable; at least one must remain
PRIVILEGED_TENANT_ROLES = frozenset({TenantRole.OWNER, TenantRole.SUPERADMIN})

# Roles a plain tenant admin may assign or take away
MANAGEABLE_TENANT_ROLES = frozenset({TenantRole.MEMBER, TenantRole.MODERATOR, TenantRole.EDITOR})

ADMIN_ROLES = (TenantRole.ADMIN, TenantRole.OWNER, TenantRole.SUPERADMIN)
MODERATION_ROLES = (TenantRole.MODERATOR, TenantRole.ADMIN, TenantRole.OWNER, TenantRole.SUPERADMIN)
EDITOR_ROLES = (TenantRole.ADMIN, TenantRole.EDITOR, TenantRole.OWNER, TenantRole.SUPERADMIN)


@dataclass(frozen=True)
class EffectiveRole:
    global_role: str
    tenant_role: Optional[str] = None

    @property
    def is_platform_superadmin(self) -> bool:
        return self.global_role == GlobalRole.SUPERADMIN

    @property
    def is_member(self) -> bool:
        return self.tenant_role is not None

    def allows(self, allowed_roles: Iterable[str]) -> bool:
        """
        Role gate used by the permission classes.

        A global superadmin always passes.  Everyone else needs a
        membership, and then either the tenant role or the global role
        must be listed in ``allowed_roles``.
        """
        if self.is_platform_superadmin:
            return True
        if not self.is_member:
            return False
        allowed = set(allowed_roles)
        return self.tenant_role in allowed or self.global_role in allowed


def resolve_effective_role(global_role: Optional[str], tenant_role: Optional[str]) -> EffectiveRole:
    return EffectiveRole(global_role=global_role or GlobalRole.USER, tenant_role=tenant_role or None)


def can_manage_membership(
    actor: EffectiveRole, target_role: Optional[str], desired_role: Optional[str] = None
) -> bool:
    """
    Whether ``actor`` may move a membership from ``target_role`` to
    ``desired_role`` (``None`` means the membership is being removed).
    """
    if actor.is_platform_superadmin:
        return True
    if actor.tenant_role in PRIVILEGED_TENANT_ROLES:
        return True
    if actor.tenant_role == TenantRole.ADMIN:
        return (target_role is None or target_role in MANAGEABLE_TENANT_ROLES) and (
            desired_role is None or desired_role in MANAGEABLE_TENANT_ROLES
        )
    return False
