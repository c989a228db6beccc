"""
Permission classes for tenant-scoped views.

They read ``view.tenant_ctx`` (set by `TenantScopedMixin`) and raise the
specific DRF exception for each failure so the client can tell "sign in"
apart from "not a member" and "insufficient permission".
"""
from rest_framework.exceptions import NotAuthenticated
from rest_framework.permissions import BasePermission

from common.exceptions import InsufficientRole, NotAMember

from .roles import ADMIN_ROLES, EDITOR_ROLES, MODERATION_ROLES


def _tenant_ctx(view):
    ctx = getattr(view, "tenant_ctx", None)
    if ctx is None:
        raise RuntimeError(f"{type(view).__name__} is not tenant scoped")
    return ctx


class RequireAuthenticated(BasePermission):
    """A signed-in caller who belongs to the tenant (or a platform superadmin)."""

    def has_permission(self, request, view):
        ctx = _tenant_ctx(view)
        if not ctx.is_authenticated:
            raise NotAuthenticated("You must sign in.")
        role = ctx.role
        if role.is_platform_superadmin or role.is_member:
            return True
        raise NotAMember()


def require_role(*roles):
    """Build a permission class admitting callers whose tenant or global role is in ``roles``."""

    class RequireRole(BasePermission):
        allowed_roles = frozenset(roles)

        def has_permission(self, request, view):
            ctx = _tenant_ctx(view)
            if not ctx.is_authenticated:
                raise NotAuthenticated("You must sign in.")
            role = ctx.role
            if not role.is_platform_superadmin and not role.is_member:
                raise NotAMember()
            if role.allows(self.allowed_roles):
                return True
            raise InsufficientRole()

    return RequireRole


IsTenantAdmin = require_role(*ADMIN_ROLES)
IsTenantModerator = require_role(*MODERATION_ROLES)
IsTenantEditor = require_role(*EDITOR_ROLES)
