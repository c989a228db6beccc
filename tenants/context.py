"""
Per-request tenant context.

Every API view is mounted under ``/<tenant_slug>/api/`` (or the bare
``/api/`` alias that stands for ``settings.DEFAULT_TENANT_SLUG``).  The
`TenantScopedMixin` resolves the tenant and the caller's membership once,
before authentication checks run, and stores the result on the view as
``view.tenant_ctx``.  Permission classes and handlers read it from there.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from django.conf import settings

from common.exceptions import TenantNotFound

from .models import Tenant, TenantMembership
from .roles import EffectiveRole, resolve_effective_role

logger = logging.getLogger(__name__)


def global_role_of(user) -> Optional[str]:
    profile = getattr(user, "profile", None)
    return getattr(profile, "role", None)


@dataclass(frozen=True)
class TenantContext:
    tenant: Tenant
    user: object
    membership: Optional[TenantMembership] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user is not None and self.user.is_authenticated)

    @property
    def tenant_role(self) -> Optional[str]:
        return self.membership.role if self.membership else None

    @property
    def role(self) -> EffectiveRole:
        global_role = global_role_of(self.user) if self.is_authenticated else None
        return resolve_effective_role(global_role, self.tenant_role)


def resolve_tenant(slug: Optional[str]) -> Tenant:
    slug = slug or settings.DEFAULT_TENANT_SLUG
    try:
        return Tenant.objects.get(slug=slug)
    except Tenant.DoesNotExist:
        logger.info("Request for unknown tenant slug %r", slug)
        raise TenantNotFound()


def build_tenant_context(tenant: Tenant, user) -> TenantContext:
    membership = None
    if user is not None and user.is_authenticated:
        membership = TenantMembership.objects.filter(tenant=tenant, user=user).first()
    return TenantContext(tenant=tenant, user=user, membership=membership)


class TenantScopedMixin:
    """
    Resolve ``tenant_ctx`` for an APIView before permissions are checked.

    An unknown slug fails the request with 404 before any handler runs.
    """
    tenant_ctx: Optional[TenantContext] = None

    def initial(self, request, *args, **kwargs):
        tenant = resolve_tenant(kwargs.get("tenant_slug"))
        self.tenant_ctx = build_tenant_context(tenant, request.user)
        super().initial(request, *args, **kwargs)

    @property
    def tenant(self) -> Tenant:
        return self.tenant_ctx.tenant

    def refresh_tenant_context(self, user):
        """Rebuild the context after the session user changes (login/register)."""
        self.tenant_ctx = build_tenant_context(self.tenant_ctx.tenant, user)
        return self.tenant_ctx
