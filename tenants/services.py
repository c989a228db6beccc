"""
Membership management with last-owner protection.

Both operations lock the tenant's privileged memberships before counting
them, so two admins demoting the last two owners concurrently cannot both
succeed.
"""
import logging
from typing import Optional

from django.db import transaction
from rest_framework.exceptions import NotFound

from common.exceptions import InsufficientRole, LastPrivilegedMember
from moderation.models import ModerationLog
from moderation.services import log_audit

from .context import TenantContext
from .models import TenantMembership
from .roles import PRIVILEGED_TENANT_ROLES, can_manage_membership

logger = logging.getLogger(__name__)


def _locked_membership(tenant, user_id) -> TenantMembership:
    membership = (
        TenantMembership.objects.select_for_update()
        .filter(tenant=tenant, user_id=user_id)
        .first()
    )
    if membership is None:
        raise NotFound("Member not found.")
    return membership


def is_last_privileged_member(membership: TenantMembership) -> bool:
    """True when ``membership`` is the only privileged row left in its tenant."""
    privileged_ids = list(
        TenantMembership.objects.select_for_update()
        .filter(tenant_id=membership.tenant_id)
        .privileged()
        .values_list("pk", flat=True)
    )
    return len(privileged_ids) <= 1 and membership.pk in privileged_ids


def _guard_privileged_removal(membership: TenantMembership, desired_role: Optional[str]):
    if not membership.is_privileged:
        return
    if desired_role is not None and desired_role in PRIVILEGED_TENANT_ROLES:
        return
    if is_last_privileged_member(membership):
        logger.info(
            "Refused to drop last privileged member user=%s tenant=%s",
            membership.user_id, membership.tenant_id,
        )
        raise LastPrivilegedMember()


def change_member_role(ctx: TenantContext, user_id, desired_role: str) -> TenantMembership:
    tenant = ctx.tenant
    with transaction.atomic():
        membership = _locked_membership(tenant, user_id)
        previous_role = membership.role
        if desired_role != previous_role:
            _guard_privileged_removal(membership, desired_role)
        if not can_manage_membership(ctx.role, previous_role, desired_role):
            raise InsufficientRole()
        TenantMembership.objects.filter(pk=membership.pk, tenant=tenant).update(role=desired_role)
        membership.role = desired_role

    log_audit(
        ctx.user, ModerationLog.ACTION_ROLE_CHANGE, "member", membership.user_id,
        tenant=tenant, **{"from": previous_role, "to": desired_role},
    )
    return membership


def remove_member(ctx: TenantContext, user_id) -> None:
    tenant = ctx.tenant
    with transaction.atomic():
        membership = _locked_membership(tenant, user_id)
        _guard_privileged_removal(membership, None)
        if not can_manage_membership(ctx.role, membership.role):
            raise InsufficientRole()
        membership.delete()

    log_audit(
        ctx.user, ModerationLog.ACTION_MEMBER_REMOVE, "member", user_id,
        tenant=tenant, role=membership.role,
    )
