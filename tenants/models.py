"""
Models for the tenants app.

A `Tenant` is one community hosted by the platform.  Each tenant owns an
optional `TenantSettings` row holding the landing-page copy, and a set of
`TenantMembership` rows that give users a role inside that community.
"""
from django.conf import settings
from django.db import models

from .roles import PRIVILEGED_TENANT_ROLES, TenantRole


class Tenant(models.Model):
    PLAN_FREE = "free"
    PLAN_PRO = "pro"
    PLAN_ENTERPRISE = "enterprise"
    PLAN_CHOICES = [
        (PLAN_FREE, "Free"),
        (PLAN_PRO, "Pro"),
        (PLAN_ENTERPRISE, "Enterprise"),
    ]

    STATUS_ACTIVE = "active"
    STATUS_SUSPENDED = "suspended"
    STATUS_CHOICES = [
        (STATUS_ACTIVE, "Active"),
        (STATUS_SUSPENDED, "Suspended"),
    ]

    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=100, unique=True)
    plan = models.CharField(max_length=16, choices=PLAN_CHOICES, default=PLAN_FREE)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name} ({self.slug})"


class TenantSettings(models.Model):
    """Editable landing-page content for a tenant."""

    tenant = models.OneToOneField(
        Tenant, on_delete=models.CASCADE, related_name="site_settings", primary_key=True
    )
    site_title = models.CharField(max_length=255, blank=True, null=True)
    hero_title = models.CharField(max_length=255, blank=True, null=True)
    hero_subtitle = models.TextField(blank=True, null=True)
    contact_email = models.EmailField(blank=True, null=True)
    socials = models.JSONField(default=dict, blank=True)
    default_language = models.CharField(max_length=8, default="tr")
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"Settings<{self.tenant.slug}>"


class TenantMembershipQuerySet(models.QuerySet):
    def privileged(self):
        return self.filter(role__in=PRIVILEGED_TENANT_ROLES)


class TenantMembership(models.Model):
    tenant = models.ForeignKey(Tenant, on_delete=models.CASCADE, related_name="memberships")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="tenant_memberships"
    )
    role = models.CharField(max_length=16, choices=TenantRole.choices, default=TenantRole.MEMBER)
    joined_at = models.DateTimeField(auto_now_add=True)

    objects = TenantMembershipQuerySet.as_manager()

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["tenant", "user"], name="uniq_tenant_membership"),
        ]
        indexes = [
            models.Index(fields=["tenant", "role"], name="tenant_member_role_idx"),
        ]
        ordering = ["joined_at"]

    @property
    def is_privileged(self) -> bool:
        return self.role in PRIVILEGED_TENANT_ROLES

    def __str__(self) -> str:
        return f"{self.user_id}@{self.tenant_id}:{self.role}"
