"""
Views for the tenants app: the admin member console and site content.
"""
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import ensure_csrf_cookie
from rest_framework.response import Response
from rest_framework.views import APIView

from moderation.models import ModerationLog
from moderation.services import log_audit

from .context import TenantScopedMixin
from .models import TenantMembership, TenantSettings
from .permissions import IsTenantAdmin, IsTenantEditor
from .serializers import (
    MemberSerializer,
    RoleChangeSerializer,
    TenantSerializer,
    TenantSettingsSerializer,
)
from .services import change_member_role, remove_member


class TenantDetailView(TenantScopedMixin, APIView):
    """GET /tenant: public description of the addressed community."""
    permission_classes = []

    @method_decorator(ensure_csrf_cookie)
    def get(self, request, **kwargs):
        ctx = self.tenant_ctx
        return Response({
            "tenant": TenantSerializer(ctx.tenant).data,
            "tenant_role": ctx.tenant_role,
        })


class AdminMemberListView(TenantScopedMixin, APIView):
    permission_classes = [IsTenantAdmin]

    def get(self, request, **kwargs):
        members = (
            TenantMembership.objects.filter(tenant=self.tenant)
            .select_related("user", "user__profile")
            .order_by("joined_at", "id")
        )
        return Response({"members": MemberSerializer(members, many=True).data})


class AdminMemberRoleView(TenantScopedMixin, APIView):
    """PATCH /admin/members/<user_id>/role"""
    permission_classes = [IsTenantAdmin]

    def patch(self, request, user_id, **kwargs):
        serializer = RoleChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        membership = change_member_role(self.tenant_ctx, user_id, serializer.validated_data["role"])
        return Response({"member": MemberSerializer(membership).data})


class AdminMemberDetailView(TenantScopedMixin, APIView):
    """DELETE /admin/members/<user_id>"""
    permission_classes = [IsTenantAdmin]

    def delete(self, request, user_id, **kwargs):
        remove_member(self.tenant_ctx, user_id)
        return Response({"message": "Membership removed."})


class SiteContentView(TenantScopedMixin, APIView):
    """
    GET /site-content is public; PATCH upserts the tenant's landing-page
    copy and is limited to admins, editors and owners.
    """

    def get_permissions(self):
        if self.request.method == "PATCH":
            return [IsTenantEditor()]
        return []

    def get(self, request, **kwargs):
        content = TenantSettings.objects.filter(tenant=self.tenant).first()
        return Response({"content": TenantSettingsSerializer(content).data if content else None})

    def patch(self, request, **kwargs):
        content = TenantSettings.objects.filter(tenant=self.tenant).first()
        serializer = TenantSettingsSerializer(content, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        content = serializer.save(tenant=self.tenant)
        log_audit(
            request.user, ModerationLog.ACTION_SITE_CONTENT_UPDATE, "site_content", self.tenant.pk,
            tenant=self.tenant, fields=sorted(serializer.validated_data),
        )
        return Response({"content": TenantSettingsSerializer(content).data})
