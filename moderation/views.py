from rest_framework import generics

from tenants.context import TenantScopedMixin
from tenants.permissions import IsTenantAdmin

from .filters import ModerationLogFilter
from .models import ModerationLog
from .serializers import ModerationLogSerializer


class AuditLogListView(TenantScopedMixin, generics.ListAPIView):
    """GET /admin/audit-logs: newest-first audit trail of the current tenant."""
    permission_classes = [IsTenantAdmin]
    serializer_class = ModerationLogSerializer
    filterset_class = ModerationLogFilter

    def get_queryset(self):
        return ModerationLog.objects.filter(tenant=self.tenant).select_related("actor")
