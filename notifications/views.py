from rest_framework.response import Response
from rest_framework.views import APIView

from tenants.context import TenantScopedMixin
from tenants.permissions import RequireAuthenticated

from .models import Notification
from .serializers import NotificationSerializer


class NotificationListView(TenantScopedMixin, APIView):
    """GET /notifications: the caller's notifications, newest first (``?unread=1`` for unread only)."""
    permission_classes = [RequireAuthenticated]

    def get(self, request, **kwargs):
        qs = Notification.objects.filter(user=request.user)
        if request.query_params.get("unread") in ("1", "true", "True"):
            qs = qs.filter(is_read=False)
        return Response({
            "notifications": NotificationSerializer(qs, many=True).data,
            "unread_count": Notification.objects.filter(user=request.user, is_read=False).count(),
        })


class NotificationMarkReadView(TenantScopedMixin, APIView):
    permission_classes = [RequireAuthenticated]

    def post(self, request, **kwargs):
        updated = Notification.objects.filter(user=request.user, is_read=False).update(is_read=True)
        return Response({"message": "Notifications marked as read.", "updated": updated})
