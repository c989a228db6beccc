"""
Views for the events app.

Anyone may browse a tenant's events; tenant admins manage them through
``AdminEventViewSet`` and every change is written to the audit log.
"""
import logging

from django.shortcuts import get_object_or_404
from rest_framework import viewsets
from rest_framework.response import Response
from rest_framework.views import APIView

from moderation.models import ModerationLog
from moderation.services import log_audit
from tenants.context import TenantScopedMixin
from tenants.permissions import IsTenantAdmin

from .models import Event
from .serializers import EventSerializer

logger = logging.getLogger(__name__)


def _tenant_events(tenant):
    return Event.objects.filter(tenant=tenant).with_activity_at().order_by("-activity_at", "-id")


class EventListView(TenantScopedMixin, APIView):
    permission_classes = []

    def get(self, request, **kwargs):
        events = _tenant_events(self.tenant)
        category = request.query_params.get("category")
        if category:
            events = events.filter(category__iexact=category)
        return Response({"events": EventSerializer(events, many=True).data})


class EventDetailView(TenantScopedMixin, APIView):
    permission_classes = []

    def get(self, request, event_id, **kwargs):
        event = get_object_or_404(Event, pk=event_id, tenant=self.tenant)
        return Response({"event": EventSerializer(event).data})


class AdminEventViewSet(TenantScopedMixin, viewsets.ModelViewSet):
    """
    CRUD for a tenant's events under /admin/events.
    """
    serializer_class = EventSerializer
    permission_classes = [IsTenantAdmin]
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]

    def get_queryset(self):
        return _tenant_events(self.tenant)

    def perform_create(self, serializer):
        event = serializer.save(tenant=self.tenant)
        logger.info("Event %s created in tenant %s", event.pk, self.tenant.slug)
        log_audit(
            self.request.user, ModerationLog.ACTION_EVENT_CREATE, "event", event.pk,
            tenant=self.tenant, title=event.title,
        )

    def perform_update(self, serializer):
        event = serializer.save()
        log_audit(
            self.request.user, ModerationLog.ACTION_EVENT_UPDATE, "event", event.pk,
            tenant=self.tenant, fields=sorted(serializer.validated_data),
        )

    def perform_destroy(self, instance):
        event_id, title = instance.pk, instance.title
        instance.delete()
        log_audit(
            self.request.user, ModerationLog.ACTION_EVENT_DELETE, "event", event_id,
            tenant=self.tenant, title=title,
        )
