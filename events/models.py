"""
Models for the events app.

An `Event` belongs to a single tenant and is shown on the public events
calendar.  Events without a date are listed by their creation time.
"""
from django.db import models
from django.db.models.functions import Coalesce


class EventQuerySet(models.QuerySet):
    def with_activity_at(self):
        return self.annotate(activity_at=Coalesce("event_date", "created_at"))


class Event(models.Model):
    """Represents an event within a tenant."""
    tenant = models.ForeignKey("tenants.Tenant", on_delete=models.CASCADE, related_name="events")
    title = models.CharField(max_length=255)
    category = models.CharField(max_length=100, blank=True, default="")
    description = models.TextField(blank=True, default="")
    location = models.CharField(max_length=255, blank=True, default="")
    event_date = models.DateTimeField(null=True, blank=True)
    capacity = models.PositiveIntegerField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = EventQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["tenant", "event_date"], name="event_tenant_date_idx"),
        ]

    def __str__(self) -> str:
        return self.title
