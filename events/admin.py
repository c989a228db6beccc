"""
Admin configuration for the events app.
"""
from django.contrib import admin

from .models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ("title", "tenant", "category", "event_date", "capacity", "created_at")
    list_filter = ("tenant", "category")
    search_fields = ("title", "location", "tenant__name")
