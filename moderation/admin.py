from django.contrib import admin
from .models import ModerationLog


@admin.register(ModerationLog)
class ModerationLogAdmin(admin.ModelAdmin):
    list_display = ("id", "tenant", "action_type", "target_type", "target_id", "actor", "created_at")
    list_filter = ("action_type", "target_type", "tenant")
    search_fields = ("target_id", "actor__username", "actor__email")
