"""
django-filter FilterSet for the admin audit-log listing.
"""
from django_filters import rest_framework as filters

from .models import ModerationLog


class ModerationLogFilter(filters.FilterSet):
    action_type = filters.ChoiceFilter(choices=ModerationLog.ACTION_CHOICES)
    target_type = filters.CharFilter(field_name="target_type")
    actor = filters.NumberFilter(field_name="actor_id")
    since = filters.IsoDateTimeFilter(field_name="created_at", lookup_expr="gte")

    class Meta:
        model = ModerationLog
        fields = ["action_type", "target_type", "actor", "since"]
