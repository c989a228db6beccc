from django.apps import AppConfig


class ActivityFeedConfig(AppConfig):
    """Read-only aggregation endpoints: activity feed, forum highlights, profiles."""
    default_auto_field = "django.db.models.BigAutoField"
    name = "activity_feed"
