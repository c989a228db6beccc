from django.apps import AppConfig


class EventsConfig(AppConfig):
    """Configuration for the events calendar app."""
    default_auto_field = "django.db.models.BigAutoField"
    name = "events"
