from django.apps import AppConfig


class ContentConfig(AppConfig):
    """Configuration for the content (blog / CMS) app."""
    default_auto_field = "django.db.models.BigAutoField"
    name = "content"
