from django.utils import timezone
from django.utils.text import slugify


def slugify_title(title: str, fallback_prefix: str = "item") -> str:
    """URL slug for a title; keeps Turkish letters and falls back to a timestamped slug."""
    slug = slugify(title or "", allow_unicode=True)[:200]
    return slug or f"{fallback_prefix}-{int(timezone.now().timestamp())}"
