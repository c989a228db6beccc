"""
Test settings for the community platform.

Runs the suite against an in-memory SQLite database with a fast password
hasher so pytest-django does not need a PostgreSQL server.
"""
from .base import *  # noqa

DEBUG = False
SECRET_KEY = "test-insecure"
ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

CACHES = {
    "default": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache"},
}

DEFAULT_TENANT_SLUG = "akincilar"
STRICT_EMAIL_DNS = False
