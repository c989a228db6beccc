"""
Models for the users app.

A `UserProfile` model extends the built-in `auth.User` with the platform's
global role, account status and reputation counters.  A `OneToOneField`
links each profile to its user.  The `UserProfile` is created
automatically via signals when a new user instance is saved.
"""
from django.contrib.auth.models import User
from django.db import models

from tenants.roles import GlobalRole


class UserProfile(models.Model):
    """Extension of Django's built-in User model."""

    STATUS_ACTIVE = "active"
    STATUS_SUSPENDED = "suspended"
    STATUS_BANNED = "banned"
    STATUS_CHOICES = [
        (STATUS_ACTIVE, "Active"),
        (STATUS_SUSPENDED, "Suspended"),
        (STATUS_BANNED, "Banned"),
    ]
    BLOCKED_STATUSES = (STATUS_SUSPENDED, STATUS_BANNED)

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="profile")
    display_name = models.CharField(max_length=100, blank=True)
    role = models.CharField(max_length=16, choices=GlobalRole.choices, default=GlobalRole.USER)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_ACTIVE)
    bio = models.TextField(blank=True)
    avatar_url = models.URLField(blank=True)
    trust_level = models.PositiveSmallIntegerField(default=0)  # 0-5
    reputation_points = models.IntegerField(default=0)
    email_verified = models.BooleanField(default=False)
    must_change_password = models.BooleanField(default=False)
    last_login_at = models.DateTimeField(null=True, blank=True)

    @property
    def is_blocked(self) -> bool:
        return self.status in self.BLOCKED_STATUSES

    def __str__(self) -> str:
        return f"Profile<{self.user.username}>"

    class Meta:
        indexes = [
            models.Index(fields=["role"], name="profile_role_idx"),
            models.Index(fields=["status"], name="profile_status_idx"),
        ]
