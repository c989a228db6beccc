from django.conf import settings
from django.db import models


class ModerationLog(models.Model):
    """Append-only audit trail of privileged and account actions in a tenant."""

    ACTION_REGISTER = "register"
    ACTION_LOGIN = "login"
    ACTION_LOGOUT = "logout"
    ACTION_THREAD_LOCK = "thread_lock"
    ACTION_THREAD_DELETE = "thread_delete"
    ACTION_REPLY_DELETE = "reply_delete"
    ACTION_EVENT_CREATE = "event_create"
    ACTION_EVENT_UPDATE = "event_update"
    ACTION_EVENT_DELETE = "event_delete"
    ACTION_POST_CREATE = "post_create"
    ACTION_POST_UPDATE = "post_update"
    ACTION_POST_DELETE = "post_delete"
    ACTION_ROLE_CHANGE = "role_change"
    ACTION_MEMBER_REMOVE = "member_remove"
    ACTION_SITE_CONTENT_UPDATE = "site_content_update"

    ACTION_CHOICES = [
        (ACTION_REGISTER, "Register"),
        (ACTION_LOGIN, "Login"),
        (ACTION_LOGOUT, "Logout"),
        (ACTION_THREAD_LOCK, "Thread lock"),
        (ACTION_THREAD_DELETE, "Thread delete"),
        (ACTION_REPLY_DELETE, "Reply delete"),
        (ACTION_EVENT_CREATE, "Event create"),
        (ACTION_EVENT_UPDATE, "Event update"),
        (ACTION_EVENT_DELETE, "Event delete"),
        (ACTION_POST_CREATE, "Post create"),
        (ACTION_POST_UPDATE, "Post update"),
        (ACTION_POST_DELETE, "Post delete"),
        (ACTION_ROLE_CHANGE, "Role change"),
        (ACTION_MEMBER_REMOVE, "Member remove"),
        (ACTION_SITE_CONTENT_UPDATE, "Site content update"),
    ]

    tenant = models.ForeignKey(
        "tenants.Tenant",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="moderation_logs",
    )
    actor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="moderation_logs",
    )
    action_type = models.CharField(max_length=32, choices=ACTION_CHOICES)
    target_type = models.CharField(max_length=32)
    target_id = models.CharField(max_length=64)
    reason = models.TextField(blank=True, default="")
    metadata = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["tenant", "created_at"], name="modlog_tenant_created_idx"),
            models.Index(fields=["action_type", "created_at"], name="modlog_action_created_idx"),
        ]
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return f"ModerationLog({self.action_type}) {self.target_type}:{self.target_id} by {self.actor_id}"
