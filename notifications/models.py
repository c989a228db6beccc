from django.conf import settings
from django.db import models


class Notification(models.Model):
    TYPE_REPLY = "reply"
    TYPE_MENTION = "mention"
    TYPE_LIKE = "like"
    TYPE_DM = "dm"
    TYPE_MOD_ACTION = "mod_action"
    TYPE_CHOICES = [
        (TYPE_REPLY, "Reply"),
        (TYPE_MENTION, "Mention"),
        (TYPE_LIKE, "Like"),
        (TYPE_DM, "Direct message"),
        (TYPE_MOD_ACTION, "Moderation action"),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="notifications"
    )
    type = models.CharField(max_length=16, choices=TYPE_CHOICES)
    payload = models.JSONField(default=dict)
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["user", "is_read", "created_at"], name="notif_user_read_idx"),
        ]
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return f"Notification({self.type}) -> {self.user_id}"
