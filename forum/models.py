"""
Models for the forum app.

Categories and threads belong to one tenant; replies inherit their tenant
through the thread.  ``ForumThread.replies_count`` and ``views_count`` are
counters maintained by the write paths in ``forum.services`` and are
never recomputed from child rows.
"""
from django.conf import settings
from django.db import models
from django.utils import timezone


class ForumCategory(models.Model):
    tenant = models.ForeignKey("tenants.Tenant", on_delete=models.CASCADE, related_name="forum_categories")
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, allow_unicode=True)
    description = models.TextField(blank=True, default="")
    is_locked = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]
        verbose_name_plural = "forum categories"

    def __str__(self) -> str:
        return self.name


class ForumThread(models.Model):
    tenant = models.ForeignKey("tenants.Tenant", on_delete=models.CASCADE, related_name="forum_threads")
    category = models.ForeignKey(ForumCategory, on_delete=models.CASCADE, related_name="threads")
    author = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="forum_threads")
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, allow_unicode=True)
    body = models.TextField()
    is_pinned = models.BooleanField(default=False)
    is_locked = models.BooleanField(default=False)
    is_hidden = models.BooleanField(default=False)
    views_count = models.PositiveIntegerField(default=0)
    replies_count = models.PositiveIntegerField(default=0)
    last_activity_at = models.DateTimeField(default=timezone.now)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["tenant", "created_at"], name="thread_tenant_created_idx"),
            models.Index(fields=["tenant", "last_activity_at"], name="thread_tenant_activity_idx"),
            models.Index(fields=["category", "is_pinned", "created_at"], name="thread_category_idx"),
        ]
        ordering = ["-is_pinned", "-created_at"]

    def __str__(self) -> str:
        return self.title


class ForumReply(models.Model):
    thread = models.ForeignKey(ForumThread, on_delete=models.CASCADE, related_name="replies")
    author = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="forum_replies")
    body = models.TextField()
    is_hidden = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["thread", "created_at"], name="reply_thread_created_idx"),
        ]
        ordering = ["created_at", "id"]
        verbose_name_plural = "forum replies"

    def __str__(self) -> str:
        return f"Reply({self.pk}) on {self.thread_id}"


class ForumReaction(models.Model):
    """
    A user's mark on a forum or blog row.  Saves and follows are stored as
    reactions too, keyed by (target_type, target_id).
    """
    TARGET_THREAD = "thread"
    TARGET_REPLY = "reply"
    TARGET_CATEGORY = "category"
    TARGET_POST = "post"
    TARGET_CHOICES = [
        (TARGET_THREAD, "Thread"),
        (TARGET_REPLY, "Reply"),
        (TARGET_CATEGORY, "Category"),
        (TARGET_POST, "Post"),
    ]

    REACTION_LIKE = "like"
    REACTION_HELPFUL = "helpful"
    REACTION_SAVE = "save"
    REACTION_FOLLOW = "follow"
    REACTION_CHOICES = [
        (REACTION_LIKE, "Like"),
        (REACTION_HELPFUL, "Helpful"),
        (REACTION_SAVE, "Save"),
        (REACTION_FOLLOW, "Follow"),
    ]

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="forum_reactions")
    target_type = models.CharField(max_length=16, choices=TARGET_CHOICES)
    target_id = models.PositiveBigIntegerField()
    reaction_type = models.CharField(max_length=16, choices=REACTION_CHOICES, default=REACTION_LIKE)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["user", "target_type", "target_id", "reaction_type"],
                name="uniq_forum_reaction",
            ),
        ]
        indexes = [
            models.Index(fields=["target_type", "target_id"], name="reaction_target_idx"),
        ]
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return f"{self.reaction_type}:{self.target_type}:{self.target_id} by {self.user_id}"


class ForumSubscription(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="forum_subscriptions")
    thread = models.ForeignKey(ForumThread, on_delete=models.CASCADE, related_name="subscriptions")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["user", "thread"], name="uniq_forum_subscription"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} -> thread {self.thread_id}"
