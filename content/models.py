"""
Models for the content app.

The ``Post`` model is a tenant-scoped blog article.  Only published posts
are visible on the public endpoints and in the activity feed; they are
ordered by ``coalesce(published_at, created_at)``.
"""
from django.conf import settings
from django.db import models
from django.db.models.functions import Coalesce


class PostQuerySet(models.QuerySet):
    def published(self):
        return self.filter(status=Post.STATUS_PUBLISHED)

    def with_activity_at(self):
        return self.annotate(activity_at=Coalesce("published_at", "created_at"))


class Post(models.Model):
    STATUS_DRAFT = "draft"
    STATUS_SCHEDULED = "scheduled"
    STATUS_PUBLISHED = "published"
    STATUS_CHOICES = [
        (STATUS_DRAFT, "Draft"),
        (STATUS_SCHEDULED, "Scheduled"),
        (STATUS_PUBLISHED, "Published"),
    ]

    tenant = models.ForeignKey("tenants.Tenant", on_delete=models.CASCADE, related_name="posts")
    author = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="posts")
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, allow_unicode=True)
    excerpt = models.TextField(blank=True, default="")
    content = models.TextField()
    cover_image = models.CharField(max_length=500, blank=True, default="")
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_DRAFT)
    published_at = models.DateTimeField(null=True, blank=True)
    seo_title = models.CharField(max_length=255, blank=True, default="")
    seo_description = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PostQuerySet.as_manager()

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["tenant", "slug"], name="uniq_post_slug_per_tenant"),
        ]
        indexes = [
            models.Index(fields=["tenant", "status", "published_at"], name="post_tenant_status_idx"),
        ]
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.title
