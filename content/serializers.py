"""
Serializers for the content app.

``PostSerializer`` is used for both the public listing and the admin CRUD
endpoints; the slug is derived from the title when omitted and a post
switched to ``published`` without a date is stamped with the current time.
"""
from django.utils import timezone
from rest_framework import serializers

from common.text import slugify_title
from users.serializers import AuthorSerializer

from .models import Post


class PostSerializer(serializers.ModelSerializer):
    author = AuthorSerializer(read_only=True)
    slug = serializers.SlugField(max_length=255, allow_unicode=True, required=False)

    class Meta:
        model = Post
        fields = [
            "id", "title", "slug", "excerpt", "content", "cover_image", "status",
            "published_at", "seo_title", "seo_description", "created_at", "updated_at", "author",
        ]
        read_only_fields = ["id", "created_at", "updated_at", "author"]

    def validate(self, data):
        if not self.instance and not data.get("slug"):
            data["slug"] = slugify_title(data.get("title", ""), fallback_prefix="post")
        status = data.get("status") or getattr(self.instance, "status", None)
        published_at = data.get("published_at") or getattr(self.instance, "published_at", None)
        if status == Post.STATUS_PUBLISHED and not published_at:
            data["published_at"] = timezone.now()
        return data
