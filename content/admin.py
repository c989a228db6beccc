from django.contrib import admin
from .models import Post


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ("id", "tenant", "title", "slug", "status", "published_at", "author")
    list_filter = ("tenant", "status")
    search_fields = ("title", "slug", "author__username")
    prepopulated_fields = {"slug": ("title",)}
