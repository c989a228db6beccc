from django.contrib import admin
from .models import ForumCategory, ForumReaction, ForumReply, ForumSubscription, ForumThread


@admin.register(ForumCategory)
class ForumCategoryAdmin(admin.ModelAdmin):
    list_display = ("id", "tenant", "name", "slug", "is_locked", "created_at")
    list_filter = ("tenant", "is_locked")
    search_fields = ("name", "slug")


@admin.register(ForumThread)
class ForumThreadAdmin(admin.ModelAdmin):
    list_display = ("id", "tenant", "category", "title", "author", "is_pinned", "is_locked", "replies_count", "views_count")
    list_filter = ("tenant", "is_pinned", "is_locked", "is_hidden")
    search_fields = ("title", "author__username")
    readonly_fields = ("replies_count", "views_count")


@admin.register(ForumReply)
class ForumReplyAdmin(admin.ModelAdmin):
    list_display = ("id", "thread", "author", "is_hidden", "created_at")
    list_filter = ("is_hidden",)
    search_fields = ("body", "author__username")


admin.site.register(ForumReaction)
admin.site.register(ForumSubscription)
