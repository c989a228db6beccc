"""
Admin configuration for the users app.

This module unregisters the default `User` admin and re-registers it with
an inline profile form so that global roles and account status are
editable via the Django admin.
"""
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.models import User

from .models import UserProfile


class UserProfileInline(admin.StackedInline):
    model = UserProfile
    can_delete = False


class UserAdmin(BaseUserAdmin):
    inlines = [UserProfileInline]
    list_display = ("username", "email", "profile_role", "profile_status", "is_active", "date_joined")

    @admin.display(description="Role")
    def profile_role(self, obj):
        return getattr(getattr(obj, "profile", None), "role", "")

    @admin.display(description="Status")
    def profile_status(self, obj):
        return getattr(getattr(obj, "profile", None), "status", "")


admin.site.unregister(User)
admin.site.register(User, UserAdmin)


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "display_name", "role", "status", "trust_level", "reputation_points")
    list_filter = ("role", "status", "email_verified")
    search_fields = ("user__username", "user__email", "display_name")
