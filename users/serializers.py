"""
Serializers for the users app.

Covers the session user payload returned by the auth endpoints, the
compact author summary embedded in forum/blog rows, and the register,
login and change-password request bodies.
"""
from __future__ import annotations

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from .validators import validate_email_smart

User = get_user_model()


class SessionUserSerializer(serializers.ModelSerializer):
    """The signed-in user, with the role held in the addressed tenant."""
    display_name = serializers.CharField(source="profile.display_name", read_only=True)
    role = serializers.CharField(source="profile.role", read_only=True)
    status = serializers.CharField(source="profile.status", read_only=True)
    bio = serializers.CharField(source="profile.bio", read_only=True)
    avatar_url = serializers.CharField(source="profile.avatar_url", read_only=True)
    trust_level = serializers.IntegerField(source="profile.trust_level", read_only=True)
    reputation_points = serializers.IntegerField(source="profile.reputation_points", read_only=True)
    email_verified = serializers.BooleanField(source="profile.email_verified", read_only=True)
    must_change_password = serializers.BooleanField(source="profile.must_change_password", read_only=True)
    created_at = serializers.DateTimeField(source="date_joined", read_only=True)
    tenant_role = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "id", "username", "display_name", "email", "role", "status", "bio",
            "avatar_url", "trust_level", "reputation_points", "email_verified",
            "must_change_password", "created_at", "tenant_role",
        ]
        read_only_fields = fields

    def get_tenant_role(self, obj):
        return self.context.get("tenant_role")


class UserSummarySerializer(serializers.ModelSerializer):
    display_name = serializers.CharField(source="profile.display_name", read_only=True, default="")

    class Meta:
        model = User
        fields = ["id", "username", "display_name"]
        read_only_fields = fields


class PublicProfileSerializer(serializers.ModelSerializer):
    display_name = serializers.CharField(source="profile.display_name", read_only=True, default="")
    bio = serializers.CharField(source="profile.bio", read_only=True, default="")
    avatar_url = serializers.CharField(source="profile.avatar_url", read_only=True, default="")
    role = serializers.CharField(source="profile.role", read_only=True, default=None)
    created_at = serializers.DateTimeField(source="date_joined", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "display_name", "bio", "avatar_url", "role", "created_at"]
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    """
    Input for POST /auth/register.  Uniqueness is checked by the view so a
    duplicate can be answered with 409 rather than a validation error.
    """
    username = serializers.CharField(min_length=3, max_length=50, trim_whitespace=True)
    email = serializers.CharField(max_length=254)
    password = serializers.CharField(min_length=6, max_length=128, write_only=True, trim_whitespace=False)
    display_name = serializers.CharField(max_length=100, required=False, allow_blank=True)

    def validate_email(self, value):
        try:
            return validate_email_smart(value)
        except DjangoValidationError as e:
            raise serializers.ValidationError(e.messages)


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class ChangePasswordSerializer(serializers.Serializer):
    current_password = serializers.CharField(write_only=True, trim_whitespace=False)
    new_password = serializers.CharField(min_length=8, max_length=128, write_only=True, trim_whitespace=False)


class AuthorSerializer(UserSummarySerializer):
    """Author block embedded in threads, replies and posts."""
    avatar_url = serializers.CharField(source="profile.avatar_url", read_only=True, default="")
    role = serializers.CharField(source="profile.role", read_only=True, default=None)

    class Meta(UserSummarySerializer.Meta):
        fields = UserSummarySerializer.Meta.fields + ["avatar_url", "role"]
        read_only_fields = fields
