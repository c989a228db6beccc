from rest_framework import serializers

from .models import Tenant, TenantMembership, TenantSettings
from .roles import TenantRole


class TenantSerializer(serializers.ModelSerializer):
    class Meta:
        model = Tenant
        fields = ["id", "name", "slug", "plan", "status", "created_at"]
        read_only_fields = fields


class TenantSettingsSerializer(serializers.ModelSerializer):
    class Meta:
        model = TenantSettings
        fields = [
            "site_title", "hero_title", "hero_subtitle", "contact_email",
            "socials", "default_language", "updated_at",
        ]
        read_only_fields = ["updated_at"]
        extra_kwargs = {
            "site_title": {"max_length": 255},
            "default_language": {"min_length": 2},
        }


class MemberSerializer(serializers.ModelSerializer):
    """A membership row flattened with the member's account fields."""
    id = serializers.IntegerField(source="user.id", read_only=True)
    username = serializers.CharField(source="user.username", read_only=True)
    email = serializers.EmailField(source="user.email", read_only=True)
    display_name = serializers.CharField(source="user.profile.display_name", read_only=True, default="")
    status = serializers.CharField(source="user.profile.status", read_only=True, default=None)
    tenant_role = serializers.CharField(source="role", read_only=True)

    class Meta:
        model = TenantMembership
        fields = ["id", "username", "display_name", "email", "role", "tenant_role", "status", "joined_at"]
        read_only_fields = fields


class RoleChangeSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=TenantRole.choices)
