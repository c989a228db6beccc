from rest_framework import serializers

from .models import ModerationLog


class ModerationLogSerializer(serializers.ModelSerializer):
    actor_username = serializers.CharField(source="actor.username", read_only=True, default=None)

    class Meta:
        model = ModerationLog
        fields = [
            "id", "actor", "actor_username", "action_type", "target_type",
            "target_id", "reason", "metadata", "created_at",
        ]
        read_only_fields = fields
