from rest_framework import serializers

from forum.serializers import ReplySerializer, ThreadSerializer, ThreadWithCategorySerializer
from users.serializers import PublicProfileSerializer


class ActivityItemSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    title = serializers.CharField()
    created_at = serializers.DateTimeField()
    type = serializers.CharField()
    ref_id = serializers.ReadOnlyField()


class ReplyWithThreadSerializer(ReplySerializer):
    thread = ThreadSerializer(read_only=True)

    class Meta(ReplySerializer.Meta):
        fields = ReplySerializer.Meta.fields + ["thread"]
        read_only_fields = fields


class HighlightsSerializer(serializers.Serializer):
    newest = ThreadWithCategorySerializer(many=True)
    most_answered = ThreadWithCategorySerializer(many=True)
    most_viewed = ThreadWithCategorySerializer(many=True)


class MemberProfileSerializer(serializers.Serializer):
    user = PublicProfileSerializer()
    threads = ThreadWithCategorySerializer(many=True)
    replies = ReplyWithThreadSerializer(many=True)
