from rest_framework import serializers

from users.serializers import AuthorSerializer

from .models import ForumCategory, ForumReply, ForumThread


class CategoryRefSerializer(serializers.ModelSerializer):
    class Meta:
        model = ForumCategory
        fields = ["id", "name"]
        read_only_fields = fields


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = ForumCategory
        fields = ["id", "name", "slug", "description", "is_locked", "created_at"]
        read_only_fields = fields


class ThreadSerializer(serializers.ModelSerializer):
    author = AuthorSerializer(read_only=True)

    class Meta:
        model = ForumThread
        fields = [
            "id", "category_id", "title", "slug", "body", "is_pinned", "is_locked",
            "is_hidden", "views_count", "replies_count", "last_activity_at", "created_at", "author",
        ]
        read_only_fields = fields


class ThreadWithCategorySerializer(ThreadSerializer):
    category = CategoryRefSerializer(read_only=True)

    class Meta(ThreadSerializer.Meta):
        fields = ThreadSerializer.Meta.fields + ["category"]
        read_only_fields = fields


class CategoryWithLastThreadSerializer(CategorySerializer):
    last_thread = serializers.SerializerMethodField()

    class Meta(CategorySerializer.Meta):
        fields = CategorySerializer.Meta.fields + ["last_thread"]
        read_only_fields = fields

    def get_last_thread(self, obj):
        thread = self.context.get("last_threads", {}).get(obj.pk)
        return ThreadSerializer(thread).data if thread else None


class ReplySerializer(serializers.ModelSerializer):
    author = AuthorSerializer(read_only=True)

    class Meta:
        model = ForumReply
        fields = ["id", "thread_id", "body", "is_hidden", "created_at", "updated_at", "author"]
        read_only_fields = fields


class ThreadCreateSerializer(serializers.Serializer):
    title = serializers.CharField(min_length=3, max_length=255)
    body = serializers.CharField(min_length=1)


class ReplyCreateSerializer(serializers.Serializer):
    body = serializers.CharField(min_length=1)


class ThreadLockSerializer(serializers.Serializer):
    locked = serializers.BooleanField(default=True)


class FollowSerializer(serializers.Serializer):
    target_type = serializers.ChoiceField(choices=["category", "thread"])
    target_id = serializers.IntegerField(min_value=1)


class SaveSerializer(serializers.Serializer):
    target_type = serializers.ChoiceField(choices=["thread", "post"])
    target_id = serializers.IntegerField(min_value=1)
