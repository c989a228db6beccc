"""
Views for the forum app.

Reading the forum is public; posting requires a membership in the tenant,
and moderation (lock, delete) requires a moderator-level role.
"""
import logging

from django.db.models import OuterRef, Subquery
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from common.exceptions import InsufficientRole
from common.pagination import DefaultPagination
from content.models import Post
from tenants.context import TenantScopedMixin
from tenants.permissions import IsTenantModerator, RequireAuthenticated

from .models import ForumCategory, ForumReaction, ForumReply, ForumSubscription, ForumThread
from .serializers import (
    CategorySerializer,
    CategoryWithLastThreadSerializer,
    FollowSerializer,
    ReplyCreateSerializer,
    ReplySerializer,
    SaveSerializer,
    ThreadCreateSerializer,
    ThreadLockSerializer,
    ThreadSerializer,
    ThreadWithCategorySerializer,
)
from . import services

logger = logging.getLogger(__name__)


class ForumScopedView(TenantScopedMixin, APIView):
    """Shared lookups restricted to the addressed tenant."""

    def get_thread(self, thread_id):
        return get_object_or_404(
            ForumThread.objects.select_related("author__profile", "category"),
            pk=thread_id,
            tenant=self.tenant,
        )

    def get_category(self, category_id):
        return get_object_or_404(ForumCategory, pk=category_id, tenant=self.tenant)


class CategoryListView(ForumScopedView):
    """GET /forum/categories: each category with its most recently active thread."""
    permission_classes = []

    def get(self, request, **kwargs):
        latest = (
            ForumThread.objects.filter(category=OuterRef("pk"))
            .order_by("-last_activity_at", "-id")
            .values("pk")[:1]
        )
        categories = list(
            ForumCategory.objects.filter(tenant=self.tenant)
            .annotate(last_thread_id=Subquery(latest))
            .order_by("created_at", "id")
        )
        thread_ids = [c.last_thread_id for c in categories if c.last_thread_id]
        threads = ForumThread.objects.select_related("author__profile").in_bulk(thread_ids)
        last_threads = {c.pk: threads.get(c.last_thread_id) for c in categories}
        data = CategoryWithLastThreadSerializer(
            categories, many=True, context={"last_threads": last_threads}
        ).data
        return Response({"categories": data})


class CategoryThreadListView(ForumScopedView):
    """
    GET lists a category's threads, pinned first then newest, paginated
    with ``?page=`` and ``?limit=``.  POST opens a new thread.
    """

    def get_permissions(self):
        if self.request.method == "POST":
            return [RequireAuthenticated()]
        return []

    def get(self, request, category_id, **kwargs):
        category = self.get_category(category_id)
        threads = (
            ForumThread.objects.filter(category=category, tenant=self.tenant)
            .select_related("author__profile")
            .order_by("-is_pinned", "-created_at", "-id")
        )
        paginator = DefaultPagination()
        page = paginator.paginate_queryset(threads, request, view=self)
        return Response({
            "category": CategorySerializer(category).data,
            "threads": paginator.get_paginated_data(ThreadSerializer(page, many=True).data),
        })

    def post(self, request, category_id, **kwargs):
        serializer = ThreadCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        category = ForumCategory.objects.filter(pk=category_id, tenant=self.tenant).first()
        if category is None or category.is_locked:
            raise InsufficientRole("New threads cannot be opened in this category.")
        thread = services.create_thread(category, request.user, **serializer.validated_data)
        return Response({"thread": ThreadSerializer(thread).data}, status=status.HTTP_201_CREATED)


class ThreadDetailView(ForumScopedView):
    """
    GET returns the thread with a page of replies and counts one view.
    DELETE removes the thread (moderators only).
    """

    def get_permissions(self):
        if self.request.method == "DELETE":
            return [IsTenantModerator()]
        return []

    def get(self, request, thread_id, **kwargs):
        thread = services.record_thread_view(self.get_thread(thread_id))

        replies = thread.replies.select_related("author__profile").order_by("created_at", "id")
        paginator = DefaultPagination()
        page = paginator.paginate_queryset(replies, request, view=self)

        is_subscribed = is_saved = False
        if self.tenant_ctx.is_authenticated:
            is_subscribed = ForumSubscription.objects.filter(user=request.user, thread=thread).exists()
            is_saved = ForumReaction.objects.filter(
                user=request.user,
                target_type=ForumReaction.TARGET_THREAD,
                target_id=thread.pk,
                reaction_type=ForumReaction.REACTION_SAVE,
            ).exists()

        data = ThreadWithCategorySerializer(thread).data
        data.update(is_subscribed=is_subscribed, is_saved=is_saved)
        return Response({
            "thread": data,
            "replies": paginator.get_paginated_data(ReplySerializer(page, many=True).data),
        })

    def delete(self, request, thread_id, **kwargs):
        services.delete_thread(self.get_thread(thread_id), request.user)
        return Response({"message": "Thread deleted."})


class ThreadLockView(ForumScopedView):
    permission_classes = [IsTenantModerator]

    def post(self, request, thread_id, **kwargs):
        thread = self.get_thread(thread_id)
        serializer = ThreadLockSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        thread = services.set_thread_lock(thread, serializer.validated_data["locked"], request.user)
        return Response({"thread": ThreadSerializer(thread).data})


class ThreadReplyCreateView(ForumScopedView):
    permission_classes = [RequireAuthenticated]

    def post(self, request, thread_id, **kwargs):
        serializer = ReplyCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        thread = self.get_thread(thread_id)
        if thread.is_locked:
            raise InsufficientRole("This thread is locked.")
        reply = services.add_reply(thread, request.user, serializer.validated_data["body"])
        return Response({"reply": ReplySerializer(reply).data}, status=status.HTTP_201_CREATED)


class ReplyDetailView(ForumScopedView):
    permission_classes = [IsTenantModerator]

    def delete(self, request, reply_id, **kwargs):
        reply = get_object_or_404(
            ForumReply.objects.select_related("thread"), pk=reply_id, thread__tenant=self.tenant
        )
        services.delete_reply(reply, request.user, self.tenant)
        return Response({"message": "Reply deleted."})


class ThreadSubscribeView(ForumScopedView):
    permission_classes = [RequireAuthenticated]

    def post(self, request, thread_id, **kwargs):
        services.subscribe(request.user, self.get_thread(thread_id))
        return Response({"message": "Subscribed.", "is_subscribed": True})

    def delete(self, request, thread_id, **kwargs):
        services.unsubscribe(request.user, self.get_thread(thread_id))
        return Response({"message": "Unsubscribed.", "is_subscribed": False})


class ThreadSaveView(ForumScopedView):
    permission_classes = [RequireAuthenticated]

    def post(self, request, thread_id, **kwargs):
        thread = self.get_thread(thread_id)
        services.add_reaction(
            request.user, ForumReaction.TARGET_THREAD, thread.pk, ForumReaction.REACTION_SAVE
        )
        return Response({"message": "Saved.", "is_saved": True})

    def delete(self, request, thread_id, **kwargs):
        services.remove_reaction(
            request.user, ForumReaction.TARGET_THREAD, thread_id, ForumReaction.REACTION_SAVE
        )
        return Response({"message": "Removed from saved.", "is_saved": False})


class SavedThreadListView(ForumScopedView):
    """GET /forum/saved: threads the caller saved in this tenant, most recently saved first."""
    permission_classes = [RequireAuthenticated]

    def get(self, request, **kwargs):
        thread_ids = list(
            ForumReaction.objects.filter(
                user=request.user,
                target_type=ForumReaction.TARGET_THREAD,
                reaction_type=ForumReaction.REACTION_SAVE,
            ).values_list("target_id", flat=True)
        )
        threads = ForumThread.objects.filter(tenant=self.tenant).select_related(
            "author__profile", "category"
        ).in_bulk(thread_ids)
        ordered = [threads[pk] for pk in thread_ids if pk in threads]
        return Response({"threads": ThreadWithCategorySerializer(ordered, many=True).data})


class FollowView(ForumScopedView):
    """
    GET/POST/DELETE /follows: follow categories and threads.  Writes are
    idempotent; GET accepts optional ``target_type`` and ``target_id`` filters.
    """
    permission_classes = [RequireAuthenticated]

    def _follow_models(self):
        return {
            "category": (ForumReaction.TARGET_CATEGORY, ForumCategory, "name"),
            "thread": (ForumReaction.TARGET_THREAD, ForumThread, "title"),
        }

    def get(self, request, **kwargs):
        wanted_type = request.query_params.get("target_type")
        wanted_id = request.query_params.get("target_id")
        follows = []
        for public_type, (target_type, model, title_field) in self._follow_models().items():
            if wanted_type and wanted_type != public_type:
                continue
            reactions = ForumReaction.objects.filter(
                user=request.user, target_type=target_type, reaction_type=ForumReaction.REACTION_FOLLOW
            )
            if wanted_id and str(wanted_id).isdigit():
                reactions = reactions.filter(target_id=int(wanted_id))
            ids = list(reactions.values_list("target_id", flat=True))
            rows = model.objects.filter(tenant=self.tenant, pk__in=ids).values("pk", title_field)
            follows.extend(
                {"target_type": public_type, "target_id": row["pk"], "title": row[title_field]}
                for row in rows
            )
        return Response({"follows": follows})

    def post(self, request, **kwargs):
        serializer = FollowSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        target_type, model, _ = self._follow_models()[serializer.validated_data["target_type"]]
        target = get_object_or_404(model, pk=serializer.validated_data["target_id"], tenant=self.tenant)
        services.add_reaction(request.user, target_type, target.pk, ForumReaction.REACTION_FOLLOW)
        return Response({"message": "Following."})

    def delete(self, request, **kwargs):
        serializer = FollowSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        target_type, _, _ = self._follow_models()[serializer.validated_data["target_type"]]
        services.remove_reaction(
            request.user, target_type, serializer.validated_data["target_id"], ForumReaction.REACTION_FOLLOW
        )
        return Response({"message": "Unfollowed."})


class SavedItemView(ForumScopedView):
    """GET/POST/DELETE /saved: bookmarks on threads and blog posts."""
    permission_classes = [RequireAuthenticated]

    def _saved_models(self):
        return {
            "thread": (ForumReaction.TARGET_THREAD, ForumThread, "title"),
            "post": (ForumReaction.TARGET_POST, Post, "title"),
        }

    def get(self, request, **kwargs):
        wanted_type = request.query_params.get("target_type")
        saved = []
        for public_type, (target_type, model, title_field) in self._saved_models().items():
            if wanted_type and wanted_type != public_type:
                continue
            ids = list(
                ForumReaction.objects.filter(
                    user=request.user, target_type=target_type, reaction_type=ForumReaction.REACTION_SAVE
                ).values_list("target_id", flat=True)
            )
            rows = model.objects.filter(tenant=self.tenant, pk__in=ids).values("pk", title_field)
            saved.extend(
                {"target_type": public_type, "target_id": row["pk"], "title": row[title_field]}
                for row in rows
            )
        return Response({"saved": saved})

    def post(self, request, **kwargs):
        serializer = SaveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        target_type, model, _ = self._saved_models()[serializer.validated_data["target_type"]]
        target = get_object_or_404(model, pk=serializer.validated_data["target_id"], tenant=self.tenant)
        services.add_reaction(request.user, target_type, target.pk, ForumReaction.REACTION_SAVE)
        return Response({"message": "Saved."})

    def delete(self, request, **kwargs):
        serializer = SaveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        target_type, _, _ = self._saved_models()[serializer.validated_data["target_type"]]
        services.remove_reaction(
            request.user, target_type, serializer.validated_data["target_id"], ForumReaction.REACTION_SAVE
        )
        return Response({"message": "Removed from saved."})
