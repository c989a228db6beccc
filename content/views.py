"""
Views for the content app.

Public readers see published posts only, newest by
``coalesce(published_at, created_at)``.  ``AdminPostViewSet`` gives
tenant admins full CRUD over every post, drafts included, and records
each change in the audit log.
"""
from django.shortcuts import get_object_or_404
from django_filters.rest_framework import DjangoFilterBackend, FilterSet, ChoiceFilter
from rest_framework import viewsets
from rest_framework.response import Response
from rest_framework.views import APIView

from common.exceptions import Conflict
from moderation.models import ModerationLog
from moderation.services import log_audit
from tenants.context import TenantScopedMixin
from tenants.permissions import IsTenantAdmin

from .models import Post
from .serializers import PostSerializer


def _public_posts(tenant):
    return (
        Post.objects.filter(tenant=tenant)
        .published()
        .with_activity_at()
        .select_related("author__profile")
        .order_by("-activity_at", "-id")
    )


class PostListView(TenantScopedMixin, APIView):
    permission_classes = []

    def get(self, request, **kwargs):
        return Response({"posts": PostSerializer(_public_posts(self.tenant), many=True).data})


class PostDetailView(TenantScopedMixin, APIView):
    """GET /posts/<id-or-slug>"""
    permission_classes = []

    def get(self, request, id_or_slug, **kwargs):
        posts = _public_posts(self.tenant)
        if id_or_slug.isdigit():
            post = posts.filter(pk=int(id_or_slug)).first() or get_object_or_404(posts, slug=id_or_slug)
        else:
            post = get_object_or_404(posts, slug=id_or_slug)
        return Response({"post": PostSerializer(post).data})


class AdminPostFilter(FilterSet):
    status = ChoiceFilter(choices=Post.STATUS_CHOICES)

    class Meta:
        model = Post
        fields = ["status"]


class AdminPostViewSet(TenantScopedMixin, viewsets.ModelViewSet):
    """
    CRUD operations for Post objects under /admin/posts.  On creation the
    ``author`` is the acting admin and the tenant comes from the URL.
    """
    serializer_class = PostSerializer
    permission_classes = [IsTenantAdmin]
    filter_backends = [DjangoFilterBackend]
    filterset_class = AdminPostFilter
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]

    def get_queryset(self):
        return Post.objects.filter(tenant=self.tenant).select_related("author__profile").order_by("-created_at")

    def _ensure_slug_free(self, slug, exclude_pk=None):
        qs = Post.objects.filter(tenant=self.tenant, slug=slug)
        if exclude_pk is not None:
            qs = qs.exclude(pk=exclude_pk)
        if qs.exists():
            raise Conflict("A post with this slug already exists.")

    def perform_create(self, serializer):
        self._ensure_slug_free(serializer.validated_data["slug"])
        post = serializer.save(tenant=self.tenant, author=self.request.user)
        log_audit(
            self.request.user, ModerationLog.ACTION_POST_CREATE, "post", post.pk,
            tenant=self.tenant, status=post.status,
        )

    def perform_update(self, serializer):
        if "slug" in serializer.validated_data:
            self._ensure_slug_free(serializer.validated_data["slug"], exclude_pk=serializer.instance.pk)
        post = serializer.save()
        log_audit(
            self.request.user, ModerationLog.ACTION_POST_UPDATE, "post", post.pk,
            tenant=self.tenant, fields=sorted(serializer.validated_data),
        )

    def perform_destroy(self, instance):
        post_id = instance.pk
        instance.delete()
        log_audit(self.request.user, ModerationLog.ACTION_POST_DELETE, "post", post_id, tenant=self.tenant)
