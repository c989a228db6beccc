"""
Views for the activity_feed app.

All endpoints are public reads scoped to the addressed tenant.
"""
from rest_framework.response import Response
from rest_framework.views import APIView

from common.pagination import clamp_limit
from forum.serializers import ThreadWithCategorySerializer
from tenants.context import TenantScopedMixin

from . import queries
from .serializers import ActivityItemSerializer, HighlightsSerializer, MemberProfileSerializer


class ActivityFeedView(TenantScopedMixin, APIView):
    """
    GET /activity?limit=N&page=P

    ``page`` is best-effort: each source is offset by ``(page - 1) * limit``
    before the merge, so rows that lost the page-1 merge to a busier source
    never reappear on page 2.  Only the first page is exact.
    """
    permission_classes = []

    def get(self, request, **kwargs):
        limit = clamp_limit(request.query_params.get("limit"), default=20, maximum=100)
        try:
            page = max(int(request.query_params.get("page", 1)), 1)
        except (TypeError, ValueError):
            page = 1
        items = queries.activity_feed(self.tenant, limit=limit, page=page)
        return Response({
            "items": ActivityItemSerializer(items, many=True).data,
            "pagination": {"page": page, "limit": limit},
        })


class ForumHighlightsView(TenantScopedMixin, APIView):
    permission_classes = []

    def get(self, request, **kwargs):
        return Response(HighlightsSerializer(queries.forum_highlights(self.tenant)).data)


class NeedsAnswersView(TenantScopedMixin, APIView):
    permission_classes = []

    def get(self, request, **kwargs):
        threads = queries.needs_answers(self.tenant)
        return Response({"threads": ThreadWithCategorySerializer(threads, many=True).data})


class MemberProfileView(TenantScopedMixin, APIView):
    """Profile of a tenant member; 404 for users outside the tenant."""
    permission_classes = []

    def get(self, request, username, **kwargs):
        profile = queries.member_profile(self.tenant, username)
        return Response(MemberProfileSerializer(profile).data)
