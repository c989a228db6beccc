from django.urls import path
from rest_framework.routers import DefaultRouter

from .views import AdminPostViewSet, PostDetailView, PostListView

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register(r"admin/posts", AdminPostViewSet, basename="admin-posts")

urlpatterns = [
    path("posts", PostListView.as_view(), name="posts"),
    path("posts/<str:id_or_slug>", PostDetailView.as_view(), name="post-detail"),
]

urlpatterns += router.urls
