from django.urls import path

from .views import (
    AdminMemberDetailView,
    AdminMemberListView,
    AdminMemberRoleView,
    SiteContentView,
    TenantDetailView,
)

urlpatterns = [
    path("tenant", TenantDetailView.as_view(), name="tenant-detail"),
    path("site-content", SiteContentView.as_view(), name="site-content"),
    path("admin/members", AdminMemberListView.as_view(), name="admin-members"),
    path("admin/members/<int:user_id>", AdminMemberDetailView.as_view(), name="admin-member-detail"),
    path("admin/members/<int:user_id>/role", AdminMemberRoleView.as_view(), name="admin-member-role"),
]
