from django.urls import path
from rest_framework.routers import DefaultRouter

from .views import AdminEventViewSet, EventDetailView, EventListView

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register(r"admin/events", AdminEventViewSet, basename="admin-events")

urlpatterns = router.urls + [
    path("events", EventListView.as_view(), name="events"),
    path("events/<int:event_id>", EventDetailView.as_view(), name="event-detail"),
]
