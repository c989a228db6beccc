from django.urls import path

from .views import ActivityFeedView, ForumHighlightsView, MemberProfileView, NeedsAnswersView

urlpatterns = [
    path("activity", ActivityFeedView.as_view(), name="activity"),
    path("forum/highlights", ForumHighlightsView.as_view(), name="forum-highlights"),
    path("forum/needs-answers", NeedsAnswersView.as_view(), name="forum-needs-answers"),
    path("profiles/<str:username>", MemberProfileView.as_view(), name="member-profile"),
    path("users/<str:username>/profile", MemberProfileView.as_view(), name="user-profile"),
]
