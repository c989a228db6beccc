from django.urls import path

from .views import (
    CategoryListView,
    CategoryThreadListView,
    FollowView,
    ReplyDetailView,
    SavedItemView,
    SavedThreadListView,
    ThreadDetailView,
    ThreadLockView,
    ThreadReplyCreateView,
    ThreadSaveView,
    ThreadSubscribeView,
)

urlpatterns = [
    path("forum/categories", CategoryListView.as_view(), name="forum-categories"),
    path("forum/categories/<int:category_id>/threads", CategoryThreadListView.as_view(), name="forum-category-threads"),
    path("forum/threads/<int:thread_id>", ThreadDetailView.as_view(), name="forum-thread"),
    path("forum/threads/<int:thread_id>/lock", ThreadLockView.as_view(), name="forum-thread-lock"),
    path("forum/threads/<int:thread_id>/replies", ThreadReplyCreateView.as_view(), name="forum-thread-replies"),
    path("forum/threads/<int:thread_id>/subscribe", ThreadSubscribeView.as_view(), name="forum-thread-subscribe"),
    path("forum/threads/<int:thread_id>/save", ThreadSaveView.as_view(), name="forum-thread-save"),
    path("forum/replies/<int:reply_id>", ReplyDetailView.as_view(), name="forum-reply"),
    path("forum/saved", SavedThreadListView.as_view(), name="forum-saved"),
    path("follows", FollowView.as_view(), name="follows"),
    path("saved", SavedItemView.as_view(), name="saved"),
]
