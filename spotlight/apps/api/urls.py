from django.urls import path

from .views import (
    CommentCountsView,
    CommentDeleteView,
    CommentListView,
    CommentRestoreView,
    PostBySlugView,
    PostCommentsView,
    PostCountsView,
    PostDetailView,
    PostLikeView,
    PostListView,
    StoreDetailView,
    StoreListView,
)

app_name = 'api'

urlpatterns = [
    path('stores/', StoreListView.as_view(), name='store-list'),
    path('stores/<int:pk>/', StoreDetailView.as_view(), name='store-detail'),
    path('posts/', PostListView.as_view(), name='post-list'),
    path('posts/counts/', PostCountsView.as_view(), name='post-counts'),
    path('posts/<int:pk>/', PostDetailView.as_view(), name='post-detail'),
    path('posts/<int:pk>/like/', PostLikeView.as_view(), name='post-like'),
    path('posts/<int:pk>/comments/', PostCommentsView.as_view(), name='post-comments'),
    path('posts/slug/<str:slug>/', PostBySlugView.as_view(), name='post-by-slug'),
    path('comments/', CommentListView.as_view(), name='comment-list'),
    path('comments/counts/', CommentCountsView.as_view(), name='comment-counts'),
    path('comments/<int:pk>/delete/', CommentDeleteView.as_view(), name='comment-delete'),
    path('comments/<int:pk>/restore/', CommentRestoreView.as_view(), name='comment-restore'),
]
