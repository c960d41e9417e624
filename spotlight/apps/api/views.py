from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.results import http_status
from apps.posts.services import CommentService, PostService
from apps.stores.services import StoreService

from .permissions import IsAdminOrCreateOnly, IsAdminOrReadOnly, IsAdminUser


def _listing_params(request, default_limit=10):
    params = {
        "page": request.query_params.get("page", 1),
        "limit": request.query_params.get("limit", default_limit),
    }
    search = request.query_params.get("search") or request.query_params.get("q")
    if search:
        params["search"] = search
    return params


class ServiceAPIView(APIView):
    """Turns service result dicts into responses with a matching status code."""

    def respond(self, result, success_status=status.HTTP_200_OK):
        return Response(result, status=http_status(result, success_status))


# Stores

class StoreListView(ServiceAPIView):
    permission_classes = [IsAdminUser]

    def get(self, request):
        return self.respond(StoreService.get_stores_paginated(**_listing_params(request)))

    def post(self, request):
        return self.respond(StoreService.create_store(request.data), status.HTTP_201_CREATED)


class StoreDetailView(ServiceAPIView):
    permission_classes = [IsAdminUser]

    def get(self, request, pk):
        return self.respond(StoreService.get_store(pk))

    def put(self, request, pk):
        return self.respond(StoreService.update_store(pk, request.data))

    def delete(self, request, pk):
        return self.respond(StoreService.delete_store(pk))


# Posts

class PostListView(ServiceAPIView):
    """Published posts for everyone; ``?all=1`` lists drafts too for staff."""

    permission_classes = [IsAdminOrReadOnly]

    def get(self, request):
        params = _listing_params(request, default_limit=9)
        category = request.query_params.get("category")
        if category and category != "all":
            params["category"] = category
        if request.query_params.get("all") == "1" and request.user.is_staff:
            return self.respond(PostService.get_posts_paginated(**params))
        return self.respond(PostService.get_published_posts(**params))

    def post(self, request):
        return self.respond(PostService.create_post(request.data), status.HTTP_201_CREATED)


class PostCountsView(ServiceAPIView):
    def get(self, request):
        return self.respond(PostService.get_post_counts_by_category())


class PostDetailView(ServiceAPIView):
    permission_classes = [IsAdminUser]

    def get(self, request, pk):
        return self.respond(PostService.get_post(pk))

    def put(self, request, pk):
        return self.respond(PostService.update_post(pk, request.data))

    def delete(self, request, pk):
        return self.respond(PostService.delete_post(pk))


class PostBySlugView(ServiceAPIView):
    def get(self, request, slug):
        return self.respond(PostService.get_post_by_slug(slug))


class PostLikeView(ServiceAPIView):
    def post(self, request, pk):
        return self.respond(PostService.like_post(pk))


class PostCommentsView(ServiceAPIView):
    def get(self, request, pk):
        return self.respond(CommentService.get_post_comments(pk))


# Comments

class CommentListView(ServiceAPIView):
    permission_classes = [IsAdminOrCreateOnly]

    def get(self, request):
        return self.respond(CommentService.get_comments_paginated(**_listing_params(request)))

    def post(self, request):
        return self.respond(CommentService.create_comment(request.data), status.HTTP_201_CREATED)


class CommentCountsView(ServiceAPIView):
    permission_classes = [IsAdminUser]

    def get(self, request):
        return self.respond(CommentService.get_comment_status_counts())


class CommentDeleteView(ServiceAPIView):
    permission_classes = [IsAdminUser]

    def post(self, request, pk):
        return self.respond(CommentService.delete_comment(pk))


class CommentRestoreView(ServiceAPIView):
    permission_classes = [IsAdminUser]

    def post(self, request, pk):
        return self.respond(CommentService.restore_comment(pk))
