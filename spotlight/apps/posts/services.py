import logging

from django.db import IntegrityError, transaction
from django.db.models import Count, F
from django.utils import timezone

from apps.core.cache import POSTS_ROUTE, cached, invalidate_routes, post_route
from apps.core.exceptions import ConflictError, InvalidRequestError, NotFoundError
from apps.core.filtering import filter_queryset
from apps.core.pagination import paginate
from apps.core.results import action, ok

from .filters import CommentFilter, PostFilter
from .models import Category, Comment, CommentStatus, Post
from .serializers import (
    CommentInputSerializer,
    CommentSerializer,
    PostInputSerializer,
    PostSerializer,
)

logger = logging.getLogger(__name__)

POST_NOT_FOUND = "게시글을 찾을 수 없습니다."
DUPLICATE_SLUG = "이미 사용 중인 슬러그입니다. 다른 슬러그를 사용해주세요."


def _get_post(pk):
    try:
        return Post.objects.select_related('store').get(pk=pk)
    except (Post.DoesNotExist, ValueError, TypeError):
        raise NotFoundError(POST_NOT_FOUND) from None


def _bump_counter(pk, field):
    try:
        updated = Post.objects.filter(pk=pk).update(**{field: F(field) + 1})
    except (ValueError, TypeError):
        raise NotFoundError(POST_NOT_FOUND) from None
    if not updated:
        raise NotFoundError(POST_NOT_FOUND)
    return Post.objects.values_list(field, flat=True).get(pk=pk)


def _save_post(post, validated):
    if Post.objects.filter(slug=validated['slug']).exclude(pk=post.pk).exists():
        raise ConflictError(DUPLICATE_SLUG)
    for field, value in validated.items():
        setattr(post, field, value)
    try:
        with transaction.atomic():
            post.save()
    except IntegrityError:
        raise ConflictError(DUPLICATE_SLUG) from None
    invalidate_routes(POSTS_ROUTE, post_route(post.pk))
    return post


def _post_listing(queryset, page, limit, search, category):
    queryset = filter_queryset(
        PostFilter,
        {'search': search, 'category': category},
        queryset.select_related('store'),
    )
    posts, pagination = paginate(queryset, page, limit)
    return ok(posts=PostSerializer(posts, many=True).data, pagination=pagination)


class PostService:
    @staticmethod
    @action("데이터를 불러오는데 실패했습니다.")
    def get_published_posts(page=1, limit=9, search=None, category=None):
        return _post_listing(Post.objects.published(), page, limit, search, category)

    @staticmethod
    @action("게시글 목록을 불러오는데 실패했습니다.")
    def get_posts_paginated(page=1, limit=10, search=None, category=None):
        return _post_listing(Post.objects.all(), page, limit, search, category)

    @staticmethod
    @action("카테고리별 게시글 수를 불러오는데 실패했습니다.")
    def get_post_counts_by_category():
        def build():
            rows = (
                Post.objects.published()
                .order_by()
                .values('category')
                .annotate(total=Count('id'))
            )
            counts = {category.value: 0 for category in Category}
            for row in rows:
                if row['category'] in counts:
                    counts[row['category']] = row['total']
            return counts

        return ok(counts=cached(POSTS_ROUTE, 'category-counts', build))

    @staticmethod
    @action("게시글을 불러오는데 실패했습니다.")
    def get_post(pk):
        return ok(post=PostSerializer(_get_post(pk)).data)

    @staticmethod
    @action("게시글을 불러오는데 실패했습니다.")
    def get_post_by_slug(slug, include_unpublished=False):
        queryset = Post.objects.select_related('store')
        if not include_unpublished:
            queryset = queryset.published()
        post = queryset.filter(slug=slug).first()
        if post is None:
            raise NotFoundError(POST_NOT_FOUND)
        return ok(post=PostSerializer(post).data)

    @staticmethod
    @action("조회수 갱신 중 오류가 발생했습니다.")
    def increment_post_views(pk):
        return ok(num_views=_bump_counter(pk, 'num_views'))

    @staticmethod
    @action("좋아요 처리 중 오류가 발생했습니다.")
    def like_post(pk):
        num_likes = _bump_counter(pk, 'num_likes')
        invalidate_routes(POSTS_ROUTE)
        return ok(num_likes=num_likes)

    @staticmethod
    @action("게시글 작성 중 오류가 발생했습니다.")
    def create_post(data):
        serializer = PostInputSerializer(data=data)
        serializer.is_valid(raise_exception=True)
        post = _save_post(Post(), serializer.validated_data)
        logger.info("created post %s (%s)", post.pk, post.slug)
        return ok(message="게시글이 성공적으로 작성되었습니다.", post=PostSerializer(post).data)

    @staticmethod
    @action("게시글 수정 중 오류가 발생했습니다.")
    def update_post(pk, data):
        post = _get_post(pk)
        serializer = PostInputSerializer(data=data)
        serializer.is_valid(raise_exception=True)
        post = _save_post(post, serializer.validated_data)
        return ok(message="게시글이 성공적으로 수정되었습니다.", post=PostSerializer(post).data)

    @staticmethod
    @action("게시글 삭제 중 오류가 발생했습니다.")
    def delete_post(pk):
        post = _get_post(pk)
        post.delete()
        logger.info("deleted post %s", pk)
        invalidate_routes(POSTS_ROUTE, post_route(pk))
        return ok(message="게시글이 성공적으로 삭제되었습니다.")


COMMENT_NOT_FOUND = {
    CommentStatus.DELETED: "삭제하려는 댓글을 찾을 수 없습니다.",
    CommentStatus.ACTIVE: "복원하려는 댓글을 찾을 수 없습니다.",
}
COMMENT_ID_REQUIRED = {
    CommentStatus.DELETED: "삭제할 댓글 ID가 필요합니다.",
    CommentStatus.ACTIVE: "복원할 댓글 ID가 필요합니다.",
}
COMMENT_STATUS_CHANGED = {
    CommentStatus.DELETED: "댓글이 성공적으로 삭제되었습니다.",
    CommentStatus.ACTIVE: "댓글이 성공적으로 복원되었습니다.",
}


def _set_comment_status(pk, status):
    """Move a comment between the two lifecycle states; nothing is ever removed."""
    if not pk:
        raise InvalidRequestError(COMMENT_ID_REQUIRED[status])
    try:
        comment = Comment.objects.get(pk=pk)
    except (Comment.DoesNotExist, ValueError, TypeError):
        raise NotFoundError(COMMENT_NOT_FOUND[status]) from None
    Comment.objects.filter(pk=comment.pk).update(
        is_deleted=status == CommentStatus.DELETED,
        updated_at=timezone.now(),
    )
    logger.info("comment %s is now %s", comment.pk, status.value)
    invalidate_routes(post_route(comment.post_id))
    return ok(message=COMMENT_STATUS_CHANGED[status])


class CommentService:
    @staticmethod
    @action("댓글 작성 중 오류가 발생했습니다. 다시 시도해주세요.")
    def create_comment(data):
        serializer = CommentInputSerializer(data=data)
        serializer.is_valid(raise_exception=True)
        comment = Comment.objects.create(**serializer.validated_data)
        invalidate_routes(post_route(comment.post_id))
        return ok(message="댓글이 성공적으로 작성되었습니다.", comment=CommentSerializer(comment).data)

    @staticmethod
    @action("댓글 목록을 불러오는 중 오류가 발생했습니다.")
    def get_all_comments():
        comments = Comment.objects.select_related('post')
        return ok(comments=CommentSerializer(comments, many=True).data)

    @staticmethod
    @action("댓글 데이터를 불러오는데 실패했습니다.")
    def get_comments_paginated(page=1, limit=10, search=None):
        queryset = filter_queryset(CommentFilter, {'search': search}, Comment.objects.select_related('post'))
        comments, pagination = paginate(queryset, page, limit)
        return ok(comments=CommentSerializer(comments, many=True).data, pagination=pagination)

    @staticmethod
    @action("댓글을 불러오는 중 오류가 발생했습니다.")
    def get_post_comments(post_id):
        def build():
            comments = Comment.objects.active().filter(post_id=post_id).select_related('post')
            return list(CommentSerializer(comments, many=True).data)

        return ok(comments=cached(post_route(post_id), 'comments', build))

    @staticmethod
    @action("댓글 현황을 불러오는 중 오류가 발생했습니다.")
    def get_comment_status_counts():
        return ok(counts={
            CommentStatus.ACTIVE.value: Comment.objects.active().count(),
            CommentStatus.DELETED.value: Comment.objects.deleted().count(),
        })

    @staticmethod
    @action("댓글 삭제 중 오류가 발생했습니다.")
    def delete_comment(pk):
        return _set_comment_status(pk, CommentStatus.DELETED)

    @staticmethod
    @action("댓글 복원 중 오류가 발생했습니다.")
    def restore_comment(pk):
        return _set_comment_status(pk, CommentStatus.ACTIVE)
