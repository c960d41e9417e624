from django.contrib import admin, messages

from .models import Comment, Post
from .services import CommentService


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'category', 'store', 'is_published', 'num_views', 'num_likes', 'created_at')
    search_fields = ('title', 'description', 'store__name')
    list_filter = ('category', 'is_published')
    prepopulated_fields = {'slug': ('title',)}


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ('id', 'post', 'author', 'email', 'is_deleted', 'created_at')
    list_filter = ('is_deleted', 'created_at')
    search_fields = ('author', 'content', 'email', 'post__title')
    actions = ('soft_delete', 'restore')

    # comments are only ever soft deleted
    def has_delete_permission(self, request, obj=None):
        return False

    def _apply(self, request, queryset, change, verb):
        results = [change(pk) for pk in queryset.values_list('pk', flat=True)]
        failed = [result for result in results if not result["success"]]
        done = len(results) - len(failed)
        if done:
            messages.success(request, f"댓글 {done}개를 {verb}했습니다.")
        if failed:
            messages.error(request, f"댓글 {len(failed)}개를 {verb}하지 못했습니다: {failed[0]['error']}")

    @admin.action(description="선택한 댓글 삭제 (복원 가능)")
    def soft_delete(self, request, queryset):
        self._apply(request, queryset, CommentService.delete_comment, "삭제")

    @admin.action(description="선택한 댓글 복원")
    def restore(self, request, queryset):
        self._apply(request, queryset, CommentService.restore_comment, "복원")
