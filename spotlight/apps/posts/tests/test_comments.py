from django.test import TestCase

from apps.posts.models import Category, Comment, CommentStatus, Post
from apps.posts.services import CommentService


class CommentServiceTests(TestCase):

    def setUp(self):
        self.post = Post.objects.create(title='Gangnam R', slug='gangnam-r', category=Category.DOMESTIC)
        self.other = Post.objects.create(title='Tokyo', slug='tokyo', category=Category.OVERSEAS)

    def create(self, **overrides):
        data = {'post_id': self.post.pk, 'author': '커피러버', 'content': '분위기가 좋아요'}
        data.update(overrides)
        return CommentService.create_comment(data)

    def test_create_comment(self):
        result = self.create(email='lover@example.com')

        self.assertTrue(result['success'])
        self.assertEqual(result['message'], '댓글이 성공적으로 작성되었습니다.')
        self.assertEqual(result['comment']['post']['slug'], 'gangnam-r')
        self.assertEqual(result['comment']['status'], 'active')
        self.assertFalse(result['comment']['is_deleted'])

    def test_blank_email_is_stored_as_null(self):
        result = self.create(email='')

        self.assertIsNone(Comment.objects.get(pk=result['comment']['id']).email)

    def test_invalid_comment_input(self):
        result = self.create(author='x' * 51, content='', post_id=9999)

        self.assertFalse(result['success'])
        self.assertEqual(result['code'], 'invalid')
        self.assertEqual(set(result['errors']), {'author', 'content', 'post_id'})
        self.assertFalse(Comment.objects.exists())

    def test_soft_delete_and_restore(self):
        comment = Comment.objects.get(pk=self.create()['comment']['id'])

        deleted = CommentService.delete_comment(comment.pk)
        self.assertEqual(deleted['message'], '댓글이 성공적으로 삭제되었습니다.')
        after_delete = Comment.objects.get(pk=comment.pk)
        self.assertTrue(after_delete.is_deleted)
        self.assertEqual(after_delete.status, CommentStatus.DELETED)

        restored = CommentService.restore_comment(comment.pk)
        self.assertEqual(restored['message'], '댓글이 성공적으로 복원되었습니다.')
        after_restore = Comment.objects.get(pk=comment.pk)
        self.assertFalse(after_restore.is_deleted)
        self.assertGreaterEqual(after_restore.updated_at, comment.updated_at)
        for field in ('post_id', 'author', 'content', 'email', 'created_at'):
            self.assertEqual(getattr(after_restore, field), getattr(comment, field))

    def test_status_change_on_missing_comment(self):
        deleted = CommentService.delete_comment(9999)
        restored = CommentService.restore_comment(9999)

        self.assertEqual(deleted['code'], 'not_found')
        self.assertEqual(deleted['error'], '삭제하려는 댓글을 찾을 수 없습니다.')
        self.assertEqual(restored['error'], '복원하려는 댓글을 찾을 수 없습니다.')

    def test_status_change_needs_an_id(self):
        result = CommentService.delete_comment(None)

        self.assertEqual(result['code'], 'invalid')
        self.assertEqual(result['error'], '삭제할 댓글 ID가 필요합니다.')

    def test_post_comments_are_active_only(self):
        kept = self.create(author='남는 댓글')['comment']['id']
        gone = self.create(author='지운 댓글')['comment']['id']
        self.create(post_id=self.other.pk)

        CommentService.get_post_comments(self.post.pk)
        CommentService.delete_comment(gone)

        comments = CommentService.get_post_comments(self.post.pk)['comments']
        self.assertEqual([comment['id'] for comment in comments], [kept])

    def test_paginated_listing_includes_deleted(self):
        for n in range(12):
            self.create(author=f'작성자{n}')
        CommentService.delete_comment(Comment.objects.first().pk)

        result = CommentService.get_comments_paginated(page=2, limit=10)

        self.assertEqual(len(result['comments']), 2)
        self.assertEqual(result['pagination']['total_count'], 12)
        self.assertEqual(CommentService.get_comment_status_counts()['counts'], {'active': 11, 'deleted': 1})

    def test_search(self):
        self.create(author='Alice', content='latte', email='alice@example.com')
        self.create(author='Bob', content='Americano is great')

        self.assertEqual(CommentService.get_comments_paginated(search='alice')['pagination']['total_count'], 1)
        self.assertEqual(CommentService.get_comments_paginated(search='americano')['pagination']['total_count'], 1)
        self.assertEqual(CommentService.get_comments_paginated(search='example.com')['pagination']['total_count'], 1)

    def test_get_all_comments(self):
        self.create()
        self.create(post_id=self.other.pk)

        self.assertEqual(len(CommentService.get_all_comments()['comments']), 2)
