from django.test import TestCase
from django.urls import reverse

from apps.posts.models import Category, Post
from apps.posts.services import PostService
from apps.stores.models import Store


def make_post(title, category=Category.DOMESTIC, **extra):
    return Post.objects.create(
        title=title,
        slug=extra.pop('slug', None) or title.lower().replace(' ', '-'),
        category=category,
        **extra,
    )


class PostListingTests(TestCase):

    def setUp(self):
        self.store = Store.objects.create(
            name='스타벅스 강남점', address='서울 강남구', location='서울', store_id='KR-1',
            images=['https://example.com/gangnam.jpg'],
        )
        for n in range(12):
            make_post(f'Domestic {n}', store=self.store if n == 0 else None)
        make_post('Overseas Tokyo', Category.OVERSEAS, description='Roastery in Tokyo')
        make_post('Special Jeju', Category.SPECIAL)
        make_post('Hidden draft', Category.SPECIAL, is_published=False)

    def test_published_posts_only(self):
        result = PostService.get_published_posts(page=1, limit=50)

        self.assertTrue(result['success'])
        self.assertEqual(result['pagination']['total_count'], 14)
        self.assertNotIn('Hidden draft', [post['title'] for post in result['posts']])

    def test_default_page_size_is_nine(self):
        result = PostService.get_published_posts()

        self.assertEqual(len(result['posts']), 9)
        self.assertEqual(result['pagination']['total_pages'], 2)

    def test_staff_listing_includes_drafts(self):
        result = PostService.get_posts_paginated(page=1, limit=50)

        self.assertEqual(result['pagination']['total_count'], 15)

    def test_category_filter(self):
        result = PostService.get_published_posts(category='overseas')

        self.assertEqual([post['title'] for post in result['posts']], ['Overseas Tokyo'])

    def test_unknown_category_is_invalid(self):
        result = PostService.get_published_posts(category='moon')

        self.assertFalse(result['success'])
        self.assertEqual(result['code'], 'invalid')
        self.assertIn('category', result['errors'])

    def test_search_title_and_description(self):
        self.assertEqual(PostService.get_published_posts(search='tokyo')['pagination']['total_count'], 1)
        self.assertEqual(PostService.get_published_posts(search='roastery')['pagination']['total_count'], 1)

    def test_page_past_the_end(self):
        result = PostService.get_published_posts(page=5)

        self.assertTrue(result['success'])
        self.assertEqual(result['posts'], [])
        self.assertEqual(result['pagination']['current_page'], 5)
        self.assertFalse(result['pagination']['has_next_page'])

    def test_cover_image_prefers_store_image(self):
        post = PostService.get_post_by_slug('domestic-0')['post']

        self.assertEqual(post['cover_image'], 'https://example.com/gangnam.jpg')
        self.assertEqual(post['store']['name'], '스타벅스 강남점')

    def test_counts_by_category(self):
        result = PostService.get_post_counts_by_category()

        self.assertEqual(result['counts'], {'domestic': 12, 'overseas': 1, 'special': 1})

    def test_counts_refresh_after_create(self):
        PostService.get_post_counts_by_category()

        PostService.create_post({'title': 'New overseas', 'category': 'overseas'})

        self.assertEqual(PostService.get_post_counts_by_category()['counts']['overseas'], 2)


class PostLookupTests(TestCase):

    def setUp(self):
        self.post = make_post('Seoul Reserve')
        self.draft = make_post('Secret', is_published=False)

    def test_get_post_by_slug(self):
        result = PostService.get_post_by_slug('seoul-reserve')

        self.assertEqual(result['post']['id'], self.post.pk)

    def test_drafts_are_hidden_by_slug(self):
        self.assertEqual(PostService.get_post_by_slug('secret')['code'], 'not_found')
        self.assertTrue(PostService.get_post_by_slug('secret', include_unpublished=True)['success'])

    def test_get_post_by_id(self):
        self.assertEqual(PostService.get_post(self.draft.pk)['post']['title'], 'Secret')
        self.assertEqual(PostService.get_post(9999)['code'], 'not_found')

    def test_views_and_likes(self):
        self.assertEqual(PostService.increment_post_views(self.post.pk)['num_views'], 1)
        self.assertEqual(PostService.increment_post_views(self.post.pk)['num_views'], 2)
        self.assertEqual(PostService.like_post(self.post.pk)['num_likes'], 1)
        self.assertEqual(PostService.like_post(9999)['code'], 'not_found')

    def test_counters_with_malformed_id_are_not_found(self):
        views = PostService.increment_post_views('abc')
        likes = PostService.like_post('abc')

        self.assertEqual(views['code'], 'not_found')
        self.assertEqual(likes['code'], 'not_found')
        self.assertEqual(likes['error'], '게시글을 찾을 수 없습니다.')


class PostWriteTests(TestCase):

    def test_create_post_derives_slug(self):
        result = PostService.create_post({'title': '제주 송당 매장', 'category': 'special'})

        self.assertTrue(result['success'])
        self.assertEqual(result['post']['slug'], '제주-송당-매장')

    def test_duplicate_slug_is_a_conflict(self):
        PostService.create_post({'title': 'Gangnam', 'category': 'domestic'})

        result = PostService.create_post({'title': 'Gangnam', 'category': 'domestic'})

        self.assertEqual(result['code'], 'conflict')
        self.assertEqual(Post.objects.count(), 1)

    def test_update_and_delete(self):
        post = PostService.create_post({'title': 'Before', 'category': 'domestic'})['post']

        updated = PostService.update_post(post['id'], {'title': 'After', 'slug': 'before', 'category': 'overseas'})
        self.assertEqual(updated['post']['category'], 'overseas')
        self.assertEqual(updated['post']['slug'], 'before')

        self.assertTrue(PostService.delete_post(post['id'])['success'])
        self.assertEqual(PostService.delete_post(post['id'])['code'], 'not_found')

    def test_missing_title_is_invalid(self):
        result = PostService.create_post({'category': 'domestic'})

        self.assertEqual(result['code'], 'invalid')
        self.assertIn('title', result['errors'])


class PublicPageTests(TestCase):

    def setUp(self):
        self.post = make_post('Busan Harbor', Category.DOMESTIC, description='바다 앞 매장')

    def test_list_page(self):
        response = self.client.get(reverse('post_list'))

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Busan Harbor')

    def test_list_json(self):
        response = self.client.get(reverse('post_list'), {'partial': '1', 'category': 'domestic'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['counts']['domestic'], 1)
        self.assertEqual(response.json()['posts'][0]['slug'], 'busan-harbor')

    def test_empty_search_state(self):
        response = self.client.get(reverse('post_list'), {'q': 'nothing-matches'})

        self.assertContains(response, '검색 조건에 맞는 매장이 없습니다.')

    def test_detail_counts_a_view(self):
        response = self.client.get(reverse('post_detail', args=['busan-harbor']))

        self.assertEqual(response.status_code, 200)
        self.post.refresh_from_db()
        self.assertEqual(self.post.num_views, 1)

    def test_detail_missing_post(self):
        response = self.client.get(reverse('post_detail', args=['missing']))

        self.assertEqual(response.status_code, 404)

    def test_like_over_ajax(self):
        response = self.client.post(
            reverse('post_like', args=['busan-harbor']),
            HTTP_X_REQUESTED_WITH='XMLHttpRequest',
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['num_likes'], 1)

    def test_comment_form(self):
        response = self.client.post(
            reverse('comment_create', args=['busan-harbor']),
            {'author': '방문자', 'content': '좋은 매장이네요'},
        )

        self.assertRedirects(response, reverse('post_detail', args=['busan-harbor']) + '#comments', fetch_redirect_response=False)
        self.assertEqual(self.post.comments.count(), 1)
