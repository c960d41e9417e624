import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from apps.posts.services import CommentService, PostService
from apps.stores.models import Store
from apps.stores.services import StoreService

SAMPLE_DATA = {
    "stores": [
        {
            "name": "스타벅스 강남R점",
            "address": "서울특별시 강남구 강남대로 390",
            "location": "서울",
            "store_id": "KR-GANGNAM-R",
            "latitude": 37.4979,
            "longitude": 127.0276,
            "parking": "유료 주차 (건물 주차장)",
            "since": "2016",
            "phone": "1522-3232",
            "tags": ["Reserve", "Seoul"],
        },
        {
            "name": "스타벅스 더제주송당파크R점",
            "address": "제주특별자치도 제주시 구좌읍 송당리 1394",
            "location": "제주",
            "store_id": "KR-JEJU-SONGDANG",
            "parking": "무료 주차 가능",
            "since": "2021",
            "tags": ["Reserve", "Jeju", "Drive"],
        },
        {
            "name": "Starbucks Reserve Roastery Tokyo",
            "address": "2-19-23 Aobadai, Meguro City, Tokyo",
            "location": "Tokyo",
            "store_id": "JP-TOKYO-ROASTERY",
            "parking": "주차 불가",
            "since": "2019",
            "tags": ["Roastery", "Japan"],
        },
    ],
    "posts": [
        {"title": "강남 한복판의 리저브 매장", "category": "domestic", "store_id": "KR-GANGNAM-R"},
        {"title": "오름 옆 제주 송당 매장", "category": "special", "store_id": "KR-JEJU-SONGDANG"},
        {"title": "도쿄 로스터리 방문기", "category": "overseas", "store_id": "JP-TOKYO-ROASTERY"},
    ],
    "comments": [
        {"post": "강남 한복판의 리저브 매장", "author": "커피러버", "content": "리저브 원두가 정말 좋아요."},
        {"post": "오름 옆 제주 송당 매장", "author": "제주여행", "content": "주차가 편해서 좋았습니다.", "email": "jeju@example.com"},
    ],
}


class Command(BaseCommand):
    help = 'Load sample stores, posts and comments (or a JSON file with the same shape)'

    def add_arguments(self, parser):
        parser.add_argument('--file', help='JSON file with "stores", "posts" and "comments" lists')

    def handle(self, *args, **options):
        data = self._load(options.get('file'))

        created_stores = 0
        for store in data.get('stores', []):
            result = StoreService.create_store(store)
            if result['success']:
                created_stores += 1
            else:
                self._warn(store.get('store_id'), result)

        post_ids = {}
        for post in data.get('posts', []):
            post = dict(post)
            store_id = post.pop('store_id', None)
            if store_id:
                post['store'] = Store.objects.filter(store_id=store_id).values_list('pk', flat=True).first()
            result = PostService.create_post(post)
            if result['success']:
                post_ids[post['title']] = result['post']['id']
            else:
                self._warn(post.get('title'), result)

        created_comments = 0
        for comment in data.get('comments', []):
            comment = dict(comment)
            title = comment.pop('post', None)
            if title not in post_ids:
                self.stdout.write(self.style.WARNING(f'{title}: post was not seeded, comment skipped'))
                continue
            result = CommentService.create_comment({**comment, 'post_id': post_ids[title]})
            if result['success']:
                created_comments += 1
            else:
                self._warn(comment.get('author'), result)

        self.stdout.write(self.style.SUCCESS(
            f'Seeded {created_stores} stores, {len(post_ids)} posts and {created_comments} comments'
        ))

    def _warn(self, label, result):
        self.stdout.write(self.style.WARNING(f"{label}: {result['error']}"))

    def _load(self, path):
        if not path:
            return SAMPLE_DATA
        try:
            return json.loads(Path(path).read_text(encoding='utf-8'))
        except (OSError, ValueError) as exc:
            raise CommandError(f'Cannot read {path}: {exc}') from exc
