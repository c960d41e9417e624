from django.test import TestCase

from apps.stores.models import Store
from apps.stores.services import StoreService


def store_data(**overrides):
    data = {
        'name': '스타벅스 테스트점',
        'address': '서울특별시 중구 세종대로 110',
        'location': '서울',
        'store_id': 'KR-TEST-001',
        'parking': '무료 주차',
        'tags': ['Reserve'],
    }
    data.update(overrides)
    return data


class StoreServiceCreateTests(TestCase):

    def test_create_store(self):
        result = StoreService.create_store(store_data(latitude=37.56, longitude=126.97))

        self.assertTrue(result['success'])
        self.assertEqual(result['store']['store_id'], 'KR-TEST-001')
        self.assertEqual(result['store']['parking_status'], '무료')
        self.assertEqual(Store.objects.count(), 1)

    def test_duplicate_store_id_is_a_conflict(self):
        StoreService.create_store(store_data())

        result = StoreService.create_store(store_data(name='다른 매장'))

        self.assertFalse(result['success'])
        self.assertEqual(result['code'], 'conflict')
        self.assertEqual(result['error'], '이미 사용 중인 스토어 ID입니다. 다른 ID를 사용해주세요.')
        self.assertEqual(Store.objects.count(), 1)
        self.assertEqual(Store.objects.get().name, '스타벅스 테스트점')

    def test_missing_required_fields_are_invalid(self):
        result = StoreService.create_store({'name': '이름만 있음'})

        self.assertFalse(result['success'])
        self.assertEqual(result['code'], 'invalid')
        self.assertIn('address', result['errors'])
        self.assertIn('store_id', result['errors'])
        self.assertFalse(Store.objects.exists())

    def test_out_of_range_coordinates_are_invalid(self):
        result = StoreService.create_store(store_data(latitude=120))

        self.assertEqual(result['code'], 'invalid')
        self.assertIn('latitude', result['errors'])

    def test_tags_are_trimmed_and_deduplicated(self):
        result = StoreService.create_store(store_data(tags=[' Seoul ', 'seoul', '', 'Reserve']))

        self.assertEqual(result['store']['tags'], ['Seoul', 'Reserve'])


class StoreServiceListingTests(TestCase):

    def setUp(self):
        for n in range(1, 24):
            Store.objects.create(
                name=f'매장 {n}',
                address='부산광역시 해운대구' if n % 2 else '서울특별시 강남구 테헤란로',
                location='부산' if n % 2 else '서울',
                store_id=f'KR-{n:03d}',
                tags=['Drive'] if n == 5 else [],
            )

    def test_first_page(self):
        result = StoreService.get_stores_paginated(page=1, limit=10)

        self.assertTrue(result['success'])
        self.assertEqual(len(result['stores']), 10)
        self.assertEqual(result['pagination'], {
            'current_page': 1,
            'total_pages': 3,
            'total_count': 23,
            'limit': 10,
            'has_next_page': True,
            'has_prev_page': False,
        })

    def test_last_page_holds_the_remainder(self):
        result = StoreService.get_stores_paginated(page=3, limit=10)

        self.assertEqual(len(result['stores']), 3)
        self.assertFalse(result['pagination']['has_next_page'])
        self.assertTrue(result['pagination']['has_prev_page'])

    def test_page_past_the_end_is_empty(self):
        result = StoreService.get_stores_paginated(page=7, limit=10)

        self.assertTrue(result['success'])
        self.assertEqual(result['stores'], [])
        self.assertEqual(result['pagination']['total_pages'], 3)
        self.assertEqual(result['pagination']['total_count'], 23)

    def test_newest_first(self):
        result = StoreService.get_stores_paginated(page=1, limit=10)

        self.assertEqual(result['stores'][0]['store_id'], 'KR-023')

    def test_search_matches_address(self):
        result = StoreService.get_stores_paginated(search='강남')

        self.assertEqual(result['pagination']['total_count'], 11)
        for store in result['stores']:
            self.assertIn('강남', store['address'])

    def test_search_matches_store_id_and_tags(self):
        by_id = StoreService.get_stores_paginated(search='kr-017')
        by_tag = StoreService.get_stores_paginated(search='drive')

        self.assertEqual([s['store_id'] for s in by_id['stores']], ['KR-017'])
        self.assertEqual([s['store_id'] for s in by_tag['stores']], ['KR-005'])

    def test_invalid_page_is_rejected(self):
        result = StoreService.get_stores_paginated(page=0, limit=10)

        self.assertFalse(result['success'])
        self.assertEqual(result['code'], 'invalid')
        self.assertIn('page', result['errors'])

    def test_get_all_stores(self):
        result = StoreService.get_all_stores()

        self.assertEqual(len(result['stores']), 23)


class StoreTagSearchTests(TestCase):

    def setUp(self):
        StoreService.create_store(store_data(store_id='KR-DT-001', tags=['드라이브스루']))
        StoreService.create_store(store_data(store_id='KR-RS-001', tags=['Reserve']))

    def test_search_matches_korean_tag(self):
        result = StoreService.get_stores_paginated(search='드라이브')

        self.assertEqual(result['pagination']['total_count'], 1)
        self.assertEqual(result['stores'][0]['store_id'], 'KR-DT-001')

    def test_search_ignores_json_encoding(self):
        self.assertEqual(StoreService.get_stores_paginated(search='ub4dc')['pagination']['total_count'], 0)
        self.assertEqual(StoreService.get_stores_paginated(search='"]')['pagination']['total_count'], 0)

    def test_search_follows_tag_updates(self):
        store = Store.objects.get(store_id='KR-RS-001')

        StoreService.update_store(store.pk, store_data(store_id='KR-RS-001', tags=['드라이브', '테라스']))

        result = StoreService.get_stores_paginated(search='테라스')
        self.assertEqual([s['store_id'] for s in result['stores']], ['KR-RS-001'])
        self.assertEqual(StoreService.get_stores_paginated(search='드라이브')['pagination']['total_count'], 2)


class StoreServiceUpdateDeleteTests(TestCase):

    def setUp(self):
        self.first = Store.objects.create(**store_data())
        self.second = Store.objects.create(**store_data(store_id='KR-TEST-002', name='두번째 매장'))

    def test_update_store(self):
        result = StoreService.update_store(self.first.pk, store_data(name='새 이름', parking='유료'))

        self.assertTrue(result['success'])
        self.first.refresh_from_db()
        self.assertEqual(self.first.name, '새 이름')
        self.assertEqual(self.first.parking_info.label, '유료')

    def test_update_may_keep_its_own_store_id(self):
        result = StoreService.update_store(self.first.pk, store_data(phone='02-000-0000'))

        self.assertTrue(result['success'])

    def test_update_to_taken_store_id_is_a_conflict(self):
        result = StoreService.update_store(self.first.pk, store_data(store_id='KR-TEST-002'))

        self.assertEqual(result['code'], 'conflict')
        self.first.refresh_from_db()
        self.assertEqual(self.first.store_id, 'KR-TEST-001')

    def test_update_missing_store(self):
        result = StoreService.update_store(9999, store_data())

        self.assertEqual(result['code'], 'not_found')
        self.assertEqual(result['error'], '스토어를 찾을 수 없습니다.')

    def test_get_store(self):
        self.assertEqual(StoreService.get_store(self.second.pk)['store']['name'], '두번째 매장')
        self.assertEqual(StoreService.get_store('abc')['code'], 'not_found')

    def test_delete_store(self):
        result = StoreService.delete_store(self.first.pk)

        self.assertTrue(result['success'])
        self.assertFalse(Store.objects.filter(pk=self.first.pk).exists())
        self.assertEqual(StoreService.delete_store(self.first.pk)['code'], 'not_found')
