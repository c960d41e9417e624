import logging

from django.db import IntegrityError, transaction

from apps.core.cache import POSTS_ROUTE, invalidate_routes
from apps.core.exceptions import ConflictError, NotFoundError
from apps.core.filtering import filter_queryset
from apps.core.pagination import paginate
from apps.core.results import action, ok

from .filters import StoreFilter
from .models import Store
from .serializers import StoreInputSerializer, StoreSerializer

logger = logging.getLogger(__name__)

DUPLICATE_STORE_ID = "이미 사용 중인 스토어 ID입니다. 다른 ID를 사용해주세요."
STORE_NOT_FOUND = "스토어를 찾을 수 없습니다."


def _get_store(pk):
    try:
        return Store.objects.get(pk=pk)
    except (Store.DoesNotExist, ValueError, TypeError):
        raise NotFoundError(STORE_NOT_FOUND) from None


def _validated(data):
    serializer = StoreInputSerializer(data=data)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


class StoreService:
    @staticmethod
    @action("스토어 생성 중 오류가 발생했습니다.")
    def create_store(data):
        validated = _validated(data)
        if Store.objects.filter(store_id=validated['store_id']).exists():
            raise ConflictError(DUPLICATE_STORE_ID) from None
        try:
            with transaction.atomic():
                store = Store.objects.create(**validated)
        except IntegrityError:
            raise ConflictError(DUPLICATE_STORE_ID) from None
        logger.info("created store %s (%s)", store.pk, store.store_id)
        invalidate_routes(POSTS_ROUTE)
        return ok(message="스토어가 성공적으로 생성되었습니다.", store=StoreSerializer(store).data)

    @staticmethod
    @action("스토어 목록을 불러오는 중 오류가 발생했습니다.")
    def get_all_stores():
        return ok(stores=StoreSerializer(Store.objects.all(), many=True).data)

    @staticmethod
    @action("스토어 데이터를 불러오는데 실패했습니다.")
    def get_stores_paginated(page=1, limit=10, search=None):
        queryset = filter_queryset(StoreFilter, {'search': search}, Store.objects.all())
        stores, pagination = paginate(queryset, page, limit)
        return ok(stores=StoreSerializer(stores, many=True).data, pagination=pagination)

    @staticmethod
    @action("스토어 정보를 불러오는 중 오류가 발생했습니다.")
    def get_store(pk):
        return ok(store=StoreSerializer(_get_store(pk)).data)

    @staticmethod
    @action("스토어 수정 중 오류가 발생했습니다.")
    def update_store(pk, data):
        store = _get_store(pk)
        validated = _validated(data)
        if Store.objects.filter(store_id=validated['store_id']).exclude(pk=store.pk).exists():
            raise ConflictError(DUPLICATE_STORE_ID) from None
        for field, value in validated.items():
            setattr(store, field, value)
        try:
            with transaction.atomic():
                store.save()
        except IntegrityError:
            raise ConflictError(DUPLICATE_STORE_ID) from None
        invalidate_routes(POSTS_ROUTE)
        return ok(message="스토어 정보가 성공적으로 수정되었습니다.", store=StoreSerializer(store).data)

    @staticmethod
    @action("스토어 삭제 중 오류가 발생했습니다.")
    def delete_store(pk):
        store = _get_store(pk)
        store.delete()
        logger.info("deleted store %s", pk)
        invalidate_routes(POSTS_ROUTE)
        return ok(message="스토어가 성공적으로 삭제되었습니다.")
