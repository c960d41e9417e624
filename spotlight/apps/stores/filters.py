from django.db.models import Q
from django_filters import rest_framework as filters

from .models import Store

SEARCH_FIELDS = ('name', 'address', 'location', 'store_id', 'tags_text')


class StoreFilter(filters.FilterSet):
    search = filters.CharFilter(method='filter_search')

    class Meta:
        model = Store
        fields = ['search']

    def filter_search(self, queryset, name, value):
        condition = Q()
        for field in SEARCH_FIELDS:
            condition |= Q(**{f'{field}__icontains': value})
        return queryset.filter(condition)
