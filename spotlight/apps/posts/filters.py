from django.db.models import Q
from django_filters import rest_framework as filters

from .models import Category, Comment, Post


def _search_condition(fields, value):
    condition = Q()
    for field in fields:
        condition |= Q(**{f'{field}__icontains': value})
    return condition


class PostFilter(filters.FilterSet):
    search = filters.CharFilter(method='filter_search')
    category = filters.ChoiceFilter(choices=Category.choices)

    class Meta:
        model = Post
        fields = ['search', 'category']

    def filter_search(self, queryset, name, value):
        return queryset.filter(_search_condition(('title', 'description'), value))


class CommentFilter(filters.FilterSet):
    search = filters.CharFilter(method='filter_search')

    class Meta:
        model = Comment
        fields = ['search']

    def filter_search(self, queryset, name, value):
        return queryset.filter(_search_condition(('author', 'content', 'email'), value))
