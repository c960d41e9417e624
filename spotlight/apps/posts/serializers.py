from django.utils.text import slugify
from rest_framework import serializers

from apps.stores.models import Store
from apps.stores.serializers import StoreSummarySerializer
from .models import Category, Comment, Post


class PostSerializer(serializers.ModelSerializer):
    store = StoreSummarySerializer(read_only=True)
    cover_image = serializers.CharField(read_only=True)

    class Meta:
        model = Post
        fields = [
            'id', 'title', 'slug', 'category', 'description', 'image', 'cover_image',
            'num_views', 'num_likes', 'store', 'is_published', 'created_at', 'updated_at',
        ]


class PostInputSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    slug = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    category = serializers.ChoiceField(choices=Category.choices)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    image = serializers.URLField(max_length=500, required=False, allow_blank=True, default='')
    store = serializers.PrimaryKeyRelatedField(queryset=Store.objects.all(), required=False, allow_null=True, default=None)
    is_published = serializers.BooleanField(required=False, default=True)

    def validate(self, attrs):
        slug = slugify(attrs.get('slug') or attrs['title'], allow_unicode=True)
        if not slug:
            raise serializers.ValidationError({'slug': ['슬러그를 만들 수 없는 제목입니다.']})
        attrs['slug'] = slug
        return attrs


class CommentPostSerializer(serializers.ModelSerializer):
    class Meta:
        model = Post
        fields = ['id', 'title', 'slug']


class CommentSerializer(serializers.ModelSerializer):
    post = CommentPostSerializer(read_only=True)
    status = serializers.CharField(read_only=True)

    class Meta:
        model = Comment
        fields = ['id', 'post', 'author', 'content', 'email', 'is_deleted', 'status', 'created_at', 'updated_at']


class CommentInputSerializer(serializers.Serializer):
    post_id = serializers.PrimaryKeyRelatedField(queryset=Post.objects.all(), source='post')
    author = serializers.CharField(max_length=50)
    content = serializers.CharField(max_length=1000)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True, default=None)

    def validate_email(self, value):
        return value or None
