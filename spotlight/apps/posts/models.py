from django.db import models
from django.utils import timezone


class Category(models.TextChoices):
    DOMESTIC = 'domestic', '국내'
    OVERSEAS = 'overseas', '해외'
    SPECIAL = 'special', '특별매장'


class CommentStatus(models.TextChoices):
    ACTIVE = 'active', '활성'
    DELETED = 'deleted', '삭제됨'


class PostQuerySet(models.QuerySet):
    def published(self):
        return self.filter(is_published=True)


class Post(models.Model):
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True, allow_unicode=True)
    category = models.CharField(max_length=20, choices=Category.choices, db_index=True)
    description = models.TextField(blank=True)
    image = models.URLField(max_length=500, blank=True)
    num_views = models.PositiveIntegerField(default=0)
    num_likes = models.PositiveIntegerField(default=0)
    store = models.ForeignKey(
        'stores.Store',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='posts',
    )
    is_published = models.BooleanField(default=True)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PostQuerySet.as_manager()

    class Meta:
        db_table = 'Posts'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.title

    @property
    def cover_image(self):
        if self.store_id and self.store.images:
            return self.store.images[0]
        return self.image or None


class CommentQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_deleted=False)

    def deleted(self):
        return self.filter(is_deleted=True)


class Comment(models.Model):
    post = models.ForeignKey('posts.Post', on_delete=models.CASCADE, related_name='comments')
    author = models.CharField(max_length=50)
    content = models.TextField()
    email = models.EmailField(null=True, blank=True)
    is_deleted = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(default=timezone.now)

    objects = CommentQuerySet.as_manager()

    class Meta:
        db_table = 'Comments'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"Comment by {self.author} on {self.post}"

    @property
    def status(self):
        return CommentStatus.DELETED if self.is_deleted else CommentStatus.ACTIVE
