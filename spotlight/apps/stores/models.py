from django.db import models
from django.utils import timezone

from .parking import classify_parking


class Store(models.Model):
    name = models.CharField(max_length=255)
    address = models.CharField(max_length=255)
    location = models.CharField(max_length=100)
    store_id = models.CharField(max_length=100, unique=True)
    latitude = models.FloatField(null=True, blank=True)
    longitude = models.FloatField(null=True, blank=True)
    parking = models.CharField(max_length=255, blank=True)
    since = models.CharField(max_length=50, blank=True)
    phone = models.CharField(max_length=50, blank=True)
    tags = models.JSONField(default=list, blank=True)
    # plain-text copy of tags for LIKE search; JSON storage escapes non-ASCII
    tags_text = models.TextField(blank=True, editable=False)
    images = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'Stores'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.name} ({self.store_id})"

    def save(self, *args, **kwargs):
        self.tags_text = "\n".join(str(tag) for tag in self.tags or [])
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and 'tags' in update_fields:
            kwargs['update_fields'] = {*update_fields, 'tags_text'}
        super().save(*args, **kwargs)

    @property
    def parking_info(self):
        return classify_parking(self.parking)

    @property
    def primary_image(self):
        return self.images[0] if self.images else None
