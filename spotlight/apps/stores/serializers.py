from rest_framework import serializers

from apps.core.tags import normalize_tags
from .models import Store


class StoreSerializer(serializers.ModelSerializer):
    parking_status = serializers.SerializerMethodField()

    class Meta:
        model = Store
        fields = [
            'id', 'name', 'address', 'location', 'store_id', 'latitude', 'longitude',
            'parking', 'parking_status', 'since', 'phone', 'tags', 'images',
            'created_at', 'updated_at',
        ]

    def get_parking_status(self, obj):
        return obj.parking_info.label


class StoreSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Store
        fields = ['id', 'name', 'address', 'location', 'store_id', 'parking', 'since', 'phone', 'tags', 'images']


class StoreInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    address = serializers.CharField(max_length=255)
    location = serializers.CharField(max_length=100)
    store_id = serializers.CharField(max_length=100)
    latitude = serializers.FloatField(required=False, allow_null=True, min_value=-90, max_value=90)
    longitude = serializers.FloatField(required=False, allow_null=True, min_value=-180, max_value=180)
    parking = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    since = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')
    phone = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')
    tags = serializers.ListField(child=serializers.CharField(allow_blank=True), required=False, default=list)
    images = serializers.ListField(child=serializers.URLField(), required=False, default=list)

    def validate_tags(self, value):
        return normalize_tags(value)
