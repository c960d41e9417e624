from django.contrib import admin
from .models import Store

admin.site.site_header = "스타벅스 매장 탐방 관리"
admin.site.site_title = "Store Spotlight Admin"
admin.site.index_title = "매장과 게시글 관리"


@admin.register(Store)
class StoreAdmin(admin.ModelAdmin):
    list_display = ('store_id', 'name', 'location', 'parking', 'since', 'created_at')
    search_fields = ('name', 'address', 'location', 'store_id')
    list_filter = ('location',)
