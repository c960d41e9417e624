from django import forms

from apps.core.tags import TagList
from apps.posts.models import Category
from apps.stores.models import Store


class StoreForm(forms.Form):
    name = forms.CharField(max_length=255, label="매장 이름")
    address = forms.CharField(max_length=255, label="주소")
    location = forms.CharField(max_length=100, label="지역")
    store_id = forms.CharField(max_length=100, label="스토어 ID")
    latitude = forms.FloatField(required=False, label="위도")
    longitude = forms.FloatField(required=False, label="경도")
    parking = forms.CharField(max_length=255, required=False, label="주차 정보")
    since = forms.CharField(max_length=50, required=False, label="개점")
    phone = forms.CharField(max_length=50, required=False, label="전화번호")
    tags = forms.CharField(required=False, label="태그 (쉼표로 구분)")
    images = forms.CharField(required=False, widget=forms.Textarea, label="이미지 URL (한 줄에 하나)")

    @classmethod
    def from_store(cls, store):
        return cls(initial={
            **{field: store[field] for field in (
                "name", "address", "location", "store_id", "latitude", "longitude",
                "parking", "since", "phone",
            )},
            "tags": ", ".join(store["tags"]),
            "images": "\n".join(store["images"]),
        })

    def clean_tags(self):
        return TagList.from_text(self.cleaned_data["tags"]).as_list()

    def clean_images(self):
        return [line.strip() for line in self.cleaned_data["images"].splitlines() if line.strip()]


class PostForm(forms.Form):
    title = forms.CharField(max_length=255, label="제목")
    slug = forms.CharField(max_length=255, required=False, label="슬러그")
    category = forms.ChoiceField(choices=Category.choices, label="카테고리")
    description = forms.CharField(required=False, widget=forms.Textarea, label="설명")
    image = forms.URLField(max_length=500, required=False, label="대표 이미지 URL")
    store = forms.ModelChoiceField(queryset=Store.objects.all(), required=False, label="매장")
    is_published = forms.BooleanField(required=False, initial=True, label="공개")

    @classmethod
    def from_post(cls, post):
        return cls(initial={
            **{field: post[field] for field in (
                "title", "slug", "category", "description", "image", "is_published",
            )},
            "store": post["store"]["id"] if post["store"] else None,
        })

    def payload(self):
        data = dict(self.cleaned_data)
        store = data.pop("store")
        data["store"] = store.pk if store else None
        return data
