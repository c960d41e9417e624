from django.urls import path
from . import views

urlpatterns = [
    path('starbucks/', views.post_list, name='post_list'),
    path('posts/<str:slug>/', views.post_detail, name='post_detail'),
    path('posts/<str:slug>/comments/', views.comment_create, name='comment_create'),
    path('posts/<str:slug>/like/', views.post_like, name='post_like'),
]
