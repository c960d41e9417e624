from django.urls import path

from . import views

app_name = "admin_tools"

urlpatterns = [
    path("stores/", views.stores_manage, name="stores_manage"),
    path("stores/add/", views.store_add, name="store_add"),
    path("stores/<int:pk>/edit/", views.store_edit, name="store_edit"),
    path("stores/<int:pk>/delete/", views.store_delete, name="store_delete"),
    path("posts/", views.posts_manage, name="posts_manage"),
    path("posts/add/", views.post_create, name="post_create"),
    path("posts/<int:pk>/edit/", views.post_edit, name="post_edit"),
    path("posts/<int:pk>/delete/", views.post_delete, name="post_delete"),
    path("comments/", views.comments_manage, name="comments_manage"),
    path("comments/<int:pk>/delete/", views.comment_delete, name="comment_delete"),
    path("comments/<int:pk>/restore/", views.comment_restore, name="comment_restore"),
]
