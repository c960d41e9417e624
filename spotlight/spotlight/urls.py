from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    path('', RedirectView.as_view(pattern_name='post_list', permanent=False)),
    path('admin/', admin.site.urls),
    path('api/', include(('apps.api.urls', 'api'), namespace='api')),
    path('', include('apps.posts.urls')),
    path('admin-tools/', include(('apps.admin_tools.urls', 'admin_tools'), namespace='admin_tools')),
]
