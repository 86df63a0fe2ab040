# emojicopypaster/app/core/urls.py

from django.contrib import admin
from django.urls import path, include
from . import views as core_views

handler403 = 'core.views.handler403'

urlpatterns = [
    path('admin/', admin.site.urls),
    path('manage/', core_views.manage_dashboard, name='manage_dashboard'),

    path('', include('catalog.urls', namespace='catalog')),
    path('', include('seo.urls', namespace='seo')),
]
