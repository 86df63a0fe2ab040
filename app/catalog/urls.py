# emojicopypaster/app/catalog/urls.py
from django.urls import path
from . import views

app_name = 'catalog'

urlpatterns = [
    path('api/emojis/', views.api_emoji_list, name='api_emoji_list'),
    path('api/emojis/categories/', views.api_categories, name='api_categories'),
    path('api/emojis/trending/', views.api_trending, name='api_trending'),
    path('api/emojis/upload/', views.api_upload_emojis, name='api_upload_emojis'),
    path('api/emojis/<int:emoji_id>/copy/', views.api_copy_emoji, name='api_copy_emoji'),
    path('api/emojis/<slug:slug>/', views.api_emoji_detail, name='api_emoji_detail'),
]
