# emojicopypaster/app/seo/urls.py
from django.urls import path
from . import views

app_name = 'seo'

urlpatterns = [
    path('sitemap.xml', views.sitemap_xml, name='sitemap_xml'),
    path('robots.txt', views.robots_txt, name='robots_txt'),

    # Public API
    path('api/pages/', views.api_page_list, name='api_page_list'),
    path('api/pages/generate/', views.page_detail_on_get(views.api_generate_page, 'generate'), name='api_generate_page'),

    # Management API
    path('api/pages/generate-batch/', views.page_detail_on_get(views.api_generate_batch, 'generate-batch'), name='api_generate_batch'),
    path('api/pages/generate-emoji-pages/', views.page_detail_on_get(views.api_generate_emoji_pages, 'generate-emoji-pages'), name='api_generate_emoji_pages'),
    path('api/pages/add-keywords/', views.page_detail_on_get(views.api_add_keywords, 'add-keywords'), name='api_add_keywords'),
    path('api/pages/delete-all/', views.page_detail_on_get(views.api_delete_all_pages, 'delete-all'), name='api_delete_all_pages'),
    path('api/pages/manage/edit/<int:page_id>/', views.manage_page_edit, name='manage_page_edit'),
    path('api/pages/manage/delete/<int:page_id>/', views.manage_page_delete, name='manage_page_delete'),

    # After the action paths: GET on those paths is routed to the page detail above
    path('api/pages/<slug:slug>/', views.api_page_detail, name='api_page_detail'),
]
