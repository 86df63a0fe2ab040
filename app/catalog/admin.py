# emojicopypaster/app/catalog/admin.py
from django.contrib import admin
from .models import Emoji

from import_export.admin import ImportExportMixin
from .resources import EmojiResource


@admin.register(Emoji)
class EmojiAdmin(ImportExportMixin, admin.ModelAdmin):
    resource_classes = [EmojiResource]
    list_display = ('emoji', 'name', 'slug', 'category', 'subcategory', 'copy_count')
    list_filter = ('category',)
    search_fields = ('name', 'slug', 'keywords', 'description')
    readonly_fields = ('copy_count',)
    prepopulated_fields = {'slug': ('name',)}
    ordering = ('id',)
