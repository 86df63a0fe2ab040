# emojicopypaster/app/seo/admin.py
from django.contrib import admin, messages
from .models import EmojiPage
from .generation import regenerate_page


@admin.register(EmojiPage)
class EmojiPageAdmin(admin.ModelAdmin):
    list_display = ('keyword', 'slug', 'title', 'is_generated', 'created_at')
    list_filter = ('is_generated',)
    search_fields = ('keyword', 'slug', 'title')
    readonly_fields = ('related_emojis', 'copyable_text', 'created_at')
    actions = ['regenerate_pages']

    def get_readonly_fields(self, request, obj=None):
        # Keyword and slug are fixed once the page exists
        if obj is not None:
            return self.readonly_fields + ('keyword', 'slug')
        return self.readonly_fields

    @admin.action(description='Regenerate selected pages')
    def regenerate_pages(self, request, queryset):
        count = 0
        for page in queryset:
            regenerate_page(page)
            count += 1
        self.message_user(request, f"Regenerated {count} page(s).", messages.SUCCESS)
