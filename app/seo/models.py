# emojicopypaster/app/seo/models.py
from django.db import models
from django.urls import reverse

from .keywords import slugify_keyword, title_case


class EmojiPageQuerySet(models.QuerySet):

    def pending(self):
        return self.filter(is_generated=False).order_by('created_at', 'id')

    def generated(self):
        return self.filter(is_generated=True)


class EmojiPage(models.Model):
    slug = models.SlugField(max_length=255, unique=True, help_text="Derived from the keyword, e.g. 'crying-emoji'.")
    title = models.CharField(max_length=255)
    keyword = models.CharField(max_length=255, help_text="The search phrase this landing page targets.")
    meta_description = models.TextField(blank=True, default='', help_text="The meta description for the page.")
    content = models.TextField(blank=True, default='', help_text="Generated markdown body.")
    copyable_text = models.TextField(blank=True, null=True)
    related_emojis = models.JSONField(default=list, blank=True)
    is_generated = models.BooleanField(default=False, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = EmojiPageQuerySet.as_manager()

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.keyword} ({self.slug})"

    def get_absolute_url(self):
        return reverse('seo:api_page_detail', kwargs={'slug': self.slug})

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify_keyword(self.keyword)
        if not self.title:
            self.title = title_case(self.keyword)
        super().save(*args, **kwargs)

    def to_dict(self):
        return {
            'id': self.pk,
            'slug': self.slug,
            'title': self.title,
            'keyword': self.keyword,
            'metaDescription': self.meta_description,
            'content': self.content,
            'copyableText': self.copyable_text,
            'relatedEmojis': self.related_emojis,
            'isGenerated': self.is_generated,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
