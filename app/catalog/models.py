# emojicopypaster/app/catalog/models.py
from django.db import models
from django.db.models import F, Q
from django.urls import reverse


class EmojiQuerySet(models.QuerySet):

    def search(self, term=None, category=None):
        """
        Case-insensitive substring search over name, category and keywords,
        optionally restricted to an exact category. Keeps catalog order.
        """
        queryset = self
        if term:
            queryset = queryset.filter(
                Q(name__icontains=term) |
                Q(category__icontains=term) |
                Q(keywords__icontains=term)
            )
        if category:
            queryset = queryset.filter(category=category)
        return queryset

    def categories(self):
        return list(
            self.order_by('category').values_list('category', flat=True).distinct()
        )

    def trending(self, limit=50):
        return self.order_by('-copy_count', 'id')[:limit]


class Emoji(models.Model):
    emoji = models.CharField(max_length=32, help_text="The emoji character(s), e.g. '🔥'.")
    name = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, unique=True)
    category = models.CharField(max_length=100, db_index=True)
    subcategory = models.CharField(max_length=100, blank=True, null=True)
    keywords = models.TextField(
        blank=True,
        default='',
        help_text="Comma-separated search keywords (e.g., 'hot, flame, lit')."
    )
    description = models.TextField(blank=True, null=True)
    copy_count = models.PositiveIntegerField(default=0)

    objects = EmojiQuerySet.as_manager()

    class Meta:
        ordering = ['id']
        verbose_name_plural = "Emojis"

    def __str__(self):
        return f"{self.emoji} {self.name}"

    @property
    def keyword_list(self):
        return [kw.strip() for kw in (self.keywords or '').split(',') if kw.strip()]

    def get_absolute_url(self):
        return reverse('catalog:api_emoji_detail', kwargs={'slug': self.slug})

    def increment_copy_count(self):
        """
        Atomically bumps the copy counter and returns the new value.
        """
        Emoji.objects.filter(pk=self.pk).update(copy_count=F('copy_count') + 1)
        self.refresh_from_db(fields=['copy_count'])
        return self.copy_count

    def to_dict(self):
        return {
            'id': self.pk,
            'emoji': self.emoji,
            'name': self.name,
            'slug': self.slug,
            'category': self.category,
            'subcategory': self.subcategory,
            'keywords': self.keyword_list,
            'description': self.description,
            'copyCount': self.copy_count,
        }
