# emojicopypaster/app/core/models.py
from django.conf import settings
from django.db import models


def default_site_url():
    return getattr(settings, 'SITE_URL', 'https://emojicopypaster.com')


class SiteSetting(models.Model):
    site_name = models.CharField(
        max_length=100,
        default="Emoji Copy Paster",
        help_text="The name of your site, used in the dashboard and page titles."
    )
    site_url = models.URLField(
        max_length=200,
        default=default_site_url,
        help_text="Public base URL without a trailing slash, used for sitemap.xml and robots.txt."
    )

    class Meta:
        verbose_name = "Site Setting"

    def __str__(self):
        return self.site_name

    @property
    def base_url(self):
        return self.site_url.rstrip('/')

    @classmethod
    def load(cls):
        """
        Returns the singleton SiteSetting object, creating it on first use.
        """
        settings_obj = cls.objects.first()
        if not settings_obj:
            settings_obj = cls.objects.create()
        return settings_obj
