import core.models
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='SiteSetting',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('site_name', models.CharField(default='Emoji Copy Paster', help_text='The name of your site, used in the dashboard and page titles.', max_length=100)),
                ('site_url', models.URLField(default=core.models.default_site_url, help_text='Public base URL without a trailing slash, used for sitemap.xml and robots.txt.')),
            ],
            options={
                'verbose_name': 'Site Setting',
            },
        ),
    ]
