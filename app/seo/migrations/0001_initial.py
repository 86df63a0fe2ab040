from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='EmojiPage',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('slug', models.SlugField(help_text="Derived from the keyword, e.g. 'crying-emoji'.", max_length=255, unique=True)),
                ('title', models.CharField(max_length=255)),
                ('keyword', models.CharField(help_text='The search phrase this landing page targets.', max_length=255)),
                ('meta_description', models.TextField(blank=True, default='', help_text='The meta description for the page.')),
                ('content', models.TextField(blank=True, default='', help_text='Generated markdown body.')),
                ('copyable_text', models.TextField(blank=True, null=True)),
                ('related_emojis', models.JSONField(blank=True, default=list)),
                ('is_generated', models.BooleanField(db_index=True, default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ['-created_at', '-id'],
            },
        ),
    ]
