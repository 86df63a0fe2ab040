from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Emoji',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('emoji', models.CharField(help_text="The emoji character(s), e.g. '🔥'.", max_length=32)),
                ('name', models.CharField(max_length=200)),
                ('slug', models.SlugField(max_length=200, unique=True)),
                ('category', models.CharField(db_index=True, max_length=100)),
                ('subcategory', models.CharField(blank=True, max_length=100, null=True)),
                ('keywords', models.TextField(blank=True, default='', help_text="Comma-separated search keywords (e.g., 'hot, flame, lit').")),
                ('description', models.TextField(blank=True, null=True)),
                ('copy_count', models.PositiveIntegerField(default=0)),
            ],
            options={
                'verbose_name_plural': 'Emojis',
                'ordering': ['id'],
            },
        ),
    ]
