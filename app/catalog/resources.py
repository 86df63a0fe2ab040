# emojicopypaster/app/catalog/resources.py
from import_export import resources, fields
from import_export.widgets import IntegerWidget
from .models import Emoji


class EmojiResource(resources.ModelResource):
    copy_count = fields.Field(
        column_name='copy_count',
        attribute='copy_count',
        readonly=True, # Counter is owned by the site, never imported
        widget=IntegerWidget()
    )

    class Meta:
        model = Emoji
        import_id_fields = ['slug']
        fields = ('slug', 'emoji', 'name', 'category', 'subcategory', 'keywords', 'description', 'copy_count')
        export_order = ('slug', 'emoji', 'name', 'category', 'subcategory', 'keywords', 'description', 'copy_count')
        skip_unchanged = True
        report_skipped = True
        clean_model_instances = True
