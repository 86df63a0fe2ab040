# emojicopypaster/app/catalog/management/commands/seed_emojis.py

from django.core.management.base import BaseCommand, CommandError
from catalog.importing import CatalogImportError, import_seed_catalog
from catalog.models import Emoji
from seo.generation import add_keywords
from seo.keywords import TOP_KEYWORDS


class Command(BaseCommand):
    help = 'Seeds the emoji catalog from the bundled CSV and creates stub pages for the top keywords.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--force',
            action='store_true',
            help='Re-import the catalog even if emojis already exist (rows are matched on slug).',
        )

    def handle(self, *args, **options):
        count = Emoji.objects.count()

        if count > 0 and not options['force']:
            self.stdout.write(self.style.SUCCESS(f'Database already has {count} emojis, skipping seed.'))
            return

        try:
            rows = import_seed_catalog()
        except CatalogImportError as e:
            raise CommandError(f'Seed catalog failed validation: {e}')

        self.stdout.write(self.style.SUCCESS(f'Seeded {rows} emojis.'))

        summary = add_keywords(TOP_KEYWORDS)
        self.stdout.write(self.style.SUCCESS(
            f"Created {summary['added']} SEO page stubs ({summary['skipped']} already existed)."
        ))
