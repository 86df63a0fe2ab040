# emojicopypaster/app/seo/management/commands/generate_pages.py

from django.core.management.base import BaseCommand, CommandError
from seo.generation import generate_catalog_pages, generate_page, generate_pending_pages


class Command(BaseCommand):
    help = 'Generates SEO pages for keywords, pending stubs, or every catalog emoji.'

    def add_arguments(self, parser):
        parser.add_argument('--keyword', action='append', default=[], help='Keyword to generate (repeatable).')
        parser.add_argument('--force', action='store_true', help='Regenerate keywords that are already generated.')
        parser.add_argument('--batch', type=int, default=None, help='Pending pages per batch.')
        parser.add_argument('--all', action='store_true', help='Keep generating batches until no pending pages remain.')
        parser.add_argument('--catalog', action='store_true', help="Generate one '<name> emoji' page per catalog emoji.")

    def handle(self, *args, **options):
        if options['batch'] is not None and options['batch'] < 1:
            raise CommandError('--batch must be at least 1.')

        if not (options['keyword'] or options['all'] or options['catalog'] or options['batch']):
            raise CommandError('Nothing to do: pass --keyword, --batch, --all or --catalog.')

        for keyword in options['keyword']:
            try:
                page, created = generate_page(keyword, force=options['force'])
            except ValueError as e:
                raise CommandError(str(e))
            self.stdout.write(f"{'Created' if created else 'Saved'} '{page.slug}': {page.title}")

        if options['batch'] or options['all']:
            total = 0
            while True:
                generated = generate_pending_pages(options['batch'])
                total += generated
                if generated == 0 or not options['all']:
                    break
                self.stdout.write(f'Generated {total} pending page(s) so far...')
            self.stdout.write(self.style.SUCCESS(f'Generated {total} pending page(s).'))

        if options['catalog']:
            summary = generate_catalog_pages()
            self.stdout.write(self.style.SUCCESS(
                f"Catalog pages: {summary['created']} created, {summary['updated']} updated, "
                f"{summary['skipped']} skipped of {summary['total']}."
            ))
