# emojicopypaster/app/catalog/importing.py
import logging
from pathlib import Path

from django.db import transaction
from tablib import Dataset

from .resources import EmojiResource

logger = logging.getLogger(__name__)

SEED_CATALOG_PATH = Path(__file__).resolve().parent / 'data' / 'emojis.csv'


class CatalogImportError(Exception):
    """Raised when a catalog file fails the dry-run validation."""

    def __init__(self, errors):
        self.errors = errors
        super().__init__("; ".join(errors) or "Unknown validation error")


def load_dataset(raw, file_name):
    """
    Loads uploaded bytes (or text) into a tablib Dataset based on the file extension.
    """
    dataset = Dataset()
    if file_name.endswith('.csv'):
        if isinstance(raw, bytes):
            try:
                raw = raw.decode('utf-8-sig')
            except UnicodeDecodeError:
                logger.warning(f"[load_dataset] 'utf-8' decoding failed for {file_name}. Trying 'latin-1'.")
                raw = raw.decode('latin-1')
        dataset.load(raw, format='csv')
    else:
        dataset.load(raw, format='xlsx')
    return dataset


def import_catalog(dataset):
    """
    Dry-runs the import first and only commits when every row is valid.
    Returns the number of rows in the dataset.
    """
    resource = EmojiResource()
    logger.info(f"[import_catalog] Starting dry run of import ({len(dataset)} rows)...")
    result = resource.import_data(dataset, dry_run=True, use_transactions=True)

    if result.has_errors() or result.has_validation_errors():
        errors = []
        for row_number, row_errors in result.row_errors():
            if row_errors:
                errors.append(f"Error in row {row_number}: {row_errors[0].error}")
        for invalid_row in result.invalid_rows:
            errors.append(f"Invalid row {invalid_row.number}: {invalid_row.error_dict}")
        for base_error in result.base_errors:
            errors.append(str(base_error.error))
        logger.warning(f"[import_catalog] Dry run failed. Errors: {errors}")
        raise CatalogImportError(errors)

    with transaction.atomic():
        resource.import_data(dataset, dry_run=False, use_transactions=True)
    logger.info("[import_catalog] Import successful.")
    return len(dataset)


def import_seed_catalog(path=SEED_CATALOG_PATH):
    with open(path, encoding='utf-8') as fh:
        dataset = load_dataset(fh.read(), str(path))
    return import_catalog(dataset)
