"""Import XLIFF files into the translation store.

Files are imported one after another, in name order, and the first error
aborts the whole run. Nothing is rolled back: translations written for a
file before it failed stay in the store.
"""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from transapi.errors import ImportAborted, NotFound, TranslationApiError
from transapi.services import xliff
from transapi.services.upsert import upsert_translation

logger = logging.getLogger(__name__)


@dataclass
class ImportStats:
    """Timings and counters for one import run."""
    files: int = 0
    inserted: int = 0
    updated: int = 0
    parse_seconds: float = 0.0
    string_seconds: float = 0.0
    insert_seconds: float = 0.0
    update_seconds: float = 0.0

    def __str__(self):
        return (
            f"Parsing files took: {self.parse_seconds:.3f}s\n"
            f"Resolving strings took: {self.string_seconds:.3f}s\n"
            f"Inserting {self.inserted} translations took: {self.insert_seconds:.3f}s\n"
            f"Updating {self.updated} translations took: {self.update_seconds:.3f}s"
        )


@dataclass
class ImportResult:
    files_processed: int
    stats: ImportStats = field(default_factory=ImportStats)


@contextmanager
def _timed(stats, attr):
    start = time.perf_counter()
    try:
        yield
    finally:
        setattr(stats, attr, getattr(stats, attr) + time.perf_counter() - start)


def import_domain(tree: xliff.DomainTree, resolver, stats=None) -> ImportStats:
    """Write every translation of one parsed file to the store.

    The language is checked before anything is written, so a file in an
    unregistered language leaves no rows behind.
    """
    if stats is None:
        stats = ImportStats()

    language_id = resolver.resolve_language(tree.language).id
    domain_id = resolver.resolve_domain(tree.name)

    for string_name, content in tree.translations:
        with _timed(stats, 'string_seconds'):
            string_id = resolver.resolve_string(string_name, domain_id)

        start = time.perf_counter()
        result = upsert_translation(string_id, language_id, content)
        elapsed = time.perf_counter() - start

        if result.created:
            stats.inserted += 1
            stats.insert_seconds += elapsed
        else:
            stats.updated += 1
            stats.update_seconds += elapsed

    return stats


def import_directory(path, resolver, notify=None) -> ImportResult:
    """Import every ``*.xliff`` file in path.

    ``notify`` is called with each file's base name once that file is fully
    imported; it runs synchronously, so a blocking callable (e.g. the ``put``
    of a bounded queue) holds the import back until it returns.

    Raises ImportAborted on the first failure.
    """
    directory = Path(path)
    stats = ImportStats()

    if not directory.is_dir():
        raise ImportAborted(0, NotFound(f"Import directory '{path}' does not exist"), stats)

    files = sorted(directory.glob(f'*{xliff.FILE_SUFFIX}'))
    logger.info(f"Importing {len(files)} file(s) from {directory}")

    processed = 0
    for file in files:
        try:
            with _timed(stats, 'parse_seconds'):
                tree = xliff.parse_file(file)
            import_domain(tree, resolver, stats)
        except TranslationApiError as e:
            logger.error(f"Import of {file.name} failed: {e}")
            raise ImportAborted(processed, e, stats) from e

        processed += 1
        stats.files = processed
        logger.debug(f"Imported {file.name}")
        if notify is not None:
            notify(file.name)

    return ImportResult(files_processed=processed, stats=stats)
