#!/usr/bin/env python3
"""Import a directory of XLIFF files into the translation database.

Every language the files declare must already be registered
(see scripts/seed_languages.py). The import stops at the first failing file.

Usage:
    python import_xliff.py <import_dir> [database_url]
"""

import logging
import os
import queue
import sys
import threading
import time

from transapi import create_app, get_resolver
from transapi.errors import ImportAborted
from transapi.services.importer import import_directory

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def report_progress(results):
    """Print each imported file name until the None sentinel arrives."""
    while True:
        name = results.get()
        if name is None:
            return
        print(f"Imported domain: {name}")


def main(argv):
    if len(argv) < 1:
        print("Usage: python import_xliff.py <import_dir> [database_url]")
        print("Example: python import_xliff.py ./translations sqlite:///translations.db")
        return 1

    import_path = argv[0]
    overrides = {'EXPORT_WORKER_ENABLED': False}
    if len(argv) > 1:
        overrides['SQLALCHEMY_DATABASE_URI'] = argv[1]

    start = time.perf_counter()
    app = create_app(os.getenv('FLASK_ENV', 'development'), **overrides)

    results = queue.Queue(maxsize=100)
    reporter = threading.Thread(target=report_progress, args=(results,), daemon=True)
    reporter.start()

    with app.app_context():
        try:
            result = import_directory(import_path, get_resolver(), notify=results.put)
        except ImportAborted as e:
            print(f"\n❌ Import failed after {e.files_processed} file(s): {e.error}")
            return 1
        finally:
            results.put(None)
            reporter.join()

    elapsed = time.perf_counter() - start
    print(f"\n✅ Imported {result.files_processed} files in {elapsed:.3f}s\n")
    print(result.stats)
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
