"""Error kinds raised by the synchronization engine."""

from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError


class TranslationApiError(Exception):
    """Base class for every error the engine raises."""


class NotFound(TranslationApiError):
    """A language, domain, string or translation is absent when required."""


class Conflict(TranslationApiError):
    """Uniqueness violation, or an update that would re-link a translation."""


class ParseError(TranslationApiError):
    """Malformed interchange file."""


class StoreError(TranslationApiError):
    """Any other failure of the underlying store."""


class ImportAborted(TranslationApiError):
    """An import run stopped on its first error.

    Carries how many files were fully imported before the failure, the
    statistics gathered so far and the original error.
    """

    def __init__(self, files_processed, error, stats=None):
        super().__init__(f"Import aborted after {files_processed} file(s): {error}")
        self.files_processed = files_processed
        self.error = error
        self.stats = stats


@contextmanager
def store_errors(session):
    """Roll back and re-raise store failures as engine errors."""
    try:
        yield
    except IntegrityError as e:
        session.rollback()
        raise Conflict(str(e.orig)) from e
    except SQLAlchemyError as e:
        session.rollback()
        raise StoreError(str(e)) from e
