"""Identifier resolver: natural keys to surrogate row ids.

Domain and string ids are cached in a ``ResolverCache`` owned by the
resolver. The cache is write-through (every lookup or creation is stored
before it is returned) and append-only: it is never evicted, so rows
deleted or renamed by another process are not noticed until the resolver
is rebuilt.

Creation goes through an insert-if-absent statement followed by a
re-select, so two flows creating the same new domain or string end up with
the same id instead of one of them failing on the unique constraint.
"""

import logging
import threading

from sqlalchemy import insert as sa_insert

from transapi import db
from transapi.errors import Conflict, NotFound, store_errors
from transapi.models import Domain, Language, TranslationString

logger = logging.getLogger(__name__)


class ResolverCache:
    """Process-wide name -> id mappings, safe to share between threads."""

    def __init__(self):
        self._lock = threading.Lock()
        self._domains = {}
        self._strings = {}

    def get_domain(self, name):
        with self._lock:
            return self._domains.get(name)

    def put_domain(self, name, domain_id):
        with self._lock:
            self._domains[name] = domain_id

    def get_string(self, domain_id, name):
        with self._lock:
            return self._strings.get((domain_id, name))

    def put_string(self, domain_id, name, string_id):
        with self._lock:
            self._strings[(domain_id, name)] = string_id

    def __len__(self):
        with self._lock:
            return len(self._domains) + len(self._strings)


def _insert_if_absent(model, **values):
    """INSERT that does nothing when a unique constraint already holds the row."""
    dialect = db.engine.dialect.name
    if dialect == 'sqlite':
        from sqlalchemy.dialects.sqlite import insert
        stmt = insert(model).values(**values).on_conflict_do_nothing()
    elif dialect == 'postgresql':
        from sqlalchemy.dialects.postgresql import insert
        stmt = insert(model).values(**values).on_conflict_do_nothing()
    else:
        # No conflict clause available: a concurrent creator surfaces as Conflict
        stmt = sa_insert(model).values(**values)

    db.session.execute(stmt)
    db.session.commit()


class IdentifierResolver:

    def __init__(self, cache=None):
        self.cache = cache if cache is not None else ResolverCache()

    def resolve_language(self, code) -> Language:
        """Language by code. Not cached, and never created."""
        with store_errors(db.session):
            language = Language.query.filter_by(code=code).first()
        if language is None:
            raise NotFound(f"Language '{code}' does not exist in database")
        return language

    def _find_domain_id(self, name):
        with store_errors(db.session):
            return db.session.query(Domain.id).filter_by(name=name).scalar()

    def _find_string_id(self, name, domain_id):
        with store_errors(db.session):
            return db.session.query(TranslationString.id).filter_by(
                name=name,
                domain_id=domain_id
            ).scalar()

    def lookup_domain(self, name) -> int:
        """Domain id by name, without creating it."""
        domain_id = self.cache.get_domain(name)
        if domain_id is not None:
            return domain_id

        domain_id = self._find_domain_id(name)
        if domain_id is None:
            raise NotFound(f"Domain '{name}' does not exist")
        self.cache.put_domain(name, domain_id)
        return domain_id

    def resolve_domain(self, name) -> int:
        """Domain id by name, creating the domain on first use."""
        domain_id = self.cache.get_domain(name)
        if domain_id is not None:
            return domain_id

        domain_id = self._find_domain_id(name)
        if domain_id is None:
            with store_errors(db.session):
                _insert_if_absent(Domain, name=name)
            domain_id = self._find_domain_id(name)
            if domain_id is None:
                raise Conflict(f"Domain '{name}' vanished while it was being created")
            logger.info(f"Created domain '{name}' (id={domain_id})")

        self.cache.put_domain(name, domain_id)
        return domain_id

    def lookup_string(self, name, domain_id) -> int:
        """String id by name within a domain, without creating it."""
        string_id = self.cache.get_string(domain_id, name)
        if string_id is not None:
            return string_id

        string_id = self._find_string_id(name, domain_id)
        if string_id is None:
            raise NotFound(f"String '{name}' does not exist in domain {domain_id}")
        self.cache.put_string(domain_id, name, string_id)
        return string_id

    def resolve_string(self, name, domain_id) -> int:
        """String id by name within a domain, creating the string on first use."""
        string_id = self.cache.get_string(domain_id, name)
        if string_id is not None:
            return string_id

        string_id = self._find_string_id(name, domain_id)
        if string_id is None:
            with store_errors(db.session):
                _insert_if_absent(TranslationString, name=name, domain_id=domain_id)
            string_id = self._find_string_id(name, domain_id)
            if string_id is None:
                raise Conflict(f"String '{name}' vanished while it was being created")

        self.cache.put_string(domain_id, name, string_id)
        return string_id
