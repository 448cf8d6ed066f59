"""
Pytest configuration and fixtures for testing the translation API.
"""

import os
import sys
import pytest
from faker import Faker
from sqlalchemy import event

# Add the parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from transapi import create_app, db
from transapi.models import Language
from transapi.services import xliff
from transapi.services.resolver import IdentifierResolver

fake = Faker()


@pytest.fixture(scope='session')
def app(tmp_path_factory):
    """Create application for testing, backed by a temporary SQLite file."""
    base = tmp_path_factory.mktemp('transapi')

    app = create_app(
        'testing',
        SQLALCHEMY_DATABASE_URI=f"sqlite:///{base / 'test.db'}",
        EXPORT_DIR=str(base / 'export'),
        EXPORT_WORKER_ENABLED=True,
    )

    yield app

    app.extensions['export_queue'].shutdown()
    with app.app_context():
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client for each test function."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Empty every table and start from a fresh resolver (its cache never forgets)."""
    with app.app_context():
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
        app.extensions['resolver'] = IdentifierResolver()
        yield db.session
        db.session.rollback()


@pytest.fixture
def resolver(app, db_session):
    return app.extensions['resolver']


@pytest.fixture
def languages(db_session):
    """Register English, French and German."""
    registered = {}
    for code, name in [('en', 'English'), ('fr', 'French'), ('de', 'German')]:
        language = Language(code=code, name=name)
        db_session.add(language)
        registered[code] = language
    db_session.commit()
    return registered


@pytest.fixture
def write_xliff(tmp_path):
    """Factory writing ``<domain>.<lang>.xliff`` files into a temp import directory."""
    import_dir = tmp_path / 'import'
    import_dir.mkdir()

    def _write(domain, lang, strings, file_name=None):
        tree = xliff.DomainTree(name=domain, language=lang, translations=list(strings.items()))
        path = import_dir / (file_name or xliff.file_name(tree))
        path.write_bytes(xliff.serialize(tree))
        return path

    _write.directory = import_dir
    return _write


@pytest.fixture
def statements(app):
    """Collect every SQL statement sent to the database during the test."""
    executed = []

    def _record(conn, cursor, statement, parameters, context, executemany):
        executed.append(statement)

    with app.app_context():
        engine = db.engine

    event.listen(engine, 'before_cursor_execute', _record)
    yield executed
    event.remove(engine, 'before_cursor_execute', _record)
