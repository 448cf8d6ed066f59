import atexit
import logging

from flask import Flask, current_app
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
from sqlalchemy import event
from dotenv import load_dotenv

load_dotenv()

db = SQLAlchemy()
migrate = Migrate()

logger = logging.getLogger(__name__)


def _configure_sqlite(engine):
    """Switch on foreign key enforcement (and WAL for file databases) per connection."""
    if engine.dialect.name != 'sqlite':
        return

    in_memory = engine.url.database in (None, '', ':memory:')

    @event.listens_for(engine, 'connect')
    def _set_sqlite_pragmas(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys = ON')
        if not in_memory:
            cursor.execute('PRAGMA journal_mode = WAL')
            cursor.execute('PRAGMA synchronous = NORMAL')
        cursor.close()


def create_app(config_name='development', **overrides):
    from transapi.config import get_config

    app = Flask(__name__)

    # Config
    app.config.from_object(get_config(config_name))
    app.config.update(overrides)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    CORS(app)

    with app.app_context():
        _configure_sqlite(db.engine)

        from transapi import models  # noqa: F401

        if app.config.get('AUTO_CREATE_TABLES', True):
            try:
                db.create_all()
            except Exception as e:
                logger.warning(f"Could not create database tables: {e}")

    from transapi.services.resolver import IdentifierResolver
    from transapi.services.export_queue import ExportQueue

    app.extensions['resolver'] = IdentifierResolver()

    export_queue = ExportQueue(
        app,
        export_dir=app.config['EXPORT_DIR'],
        maxsize=app.config['EXPORT_QUEUE_SIZE'],
        enabled=app.config['EXPORT_WORKER_ENABLED'],
    )
    export_queue.start()
    atexit.register(export_queue.shutdown)
    app.extensions['export_queue'] = export_queue

    # Register routes
    from transapi.routes import register_routes
    from transapi.routes.errors import register_error_handlers
    register_routes(app)
    register_error_handlers(app)

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok'}, 200

    return app


def get_resolver():
    """Identifier resolver shared by every flow of the current app."""
    return current_app.extensions['resolver']


def get_export_queue():
    return current_app.extensions['export_queue']
