#!/usr/bin/env python
"""Database initialization script for the translation API.

Creates all tables from the SQLAlchemy models. Run this once before the
first import, then register languages with scripts/seed_languages.py.

Usage:
    python init_db.py
"""

import os
import sys

from transapi import create_app, db


def init_database():
    """Initialize the database by creating all tables."""
    config_name = os.getenv('FLASK_ENV', 'development')
    app = create_app(config_name, EXPORT_WORKER_ENABLED=False)

    print(f"\n{'='*60}")
    print(f"Database Initialization for {config_name.upper()} Environment")
    print(f"{'='*60}\n")

    with app.app_context():
        try:
            print("Creating database tables...")
            print(f"Database URI: {app.config['SQLALCHEMY_DATABASE_URI']}\n")

            db.create_all()

            tables_info = [
                ("language", "Registered languages (code is unique)"),
                ("domain", "Named collections of strings"),
                ("string", "Translatable keys, unique per domain"),
                ("translation", "Content of one string in one language"),
            ]

            print("Created tables:")
            for table_name, description in tables_info:
                print(f"  ✓ {table_name:<15} - {description}")

            print(f"\n{'='*60}")
            print("✅ Database initialization complete!")
            print(f"{'='*60}\n")
            print("Next steps:")
            print("  1. Register languages: python scripts/seed_languages.py")
            print("  2. Import XLIFF files: python import_xliff.py <import_dir>")
            print("  3. Start the API server: python wsgi.py")
            print("\n")

            return True

        except Exception as e:
            print(f"❌ Error creating database: {e}\n")
            return False


if __name__ == '__main__':
    success = init_database()
    sys.exit(0 if success else 1)
