#!/usr/bin/env python3
"""Register languages in the translation database.

Imports fail for any language that is not registered, so run this before
the first import. Extra languages can be given as code=name arguments.

Usage:
    python scripts/seed_languages.py [code=name ...]
Example:
    python scripts/seed_languages.py pt-BR="Brazilian Portuguese"
"""

import sys
import os

# Add parent directory to path to import transapi
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from transapi import create_app, db
from transapi.models import Language

LANGUAGES_DATA = [
    {'code': 'en', 'name': 'English'},
    {'code': 'fr', 'name': 'French'},
    {'code': 'de', 'name': 'German'},
    {'code': 'es', 'name': 'Spanish'},
    {'code': 'it', 'name': 'Italian'},
    {'code': 'nl', 'name': 'Dutch'},
    {'code': 'pt', 'name': 'Portuguese'},
    {'code': 'ru', 'name': 'Russian'},
    {'code': 'lv', 'name': 'Latvian'},
]


def parse_language_args(args):
    """Turn code=name arguments into language dicts."""
    languages = []
    for arg in args:
        code, sep, name = arg.partition('=')
        if not sep or not code or not name:
            raise ValueError(f"Expected code=name, got '{arg}'")
        languages.append({'code': code.strip(), 'name': name.strip()})
    return languages


def seed_languages(languages):
    """Add missing languages and refresh the names of existing ones."""
    added_count = 0
    updated_count = 0

    for language_data in languages:
        existing = Language.query.filter_by(code=language_data['code']).first()

        if existing:
            existing.name = language_data['name']
            updated_count += 1
            print(f"  Updated: {language_data['code']} ({language_data['name']})")
        else:
            db.session.add(Language(code=language_data['code'], name=language_data['name']))
            added_count += 1
            print(f"  Added: {language_data['code']} ({language_data['name']})")

    db.session.commit()
    return added_count, updated_count


if __name__ == '__main__':
    try:
        extra = parse_language_args(sys.argv[1:])
    except ValueError as e:
        print(f"❌ {e}")
        sys.exit(1)

    app = create_app(os.getenv('FLASK_ENV', 'development'), EXPORT_WORKER_ENABLED=False)

    with app.app_context():
        print("Starting language seeding...")
        added, updated = seed_languages(LANGUAGES_DATA + extra)

        print("\n" + "="*50)
        print("Language seeding completed!")
        print(f"Added: {added} new languages")
        print(f"Updated: {updated} existing languages")
        print(f"Total languages in database: {Language.query.count()}")
        print("="*50)
