"""
Tests for the language seeding script.
"""

import pytest

from scripts.seed_languages import LANGUAGES_DATA, parse_language_args, seed_languages
from transapi.models import Language


def test_parse_language_args():
    assert parse_language_args(['pt-BR=Brazilian Portuguese', 'ja = Japanese']) == [
        {'code': 'pt-BR', 'name': 'Brazilian Portuguese'},
        {'code': 'ja', 'name': 'Japanese'},
    ]


def test_parse_language_args_rejects_missing_name():
    with pytest.raises(ValueError):
        parse_language_args(['pt-BR'])


def test_seeding_twice_updates_instead_of_duplicating(db_session):
    added, updated = seed_languages(LANGUAGES_DATA)
    assert (added, updated) == (len(LANGUAGES_DATA), 0)

    added, updated = seed_languages([{'code': 'fr', 'name': 'Français'}])

    assert (added, updated) == (0, 1)
    assert Language.query.count() == len(LANGUAGES_DATA)
    assert Language.query.filter_by(code='fr').one().name == 'Français'
