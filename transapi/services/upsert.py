"""Create-or-update of a single translation row.

Each call writes and commits one row on its own; callers that upsert many
translations (the importer) get no transaction spanning them.
"""

from dataclasses import dataclass

from transapi import db
from transapi.errors import Conflict, NotFound, store_errors
from transapi.models import Translation


@dataclass
class UpsertResult:
    translation: Translation
    created: bool


def find_translation_id(string_id, language_id):
    """Id of the translation for (string, language), or None."""
    with store_errors(db.session):
        return db.session.query(Translation.id).filter_by(
            string_id=string_id,
            language_id=language_id
        ).scalar()


def upsert_translation(string_id, language_id, content, existing_id=None) -> UpsertResult:
    """Insert the translation, or overwrite the content of the existing row.

    When ``existing_id`` is given the row must exist and belong to the same
    string and language; it is never re-linked.
    """
    with store_errors(db.session):
        if existing_id is not None:
            translation = db.session.get(Translation, existing_id)
            if translation is None:
                raise NotFound(f"Translation {existing_id} does not exist")
            if translation.string_id != string_id or translation.language_id != language_id:
                raise Conflict(
                    f"Translation {existing_id} belongs to string {translation.string_id} / "
                    f"language {translation.language_id}, not {string_id} / {language_id}"
                )
        else:
            translation = Translation.query.filter_by(
                string_id=string_id,
                language_id=language_id
            ).first()

        created = translation is None
        if created:
            translation = Translation(
                string_id=string_id,
                language_id=language_id,
                content=content
            )
            db.session.add(translation)
        else:
            translation.content = content

        db.session.commit()

    return UpsertResult(translation=translation, created=created)
