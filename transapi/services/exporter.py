"""Export a domain from the store back to XLIFF files, one per language."""

import logging
from pathlib import Path

from sqlalchemy.orm import selectinload

from transapi import db
from transapi.errors import NotFound, StoreError, store_errors
from transapi.models import Domain, TranslationString
from transapi.services import xliff

logger = logging.getLogger(__name__)


def load_domain(name) -> Domain:
    """Domain with all its strings and their translations loaded."""
    with store_errors(db.session):
        domain = Domain.query.options(
            selectinload(Domain.strings).selectinload(TranslationString.translations)
        ).filter_by(name=name).first()

    if domain is None:
        raise NotFound(f"Domain '{name}' does not exist")
    return domain


def list_domains():
    with store_errors(db.session):
        return Domain.query.order_by(Domain.name).all()


def build_trees(domain) -> list[xliff.DomainTree]:
    """Split a loaded domain into one tree per language, in language code order."""
    trees = {}
    for string in domain.strings:
        for translation in string.translations:
            code = translation.language.code
            if code not in trees:
                trees[code] = xliff.DomainTree(name=domain.name, language=code)
            trees[code].translations.append((string.name, translation.content))

    return [trees[code] for code in sorted(trees)]


def export_domain(name, output_dir, source_language='en') -> list[Path]:
    """Write ``<domain>.<language>.xliff`` for every language the domain has."""
    domain = load_domain(name)
    trees = build_trees(domain)

    directory = Path(output_dir)
    try:
        directory.mkdir(parents=True, exist_ok=True)
        paths = [xliff.write_file(tree, directory, source_language) for tree in trees]
    except OSError as e:
        raise StoreError(f"Could not write export files for '{name}': {e}") from e

    logger.info(f"Exported domain '{name}' to {len(paths)} file(s) in {directory}")
    return paths
