"""Single-translation updates coming from the HTTP API."""

import logging

from transapi.errors import NotFound
from transapi.services.upsert import UpsertResult, find_translation_id, upsert_translation

logger = logging.getLogger(__name__)


def create_or_update_translation(resolver, domain_name, string_name, lang, content,
                                 allow_create=False) -> UpsertResult:
    """Set the content of a string in one language.

    The domain and language must already exist. With ``allow_create`` the
    string and translation are created when missing; without it both must
    exist, and a missing one raises NotFound.
    """
    language = resolver.resolve_language(lang)
    domain_id = resolver.lookup_domain(domain_name)

    if allow_create:
        string_id = resolver.resolve_string(string_name, domain_id)
        result = upsert_translation(string_id, language.id, content)
    else:
        try:
            string_id = resolver.lookup_string(string_name, domain_id)
        except NotFound:
            raise NotFound(f"String '{string_name}' does not exist in domain '{domain_name}'")

        existing_id = find_translation_id(string_id, language.id)
        if existing_id is None:
            raise NotFound(
                f"No '{lang}' translation of '{string_name}' in domain '{domain_name}'"
            )
        result = upsert_translation(string_id, language.id, content, existing_id=existing_id)

    action = 'Created' if result.created else 'Updated'
    logger.info(f"{action} '{lang}' translation of {domain_name}/{string_name}")
    return result
