"""Database models for the translation store."""

from .language import Language
from .domain import Domain
from .string import TranslationString
from .translation import Translation

__all__ = ['Language', 'Domain', 'TranslationString', 'Translation']
