"""Locale-sensitive word rules: case inflection, gender words and initials."""

from .case import GrammaticalCase, inflect
from .gender import Gender, article, polite, symbol
from .initials import initials
from .locale import Language, Locale, LocaleLike, language_of, parse_locale

__all__ = [
    "GrammaticalCase",
    "inflect",
    "Gender",
    "article",
    "polite",
    "symbol",
    "initials",
    "Language",
    "Locale",
    "LocaleLike",
    "language_of",
    "parse_locale",
]
