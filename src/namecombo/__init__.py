"""Render personal names as culturally defined combinations.

A :class:`Names` record holds the parts of a person's name.  It can be
rendered as any :class:`NameCombo` (polite address, title plus name,
alphabetical ordering, initials, ...) in a :class:`GrammaticalCase` for the
English and German rule sets::

    >>> from namecombo import Names, NameCombo, GrammaticalCase
    >>> names = Names(forenames=["Thomas", "Jakob"], predicate="von", surname="Würzinger")
    >>> names.designate(NameCombo.NAME, GrammaticalCase.GENETIVE, "de-DE")
    'Thomas von Würzingers'
"""

from .grammar import Gender, GrammaticalCase, Language, Locale, inflect, initials, parse_locale
from .names import MONIKER_PRECEDENCE, NameCombo, Names, designate, moniker
from .utils.errors import (
    IllegalCaseError,
    IllegalComboError,
    MissingNameElementError,
    NameComboError,
    NotExpressionableError,
    ParseError,
    UnsupportedLocaleError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Gender",
    "GrammaticalCase",
    "Language",
    "Locale",
    "inflect",
    "initials",
    "parse_locale",
    "Names",
    "NameCombo",
    "designate",
    "moniker",
    "MONIKER_PRECEDENCE",
    "NameComboError",
    "MissingNameElementError",
    "NotExpressionableError",
    "UnsupportedLocaleError",
    "ParseError",
    "IllegalCaseError",
    "IllegalComboError",
]
