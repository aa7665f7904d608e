"""Grammatical cases and the suffix rules used to inflect names.

Names are inflected by appending a suffix to the last word of the assembled
string.  Only the genitive carries a suffix in the modeled languages:

* English appends ``'s``, or a bare ``'`` when the word already ends in ``s``.
* German appends ``s``, or a bare ``'`` when the word ends in a sibilant
  (``s``, ``ß``, ``z``, ``x``).

Nominative, dative and accusative leave the word unchanged.  German nouns do
inflect in the accusative for some name classes; that is not modeled.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from namecombo.utils.errors import IllegalCaseError

from .locale import Language, LocaleLike, language_of

__all__ = ["GrammaticalCase", "inflect"]


class GrammaticalCase(Enum):
    """Closed set of grammatical cases a name can be rendered in."""

    NOMINATIVE = "nominative"
    GENETIVE = "genetive"
    DATIVE = "dative"
    ACCUSATIVE = "accusative"

    ALL: ClassVar[tuple["GrammaticalCase", ...]]

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "GrammaticalCase":
        """Return the case named by ``text`` (case-insensitive, ``"s"`` is genitive)."""

        key = text.strip().lower()
        if key == "s":
            return cls.GENETIVE
        try:
            return cls(key)
        except ValueError:
            raise IllegalCaseError(text) from None


GrammaticalCase.ALL = tuple(GrammaticalCase)

# Lower-cased word endings after which the genitive gets a bare apostrophe.
_GENITIVE_SIBILANTS: dict[Language, frozenset[str]] = {
    Language.EN: frozenset({"s"}),
    Language.DE: frozenset({"s", "ß", "z", "x"}),
}

_GENITIVE_SUFFIX: dict[Language, str] = {
    Language.EN: "'s",
    Language.DE: "s",
}


def inflect(word: str, case: GrammaticalCase, locale: LocaleLike) -> str:
    """Return ``word`` inflected for ``case`` under the rules of ``locale``.

    Raises
    ------
    UnsupportedLocaleError
        If the locale's language has no rule set.
    """

    language = language_of(locale)
    if not word:
        return ""
    if case is not GrammaticalCase.GENETIVE:
        return word
    if word[-1].lower() in _GENITIVE_SIBILANTS[language]:
        return word + "'"
    return word + _GENITIVE_SUFFIX[language]
