"""Gender of a name and the words derived from it.

The gender selects the polite form of address (``Herr``/``Frau``,
``Mister``/``Miss``) and the article placed before an honorific epithet
(``der Große``).  Genders without a polite form raise
:class:`~namecombo.utils.errors.NotExpressionableError`; they simply get no
article.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from namecombo.utils.errors import NotExpressionableError

from .locale import Language, LocaleLike, language_of

__all__ = ["Gender", "polite", "symbol", "article"]


class Gender(Enum):
    """A subset of possible genders."""

    UNDEFINED = "undefined"
    MALE = "male"
    FEMALE = "female"
    NEUTRAL = "neutral"
    OTHER = "other"

    ALL: ClassVar[tuple["Gender", ...]]

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        return symbol(self)

    def label(self, locale: LocaleLike) -> str:
        """Return the localized name of the gender category itself."""

        return _LABELS[language_of(locale)][self]


Gender.ALL = tuple(Gender)

_POLITE: dict[Language, dict[Gender, str]] = {
    Language.EN: {Gender.MALE: "Mister", Gender.FEMALE: "Miss"},
    Language.DE: {Gender.MALE: "Herr", Gender.FEMALE: "Frau"},
}

_ARTICLES: dict[Language, dict[Gender, str]] = {
    Language.EN: {Gender.MALE: "the", Gender.FEMALE: "the", Gender.NEUTRAL: "the"},
    Language.DE: {Gender.MALE: "der", Gender.FEMALE: "die", Gender.NEUTRAL: "das"},
}

_SYMBOLS: dict[Gender, str] = {
    Gender.UNDEFINED: "⚪",
    Gender.MALE: "♂",
    Gender.FEMALE: "♀",
    Gender.NEUTRAL: "⚪",
    Gender.OTHER: "⚧",
}

_LABELS: dict[Language, dict[Gender, str]] = {
    Language.EN: {
        Gender.UNDEFINED: "undefined",
        Gender.MALE: "male",
        Gender.FEMALE: "female",
        Gender.NEUTRAL: "neutral",
        Gender.OTHER: "other",
    },
    Language.DE: {
        Gender.UNDEFINED: "undefiniert",
        Gender.MALE: "männlich",
        Gender.FEMALE: "weiblich",
        Gender.NEUTRAL: "neutral",
        Gender.OTHER: "divers",
    },
}


def polite(gender: Gender, locale: LocaleLike) -> str:
    """Return the polite address for a person of ``gender``.

    Raises
    ------
    UnsupportedLocaleError
        If the locale's language has no rule set.
    NotExpressionableError
        If ``gender`` has no polite address (undefined, neutral, other).
    """

    table = _POLITE[language_of(locale)]
    try:
        return table[gender]
    except KeyError:
        raise NotExpressionableError(f"gender has no polite address: {gender}") from None


def symbol(gender: Gender) -> str:
    """Return the display glyph for ``gender``; locale independent."""

    return _SYMBOLS[gender]


def article(gender: Gender | None, locale: LocaleLike, *, capitalize: bool = False) -> str | None:
    """Return the definite article used before an honorific, or ``None``.

    Undefined, other and missing genders take no article.
    """

    table = _ARTICLES[language_of(locale)]
    if gender is None or gender not in table:
        return None
    word = table[gender]
    return word.capitalize() if capitalize else word
