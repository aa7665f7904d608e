"""Locale identifiers and the closed set of modeled languages.

Callers hand in a freeform language tag such as ``"de"``, ``"de-DE"`` or
``"en_US"``.  Only the language subtag is inspected; it selects one of the
rule sets in :class:`Language`.  Anything else is rejected with
:class:`~namecombo.utils.errors.UnsupportedLocaleError` instead of silently
falling back to a default.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from namecombo.utils.errors import UnsupportedLocaleError

__all__ = ["Language", "Locale", "LocaleLike", "parse_locale", "language_of"]

_SUBTAG_SPLIT_RE = re.compile(r"[-_]")


class Language(Enum):
    """Languages with a modeled rule set."""

    EN = "en"
    DE = "de"


@dataclass(slots=True, frozen=True)
class Locale:
    """A two part language/region tag.  ``region`` may be absent."""

    language: str
    region: str | None = None

    def __str__(self) -> str:
        if self.region:
            return f"{self.language}-{self.region}"
        return self.language


LocaleLike = str | Locale | Language


def parse_locale(tag: str) -> Locale:
    """Split ``tag`` into language and region subtags.

    The language subtag is lower-cased and the region upper-cased.  Script
    subtags (four letters, e.g. ``Latn``) are skipped.  An empty tag or one
    whose first subtag is not alphabetic raises ``UnsupportedLocaleError``.
    """

    parts = [p for p in _SUBTAG_SPLIT_RE.split(tag.strip()) if p]
    if not parts or not parts[0].isalpha():
        raise UnsupportedLocaleError(tag)
    language = parts[0].lower()
    region = None
    for part in parts[1:]:
        if len(part) == 4 and part.isalpha():
            continue
        region = part.upper()
        break
    return Locale(language, region)


def language_of(locale: LocaleLike) -> Language:
    """Return the modeled :class:`Language` for ``locale``."""

    if isinstance(locale, Language):
        return locale
    parsed = locale if isinstance(locale, Locale) else parse_locale(locale)
    try:
        return Language(parsed.language.lower())
    except ValueError:
        raise UnsupportedLocaleError(locale) from None
