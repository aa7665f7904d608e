"""Pick the single best casual identification of a name record.

The combinations in :data:`MONIKER_PRECEDENCE` are tried in order, from the
most complete legal identification down to the most casual one.  A
combination that does not apply to the record (missing part, no polite form)
falls through to the next; any other error propagates immediately.
"""

from __future__ import annotations

from namecombo.grammar.case import GrammaticalCase
from namecombo.grammar.locale import LocaleLike, language_of
from namecombo.utils.errors import MissingNameElementError, NotExpressionableError
from namecombo.utils.logging import get_logger

from .combo import NameCombo
from .record import Names
from .resolver import designate

__all__ = ["MONIKER_PRECEDENCE", "moniker"]

logger = get_logger(__name__)

MONIKER_PRECEDENCE: tuple[NameCombo, ...] = (
    NameCombo.FULLNAME,
    NameCombo.FIRSTNAME,
    NameCombo.SURNAME,
    NameCombo.NICKNAME,
    NameCombo.SUPERNAME,
)


def moniker(
    names: Names,
    case: GrammaticalCase | None = None,
    locale: LocaleLike = "en-US",
) -> str:
    """Return the first combination of :data:`MONIKER_PRECEDENCE` that renders.

    Raises
    ------
    MissingNameElementError
        The error of the last attempted combination when none applies.
    UnsupportedLocaleError
        If the locale's language has no rule set.
    """

    language = language_of(locale)
    *candidates, last = MONIKER_PRECEDENCE
    for combo in candidates:
        try:
            return designate(names, combo, case, language)
        except (MissingNameElementError, NotExpressionableError) as exc:
            logger.debug("moniker: %s does not apply (%s)", combo, exc)
    return designate(names, last, case, language)
