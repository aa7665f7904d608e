"""Combination resolver: render a name record as one :class:`NameCombo`.

:func:`designate` is a total function over the combination vocabulary.  Each
branch of its ``match`` statement decides

* which parts of the record are required (a missing part raises
  :class:`~namecombo.utils.errors.MissingNameElementError` naming it),
* whether it first renders a base combination by calling :func:`designate`
  again (see :data:`BASE_COMBOS`),
* how the pieces are joined, always with single spaces, and
* what the grammatical case applies to.

Leaf combinations inflect the whole assembled string.  Compound combinations
put an uninflected modifier (title, rank, polite address, article) in front of
an already inflected base combination.  The initials family always works on
the nominative and ignores ``case``.

Recursion is bounded: base combinations never call back into compound ones
and the deepest chain is ``PoliteTitleName`` → ``TitleName`` → ``Name``.
"""

from __future__ import annotations

from typing import TypeVar, assert_never

from namecombo.grammar.case import GrammaticalCase, inflect
from namecombo.grammar.gender import article, polite
from namecombo.grammar.initials import initials
from namecombo.grammar.locale import Language, LocaleLike, language_of
from namecombo.utils.errors import MissingNameElementError

from .combo import NameCombo
from .record import Names

__all__ = ["BASE_COMBOS", "BIRTHNAME_MARKER", "designate"]

T = TypeVar("T")

BIRTHNAME_MARKER = "geb."

# Base combinations each compound combination renders through ``designate``.
BASE_COMBOS: dict[NameCombo, tuple[NameCombo, ...]] = {
    NameCombo.TITLE_NAME: (NameCombo.NAME,),
    NameCombo.TITLE_FIRSTNAME: (NameCombo.FIRSTNAME,),
    NameCombo.TITLE_SURNAME: (NameCombo.SURNAME,),
    NameCombo.TITLE_FULLNAME: (NameCombo.FULLNAME,),
    NameCombo.POLITE_NAME: (NameCombo.NAME,),
    NameCombo.POLITE_FIRSTNAME: (NameCombo.FIRSTNAME,),
    NameCombo.POLITE_SURNAME: (NameCombo.SURNAME,),
    NameCombo.POLITE_FULLNAME: (NameCombo.FULLNAME,),
    NameCombo.POLITE_TITLE_NAME: (NameCombo.TITLE_NAME,),
    NameCombo.POLITE_SUPERNAME: (NameCombo.SUPERNAME,),
    NameCombo.RANK_NAME: (NameCombo.NAME,),
    NameCombo.RANK_FIRSTNAME: (NameCombo.FIRSTNAME,),
    NameCombo.RANK_SURNAME: (NameCombo.SURNAME,),
    NameCombo.RANK_FULLNAME: (NameCombo.FULLNAME,),
    NameCombo.RANK_TITLE_NAME: (NameCombo.TITLE_NAME,),
    NameCombo.RANK_SUPERNAME: (NameCombo.SUPERNAME,),
    NameCombo.FIRST_NICKNAME: (NameCombo.NICKNAME,),
    NameCombo.NICK_SURNAME: (NameCombo.SURNAME,),
    NameCombo.HONORTITLE: (NameCombo.HONOR,),
    NameCombo.FIRST_HONORNAME: (NameCombo.HONOR,),
    NameCombo.TRIA_NOMINA: (NameCombo.FIRSTNAME,),
    NameCombo.FIRST_SUPERNAME: (NameCombo.SUPERNAME,),
    NameCombo.INITIALS: (NameCombo.NAME,),
    NameCombo.INITIALS_FULL: (NameCombo.FORENAMES, NameCombo.SURNAME),
}


def _require(value: T | None, field: str) -> T:
    if value is None:
        raise MissingNameElementError(field)
    return value


def _join(*parts: str | None) -> str:
    return " ".join(p for p in parts if p)


def _ordered(surname: str, *trailing: str | None) -> str:
    """Return ``"surname, trailing..."`` or the bare surname without a trailing clause."""

    clause = _join(*trailing)
    return f"{surname}, {clause}" if clause else surname


def _base(names: Names, combo: NameCombo, case: GrammaticalCase, language: Language) -> str:
    return designate(names, BASE_COMBOS[combo][0], case, language)


def designate(
    names: Names,
    combo: NameCombo,
    case: GrammaticalCase | None = None,
    locale: LocaleLike = "en-US",
) -> str:
    """Return ``names`` rendered as ``combo`` in ``case`` for ``locale``.

    Parameters
    ----------
    names:
        The record to render.  It is never modified.
    combo:
        The combination to render.
    case:
        Grammatical case; ``None`` means nominative.
    locale:
        Language tag or :class:`~namecombo.grammar.locale.Locale`.  Only
        English and German are supported.

    Raises
    ------
    MissingNameElementError
        If a part required by ``combo`` is absent.
    NotExpressionableError
        If ``combo`` needs a polite address the record's gender does not have.
    UnsupportedLocaleError
        If the locale's language has no rule set.
    """

    language = language_of(locale)
    if case is None:
        case = GrammaticalCase.NOMINATIVE
    nominative = GrammaticalCase.NOMINATIVE

    match combo:
        # -- Plain names -------------------------------------------------------
        case NameCombo.NAME:
            firstname = _require(names.firstname, "firstname")
            surname = _require(names.surname_full, "surname")
            return inflect(f"{firstname} {surname}", case, language)
        case NameCombo.FULLNAME:
            forenames = _require(names.forenames_str, "forenames")
            surname = _require(names.surname_full, "surname")
            rendered = inflect(f"{forenames} {surname}", case, language)
            if names.birthname is not None:
                rendered = f"{rendered} {BIRTHNAME_MARKER} {names.birthname}"
            return rendered
        case NameCombo.FIRSTNAME:
            return inflect(_require(names.firstname, "firstname"), case, language)
        case NameCombo.FORENAMES:
            return inflect(_require(names.forenames_str, "forenames"), case, language)
        case NameCombo.SURNAME:
            return inflect(_require(names.surname_full, "surname"), case, language)

        # -- Title -------------------------------------------------------------
        case NameCombo.TITLE:
            return _require(names.title, "title")
        case (
            NameCombo.TITLE_NAME
            | NameCombo.TITLE_FIRSTNAME
            | NameCombo.TITLE_SURNAME
            | NameCombo.TITLE_FULLNAME
        ):
            title = _require(names.title, "title")
            return _join(title, _base(names, combo, case, language))

        # -- Polite address ------------------------------------------------------
        case NameCombo.POLITE:
            return polite(_require(names.gender, "gender"), language)
        case (
            NameCombo.POLITE_NAME
            | NameCombo.POLITE_FIRSTNAME
            | NameCombo.POLITE_SURNAME
            | NameCombo.POLITE_FULLNAME
            | NameCombo.POLITE_TITLE_NAME
            | NameCombo.POLITE_SUPERNAME
        ):
            address = polite(_require(names.gender, "gender"), language)
            return _join(address, _base(names, combo, case, language))

        # -- Rank ----------------------------------------------------------------
        case NameCombo.RANK:
            return _require(names.rank, "rank")
        case NameCombo.POLITE_RANK:
            address = polite(_require(names.gender, "gender"), language)
            return _join(address, _require(names.rank, "rank"))
        case (
            NameCombo.RANK_NAME
            | NameCombo.RANK_FIRSTNAME
            | NameCombo.RANK_SURNAME
            | NameCombo.RANK_FULLNAME
            | NameCombo.RANK_TITLE_NAME
            | NameCombo.RANK_SUPERNAME
        ):
            rank = _require(names.rank, "rank")
            return _join(rank, _base(names, combo, case, language))

        # -- Nickname ------------------------------------------------------------
        case NameCombo.NICKNAME:
            return inflect(_require(names.nickname, "nickname"), case, language)
        case NameCombo.FIRST_NICKNAME:
            firstname = _require(names.firstname, "firstname")
            return _join(firstname, _base(names, combo, case, language))
        case NameCombo.NICK_SURNAME:
            nickname = _require(names.nickname, "nickname")
            return _join(nickname, _base(names, combo, case, language))

        # -- Honorific -----------------------------------------------------------
        case NameCombo.HONOR:
            return inflect(_require(names.honorname, "honorname"), case, language)
        case NameCombo.HONORTITLE:
            honor = _base(names, combo, case, language)
            return _join(article(names.gender, language, capitalize=True), honor)
        case NameCombo.FIRST_HONORNAME:
            firstname = _require(names.firstname, "firstname")
            honor = _base(names, combo, case, language)
            return _join(firstname, article(names.gender, language), honor)

        # -- Antique forms -------------------------------------------------------
        case NameCombo.DUA_NOMINA:
            surname = _require(names.surname, "surname")
            nickname = _require(names.nickname, "nickname")
            return inflect(f"{surname} {nickname}", case, language)
        case NameCombo.TRIA_NOMINA:
            firstname = _base(names, combo, nominative, language)
            surname = _require(names.surname, "surname")
            nickname = _require(names.nickname, "nickname")
            return inflect(f"{firstname} {surname} {nickname}", case, language)

        # -- Supername -----------------------------------------------------------
        case NameCombo.SUPERNAME:
            return inflect(_require(names.supername, "supername"), case, language)
        case NameCombo.FIRST_SUPERNAME:
            firstname = _require(names.firstname, "firstname")
            return _join(firstname, _base(names, combo, case, language))
        case NameCombo.SUPER_NAME:
            firstname = _require(names.firstname, "firstname")
            supername = _require(names.supername, "supername")
            surname = _require(names.surname_full, "surname")
            return inflect(f"{firstname} {supername} {surname}", case, language)

        # -- Initials ------------------------------------------------------------
        case NameCombo.INITIALS:
            return initials(_base(names, combo, nominative, language))
        case NameCombo.INITIALS_FULL:
            forenames_combo, surname_combo = BASE_COMBOS[combo]
            forenames = designate(names, forenames_combo, nominative, language)
            surname = designate(names, surname_combo, nominative, language)
            return _join(names.title, initials(f"{forenames} {surname}"))
        case NameCombo.SIGN:
            forenames = _require(names.forenames_str, "forenames")
            surname = _require(names.surname, "surname")
            return _join(names.title, initials(_join(forenames, names.predicate)), surname)

        # -- Alphabetical ordering -----------------------------------------------
        case NameCombo.ORDERED_NAME:
            surname = _require(names.surname, "surname")
            return inflect(_ordered(surname, names.firstname, names.predicate), case, language)
        case NameCombo.ORDERED_SURNAME:
            surname = _require(names.surname, "surname")
            return inflect(_ordered(surname, names.predicate), case, language)
        case NameCombo.ORDERED_TITLE_NAME:
            surname = _require(names.surname, "surname")
            return inflect(
                _ordered(surname, names.title, names.firstname, names.predicate), case, language
            )

        case _:
            assert_never(combo)
