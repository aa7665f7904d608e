"""The closed vocabulary of name combinations.

Each :class:`NameCombo` member names one rendering template.  The member value
is the symbol used by external callers when they serialize or parse a
combination; it is case-sensitive because ``Supername`` and ``SuperName`` are
different combinations.

Every member documents its output through :attr:`NameCombo.example`, rendered
from :data:`EXAMPLE_NAMES` in German and the nominative case.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from namecombo.grammar.gender import Gender
from namecombo.utils.errors import IllegalComboError

from .record import Names

__all__ = ["NameCombo", "EXAMPLE_NAMES", "EXAMPLE_LOCALE"]


class NameCombo(Enum):
    """Named templates a :class:`~namecombo.names.record.Names` can be rendered as."""

    NAME = "Name"
    FULLNAME = "Fullname"
    FIRSTNAME = "Firstname"
    FORENAMES = "Forenames"
    SURNAME = "Surname"
    TITLE = "Title"
    TITLE_NAME = "TitleName"
    TITLE_FIRSTNAME = "TitleFirstname"
    TITLE_SURNAME = "TitleSurname"
    TITLE_FULLNAME = "TitleFullname"
    POLITE = "Polite"
    POLITE_NAME = "PoliteName"
    POLITE_FIRSTNAME = "PoliteFirstname"
    POLITE_SURNAME = "PoliteSurname"
    POLITE_FULLNAME = "PoliteFullname"
    POLITE_TITLE_NAME = "PoliteTitleName"
    RANK = "Rank"
    POLITE_RANK = "PoliteRank"
    RANK_NAME = "RankName"
    RANK_FIRSTNAME = "RankFirstname"
    RANK_SURNAME = "RankSurname"
    RANK_FULLNAME = "RankFullname"
    RANK_TITLE_NAME = "RankTitleName"
    NICKNAME = "Nickname"
    FIRST_NICKNAME = "FirstNickname"
    NICK_SURNAME = "NickSurname"
    HONOR = "Honor"
    HONORTITLE = "Honortitle"
    FIRST_HONORNAME = "FirstHonorname"
    DUA_NOMINA = "DuaNomina"
    TRIA_NOMINA = "TriaNomina"
    SUPERNAME = "Supername"
    FIRST_SUPERNAME = "FirstSupername"
    SUPER_NAME = "SuperName"
    POLITE_SUPERNAME = "PoliteSupername"
    RANK_SUPERNAME = "RankSupername"
    INITIALS = "Initials"
    INITIALS_FULL = "InitialsFull"
    SIGN = "Sign"
    ORDERED_NAME = "OrderedName"
    ORDERED_SURNAME = "OrderedSurname"
    ORDERED_TITLE_NAME = "OrderedTitleName"

    ALL: ClassVar[tuple["NameCombo", ...]]

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "NameCombo":
        """Return the combination whose symbol is exactly ``text`` (surrounding blanks ignored)."""

        try:
            return cls(text.strip())
        except ValueError:
            raise IllegalComboError(text) from None

    @property
    def example(self) -> str:
        """The rendering of :data:`EXAMPLE_NAMES` as this combination."""

        return _EXAMPLES[self]


NameCombo.ALL = tuple(NameCombo)

EXAMPLE_LOCALE = "de-DE"

EXAMPLE_NAMES = Names(
    forenames=("Thomas", "Jakob"),
    predicate="von",
    surname="Würzinger",
    birthname="Müller",
    title="Dr.",
    rank="Oberst",
    nickname="Würzli",
    honorname="Große",
    supername="Wurz",
    gender=Gender.MALE,
)

_EXAMPLES: dict[NameCombo, str] = {
    NameCombo.NAME: "Thomas von Würzinger",
    NameCombo.FULLNAME: "Thomas Jakob von Würzinger geb. Müller",
    NameCombo.FIRSTNAME: "Thomas",
    NameCombo.FORENAMES: "Thomas Jakob",
    NameCombo.SURNAME: "von Würzinger",
    NameCombo.TITLE: "Dr.",
    NameCombo.TITLE_NAME: "Dr. Thomas von Würzinger",
    NameCombo.TITLE_FIRSTNAME: "Dr. Thomas",
    NameCombo.TITLE_SURNAME: "Dr. von Würzinger",
    NameCombo.TITLE_FULLNAME: "Dr. Thomas Jakob von Würzinger geb. Müller",
    NameCombo.POLITE: "Herr",
    NameCombo.POLITE_NAME: "Herr Thomas von Würzinger",
    NameCombo.POLITE_FIRSTNAME: "Herr Thomas",
    NameCombo.POLITE_SURNAME: "Herr von Würzinger",
    NameCombo.POLITE_FULLNAME: "Herr Thomas Jakob von Würzinger geb. Müller",
    NameCombo.POLITE_TITLE_NAME: "Herr Dr. Thomas von Würzinger",
    NameCombo.RANK: "Oberst",
    NameCombo.POLITE_RANK: "Herr Oberst",
    NameCombo.RANK_NAME: "Oberst Thomas von Würzinger",
    NameCombo.RANK_FIRSTNAME: "Oberst Thomas",
    NameCombo.RANK_SURNAME: "Oberst von Würzinger",
    NameCombo.RANK_FULLNAME: "Oberst Thomas Jakob von Würzinger geb. Müller",
    NameCombo.RANK_TITLE_NAME: "Oberst Dr. Thomas von Würzinger",
    NameCombo.NICKNAME: "Würzli",
    NameCombo.FIRST_NICKNAME: "Thomas Würzli",
    NameCombo.NICK_SURNAME: "Würzli von Würzinger",
    NameCombo.HONOR: "Große",
    NameCombo.HONORTITLE: "Der Große",
    NameCombo.FIRST_HONORNAME: "Thomas der Große",
    NameCombo.DUA_NOMINA: "Würzinger Würzli",
    NameCombo.TRIA_NOMINA: "Thomas Würzinger Würzli",
    NameCombo.SUPERNAME: "Wurz",
    NameCombo.FIRST_SUPERNAME: "Thomas Wurz",
    NameCombo.SUPER_NAME: "Thomas Wurz von Würzinger",
    NameCombo.POLITE_SUPERNAME: "Herr Wurz",
    NameCombo.RANK_SUPERNAME: "Oberst Wurz",
    NameCombo.INITIALS: "T. v. W.",
    NameCombo.INITIALS_FULL: "Dr. T. J. v. W.",
    NameCombo.SIGN: "Dr. T. J. v. Würzinger",
    NameCombo.ORDERED_NAME: "Würzinger, Thomas von",
    NameCombo.ORDERED_SURNAME: "Würzinger, von",
    NameCombo.ORDERED_TITLE_NAME: "Würzinger, Dr. Thomas von",
}
