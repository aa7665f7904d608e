"""The name record: every nameable part of one person.

All parts except ``forenames`` are optional and the record accepts any mix of
present and missing parts.  Whether a part is required is decided lazily by
the combination being rendered (see :mod:`namecombo.names.resolver`).

Records are immutable.  They are built either in one go or incrementally with
the ``with_*`` methods, each of which returns a new record::

    names = (
        Names()
        .with_forenames(["Thomas", "Jakob"])
        .with_predicate("von")
        .with_surname("Würzinger")
    )
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field

from namecombo.grammar.gender import Gender

from .validators import empty_to_none, normalize, to_forenames

if TYPE_CHECKING:  # pragma: no cover - used for type hints only
    from namecombo.grammar.case import GrammaticalCase
    from namecombo.grammar.locale import LocaleLike

    from .combo import NameCombo

NamePart = Optional[
    Annotated[
        str,
        BeforeValidator(normalize),
        AfterValidator(empty_to_none),
    ]
]


class Names(BaseModel):
    """Contains the parts of a person's name.

    ``forenames`` is ordered; its first entry is "the" firstname.
    """

    forenames: Annotated[tuple[str, ...], BeforeValidator(to_forenames)] = Field(
        (), description="Given names in order; the first one is the firstname."
    )
    predicate: NamePart = Field(
        None, description="Nobility or lineage particle preceding the surname, e.g. 'von'."
    )
    surname: NamePart = Field(None, description="Family name without the predicate.")
    birthname: NamePart = Field(None, description="Maiden or prior surname.")
    title: NamePart = Field(None, description="Academic or formal title, e.g. 'Dr.'.")
    rank: NamePart = Field(None, description="Professional or military rank.")
    nickname: NamePart = Field(None, description="Informal name.")
    honorname: NamePart = Field(
        None, description="Epithet used together with an article, e.g. 'Große'."
    )
    supername: NamePart = Field(
        None, description="Secondary name inserted between forename and surname."
    )
    gender: Optional[Gender] = Field(None, description="Gender of the person.")

    model_config = ConfigDict(frozen=True, extra="forbid")

    # -- Derived views -------------------------------------------------------

    @property
    def firstname(self) -> str | None:
        """The first forename, if any."""

        return self.forenames[0] if self.forenames else None

    @property
    def forenames_str(self) -> str | None:
        """All forenames separated by single spaces, if any."""

        return " ".join(self.forenames) if self.forenames else None

    @property
    def surname_full(self) -> str | None:
        """Predicate and surname, or the bare surname.

        ``None`` whenever the surname is missing, even if a predicate is set.
        """

        if self.surname is None:
            return None
        if self.predicate is None:
            return self.surname
        return f"{self.predicate} {self.surname}"

    # -- Builder -------------------------------------------------------------

    def _with(self, **update: Any) -> "Names":
        # ``model_copy`` skips validation, so rebuild through the validators.
        data = self.model_dump()
        data.update(update)
        return type(self).model_validate(data)

    def with_forenames(self, forenames: Sequence[str] | str | None) -> "Names":
        return self._with(forenames=forenames)

    def with_predicate(self, predicate: str | None) -> "Names":
        return self._with(predicate=predicate)

    def with_surname(self, surname: str | None) -> "Names":
        return self._with(surname=surname)

    def with_birthname(self, birthname: str | None) -> "Names":
        return self._with(birthname=birthname)

    def with_title(self, title: str | None) -> "Names":
        return self._with(title=title)

    def with_rank(self, rank: str | None) -> "Names":
        return self._with(rank=rank)

    def with_nickname(self, nickname: str | None) -> "Names":
        return self._with(nickname=nickname)

    def with_honorname(self, honorname: str | None) -> "Names":
        return self._with(honorname=honorname)

    def with_supername(self, supername: str | None) -> "Names":
        return self._with(supername=supername)

    def with_gender(self, gender: Gender | str | None) -> "Names":
        return self._with(gender=gender)

    # -- Rendering -----------------------------------------------------------

    def designate(
        self,
        combo: "NameCombo",
        case: "GrammaticalCase | None" = None,
        locale: "LocaleLike" = "en-US",
    ) -> str:
        """Render this record as ``combo``; see :func:`namecombo.names.resolver.designate`."""

        from .resolver import designate

        return designate(self, combo, case, locale)

    def moniker(self, case: "GrammaticalCase | None" = None, locale: "LocaleLike" = "en-US") -> str:
        """Return the best casual identification; see :func:`namecombo.names.moniker.moniker`."""

        from .moniker import moniker

        return moniker(self, case, locale)


__all__ = ["Names", "NamePart"]
