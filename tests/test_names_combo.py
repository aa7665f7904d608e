import pytest

from namecombo.names.combo import EXAMPLE_LOCALE, EXAMPLE_NAMES, NameCombo
from namecombo.names.resolver import designate
from namecombo.utils.errors import IllegalComboError

VOCABULARY = (
    "Name, Fullname, Firstname, Forenames, Surname, Title, TitleName, TitleFirstname, "
    "TitleSurname, TitleFullname, Polite, PoliteName, PoliteFirstname, PoliteSurname, "
    "PoliteFullname, PoliteTitleName, Rank, PoliteRank, RankName, RankFirstname, "
    "RankSurname, RankFullname, RankTitleName, Nickname, FirstNickname, NickSurname, Honor, "
    "Honortitle, FirstHonorname, DuaNomina, TriaNomina, Supername, FirstSupername, "
    "SuperName, PoliteSupername, RankSupername, Initials, InitialsFull, Sign, OrderedName, "
    "OrderedSurname, OrderedTitleName"
).split(", ")


def test_vocabulary_is_verbatim() -> None:
    assert [combo.value for combo in NameCombo.ALL] == VOCABULARY
    assert len(NameCombo.ALL) == 42


@pytest.mark.parametrize("symbol", VOCABULARY)
def test_parse_symbol(symbol: str) -> None:
    combo = NameCombo.parse(symbol)
    assert str(combo) == symbol


def test_parse_is_case_sensitive() -> None:
    assert NameCombo.parse("Supername") is NameCombo.SUPERNAME
    assert NameCombo.parse("SuperName") is NameCombo.SUPER_NAME
    with pytest.raises(IllegalComboError):
        NameCombo.parse("supername")


@pytest.mark.parametrize("text", ["", "Nickame", "TITLE_NAME", "Full name"])
def test_parse_rejects_unknown(text: str) -> None:
    with pytest.raises(IllegalComboError) as excinfo:
        NameCombo.parse(text)
    assert excinfo.value.text == text


@pytest.mark.parametrize("combo", NameCombo.ALL)
def test_every_example_renders(combo: NameCombo) -> None:
    assert designate(EXAMPLE_NAMES, combo, None, EXAMPLE_LOCALE) == combo.example


@pytest.mark.parametrize(
    "symbol",
    [
        "Name",
        "TitleFullname",
        "PoliteTitleName",
        "RankSurname",
        "FirstHonorname",
        "OrderedTitleName",
        "InitialsFull",
        "SuperName",
    ],
)
def test_parse_then_render_reproduces_example(symbol: str) -> None:
    combo = NameCombo.parse(symbol)
    assert EXAMPLE_NAMES.designate(combo, locale=EXAMPLE_LOCALE) == combo.example
