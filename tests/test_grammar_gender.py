import pytest

from namecombo.grammar.gender import Gender, article, polite, symbol
from namecombo.utils.errors import NotExpressionableError, UnsupportedLocaleError


def test_gender_all() -> None:
    assert Gender.ALL == (
        Gender.UNDEFINED,
        Gender.MALE,
        Gender.FEMALE,
        Gender.NEUTRAL,
        Gender.OTHER,
    )


def test_gender_polite() -> None:
    assert polite(Gender.MALE, "en-US") == "Mister"
    assert polite(Gender.FEMALE, "en-US") == "Miss"
    assert polite(Gender.MALE, "de-DE") == "Herr"
    assert polite(Gender.FEMALE, "de-DE") == "Frau"


@pytest.mark.parametrize("gender", [Gender.UNDEFINED, Gender.NEUTRAL, Gender.OTHER])
@pytest.mark.parametrize("locale", ["en", "de"])
def test_gender_polite_not_expressionable(gender: Gender, locale: str) -> None:
    with pytest.raises(NotExpressionableError):
        polite(gender, locale)


def test_gender_polite_unsupported_locale() -> None:
    # The locale is checked before the gender.
    with pytest.raises(UnsupportedLocaleError):
        polite(Gender.MALE, "fr")
    with pytest.raises(UnsupportedLocaleError):
        polite(Gender.NEUTRAL, "fr")


def test_gender_symbol() -> None:
    assert symbol(Gender.MALE) == "♂"
    assert symbol(Gender.FEMALE) == "♀"
    assert symbol(Gender.NEUTRAL) == "⚪"
    assert symbol(Gender.UNDEFINED) == "⚪"
    assert symbol(Gender.OTHER) == "⚧"
    assert Gender.OTHER.symbol == "⚧"


def test_gender_text() -> None:
    assert str(Gender.MALE) == "male"
    assert str(Gender.FEMALE) == "female"
    assert str(Gender.NEUTRAL) == "neutral"
    assert str(Gender.OTHER) == "other"
    assert Gender("female") is Gender.FEMALE


def test_gender_label() -> None:
    assert Gender.FEMALE.label("en") == "female"
    assert Gender.FEMALE.label("de-DE") == "weiblich"
    assert Gender.OTHER.label("de") == "divers"
    with pytest.raises(UnsupportedLocaleError):
        Gender.MALE.label("it")


def test_article_german() -> None:
    assert article(Gender.MALE, "de") == "der"
    assert article(Gender.FEMALE, "de") == "die"
    assert article(Gender.NEUTRAL, "de") == "das"
    assert article(Gender.FEMALE, "de", capitalize=True) == "Die"


def test_article_english() -> None:
    assert article(Gender.MALE, "en") == "the"
    assert article(Gender.NEUTRAL, "en", capitalize=True) == "The"


@pytest.mark.parametrize("gender", [Gender.UNDEFINED, Gender.OTHER, None])
def test_article_missing(gender: Gender | None) -> None:
    assert article(gender, "de") is None
    assert article(gender, "en", capitalize=True) is None
