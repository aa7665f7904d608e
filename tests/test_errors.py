"""Tests for the exception hierarchy."""

import pytest

from namecombo.utils.errors import (
    IllegalCaseError,
    IllegalComboError,
    IOFormatError,
    MissingNameElementError,
    NameComboError,
    NotExpressionableError,
    ParseError,
    UnsupportedFormatError,
    UnsupportedLocaleError,
)


@pytest.mark.parametrize(
    "exc",
    [
        MissingNameElementError("title"),
        NotExpressionableError("neutral"),
        UnsupportedLocaleError("fr-FR"),
        IllegalCaseError("vocative"),
        IllegalComboError("Nickame"),
    ],
)
def test_rendering_errors_share_base(exc: Exception) -> None:
    assert isinstance(exc, NameComboError)
    assert isinstance(exc, ValueError)


def test_missing_element_names_field() -> None:
    exc = MissingNameElementError("gender")
    assert exc.field == "gender"
    assert str(exc) == "missing name element: gender"


def test_parse_errors_keep_text() -> None:
    exc = IllegalComboError("Nickame")
    assert isinstance(exc, ParseError)
    assert exc.text == "Nickame"
    assert str(exc) == "illegal name combination: 'Nickame'"
    assert str(IllegalCaseError("x")) == "illegal grammatical case: 'x'"


def test_unsupported_locale_keeps_tag() -> None:
    assert UnsupportedLocaleError("fr-FR").locale == "fr-FR"


def test_format_errors() -> None:
    assert issubclass(UnsupportedFormatError, IOFormatError)
    assert not issubclass(IOFormatError, NameComboError)
