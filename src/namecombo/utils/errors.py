"""Typed exceptions for name rendering and for the parsing boundary."""


class NameComboError(ValueError):
    """Base class for all errors raised by the package."""


class MissingNameElementError(NameComboError):
    """Raised when a combination needs a name part the record does not hold."""

    def __init__(self, field: str) -> None:
        super().__init__(f"missing name element: {field}")
        self.field = field


class NotExpressionableError(NameComboError):
    """Raised when a linguistic form has no rendering for the given gender or locale."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"not expressionable: {detail}")
        self.detail = detail


class UnsupportedLocaleError(NameComboError):
    """Raised when a locale's language has no rule set."""

    def __init__(self, locale: object) -> None:
        super().__init__(f"unsupported locale: {locale}")
        self.locale = str(locale)


class ParseError(NameComboError):
    """Base class for string to enum conversion errors."""

    def __init__(self, text: str) -> None:
        super().__init__(f"{self._kind}: {text!r}")
        self.text = text

    _kind = "cannot parse"


class IllegalCaseError(ParseError):
    """Raised when a string names no grammatical case."""

    _kind = "illegal grammatical case"


class IllegalComboError(ParseError):
    """Raised when a string names no name combination."""

    _kind = "illegal name combination"


class IOFormatError(ValueError):
    """Base class for record file format errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader is registered for a file format."""
