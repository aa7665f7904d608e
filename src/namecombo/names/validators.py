"""Validation functions for the name record fields."""

from __future__ import annotations

from typing import Any


def normalize(value: Any) -> Any:
    """Strip a string and collapse inner whitespace runs to one space."""

    if isinstance(value, str):
        return " ".join(value.split())
    return value


def empty_to_none(value: Any) -> Any:
    """Convert empty strings to ``None``."""

    if isinstance(value, str) and value == "":
        return None
    return value


def to_forenames(value: Any) -> Any:
    """Accept a whitespace separated string or a sequence of forenames.

    Entries are normalized and empty ones dropped; the order is kept.
    """

    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    if isinstance(value, (list, tuple)):
        cleaned = (normalize(v) if isinstance(v, str) else v for v in value)
        return tuple(v for v in cleaned if v != "")
    return value
