"""Reduce a phrase to period-delimited initials."""

from __future__ import annotations

__all__ = ["initials"]


def initials(phrase: str) -> str:
    """Return the initials of the space separated tokens in ``phrase``.

    The first character of every token keeps its case and is followed by a
    period: ``"Penelope von Würzinger"`` becomes ``"P. v. W."``.  Empty tokens
    produced by repeated spaces are skipped.
    """

    return " ".join(f"{token[0]}." for token in phrase.split(" ") if token)
