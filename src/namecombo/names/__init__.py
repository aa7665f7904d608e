"""Name records and the combination engine that renders them."""

from .combo import EXAMPLE_LOCALE, EXAMPLE_NAMES, NameCombo
from .moniker import MONIKER_PRECEDENCE, moniker
from .record import Names
from .resolver import BASE_COMBOS, designate

__all__ = [
    "Names",
    "NameCombo",
    "EXAMPLE_NAMES",
    "EXAMPLE_LOCALE",
    "BASE_COMBOS",
    "designate",
    "MONIKER_PRECEDENCE",
    "moniker",
]
