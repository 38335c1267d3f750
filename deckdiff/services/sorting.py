"""
Display ordering for deck entries.

Commanders come first, then non-lands before lands, then card name. The
two flags are independent keys, so a commander that is also a land sorts
after the other commanders. Flags are detected by case-insensitive
substring match on free-text categories ("Commander{top}" and "Utility
Land" both count).
"""

import unicodedata
from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

COMMANDER_MARKER = "commander"
LAND_MARKER = "land"

# Letters NFKD leaves whole; casefold already turns "ß" into "ss"
LIGATURES = str.maketrans({"æ": "ae", "œ": "oe", "ø": "o"})


class Sortable(Protocol):
    @property
    def card_name(self) -> str: ...

    @property
    def categories(self) -> Sequence[str]: ...


T = TypeVar("T", bound=Sortable)


def _has_marker(categories: Iterable[str], marker: str) -> bool:
    return any(marker in category.lower() for category in categories)


def is_commander(categories: Iterable[str]) -> bool:
    return _has_marker(categories, COMMANDER_MARKER)


def is_land(categories: Iterable[str]) -> bool:
    return _has_marker(categories, LAND_MARKER)


def display_rank(categories: Sequence[str]) -> tuple[bool, bool]:
    """(not commander, land): False sorts first on both keys."""
    return not is_commander(categories), is_land(categories)


def name_collation_key(name: str) -> tuple[str, str]:
    """
    Locale-independent approximation of dictionary order.

    Accents and case are ignored and ligatures are spelled out first
    ("Æther Vial" sorts with "aether vial"), then the raw name breaks
    ties so the order is total.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold().translate(LIGATURES), name


def display_sort_key(entry: Sortable) -> tuple[bool, bool, str, str]:
    return (*display_rank(entry.categories), *name_collation_key(entry.card_name))


def sort_entries(entries: Iterable[T]) -> list[T]:
    """Return entries in display order. Input order never affects the result."""
    return sorted(entries, key=display_sort_key)
