from dataclasses import dataclass
from enum import Enum

from deckdiff.models.card import Card
from deckdiff.models.deck import ParseError


class ChangeType(str, Enum):
    """How a card changed between two deck snapshots."""

    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    UNCHANGED = "unchanged"


@dataclass(frozen=True, slots=True)
class DiffEntry:
    """
    One card name's status across two decks.

    Attributes:
        card_name: Identity key shared by both decks
        old_quantity: Aggregate quantity in the first deck (0 if absent)
        new_quantity: Aggregate quantity in the second deck (0 if absent)
        change_type: Bucket this entry belongs to
        categories: Union of tags seen for the name in either deck
        card: Catalog card, when resolved
    """

    card_name: str
    old_quantity: int
    new_quantity: int
    change_type: ChangeType
    categories: tuple[str, ...] = ()
    card: Card | None = None

    @property
    def delta(self) -> int:
        return self.new_quantity - self.old_quantity


@dataclass(frozen=True, slots=True)
class DiffResult:
    """
    Classification of every distinct card name across two decks.

    Each name appears in exactly one bucket. Buckets are in display order.
    """

    added: tuple[DiffEntry, ...] = ()
    removed: tuple[DiffEntry, ...] = ()
    modified: tuple[DiffEntry, ...] = ()
    unchanged: tuple[DiffEntry, ...] = ()
    errors_deck_1: tuple[ParseError, ...] = ()
    errors_deck_2: tuple[ParseError, ...] = ()

    def summary(self) -> dict[str, int]:
        """Entry count per bucket."""
        return {
            ChangeType.ADDED.value: len(self.added),
            ChangeType.REMOVED.value: len(self.removed),
            ChangeType.MODIFIED.value: len(self.modified),
            ChangeType.UNCHANGED.value: len(self.unchanged),
        }
