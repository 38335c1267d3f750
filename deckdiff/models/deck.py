from dataclasses import dataclass

from deckdiff.models.card import Card


@dataclass(frozen=True, slots=True)
class ParsedEntry:
    """
    One successfully parsed deck-list line.

    Attributes:
        quantity: Number of copies, always >= 1
        card_name: Trimmed card name, case preserved
        set_code: Set code from "(lea)" annotation
        collector_number: Collector number following the set code
        categories: Tags from the trailing "[...]" block, in appearance order
        line_number: 1-indexed position in the original text
    """

    quantity: int
    card_name: str
    set_code: str | None = None
    collector_number: str | None = None
    categories: tuple[str, ...] = ()
    line_number: int = 0


@dataclass(frozen=True, slots=True)
class ParseError:
    """A deck-list line that could not be parsed."""

    line_number: int
    line_text: str
    message: str


@dataclass(frozen=True, slots=True)
class DeckParseResult:
    """Entries and errors from one deck list, both in line order."""

    entries: tuple[ParsedEntry, ...] = ()
    errors: tuple[ParseError, ...] = ()

    @property
    def total_cards(self) -> int:
        """Sum of quantities across all entries."""
        return sum(entry.quantity for entry in self.entries)


@dataclass(frozen=True, slots=True)
class ResolvedEntry:
    """
    A parsed entry with its catalog card attached.

    `card` is None when the name is not in the catalog. That is a
    resolution miss, not a parse error.
    """

    quantity: int
    card_name: str
    set_code: str | None = None
    collector_number: str | None = None
    categories: tuple[str, ...] = ()
    card: Card | None = None

    @classmethod
    def from_parsed(cls, entry: ParsedEntry, card: Card | None) -> "ResolvedEntry":
        return cls(
            quantity=entry.quantity,
            card_name=entry.card_name,
            set_code=entry.set_code,
            collector_number=entry.collector_number,
            categories=entry.categories,
            card=card,
        )

    @property
    def is_resolved(self) -> bool:
        return self.card is not None


@dataclass(frozen=True, slots=True)
class DeckResolveResult:
    """Resolved deck list as returned by the resolve endpoint."""

    entries: tuple[ResolvedEntry, ...] = ()
    errors: tuple[ParseError, ...] = ()
    total_cards: int = 0

    def unresolved_names(self) -> list[str]:
        """Distinct names with no catalog match, in first-seen order."""
        names: dict[str, None] = {}
        for entry in self.entries:
            if entry.card is None:
                names.setdefault(entry.card_name, None)
        return list(names)
