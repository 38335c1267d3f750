"""
Deck resolution service.

Attaches catalog cards to parsed deck entries. Unknown names stay in the
result with no card; they are never turned into parse errors.
"""

import logging
from collections.abc import Iterable

from deckdiff.models.deck import DeckResolveResult, ParsedEntry, ResolvedEntry
from deckdiff.parsers.deck_list import parse_deck_list
from deckdiff.services.card_catalog import CardLookup

logger = logging.getLogger(__name__)


def resolve_entries(entries: Iterable[ParsedEntry], catalog: CardLookup) -> list[ResolvedEntry]:
    """
    Look up each entry's card name in the catalog.

    Args:
        entries: Parsed entries, in deck order
        catalog: Card lookup collaborator

    Returns:
        ResolvedEntry per input entry, same order.
    """
    resolved: list[ResolvedEntry] = []
    for entry in entries:
        card = catalog.get(entry.card_name)
        if card is None:
            logger.debug("Card not found: %s (line %d)", entry.card_name, entry.line_number)
        resolved.append(ResolvedEntry.from_parsed(entry, card))
    return resolved


def resolve_deck_list(text: str, catalog: CardLookup) -> DeckResolveResult:
    """
    Parse a deck list and resolve every entry against the catalog.

    Args:
        text: Raw deck-list text
        catalog: Card lookup collaborator

    Returns:
        DeckResolveResult with entries in line order, per-line parse
        errors, and total_cards summed over resolved and unresolved entries.
    """
    parsed = parse_deck_list(text)
    entries = resolve_entries(parsed.entries, catalog)

    return DeckResolveResult(
        entries=tuple(entries),
        errors=parsed.errors,
        total_cards=parsed.total_cards,
    )
