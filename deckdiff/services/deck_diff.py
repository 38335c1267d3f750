"""
Deck diff service.

Reconciles two deck lists by card name into added, removed, modified and
unchanged buckets.

INVARIANTS:
1. Identity is the exact card name; set and collector number are ignored
2. Every distinct name in either deck lands in exactly one bucket
3. Lines repeating a name are summed before comparison
4. A name whose total quantity is 0 counts as absent
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from deckdiff.models.card import Card
from deckdiff.models.deck import DeckParseResult, DeckResolveResult, ParsedEntry, ResolvedEntry
from deckdiff.models.diff import ChangeType, DiffEntry, DiffResult
from deckdiff.parsers.deck_list import parse_deck_list
from deckdiff.services.card_catalog import CardLookup
from deckdiff.services.sorting import sort_entries

logger = logging.getLogger(__name__)


@dataclass
class CardTotal:
    """Aggregate of every line naming one card within a deck."""

    quantity: int = 0
    categories: list[str] = field(default_factory=list)
    card: Card | None = None


def _merge_categories(target: list[str], categories: Iterable[str]) -> None:
    for category in categories:
        if category not in target:
            target.append(category)


def aggregate_entries(entries: Iterable[ParsedEntry | ResolvedEntry]) -> dict[str, CardTotal]:
    """
    Sum quantities and union categories per card name.

    Args:
        entries: Entries from one deck, in line order

    Returns:
        Dict keyed by card name in first-seen order. Names with no
        positive quantity are left out.
    """
    totals: dict[str, CardTotal] = {}

    for entry in entries:
        if entry.quantity <= 0:
            continue
        total = totals.setdefault(entry.card_name, CardTotal())
        total.quantity += entry.quantity
        _merge_categories(total.categories, entry.categories)
        if total.card is None and isinstance(entry, ResolvedEntry):
            total.card = entry.card

    return totals


def _classify(old_quantity: int, new_quantity: int) -> ChangeType:
    if old_quantity == 0:
        return ChangeType.ADDED
    if new_quantity == 0:
        return ChangeType.REMOVED
    if old_quantity != new_quantity:
        return ChangeType.MODIFIED
    return ChangeType.UNCHANGED


def diff_decks(
    old: DeckParseResult | DeckResolveResult,
    new: DeckParseResult | DeckResolveResult,
    catalog: CardLookup | None = None,
) -> DiffResult:
    """
    Classify every card name across two decks.

    Args:
        old: First deck (the "before" snapshot)
        new: Second deck (the "after" snapshot)
        catalog: Optional lookup used to attach cards to diff entries.
            Without it, cards already attached to resolved entries are
            reused.

    Returns:
        DiffResult with each bucket in display order and both decks'
        parse errors passed through untouched.
    """
    old_totals = aggregate_entries(old.entries)
    new_totals = aggregate_entries(new.entries)

    buckets: dict[ChangeType, list[DiffEntry]] = {change: [] for change in ChangeType}

    all_names = list(old_totals) + [name for name in new_totals if name not in old_totals]

    for name in all_names:
        old_total = old_totals.get(name, CardTotal())
        new_total = new_totals.get(name, CardTotal())

        categories = list(old_total.categories)
        _merge_categories(categories, new_total.categories)

        if catalog is not None:
            card = catalog.get(name)
        else:
            card = new_total.card or old_total.card

        change_type = _classify(old_total.quantity, new_total.quantity)
        buckets[change_type].append(
            DiffEntry(
                card_name=name,
                old_quantity=old_total.quantity,
                new_quantity=new_total.quantity,
                change_type=change_type,
                categories=tuple(categories),
                card=card,
            )
        )

    result = DiffResult(
        added=tuple(sort_entries(buckets[ChangeType.ADDED])),
        removed=tuple(sort_entries(buckets[ChangeType.REMOVED])),
        modified=tuple(sort_entries(buckets[ChangeType.MODIFIED])),
        unchanged=tuple(sort_entries(buckets[ChangeType.UNCHANGED])),
        errors_deck_1=old.errors,
        errors_deck_2=new.errors,
    )
    logger.debug("Deck diff completed: %s", result.summary())
    return result


def diff_deck_lists(text_1: str, text_2: str, catalog: CardLookup | None = None) -> DiffResult:
    """Parse two raw deck lists and diff them."""
    return diff_decks(parse_deck_list(text_1), parse_deck_list(text_2), catalog)
