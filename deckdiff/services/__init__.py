from deckdiff.services.card_catalog import (
    CardCatalog,
    CardLookup,
    download_card_catalog,
    load_card_catalog,
)
from deckdiff.services.deck_diff import aggregate_entries, diff_deck_lists, diff_decks
from deckdiff.services.deck_resolver import resolve_deck_list, resolve_entries
from deckdiff.services.sorting import (
    display_rank,
    is_commander,
    is_land,
    sort_entries,
)

__all__ = [
    "CardCatalog",
    "CardLookup",
    "aggregate_entries",
    "diff_deck_lists",
    "diff_decks",
    "display_rank",
    "download_card_catalog",
    "is_commander",
    "is_land",
    "load_card_catalog",
    "resolve_deck_list",
    "resolve_entries",
    "sort_entries",
]
