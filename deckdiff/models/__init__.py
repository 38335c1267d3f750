from deckdiff.models.card import Card, ImageUris
from deckdiff.models.deck import (
    DeckParseResult,
    DeckResolveResult,
    ParsedEntry,
    ParseError,
    ResolvedEntry,
)
from deckdiff.models.diff import ChangeType, DiffEntry, DiffResult

__all__ = [
    "Card",
    "ChangeType",
    "DeckParseResult",
    "DeckResolveResult",
    "DiffEntry",
    "DiffResult",
    "ImageUris",
    "ParseError",
    "ParsedEntry",
    "ResolvedEntry",
]
