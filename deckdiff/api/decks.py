"""
Deck API endpoints.

Provides deck-list resolution and two-deck diffing.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status

from deckdiff.api.dependencies import get_catalog
from deckdiff.api.schemas import DeckDiffRequest, DeckDiffResponse, DeckResolveResponse
from deckdiff.config import settings
from deckdiff.parsers.deck_list import parse_deck_list
from deckdiff.services.card_catalog import CardCatalog
from deckdiff.services.deck_diff import diff_decks
from deckdiff.services.deck_resolver import resolve_deck_list

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/deck", tags=["decks"])

PLAIN_TEXT_BODY = {
    "requestBody": {
        "required": True,
        "content": {"text/plain": {"schema": {"type": "string"}}},
    }
}


def _check_length(deck_text: str, field_name: str) -> None:
    if len(deck_text) > settings.max_deck_list_chars:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=(
                f"{field_name} is {len(deck_text)} characters; "
                f"limit is {settings.max_deck_list_chars}"
            ),
        )


@router.post("/resolve", response_model=DeckResolveResponse, openapi_extra=PLAIN_TEXT_BODY)
async def resolve_deck(
    request: Request,
    catalog: Annotated[CardCatalog, Depends(get_catalog)],
) -> DeckResolveResponse:
    """
    Parse and resolve a deck list sent as a plain-text body.

    Malformed lines are reported in `errors`; unknown card names come
    back as entries with `card: null`.
    """
    body = await request.body()
    try:
        deck_text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Deck list must be UTF-8 text",
        ) from e

    _check_length(deck_text, "Deck list")

    result = resolve_deck_list(deck_text, catalog)
    logger.debug(
        "Deck processing completed: %d entries, %d errors, %d cards",
        len(result.entries),
        len(result.errors),
        result.total_cards,
    )
    return DeckResolveResponse.model_validate(result, from_attributes=True)


@router.post("/diff", response_model=DeckDiffResponse)
async def diff_deck(
    request: DeckDiffRequest,
    catalog: Annotated[CardCatalog, Depends(get_catalog)],
) -> DeckDiffResponse:
    """
    Compare two deck lists.

    Every card name from either list appears in exactly one of added,
    removed, modified or unchanged. Each list's parse errors are
    reported separately.
    """
    _check_length(request.deck_list_1, "deck_list_1")
    _check_length(request.deck_list_2, "deck_list_2")

    result = diff_decks(
        parse_deck_list(request.deck_list_1),
        parse_deck_list(request.deck_list_2),
        catalog,
    )
    logger.debug(
        "Deck diff processing completed: %s, %d/%d errors",
        result.summary(),
        len(result.errors_deck_1),
        len(result.errors_deck_2),
    )
    return DeckDiffResponse.model_validate(result, from_attributes=True)
