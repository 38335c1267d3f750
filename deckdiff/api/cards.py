"""
Card API endpoints.

Exact-name card lookup against the loaded catalog.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from deckdiff.api.dependencies import get_catalog
from deckdiff.api.schemas import CardResponse
from deckdiff.services.card_catalog import CardCatalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cards", tags=["cards"])


# `path` converter so split cards like "Fire // Ice" reach the handler
@router.get("/{name:path}", response_model=CardResponse)
async def get_card_by_name(
    name: str,
    catalog: Annotated[CardCatalog, Depends(get_catalog)],
) -> CardResponse:
    """
    Get a card by exact, case-sensitive name.

    Returns 404 if the catalog has no card with that name.
    """
    card = catalog.get(name)
    if card is None:
        logger.warning("Card not found: %s", name)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Card '{name}' not found",
        )

    logger.debug("Card found: %s", name)
    return CardResponse.model_validate(card, from_attributes=True)
