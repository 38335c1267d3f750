"""
Health check endpoints.

Provides liveness and readiness probes. Readiness requires the card catalog.
"""

from importlib.metadata import version as pkg_version
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from deckdiff.api.dependencies import current_catalog
from deckdiff.services.card_catalog import CardCatalog

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    cards_loaded: int


@router.get("/health", response_model=HealthResponse)
async def health(
    catalog: Annotated[CardCatalog | None, Depends(current_catalog)],
) -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running, with the number of unique
    card names in the catalog (0 if not loaded).
    """
    return HealthResponse(
        status="healthy",
        version=pkg_version("deckdiff"),
        cards_loaded=len(catalog) if catalog is not None else 0,
    )


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    catalog: Annotated[CardCatalog | None, Depends(current_catalog)],
) -> HealthResponse:
    """
    Readiness probe.

    Returns 503 until a non-empty card catalog is loaded.
    """
    app_version = pkg_version("deckdiff")
    if catalog is None or len(catalog) == 0:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="not ready", version=app_version, cards_loaded=0)
    return HealthResponse(status="ready", version=app_version, cards_loaded=len(catalog))
