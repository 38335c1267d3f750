from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from deckdiff.services.card_catalog import CardCatalog


def current_catalog(request: Request) -> CardCatalog | None:
    """Catalog loaded at startup, or None if loading has not happened."""
    return getattr(request.app.state, "catalog", None)


def get_catalog(
    catalog: Annotated[CardCatalog | None, Depends(current_catalog)],
) -> CardCatalog:
    """Require a loaded catalog. Returns 503 when it is unavailable."""
    if catalog is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Card catalog is not loaded",
        )
    return catalog
