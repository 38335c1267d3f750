"""
Card catalog service.

Loads Scryfall oracle-cards bulk data once and answers exact-name lookups.
A name missing from the catalog is a normal outcome, not an error.
"""

import json
import logging
import time
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

import httpx

from deckdiff.config import settings
from deckdiff.models.card import Card

logger = logging.getLogger(__name__)

BULK_DATA_TYPE = "oracle_cards"
USER_AGENT = "DeckDiff/1.0"


class CardLookup(Protocol):
    """Anything that can map a card name to a Card."""

    def get(self, name: str) -> Card | None: ...


class CardCatalog:
    """
    In-memory card catalog keyed by exact card name.

    Multiple records may share a name (tokens, reprinted extras). All are
    kept; lookups return the first one loaded.
    """

    def __init__(self, cards_by_name: dict[str, list[Card]] | None = None) -> None:
        self._cards_by_name: dict[str, list[Card]] = cards_by_name or {}

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "CardCatalog":
        cards_by_name: dict[str, list[Card]] = {}
        for card in cards:
            cards_by_name.setdefault(card.name, []).append(card)
        return cls(cards_by_name)

    def get(self, name: str) -> Card | None:
        """Return the card for an exact, case-sensitive name, or None."""
        printings = self._cards_by_name.get(name)
        return printings[0] if printings else None

    def printings(self, name: str) -> list[Card]:
        """All records loaded under this name."""
        return list(self._cards_by_name.get(name, []))

    @property
    def total_records(self) -> int:
        return sum(len(cards) for cards in self._cards_by_name.values())

    def __contains__(self, name: object) -> bool:
        return name in self._cards_by_name

    def __len__(self) -> int:
        return len(self._cards_by_name)


def load_card_catalog(path: Path | None = None) -> CardCatalog:
    """
    Load the card catalog from a Scryfall bulk JSON file.

    Args:
        path: Path to JSON file. Defaults to settings.card_data_path

    Returns:
        CardCatalog grouping records by name.

    Raises:
        FileNotFoundError: If the bulk file doesn't exist
        ValueError: If the file is not valid JSON
    """
    if path is None:
        path = settings.card_data_path

    if not path.exists():
        raise FileNotFoundError(
            f"Card data not found at {path}. "
            "Run `python -m deckdiff.jobs.download_cards` first."
        )

    started = time.perf_counter()
    logger.info("Loading cards from %s", path)

    with open(path, encoding="utf-8") as f:
        try:
            raw_cards = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(
                f"Card data at {path} is corrupted. "
                "Re-run `python -m deckdiff.jobs.download_cards`."
            ) from e

    catalog = CardCatalog.from_cards(
        Card.from_scryfall(raw) for raw in raw_cards if raw.get("name")
    )

    logger.info(
        "Loaded %d unique names (%d records) in %d ms",
        len(catalog),
        catalog.total_records,
        (time.perf_counter() - started) * 1000,
    )
    return catalog


async def download_card_catalog(output_path: Path | None = None) -> Path:
    """
    Download the latest Scryfall oracle-cards bulk data.

    Args:
        output_path: Where to save the file. Defaults to settings.card_data_path

    Returns:
        Path to downloaded file.

    Raises:
        ValueError: If the oracle-cards entry is missing from the bulk index
        httpx.HTTPError: If download fails
    """
    if output_path is None:
        output_path = settings.card_data_path

    output_path.parent.mkdir(parents=True, exist_ok=True)
    headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}

    async with httpx.AsyncClient(timeout=30.0, headers=headers) as client:
        response = await client.get(settings.scryfall_bulk_api)
        response.raise_for_status()
        data = response.json()

        download_url = None
        for item in data["data"]:
            if item["type"] == BULK_DATA_TYPE:
                download_url = item["download_uri"]
                break

        if not download_url:
            raise ValueError(f"Could not find {BULK_DATA_TYPE} bulk data URL")

        logger.debug("Streaming %s to %s", download_url, output_path)
        async with client.stream(
            "GET", download_url, timeout=300.0, follow_redirects=True
        ) as response:
            response.raise_for_status()
            with open(output_path, "wb") as f:
                async for chunk in response.aiter_bytes(8192):
                    f.write(chunk)

    return output_path
