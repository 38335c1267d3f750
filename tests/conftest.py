from pathlib import Path

import pytest

from deckdiff.models.card import Card, ImageUris
from deckdiff.services.card_catalog import CardCatalog


@pytest.fixture
def card_data_path() -> Path:
    """Scryfall oracle-cards sample: 8 unique names, 9 named records."""
    return Path(__file__).parent / "fixtures" / "oracle_cards_sample.json"


@pytest.fixture
def sample_catalog() -> CardCatalog:
    """Small in-memory catalog covering the example decks."""
    names = [
        "Lightning Bolt",
        "Counterspell",
        "Forest",
        "Mountain",
        "Sol Ring",
        "Blasphemous Act",
    ]
    return CardCatalog.from_cards(
        Card(
            id=f"test-{name.replace(' ', '-').lower()}",
            name=name,
            image_status="highres_scan",
            image_uris=ImageUris(normal=f"https://example.com/{name}.jpg"),
        )
        for name in names
    )


@pytest.fixture
def first_deck_text() -> str:
    return "4x Lightning Bolt\n2x Counterspell\n1x Forest\n1x Mountain"


@pytest.fixture
def second_deck_text() -> str:
    return (
        "2x Lightning Bolt\n"
        "2x Counterspell\n"
        "1x Forest\n"
        "1x Mountain\n"
        "3x Sol Ring [Artifact, Ramp]\n"
        "1x Blasphemous Act [Removal]"
    )
