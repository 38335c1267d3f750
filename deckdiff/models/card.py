from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ImageUris:
    """Artwork links for a card. Only the normal-size image is kept."""

    normal: str


@dataclass(frozen=True, slots=True)
class Card:
    """
    A card record from the Scryfall oracle-cards bulk data.

    Attributes:
        id: Scryfall card ID
        name: Canonical card name (e.g., "Fire // Ice")
        image_status: Scryfall image quality marker (e.g., "highres_scan")
        image_uris: Artwork links, absent for some multi-faced cards
    """

    id: str
    name: str
    image_status: str
    image_uris: ImageUris | None = None

    @classmethod
    def from_scryfall(cls, data: dict[str, Any]) -> "Card":
        """Build a Card from a raw Scryfall JSON object, ignoring extra fields."""
        image_uris = data.get("image_uris")
        normal = image_uris.get("normal") if isinstance(image_uris, dict) else None
        return cls(
            id=str(data.get("id", "")),
            name=str(data["name"]),
            image_status=str(data.get("image_status", "missing")),
            image_uris=ImageUris(normal=normal) if normal else None,
        )
