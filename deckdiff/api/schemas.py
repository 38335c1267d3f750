"""
Response and request models shared by the API routers.

Domain results are frozen dataclasses; these models mirror them on the
wire and are built with `model_validate(..., from_attributes=True)`.
"""

from pydantic import BaseModel, ConfigDict, Field

from deckdiff.models.diff import ChangeType


class ImageUrisResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    normal: str


class CardResponse(BaseModel):
    """A catalog card."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    image_status: str
    image_uris: ImageUrisResponse | None = None


class ParseErrorResponse(BaseModel):
    """A deck-list line that could not be parsed."""

    model_config = ConfigDict(from_attributes=True)

    line_number: int
    line_text: str
    message: str


class ResolvedEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    quantity: int
    card_name: str
    set_code: str | None = None
    collector_number: str | None = None
    categories: list[str] = Field(default_factory=list)
    card: CardResponse | None = None


class DeckResolveResponse(BaseModel):
    """Response model for a resolved deck list."""

    model_config = ConfigDict(from_attributes=True)

    entries: list[ResolvedEntryResponse]
    total_cards: int
    errors: list[ParseErrorResponse]


class DeckDiffRequest(BaseModel):
    """Two raw deck lists: the old one first."""

    deck_list_1: str
    deck_list_2: str


class DiffEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    card_name: str
    old_quantity: int
    new_quantity: int
    change_type: ChangeType
    categories: list[str] = Field(default_factory=list)
    card: CardResponse | None = None


class DeckDiffResponse(BaseModel):
    """Response model for a deck diff."""

    model_config = ConfigDict(from_attributes=True)

    added: list[DiffEntryResponse]
    removed: list[DiffEntryResponse]
    modified: list[DiffEntryResponse]
    unchanged: list[DiffEntryResponse]
    errors_deck_1: list[ParseErrorResponse]
    errors_deck_2: list[ParseErrorResponse]
