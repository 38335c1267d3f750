from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "DeckDiff"
    debug: bool = False

    # Scryfall oracle-cards bulk file, see `python -m deckdiff.jobs.download_cards`
    card_data_path: Path = Path("data/oracle-cards.json")

    scryfall_bulk_api: str = "https://api.scryfall.com/bulk-data"

    # Requests with a longer deck list are rejected with 413
    max_deck_list_chars: int = 100_000


settings = Settings()
