"""
Refresh the card data the server loads at startup.

Downloads Scryfall oracle cards, then loads the file back as a catalog so a
truncated or corrupted download fails here instead of at server start.

Usage:
    python -m deckdiff.jobs.download_cards [--output data/oracle-cards.json]
"""

import argparse
import asyncio
import logging
from pathlib import Path

from deckdiff.services.card_catalog import (
    CardCatalog,
    download_card_catalog,
    load_card_catalog,
)

logger = logging.getLogger(__name__)


async def refresh_card_data(output_path: Path | None = None) -> CardCatalog:
    """
    Download oracle cards and verify the file loads.

    Args:
        output_path: Where to save the file. Defaults to settings.card_data_path

    Returns:
        The catalog loaded from the downloaded file.

    Raises:
        httpx.HTTPError: If the download fails
        ValueError: If the bulk index has no oracle-cards entry or the
            downloaded file is not valid JSON
    """
    path = await download_card_catalog(output_path)
    catalog = load_card_catalog(path)

    if len(catalog) == 0:
        logger.warning("Card data at %s contains no named cards", path)
    else:
        logger.info("Card data at %s ready: %d unique names", path, len(catalog))
    return catalog


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Download Scryfall oracle cards for DeckDiff")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="File to write (default: CARD_DATA_PATH setting)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(refresh_card_data(args.output))


if __name__ == "__main__":
    main()
