"""
Inspect a card from the catalog.

Loads the catalog, then prints the cards that synergize with the given
card and its other versions. Also useful to check that a catalog file loads.

    python -m decksmith.jobs.inspect_card ALT_CORE_B_AX_04_C --catalog cards.json
"""

import argparse
import logging
from pathlib import Path

from decksmith.config import settings
from decksmith.models.failure import CardNotFoundError
from decksmith.services.card_catalog import find_card, load_catalog
from decksmith.services.synergy_finder import find_synergy_matches, format_synergy_results
from decksmith.services.versions import find_versions

logger = logging.getLogger(__name__)


def run_inspect(reference: str, catalog_path: Path) -> str:
    """
    Build the inspection report for a card.

    Raises:
        FileNotFoundError: If the catalog file doesn't exist
        CatalogError: If the catalog is malformed
        CardNotFoundError: If the card is not in the catalog
    """
    catalog = load_catalog(catalog_path)

    card = find_card(catalog, reference)
    if card is None:
        raise CardNotFoundError(reference)

    lines = [format_synergy_results(card, find_synergy_matches(card, catalog))]

    versions = find_versions(card, catalog)
    if versions:
        lines.append(f"\n## Other versions of {card.name}")
        lines.extend(f"- {v.reference} ({v.rarity or 'unknown rarity'})" for v in versions)

    return "\n".join(lines)


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Show synergies and versions of a card.")
    parser.add_argument("reference", help="Catalog reference of the card")
    parser.add_argument(
        "--catalog",
        type=Path,
        default=Path(settings.catalog_path),
        help="Path to the card catalog JSON file",
    )
    args = parser.parse_args()

    try:
        print(run_inspect(args.reference, args.catalog))
    except Exception as e:
        logger.error("Failed to inspect %s: %s", args.reference, e)
        raise


if __name__ == "__main__":
    main()
