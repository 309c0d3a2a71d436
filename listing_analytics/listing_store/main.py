"""CLI entry point for the listing store.

Usage:
    python -m listing_analytics.listing_store.main
    python -m listing_analytics.listing_store.main --filter color --value red
    python -m listing_analytics.listing_store.main --missing country --output missing.json
    python -m listing_analytics.listing_store.main --by-country --data my_listings.json
    python -m listing_analytics.listing_store.main --by-country --filter language --value french
"""

from __future__ import annotations

import argparse
import json
from typing import Sequence

from ..common.config import settings
from ..common.logging import setup_logging
from ..common.models import Listing
from .dashboard import country_overview, missing_data_breakdown, missing_fields
from .models import ALL_ATTRIBUTES, SEARCHABLE_ATTRIBUTES
from .store import ListingStore

logger = setup_logging(level=settings.logging.level, module_name="listing_analytics")

_SEARCHABLE = [a.value for a in SEARCHABLE_ATTRIBUTES]
_ALL = [a.value for a in ALL_ATTRIBUTES]


def _listing_rows(listings: list[Listing]) -> list[dict]:
    return [listing.model_dump() for listing in listings]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Listing Analytics: query and audit listings")
    parser.add_argument(
        "--data",
        type=str,
        help="Path to listings JSON (default: data.listings_path from settings)",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--stats",
        action="store_true",
        help="Show collection statistics (default)",
    )
    mode.add_argument(
        "--filter",
        choices=_SEARCHABLE,
        help="Attribute to search by value (requires --value)",
    )
    mode.add_argument(
        "--missing",
        choices=_ALL,
        help="List listings missing this attribute",
    )
    mode.add_argument(
        "--values",
        choices=_SEARCHABLE,
        help="List the distinct values of an attribute",
    )
    mode.add_argument(
        "--countries",
        action="store_true",
        help="List the distinct countries",
    )

    parser.add_argument(
        "--by-country",
        action="store_true",
        help="Group listings by country; with --filter, count matches per country",
    )
    parser.add_argument(
        "--value",
        type=str,
        help="Value to match with --filter (case-insensitive)",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Output JSON file path",
    )
    return parser


def run(args: argparse.Namespace) -> object:
    """Execute the selected query and return its JSON-ready result."""
    data_path = args.data or settings.data.listings_abs_path
    store = ListingStore.from_file(data_path)

    if args.by_country:
        highlighted = None
        if args.filter:
            highlighted = store.filter_by_attribute(args.filter, args.value)
            logger.info("Highlighting %d listings with %s = %r", len(highlighted), args.filter, args.value)
        for group in country_overview(store, highlighted):
            logger.info(
                "  %s: %d listings, %d matches",
                group.country, group.listing_count, group.highlight_count,
            )
        return {
            country: _listing_rows(listings)
            for country, listings in store.group_by_country().items()
        }

    if args.filter:
        results = store.filter_by_attribute(args.filter, args.value)
        logger.info("%d listings with %s = %r", len(results), args.filter, args.value)
        for listing in results:
            logger.info("  #%d %s (%s)", listing.id, listing.full_name, listing.email)
        return _listing_rows(results)

    if args.missing:
        results = store.listings_missing(args.missing)
        logger.info("%d listings missing %s", len(results), args.missing)
        for listing in results:
            logger.info(
                "  #%d %s (Missing: %s)",
                listing.id, listing.full_name, ", ".join(missing_fields(listing)),
            )
        return _listing_rows(results)

    if args.values:
        values = store.distinct_values(args.values)
        logger.info("%d distinct %s values: %s", len(values), args.values, ", ".join(values))
        return values

    if args.countries:
        countries = store.distinct_countries()
        logger.info("%d distinct countries: %s", len(countries), ", ".join(countries))
        return countries

    stats = store.statistics()
    logger.info(
        "Listings: %d | Countries: %d | Colors: %d | Languages: %d",
        stats.total_listings,
        stats.unique_countries,
        stats.unique_colors,
        stats.unique_languages,
    )
    for card in missing_data_breakdown(stats):
        logger.info("  %s: %d (%.1f%%)", card.title, card.count, card.percentage)
    return stats.to_dict()


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.filter and args.value is None:
        parser.error("--filter requires --value")
    if args.value is not None and not args.filter:
        parser.error("--value requires --filter")
    if args.by_country and (args.stats or args.missing or args.values or args.countries):
        parser.error("--by-country can only be combined with --filter")

    result = run(args)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(result, f, ensure_ascii=False, indent=2)
        logger.info("Output written to %s", args.output)


if __name__ == "__main__":
    main()
