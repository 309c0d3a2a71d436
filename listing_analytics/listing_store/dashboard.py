"""Dashboard views built from store query results.

These helpers shape engine output for display: missing-data percentages,
the country overview ordered by search matches, and result labels.
"""

from __future__ import annotations

from typing import Iterable

from ..common.models import Listing
from .models import (
    ALL_ATTRIBUTES,
    CountryGroup,
    ListingAttribute,
    MissingDataCard,
    Statistics,
)
from .store import UNKNOWN_COUNTRY, ListingStore, country_label


def missing_data_breakdown(stats: Statistics) -> list[MissingDataCard]:
    """One card per attribute (color, language, country).

    Percentages are of the total listing count, rounded to one decimal,
    and 0.0 for an empty collection.
    """
    cards: list[MissingDataCard] = []
    for attribute in ALL_ATTRIBUTES:
        count = stats.null_counts.get(attribute)
        percentage = 0.0
        if stats.total_listings > 0:
            percentage = round(count / stats.total_listings * 100, 1)
        cards.append(MissingDataCard(attribute=attribute, count=count, percentage=percentage))
    return cards


def highlighted_countries(highlighted: Iterable[Listing] | None) -> set[str]:
    """Country labels containing at least one highlighted listing."""
    return {country_label(listing) for listing in highlighted or ()}


def _country_sort_key(group: CountryGroup) -> tuple:
    # Most matches first, "Unknown" after named countries, then by name
    return (
        -group.highlight_count,
        group.country == UNKNOWN_COUNTRY,
        group.country.casefold(),
        group.country,
    )


def country_overview(
    store: ListingStore,
    highlighted: Iterable[Listing] | None = None,
) -> list[CountryGroup]:
    """Country groups ordered for display.

    Args:
        store: Listing store to group.
        highlighted: Listings to count as matches, typically the result
            of a search. Matching is by listing id.

    Returns:
        Groups sorted by match count (descending), with ``"Unknown"``
        after named countries and names ascending otherwise.
    """
    highlighted_ids = {listing.id for listing in highlighted or ()}

    groups = [
        CountryGroup(
            country=country,
            listings=listings,
            highlight_count=sum(1 for listing in listings if listing.id in highlighted_ids),
        )
        for country, listings in store.group_by_country().items()
    ]
    return sorted(groups, key=_country_sort_key)


def missing_fields(listing: Listing) -> list[str]:
    """Labels of the attributes ``listing`` is missing, e.g. ``["Color"]``."""
    return [
        attribute.label for attribute in ALL_ATTRIBUTES
        if attribute.read(listing) is None
    ]


def results_title(
    search_key: ListingAttribute | str | None = None,
    search_value: str = "",
    missing_key: ListingAttribute | str | None = None,
) -> str:
    """Heading for a result list.

    A missing-data view takes precedence over a search.
    """
    if missing_key:
        return f"Listings with Missing {ListingAttribute(missing_key).label}"
    if search_key and search_value:
        return f"{ListingAttribute(search_key).label}: {search_value}"
    return "Search Results"
