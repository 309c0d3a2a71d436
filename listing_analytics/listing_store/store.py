"""Listing store and query engine.

Holds a fixed listing collection and answers filter, grouping, catalog
and completeness questions about it. Every query scans the collection
and returns new containers; the collection itself is never modified.

Usage:
    store = ListingStore.from_file("data/listings.json")
    reds = store.filter_by_attribute("color", "red")
    by_country = store.group_by_country()
    stats = store.statistics()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping

from ..common.models import Listing
from .loader import load_listings, parse_listings
from .models import (
    ALL_ATTRIBUTES,
    SEARCHABLE_ATTRIBUTES,
    ListingAttribute,
    NullCounts,
    Statistics,
)

logger = logging.getLogger(__name__)

UNKNOWN_COUNTRY = "Unknown"

AttributeKey = ListingAttribute | str


def _resolve_attribute(
    key: AttributeKey,
    allowed: tuple[ListingAttribute, ...],
) -> ListingAttribute:
    """Map ``key`` to an attribute, failing fast outside ``allowed``."""
    try:
        attribute = ListingAttribute(key)
    except ValueError:
        attribute = None

    if attribute not in allowed:
        names = ", ".join(a.value for a in allowed)
        raise ValueError(f"Unsupported listing attribute {key!r}; expected one of: {names}")
    return attribute


def country_label(listing: Listing) -> str:
    """Country used for grouping; missing countries become ``"Unknown"``."""
    return UNKNOWN_COUNTRY if listing.country is None else listing.country


class ListingStore:
    """Read-only query engine over a listing collection.

    The collection is handed in at construction and kept as a tuple.
    Listings are frozen models, so a store can be shared freely.
    """

    def __init__(self, listings: Iterable[Listing]) -> None:
        self._listings: tuple[Listing, ...] = tuple(listings)
        logger.debug("ListingStore created with %d listings", len(self._listings))

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> ListingStore:
        """Build a store from raw mappings, validating them first."""
        return cls(parse_listings(records))

    @classmethod
    def from_file(cls, path: str | Path) -> ListingStore:
        """Build a store from a JSON data file."""
        return cls(load_listings(path))

    @property
    def listings(self) -> tuple[Listing, ...]:
        return self._listings

    def __len__(self) -> int:
        return len(self._listings)

    def __iter__(self) -> Iterator[Listing]:
        return iter(self._listings)

    # --- Queries ---

    def filter_by_attribute(self, key: AttributeKey, value: str) -> list[Listing]:
        """Listings whose ``key`` attribute equals ``value``, ignoring case.

        Listings missing the attribute never match. An empty ``value``
        only matches attributes that are themselves empty strings.

        Args:
            key: ``"color"`` or ``"language"``.
            value: Text to compare against.

        Returns:
            Matching listings in collection order (possibly empty).
        """
        attribute = _resolve_attribute(key, SEARCHABLE_ATTRIBUTES)
        needle = value.lower()
        matches = [
            listing for listing in self._listings
            if (current := attribute.read(listing)) is not None
            and current.lower() == needle
        ]
        logger.debug(
            "filter %s=%r matched %d/%d listings",
            attribute.value, value, len(matches), len(self._listings),
        )
        return matches

    def listings_missing(self, key: AttributeKey) -> list[Listing]:
        """Listings with no value for ``key``, in collection order."""
        attribute = _resolve_attribute(key, ALL_ATTRIBUTES)
        return [
            listing for listing in self._listings
            if attribute.read(listing) is None
        ]

    def group_by_country(self) -> dict[str, list[Listing]]:
        """Partition listings by country.

        Groups appear in order of each country's first occurrence.
        Listings without a country go to the ``"Unknown"`` group.
        """
        grouped: dict[str, list[Listing]] = {}
        for listing in self._listings:
            grouped.setdefault(country_label(listing), []).append(listing)
        return grouped

    def distinct_values(self, key: AttributeKey) -> list[str]:
        """Sorted unique values of ``key`` (``"color"`` or ``"language"``).

        Case is preserved, so ``"Red"`` and ``"red"`` are separate
        entries. Missing values are not included.
        """
        attribute = _resolve_attribute(key, SEARCHABLE_ATTRIBUTES)
        return sorted({
            value for listing in self._listings
            if (value := attribute.read(listing)) is not None
        })

    def distinct_countries(self) -> list[str]:
        """Unique countries in order of first occurrence."""
        return list(dict.fromkeys(
            listing.country for listing in self._listings
            if listing.country is not None
        ))

    def statistics(self) -> Statistics:
        """Total, distinct-value and missing-value counts."""
        return Statistics(
            total_listings=len(self._listings),
            unique_countries=len(self.distinct_countries()),
            unique_colors=len(self.distinct_values(ListingAttribute.COLOR)),
            unique_languages=len(self.distinct_values(ListingAttribute.LANGUAGE)),
            null_counts=NullCounts(
                color=len(self.listings_missing(ListingAttribute.COLOR)),
                language=len(self.listings_missing(ListingAttribute.LANGUAGE)),
                country=len(self.listings_missing(ListingAttribute.COUNTRY)),
            ),
        )
