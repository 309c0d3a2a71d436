"""Data models for listing queries, statistics and dashboard views."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from ..common.models import Listing


class ListingAttribute(str, Enum):
    """Optional listing attributes that queries can be keyed on."""
    COLOR = "color"
    LANGUAGE = "language"
    COUNTRY = "country"

    @property
    def label(self) -> str:
        """Display label, e.g. ``"Color"``."""
        return self.value.capitalize()

    def read(self, listing: Listing) -> str | None:
        """Return this attribute's value on ``listing``."""
        return _ACCESSORS[self](listing)


_ACCESSORS: dict[ListingAttribute, Callable[[Listing], str | None]] = {
    ListingAttribute.COLOR: lambda listing: listing.color,
    ListingAttribute.LANGUAGE: lambda listing: listing.language,
    ListingAttribute.COUNTRY: lambda listing: listing.country,
}

# Attributes that can be searched by value
SEARCHABLE_ATTRIBUTES = (ListingAttribute.COLOR, ListingAttribute.LANGUAGE)
ALL_ATTRIBUTES = tuple(ListingAttribute)


@dataclass(frozen=True)
class NullCounts:
    """Number of listings missing each optional attribute."""
    color: int = 0
    language: int = 0
    country: int = 0

    def get(self, attribute: ListingAttribute) -> int:
        return {
            ListingAttribute.COLOR: self.color,
            ListingAttribute.LANGUAGE: self.language,
            ListingAttribute.COUNTRY: self.country,
        }[attribute]

    def to_dict(self) -> dict:
        return {
            "color": self.color,
            "language": self.language,
            "country": self.country,
        }


@dataclass(frozen=True)
class Statistics:
    """Completeness and cardinality summary of a listing collection."""
    total_listings: int = 0
    unique_countries: int = 0
    unique_colors: int = 0
    unique_languages: int = 0
    null_counts: NullCounts = field(default_factory=NullCounts)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        return {
            "total_listings": self.total_listings,
            "unique_countries": self.unique_countries,
            "unique_colors": self.unique_colors,
            "unique_languages": self.unique_languages,
            "null_counts": self.null_counts.to_dict(),
        }


@dataclass(frozen=True)
class MissingDataCard:
    """Missing-data figure for one attribute."""
    attribute: ListingAttribute
    count: int
    percentage: float  # 0-100, one decimal

    @property
    def title(self) -> str:
        return f"Missing {self.attribute.label}"

    def to_dict(self) -> dict:
        return {
            "attribute": self.attribute.value,
            "title": self.title,
            "count": self.count,
            "percentage": self.percentage,
        }


@dataclass
class CountryGroup:
    """Listings of one country, with how many of them match a search."""
    country: str
    listings: list[Listing] = field(default_factory=list)
    highlight_count: int = 0

    @property
    def listing_count(self) -> int:
        return len(self.listings)

    @property
    def has_matches(self) -> bool:
        return self.highlight_count > 0

    def to_dict(self) -> dict:
        return {
            "country": self.country,
            "listing_count": self.listing_count,
            "highlight_count": self.highlight_count,
            "listing_ids": [listing.id for listing in self.listings],
        }
