"""Listing Store Module - query, group and audit listings."""

from .dashboard import (
    country_overview,
    highlighted_countries,
    missing_data_breakdown,
    missing_fields,
    results_title,
)
from .loader import load_listings, parse_listings
from .models import (
    CountryGroup,
    ListingAttribute,
    MissingDataCard,
    NullCounts,
    Statistics,
)
from .store import UNKNOWN_COUNTRY, ListingStore

__all__ = [
    "ListingStore",
    "UNKNOWN_COUNTRY",
    "ListingAttribute",
    "NullCounts",
    "Statistics",
    "CountryGroup",
    "MissingDataCard",
    "load_listings",
    "parse_listings",
    "country_overview",
    "highlighted_countries",
    "missing_data_breakdown",
    "missing_fields",
    "results_title",
]
