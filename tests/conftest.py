"""Shared test fixtures for listing analytics."""

import json
import sys
from pathlib import Path

import pytest

# Ensure the package is importable without installation
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from listing_analytics.common.models import Listing
from listing_analytics.listing_store.store import ListingStore


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def sample_records() -> list[dict]:
    """Raw listing records with a mix of missing attributes and casings."""
    return [
        {"id": 1, "first_name": "Ada", "last_name": "Byron", "email": "ada@example.com",
         "country": "France", "language": "French", "color": "Red"},
        {"id": 2, "first_name": "Bo", "last_name": "Chen", "email": "bo@example.com",
         "country": None, "language": "English", "color": "red"},
        {"id": 3, "first_name": "Cy", "last_name": "Diaz", "email": "cy@example.com",
         "country": "Brazil", "language": None, "color": "Blue"},
        {"id": 4, "first_name": "Di", "last_name": "Eck", "email": "di@example.com",
         "country": "France", "language": "english", "color": None},
        {"id": 5, "first_name": "Ed", "last_name": "Fox", "email": "ed@example.com",
         "country": None, "language": None, "color": ""},
        {"id": 6, "first_name": "Flo", "last_name": "Gao", "email": "flo@example.com",
         "country": "China", "language": "Chinese", "color": "Teal"},
    ]


@pytest.fixture
def sample_listings(sample_records) -> list[Listing]:
    return [Listing(**r) for r in sample_records]


@pytest.fixture
def store(sample_listings) -> ListingStore:
    """Store over the sample listings."""
    return ListingStore(sample_listings)


@pytest.fixture
def scenario_store() -> ListingStore:
    """Two-listing collection used by the documented scenario."""
    return ListingStore([
        Listing(id=1, first_name="A", last_name="One", email="a@example.com",
                color="Red", language=None, country="France"),
        Listing(id=2, first_name="B", last_name="Two", email="b@example.com",
                color=None, language="English", country=None),
    ])


@pytest.fixture
def listings_file(tmp_path, sample_records) -> Path:
    """Sample records written to a temporary JSON data file."""
    path = tmp_path / "listings.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(sample_records, f)
    return path
