"""Load and validate listing collections from JSON data files.

Validation happens here, before a store is built, so the query engine
can assume every record has the listing shape and a unique id.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from ..common.models import Listing

logger = logging.getLogger(__name__)


def parse_listings(records: Iterable[Mapping[str, Any]]) -> list[Listing]:
    """Validate raw records into Listing models.

    Args:
        records: Mappings shaped like listings (e.g. decoded JSON objects).

    Returns:
        Listings in the same order as ``records``.

    Raises:
        ValueError: If a record does not fit the listing shape or an id
            appears more than once.
    """
    listings: list[Listing] = []
    seen_ids: set[int] = set()

    for index, record in enumerate(records):
        try:
            listing = Listing.model_validate(record)
        except ValidationError as e:
            raise ValueError(f"Invalid listing at index {index}: {e}") from e

        if listing.id in seen_ids:
            raise ValueError(f"Duplicate listing id {listing.id} at index {index}")
        seen_ids.add(listing.id)
        listings.append(listing)

    return listings


def load_listings(path: str | Path) -> list[Listing]:
    """Read a JSON array of listings from disk.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file is not a JSON array of valid listings.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise ValueError(
            f"{path} must contain a JSON array of listings, got {type(data).__name__}"
        )

    listings = parse_listings(data)
    logger.info("Loaded %d listings from %s", len(listings), path)
    return listings
