"""Shared Pydantic data models for listing analytics.

The listing record is the data contract between the loader, the query
engine and anything rendering its results.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Listing(BaseModel):
    """A single person-like listing record.

    ``country``, ``language`` and ``color`` are ``None`` when the data is
    missing. An empty string is a value, not a missing one.
    """
    model_config = ConfigDict(frozen=True)

    id: int
    first_name: str
    last_name: str
    email: str
    country: str | None = None
    language: str | None = None
    color: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
