"""Listing analytics: query, group and audit a static listing collection."""

__version__ = "0.1.0"
