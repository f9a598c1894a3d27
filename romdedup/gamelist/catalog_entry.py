"""
Catalog data structures.

Defines the record extracted from each <game> element of a gamelist.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogRecord:
    """
    A single gamelist entry as far as duplicate detection cares.

    Only the ROM path and the canonical name are kept; every other
    gamelist field (media, ratings, play counts) is irrelevant here.
    """
    path: str  # Relative path to ROM (e.g., "./Game.zip")
    name: str  # Canonical game name, used as the grouping key
