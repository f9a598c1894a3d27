"""
Gamelist package for romdedup.

Handles loading ES-DE gamelist.xml catalogs and resolving the ROM paths
they reference.
"""

from .catalog_entry import CatalogRecord
from .parser import (
    GamelistParser,
    CatalogError,
    CatalogReadError,
    CatalogParseError,
    load_catalog,
)
from .path_handler import PathHandler, MalformedPathError

__all__ = [
    'CatalogRecord',
    'GamelistParser',
    'CatalogError',
    'CatalogReadError',
    'CatalogParseError',
    'load_catalog',
    'PathHandler',
    'MalformedPathError',
]
