"""
Gamelist XML parser.

Loads ES-DE gamelist.xml files into the minimal records needed to spot
duplicate ROMs.
"""

import logging
from pathlib import Path
from typing import List, Optional

from lxml import etree

from .catalog_entry import CatalogRecord

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for gamelist loading errors."""
    pass


class CatalogReadError(CatalogError):
    """Gamelist file could not be read (missing, permissions, directory)."""
    pass


class CatalogParseError(CatalogError):
    """Gamelist content is not a structurally valid gamelist."""
    pass


class GamelistParser:
    """
    Parses ES-DE gamelist.xml files.

    ES-DE writes ``path`` and ``name`` as child elements of each ``<game>``;
    hand-written catalogs sometimes use attributes instead, so both are
    accepted. Child elements take precedence over attributes.
    """

    def parse_gamelist(self, gamelist_path: Path) -> List[CatalogRecord]:
        """
        Parse gamelist.xml file.

        Args:
            gamelist_path: Path to gamelist.xml file

        Returns:
            List of CatalogRecord objects in document order

        Raises:
            CatalogReadError: If the file cannot be read
            CatalogParseError: If the XML is malformed or an entry lacks
                a path or name
        """
        gamelist_path = Path(gamelist_path)

        try:
            content = gamelist_path.read_bytes()
        except OSError as e:
            raise CatalogReadError(f"Cannot read gamelist {gamelist_path}: {e}") from e

        try:
            root = etree.fromstring(content)
        except etree.XMLSyntaxError as e:
            raise CatalogParseError(f"Malformed XML in {gamelist_path}: {e}") from e

        records = []
        for index, game_elem in enumerate(root.findall("game"), 1):
            records.append(self._parse_game_element(game_elem, index))

        logger.debug(f"Loaded {len(records)} entries from {gamelist_path}")
        return records

    def _parse_game_element(self, game_elem: etree._Element, index: int) -> CatalogRecord:
        """
        Parse a single <game> element.

        Args:
            game_elem: <game> XML element
            index: 1-based position of the element, for error messages

        Returns:
            CatalogRecord for the element

        Raises:
            CatalogParseError: If path or name is missing
        """
        path = self._get_value(game_elem, "path")
        name = self._get_value(game_elem, "name")

        missing = [field for field, value in (("path", path), ("name", name)) if value is None]
        if missing:
            raise CatalogParseError(
                f"Game entry #{index} (line {game_elem.sourceline}) "
                f"is missing required field(s): {', '.join(missing)}"
            )

        return CatalogRecord(path=path, name=name)

    def _get_value(self, element: etree._Element, tag: str) -> Optional[str]:
        """Get child element text, falling back to an attribute of the same name."""
        child = element.find(tag)
        if child is not None and child.text and child.text.strip():
            return child.text.strip()

        attr = element.get(tag)
        if attr is not None and attr.strip():
            return attr.strip()

        return None


def load_catalog(gamelist_path: Path) -> List[CatalogRecord]:
    """
    Load catalog records from a gamelist file.

    Convenience wrapper around GamelistParser.parse_gamelist().
    """
    return GamelistParser().parse_gamelist(gamelist_path)
