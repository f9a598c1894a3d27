"""Group gamelist records by canonical game name."""

import logging
from typing import Dict, Iterable, List

from romdedup.gamelist.catalog_entry import CatalogRecord
from romdedup.gamelist.path_handler import PathHandler

logger = logging.getLogger(__name__)


def group_by_name(records: Iterable[CatalogRecord]) -> Dict[str, List[str]]:
    """
    Group ROM filenames by game name.

    Every name is returned, including names with a single filename.
    Filenames keep their catalog order and are not deduplicated, so a
    filename listed twice under one name appears twice.

    Args:
        records: Catalog records in document order

    Returns:
        Dict mapping game name to the list of ROM filenames

    Raises:
        MalformedPathError: If a record's path has no filename component
    """
    groups: Dict[str, List[str]] = {}

    for record in records:
        # "./subdir/Game.zip" -> "Game.zip"
        filename = PathHandler.get_rom_filename(record.path, record.name)
        groups.setdefault(record.name, []).append(filename)

    logger.debug(f"Grouped catalog into {len(groups)} distinct names")
    return groups
