"""Filter name groups down to duplicate sets present on disk."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from romdedup.gamelist.path_handler import PathHandler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DuplicateSet:
    """A game name with two or more ROM files present in the ROM directory."""
    name: str
    paths: List[Path] = field(default_factory=list)


def find_duplicate_sets(groups: Dict[str, List[str]], rom_dir: Path) -> List[DuplicateSet]:
    """
    Resolve grouped filenames against the ROM directory.

    Groups with a single filename are not candidates. For the rest, each
    filename is joined onto ``rom_dir`` and kept only if something exists at
    that path. A filename listed more than once resolves to the same file and
    is listed once, at its first position. A set is emitted only when at
    least two distinct paths exist; groups that fall short are dropped
    without being reported.

    Args:
        groups: Mapping of game name to ROM filenames (from group_by_name)
        rom_dir: Directory holding the ROM files

    Returns:
        List of DuplicateSet objects in group order
    """
    handler = PathHandler(rom_dir)
    duplicate_sets = []

    for name, filenames in groups.items():
        if len(filenames) <= 1:
            continue

        existing = []
        for filename in filenames:
            rom_path = handler.resolve_rom_path(filename)
            if rom_path not in existing and rom_path.exists():
                existing.append(rom_path)

        if len(existing) > 1:
            duplicate_sets.append(DuplicateSet(name=name, paths=existing))
        else:
            logger.debug(
                f"Skipping '{name}': {len(filenames)} catalog entries, "
                f"{len(existing)} present in {rom_dir}"
            )

    return duplicate_sets
