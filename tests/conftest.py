"""
Shared pytest fixtures and utilities for the romdedup test suite.
"""

from pathlib import Path
from typing import Callable, Iterable, Tuple

import pytest


@pytest.fixture
def rom_dir(tmp_path: Path) -> Path:
    """Empty ROM directory inside the temp workspace."""
    path = tmp_path / "roms"
    path.mkdir()
    return path


@pytest.fixture
def dup_dir(tmp_path: Path) -> Path:
    """Empty quarantine directory inside the temp workspace."""
    path = tmp_path / "dupes"
    path.mkdir()
    return path


@pytest.fixture
def make_gamelist(tmp_path: Path) -> Callable[[Iterable[Tuple[str, str]]], Path]:
    """
    Write an ES-DE style gamelist.xml from (path, name) pairs.

    Usage:
        gamelist = make_gamelist([("./a/tetris.zip", "Tetris")])
    """

    def _builder(entries: Iterable[Tuple[str, str]], filename: str = "gamelist.xml") -> Path:
        games = "\n".join(
            f"  <game>\n    <path>{path}</path>\n    <name>{name}</name>\n  </game>"
            for path, name in entries
        )
        gamelist = tmp_path / filename
        gamelist.write_text(
            f'<?xml version="1.0"?>\n<gameList>\n{games}\n</gameList>\n',
            encoding="utf-8",
        )
        return gamelist

    return _builder


@pytest.fixture
def make_roms(rom_dir: Path) -> Callable[..., list]:
    """
    Create placeholder ROM files in the ROM directory.

    Usage:
        paths = make_roms("tetris.zip", "tetris (alt).zip")
    """

    def _builder(*filenames: str) -> list:
        created = []
        for filename in filenames:
            path = rom_dir / filename
            path.write_bytes(filename.encode("utf-8"))
            created.append(path)
        return created

    return _builder
