import pytest

from romdedup.dedupe.grouper import group_by_name
from romdedup.gamelist.catalog_entry import CatalogRecord
from romdedup.gamelist.path_handler import MalformedPathError


def _records(*pairs):
    return [CatalogRecord(path=path, name=name) for path, name in pairs]


@pytest.mark.unit
def test_group_by_name_keeps_first_seen_order():
    records = _records(
        ("./a/tetris.zip", "Tetris"),
        ("./pacman.zip", "Pac-Man"),
        ("./b/tetris (alt).zip", "Tetris"),
    )

    groups = group_by_name(records)

    assert groups == {
        "Tetris": ["tetris.zip", "tetris (alt).zip"],
        "Pac-Man": ["pacman.zip"],
    }


@pytest.mark.unit
def test_group_by_name_does_not_deduplicate_filenames():
    records = _records(
        ("./a/tetris.zip", "Tetris"),
        ("./b/tetris.zip", "Tetris"),
    )

    assert group_by_name(records) == {"Tetris": ["tetris.zip", "tetris.zip"]}


@pytest.mark.unit
def test_group_by_name_is_deterministic():
    records = _records(
        ("./c.zip", "Gamma"),
        ("./a.zip", "Alpha"),
        ("./b.zip", "Alpha"),
    )

    first = group_by_name(records)
    second = group_by_name(records)

    assert first == second
    assert list(first.items()) == list(second.items())


@pytest.mark.unit
def test_group_by_name_empty():
    assert group_by_name([]) == {}


@pytest.mark.unit
def test_group_by_name_aborts_on_malformed_path():
    records = _records(
        ("./ok.zip", "Ok"),
        ("", "Broken"),
        ("./later.zip", "Later"),
    )

    with pytest.raises(MalformedPathError, match="Broken"):
        group_by_name(records)
