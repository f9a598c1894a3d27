import builtins
from pathlib import Path
from unittest.mock import patch

import pytest

from romdedup.ui import prompts


@pytest.mark.unit
@pytest.mark.parametrize("response, expected", [
    ("2", 2),
    (" 3 \n", 3),
    ("", 1),
    ("   ", 1),
    ("two", 1),
    ("1.5", 1),
    (None, 1),
])
def test_parse_choice(response, expected):
    assert prompts.parse_choice(response, 3) == expected


@pytest.mark.unit
@pytest.mark.parametrize("response", ["0", "4", "-2", "99"])
def test_parse_choice_out_of_range_keeps_first(response):
    assert prompts.parse_choice(response, 3) == 1


@pytest.mark.unit
def test_choose_file_to_keep_lists_paths_and_prompts(capsys):
    paths = [Path("roms/tetris.zip"), Path("roms/tetris (alt).zip")]

    with patch.object(builtins, "input", return_value="2") as mock_input:
        choice = prompts.PromptSystem().choose_file_to_keep("Tetris", paths)

    assert choice == 2
    mock_input.assert_called_once_with(prompts.KEEP_PROMPT)
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Duplicate game: Tetris",
        f"  1: {paths[0]}",
        f"  2: {paths[1]}",
    ]


@pytest.mark.unit
def test_choose_file_to_keep_end_of_input_defaults(capsys):
    with patch.object(builtins, "input", side_effect=EOFError):
        choice = prompts.PromptSystem().choose_file_to_keep("Tetris", [Path("a"), Path("b")])

    assert choice == 1


@pytest.mark.unit
def test_keep_prompt_text():
    assert prompts.KEEP_PROMPT == "Enter the number of the file to keep (default is 1): "
