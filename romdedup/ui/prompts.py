"""
Interactive prompt system for duplicate resolution

Displays a duplicate set and asks the operator which file to keep.
"""

import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

KEEP_PROMPT = "Enter the number of the file to keep (default is 1): "
DEFAULT_CHOICE = 1


def parse_choice(response: Optional[str], count: int) -> int:
    """
    Turn an operator response into a 1-based index.

    Empty or non-numeric input silently selects the default. A number
    outside 1..count also selects the default so a typo never leaves the
    set without a kept file.

    Args:
        response: Raw line typed by the operator (None on end of input)
        count: Number of files listed

    Returns:
        1-based index of the file to keep
    """
    if response is None:
        return DEFAULT_CHOICE

    response = response.strip()
    if not response:
        return DEFAULT_CHOICE

    try:
        choice = int(response)
    except ValueError:
        logger.debug(f"Non-numeric choice {response!r}, keeping entry {DEFAULT_CHOICE}")
        return DEFAULT_CHOICE

    if not 1 <= choice <= count:
        logger.warning(
            f"Choice {choice} is out of range 1-{count}, keeping entry {DEFAULT_CHOICE}"
        )
        return DEFAULT_CHOICE

    return choice


class PromptSystem:
    """
    Console prompts for picking the copy of a game to keep

    Example:
        prompts = PromptSystem()
        keep = prompts.choose_file_to_keep("Tetris", [Path("roms/a.zip"), Path("roms/b.zip")])
    """

    def show_duplicate_set(self, name: str, paths: List[Path]) -> None:
        """Print the game name and a 1-based list of its files."""
        print(f"Duplicate game: {name}")
        for i, path in enumerate(paths, 1):
            print(f"  {i}: {path}")

    def choose_file_to_keep(self, name: str, paths: List[Path]) -> int:
        """
        Show a duplicate set and read the operator's choice

        Args:
            name: Canonical game name
            paths: Existing ROM paths for the game

        Returns:
            1-based index of the file to keep
        """
        self.show_duplicate_set(name, paths)

        try:
            response = input(KEEP_PROMPT)
        except EOFError:
            # Closed stdin reads as an empty line
            logger.debug("End of input reached, using default choice")
            response = None

        choice = parse_choice(response, len(paths))
        logger.debug(f"Keeping entry {choice} for {name}")
        return choice
