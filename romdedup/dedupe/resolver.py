"""
Interactive duplicate resolution.

Asks the operator which copy of each duplicated game to keep and moves the
other copies into the quarantine directory.
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from romdedup.dedupe.existence import DuplicateSet
from romdedup.ui.prompts import PromptSystem

logger = logging.getLogger(__name__)


@dataclass
class MoveFailure:
    """A ROM that could not be moved into the quarantine directory."""
    source: Path
    destination: Path
    error: str


@dataclass
class ResolutionResult:
    """Outcome of resolving one duplicate set."""
    name: str
    choice: int
    kept: Optional[Path] = None
    moved: List[Path] = field(default_factory=list)
    failed: List[MoveFailure] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True when every non-kept file was moved."""
        return not self.failed


class DuplicateResolver:
    """
    Resolves duplicate sets one at a time.

    A move that fails is logged and recorded on the set's result; the
    remaining files and sets are still processed.
    """

    def __init__(
        self,
        dup_dir: Path,
        prompts: Optional[PromptSystem] = None,
        dry_run: bool = False
    ):
        """
        Initialize resolver.

        Args:
            dup_dir: Quarantine directory receiving the non-kept files
            prompts: Prompt system used to ask the operator
            dry_run: Report moves without touching the filesystem
        """
        self.dup_dir = Path(dup_dir)
        self.prompts = prompts or PromptSystem()
        self.dry_run = dry_run

    def resolve_all(self, duplicate_sets: List[DuplicateSet]) -> List[ResolutionResult]:
        """
        Resolve every duplicate set in order.

        Args:
            duplicate_sets: Sets from find_duplicate_sets()

        Returns:
            One ResolutionResult per set
        """
        return [self.resolve_set(dup_set) for dup_set in duplicate_sets]

    def resolve_set(self, dup_set: DuplicateSet) -> ResolutionResult:
        """
        Prompt for the file to keep and move the others.

        Args:
            dup_set: Duplicate set to resolve

        Returns:
            ResolutionResult describing kept, moved and failed files
        """
        choice = self.prompts.choose_file_to_keep(dup_set.name, dup_set.paths)
        result = ResolutionResult(name=dup_set.name, choice=choice)

        for i, path in enumerate(dup_set.paths, 1):
            if i == choice:
                result.kept = path
                continue

            destination = self.dup_dir / path.name

            if self.dry_run:
                print(f"  Would move: {path} -> {destination}")
                result.moved.append(path)
                continue

            try:
                shutil.move(str(path), str(destination))
            except OSError as e:
                logger.error(f"Failed to move {path} to {destination}: {e}")
                result.failed.append(MoveFailure(path, destination, str(e)))
                continue

            logger.info(f"Moved {path} -> {destination}")
            result.moved.append(path)

        if not result.success:
            logger.warning(
                f"'{dup_set.name}' partially resolved: "
                f"{len(result.failed)} file(s) left in place"
            )

        return result
