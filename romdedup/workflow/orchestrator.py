"""
Workflow orchestrator for romdedup runs.

Coordinates the complete deduplication workflow:
1. Load gamelist
2. Group entries by game name
3. Keep groups with two or more ROMs on disk
4. Resolve each duplicate set interactively
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config.settings import DedupeSettings
from ..gamelist.parser import GamelistParser
from ..dedupe.grouper import group_by_name
from ..dedupe.existence import find_duplicate_sets
from ..dedupe.resolver import DuplicateResolver, ResolutionResult
from ..ui.prompts import PromptSystem

logger = logging.getLogger(__name__)


@dataclass
class DedupeReport:
    """Result of a complete deduplication run."""
    total_records: int = 0
    distinct_names: int = 0
    duplicate_sets: int = 0
    results: List[ResolutionResult] = field(default_factory=list)

    @property
    def moved_count(self) -> int:
        return sum(len(r.moved) for r in self.results)

    @property
    def failed_count(self) -> int:
        return sum(len(r.failed) for r in self.results)


class DedupeOrchestrator:
    """
    Runs Loader -> Grouper -> Existence Filter -> Resolver once.

    Gamelist errors (CatalogError) and malformed paths (MalformedPathError)
    propagate to the caller; move failures are collected on the report.
    """

    def __init__(self, settings: DedupeSettings, prompts: Optional[PromptSystem] = None):
        """
        Initialize orchestrator.

        Args:
            settings: Immutable run settings
            prompts: Prompt system (defaults to console prompts)
        """
        self.settings = settings
        self.parser = GamelistParser()
        self.resolver = DuplicateResolver(
            settings.dup_dir,
            prompts=prompts,
            dry_run=settings.dry_run,
        )

    def run(self) -> DedupeReport:
        """
        Execute the workflow.

        Returns:
            DedupeReport with per-set results

        Raises:
            CatalogError: If the gamelist cannot be read or parsed
            MalformedPathError: If a gamelist path has no filename
        """
        report = DedupeReport()

        records = self.parser.parse_gamelist(self.settings.gamelist)
        report.total_records = len(records)
        logger.info(f"Loaded {len(records)} gamelist entries from {self.settings.gamelist}")

        groups = group_by_name(records)
        report.distinct_names = len(groups)

        duplicate_sets = find_duplicate_sets(groups, self.settings.rom_dir)
        report.duplicate_sets = len(duplicate_sets)
        logger.info(
            f"Found {len(duplicate_sets)} duplicate set(s) among "
            f"{len(groups)} distinct names"
        )

        if self.settings.dry_run:
            logger.info("Dry run: no files will be moved")

        report.results = self.resolver.resolve_all(duplicate_sets)

        verb = "would be moved" if self.settings.dry_run else "moved"
        logger.info(f"{report.moved_count} file(s) {verb} to {self.settings.dup_dir}")

        if report.failed_count:
            logger.warning(
                f"{report.failed_count} file(s) could not be moved to {self.settings.dup_dir}"
            )

        return report
