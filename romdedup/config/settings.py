"""Immutable run settings derived from the validated configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any

from romdedup.config.loader import get_config_value


@dataclass(frozen=True)
class DedupeSettings:
    """Settings for a single deduplication run."""
    gamelist: Path
    rom_dir: Path
    dup_dir: Path
    dry_run: bool = False
    summary: bool = False

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'DedupeSettings':
        """
        Build settings from a validated configuration dictionary.

        Args:
            config: Configuration from load_config() with CLI overrides applied

        Returns:
            DedupeSettings instance
        """
        return cls(
            gamelist=Path(get_config_value(config, 'paths.gamelist')).expanduser(),
            rom_dir=Path(get_config_value(config, 'paths.romdir')).expanduser(),
            dup_dir=Path(get_config_value(config, 'paths.dupdir')).expanduser(),
            dry_run=get_config_value(config, 'runtime.dry_run', False),
            summary=get_config_value(config, 'output.summary', False),
        )
