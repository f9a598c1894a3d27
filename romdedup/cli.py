"""Command-line interface for romdedup."""

import sys
import logging
import argparse
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

from romdedup import __version__
from romdedup.config.loader import load_config, ConfigError
from romdedup.config.validator import validate_config, ValidationError
from romdedup.config.settings import DedupeSettings
from romdedup.gamelist.parser import CatalogError
from romdedup.gamelist.path_handler import MalformedPathError
from romdedup.workflow.orchestrator import DedupeOrchestrator
from romdedup.ui.summary import print_summary


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog='romdedup',
        description='Looks in a specified directory and compares to gamelist.xml to find duplicate roms',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Compare ./gamelist.xml against ROMs in the current directory
  romdedup --dupdir ../duplicates

  # Explicit gamelist and ROM directory
  romdedup -g ~/ES-DE/gamelists/snes/gamelist.xml -r ~/ROMs/snes -d ~/ROMs/snes-dupes

  # Walk through the prompts without moving anything
  romdedup -d ../duplicates --dry-run --summary

  # Use settings from a config file
  romdedup --config romdedup.yaml
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '-g', '--gamelist',
        metavar='GAMELIST',
        help='Path to the gamelist.xml file (default: gamelist.xml)'
    )

    parser.add_argument(
        '-r', '--romdir',
        metavar='ROMDIR',
        help='Directory where the ROM files are located (default: .)'
    )

    parser.add_argument(
        '-d', '--dupdir',
        metavar='DUPDIR',
        help='Directory to move duplicate files to (required)'
    )

    parser.add_argument(
        '-c', '--config',
        type=Path,
        metavar='PATH',
        help='Optional YAML config file; command-line flags override it'
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Prompt as usual but only report the moves that would happen'
    )

    parser.add_argument(
        '--summary',
        action='store_true',
        help='Print a summary table after all duplicates are resolved'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        type=str.upper,
        help='Console log level. Overrides config.'
    )

    return parser


def _setup_logging(config: dict) -> None:
    """
    Setup logging configuration from config.

    Args:
        config: Configuration dictionary
    """
    logging_config = config.get('logging', {})

    # Get log level
    level_str = (logging_config.get('level') or 'WARNING').upper()
    level = getattr(logging, level_str, logging.WARNING)

    handlers = []

    if logging_config.get('console', True):
        # stderr keeps stdout free for the prompts
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        formatter = logging.Formatter('%(levelname)s: %(message)s')
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # File handler (if configured)
    log_file = logging_config.get('file')
    if log_file:
        try:
            log_path = Path(log_file).expanduser()
            # Create parent directory if it doesn't exist
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path)
            file_handler.setLevel(level)
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
        except OSError as e:
            print(f"Error: Could not create log file '{log_file}': {e}", file=sys.stderr)
            sys.exit(1)

    if not handlers:
        handlers.append(logging.NullHandler())

    # Configure root logger
    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True  # Override any existing configuration
    )


def _apply_overrides(config: dict, args: argparse.Namespace) -> None:
    """Apply command-line flags on top of the loaded configuration."""
    paths = config.setdefault('paths', {})
    if args.gamelist is not None:
        paths['gamelist'] = args.gamelist
    if args.romdir is not None:
        paths['romdir'] = args.romdir
    if args.dupdir is not None:
        paths['dupdir'] = args.dupdir

    if args.dry_run:
        config.setdefault('runtime', {})['dry_run'] = True

    if args.summary:
        config.setdefault('output', {})['summary'] = True

    if args.log_level:
        config.setdefault('logging', {})['level'] = args.log_level


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for romdedup CLI.

    Args:
        argv: Command-line arguments (default: sys.argv)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    _apply_overrides(config, args)

    # Same outcome as a required argparse flag when no config supplies it
    if not config['paths'].get('dupdir'):
        parser.error("the following arguments are required: -d/--dupdir")

    try:
        validate_config(config)
    except ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    _setup_logging(config)
    settings = DedupeSettings.from_config(config)

    print(f"Gamelist path: {settings.gamelist}")
    print(f"ROM directory: {settings.rom_dir}")
    print(f"Duplicate directory: {settings.dup_dir}")

    try:
        return run_dedupe(settings)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130


def run_dedupe(settings: DedupeSettings) -> int:
    """
    Run the deduplication workflow.

    Args:
        settings: Immutable run settings

    Returns:
        Exit code
    """
    orchestrator = DedupeOrchestrator(settings)

    try:
        report = orchestrator.run()
    except CatalogError as e:
        # Nothing was touched; report and finish normally
        print(f"Error parsing gamelist: {e}", file=sys.stderr)
        return 0
    except MalformedPathError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if settings.summary:
        print_summary(report.results, dry_run=settings.dry_run)

    if report.failed_count:
        print(
            f"Error: {report.failed_count} file(s) could not be moved to {settings.dup_dir}",
            file=sys.stderr
        )
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
