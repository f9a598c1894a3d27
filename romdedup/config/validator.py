"""Configuration validation."""

from typing import Dict, Any, List

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ValidationError(Exception):
    """Configuration validation errors."""
    pass


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration structure and values.

    Args:
        config: Configuration dictionary from loader (with CLI overrides)

    Raises:
        ValidationError: If configuration is invalid
    """
    errors = []

    errors.extend(_validate_paths(config.get('paths', {})))
    errors.extend(_validate_flags('runtime', config.get('runtime', {}), ['dry_run']))
    errors.extend(_validate_flags('output', config.get('output', {}), ['summary']))
    errors.extend(_validate_logging(config.get('logging', {})))

    if errors:
        raise ValidationError(
            "Configuration validation failed:\n  - " + "\n  - ".join(errors)
        )


def _validate_paths(section: Dict[str, Any]) -> List[str]:
    """Validate paths section."""
    if not isinstance(section, dict):
        return ["paths must be a dictionary"]

    errors = []

    for key in ('gamelist', 'romdir'):
        value = section.get(key)
        if not isinstance(value, str) or not value:
            errors.append(f"paths.{key} must be a non-empty string")

    dupdir = section.get('dupdir')
    if not dupdir:
        errors.append("paths.dupdir is required")
    elif not isinstance(dupdir, str):
        errors.append("paths.dupdir must be a string")

    return errors


def _validate_flags(section_name: str, section: Dict[str, Any], keys: List[str]) -> List[str]:
    """Validate boolean switches in a section."""
    if not isinstance(section, dict):
        return [f"{section_name} must be a dictionary"]

    errors = []
    for key in keys:
        if key in section and not isinstance(section[key], bool):
            errors.append(f"{section_name}.{key} must be true or false")
    return errors


def _validate_logging(section: Dict[str, Any]) -> List[str]:
    """Validate logging section."""
    if not isinstance(section, dict):
        return ["logging must be a dictionary"]

    errors = []

    level = section.get('level', 'WARNING')
    if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
        errors.append(
            f"logging.level must be one of: {', '.join(VALID_LOG_LEVELS)}"
        )

    if 'console' in section and not isinstance(section['console'], bool):
        errors.append("logging.console must be true or false")

    log_file = section.get('file')
    if log_file is not None and not isinstance(log_file, str):
        errors.append("logging.file must be a string")

    return errors
