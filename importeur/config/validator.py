"""Configuration validation."""

import logging
from typing import Dict, Any, List

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Configuration validation errors."""
    pass


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration structure and values.

    Args:
        config: Configuration dictionary from loader

    Raises:
        ValidationError: If configuration is invalid
    """
    errors = []

    # Validate logging section
    errors.extend(_validate_logging(config.get('logging', {})))

    # Validate detection section
    errors.extend(_validate_detection(config.get('detection', {})))

    # Validate import section
    errors.extend(_validate_import(config.get('import', {})))

    if errors:
        raise ValidationError(
            "Configuration validation failed:\n  - " + "\n  - ".join(errors)
        )


def _validate_logging(section: Dict[str, Any]) -> List[str]:
    """Validate logging options section."""
    if not isinstance(section, dict):
        return ["logging must be a mapping"]

    errors = []

    # Validate level
    level = section.get('level', 'INFO')
    valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
    if level not in valid_levels:
        errors.append(f"logging.level must be one of: {', '.join(valid_levels)}")

    # Validate console flag
    console = section.get('console', True)
    if not isinstance(console, bool):
        errors.append("logging.console must be a boolean")

    # Validate optional log file
    if 'file' in section and section['file'] is not None:
        if not isinstance(section['file'], str):
            errors.append("logging.file must be a string path or null")

    return errors


def _validate_detection(section: Dict[str, Any]) -> List[str]:
    """Validate detection options section."""
    if not isinstance(section, dict):
        return ["detection must be a mapping"]

    errors = []

    report_matched = section.get('report_matched_path', False)
    if not isinstance(report_matched, bool):
        errors.append("detection.report_matched_path must be a boolean")

    return errors


def _validate_import(section: Dict[str, Any]) -> List[str]:
    """Validate import options section."""
    if not isinstance(section, dict):
        return ["import must be a mapping"]

    errors = []

    # Validate failure marker
    marker = section.get('failure_marker', 'Error')
    if not isinstance(marker, str) or not marker:
        errors.append("import.failure_marker must be a non-empty string")

    # Validate simulated delay (bool is an int subclass, reject it explicitly)
    delay = section.get('delay_seconds', 0.1)
    if isinstance(delay, bool) or not isinstance(delay, (int, float)) or delay < 0:
        errors.append("import.delay_seconds must be a non-negative number")

    # Validate concurrency
    max_concurrent = section.get('max_concurrent', 1)
    if isinstance(max_concurrent, bool) or not isinstance(max_concurrent, int):
        errors.append("import.max_concurrent must be an integer")
    elif max_concurrent < 1 or max_concurrent > 16:
        errors.append("import.max_concurrent must be between 1 and 16")

    return errors
