"""
Config loader for report configuration files.

This module provides the public API for loading and validating
report configs from disk or YAML strings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from .models import ReportConfig
from .parser import ConfigParser
from .validation import ConfigValidator, ValidationResult


def load_report_config(
    path: str | Path,
    environ: Mapping[str, str] | None = None,
) -> tuple[ReportConfig | None, ValidationResult]:
    """
    Load and validate a report config from a YAML file.

    Args:
        path: Path to the YAML config file
        environ: Variables for {{env.NAME}} placeholders (defaults to os.environ)

    Returns:
        Tuple of (ReportConfig or None, ValidationResult)
        If validation fails, ReportConfig will be None.

    Example:
        config, result = load_report_config("visionreport.yaml")
        if not result.is_valid:
            print(result)
            sys.exit(1)
        report = VisionReport.from_config(config)
    """
    path = Path(path)

    # Check file exists
    if not path.exists():
        result = ValidationResult()
        result.add_error(
            str(path),
            "File not found",
            suggestion="Check the file path is correct"
        )
        return None, result

    # Parse YAML
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error(
            str(path),
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)"
        )
        return None, result

    return _validate_and_parse(str(path), data, environ)


def validate_report_config_yaml(
    yaml_string: str,
    environ: Mapping[str, str] | None = None,
) -> tuple[ReportConfig | None, ValidationResult]:
    """
    Validate a report config from a YAML string (useful for testing).

    Args:
        yaml_string: YAML content as a string
        environ: Variables for {{env.NAME}} placeholders (defaults to os.environ)

    Returns:
        Tuple of (ReportConfig or None, ValidationResult)
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error("yaml", f"Invalid YAML syntax: {e}")
        return None, result

    return _validate_and_parse("yaml", data, environ)


def _validate_and_parse(
    source: str,
    data: Any,
    environ: Mapping[str, str] | None,
) -> tuple[ReportConfig | None, ValidationResult]:
    if not isinstance(data, dict):
        result = ValidationResult()
        result.add_error(
            source,
            "Config must be a YAML object (not a list or scalar)",
            value=type(data).__name__
        )
        return None, result

    validator = ConfigValidator(data)
    result = validator.validate()

    if not result.is_valid:
        return None, result

    parser = ConfigParser(data, environ)
    return parser.parse(), result
