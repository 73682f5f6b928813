"""
Report configuration files

This package loads report metadata and output settings from YAML.

Features:
    - Schema validation with path-qualified, suggestion-bearing errors
    - {{env.NAME}} placeholders resolved from the environment
    - Typed ReportConfig / OutputConfig results

Usage:
    from visionreport.config import load_report_config

    config, result = load_report_config("visionreport.yaml")
    if not result.is_valid:
        print(result)
"""

# Loader functions
from .loader import load_report_config, validate_report_config_yaml

# Models
from .models import OutputConfig, OutputFormat, ReportConfig

# Parsing & validation
from .parser import ConfigParser
from .validation import ConfigValidator, ValidationError, ValidationResult

__all__ = [
    # Loader functions
    "load_report_config",
    "validate_report_config_yaml",
    # Models
    "OutputConfig",
    "OutputFormat",
    "ReportConfig",
    # Parsing & validation
    "ConfigParser",
    "ConfigValidator",
    "ValidationError",
    "ValidationResult",
]
