"""
VisionReport - Programmatic Test Report Builder

This package lets test code build structured, embeddable evidence (statuses,
messages, screenshots) and hand it to a report generator.

Subpackages:
    - api: VisionReport, the top-level report container
    - model: TestCase, LogEntry, Media and the status/type enums
    - config: YAML report configuration files
    - generation: JSON and console report generators

Usage:
    from visionreport import VisionReport, ReportType, Status, Media, JSONReportGenerator

    report = VisionReport(ReportType.UI_TESTING).set_project_name("Shop")

    test = report.add_test("Successful Login", tags="Smoke, Regression")
    test.add_log(Status.INFO, "Open login page")
    test.add_log(Status.PASS, "Submit", message="Dashboard shown",
                 media=Media.from_path("shots/dashboard.png"))
    test.set_status(Status.PASS)

    JSONReportGenerator("reports/run.json").generate(report)
"""

__version__ = "0.1.0"
__author__ = "Vision-Report Team"

# Errors
from .errors import (
    GenerationError,
    InvalidArgumentError,
    InvalidInputError,
    MediaError,
    MediaNotFoundError,
    MediaReadError,
    MediaUnreadableError,
    VisionReportError,
)

# Re-export model for convenience
from .model import (
    LogEntry,
    Media,
    MediaType,
    ReportType,
    Status,
    TestCase,
)

# Re-export api for convenience
from .api import VisionReport

# Re-export config for convenience
from .config import (
    OutputConfig,
    OutputFormat,
    ReportConfig,
    ValidationResult,
    load_report_config,
    validate_report_config_yaml,
)

# Re-export generation for convenience
from .generation import (
    ConsoleReportGenerator,
    JSONReportGenerator,
    ReportGenerator,
    create_generator,
)

__all__ = [
    # Package info
    "__version__",
    "__author__",
    # Errors
    "GenerationError",
    "InvalidArgumentError",
    "InvalidInputError",
    "MediaError",
    "MediaNotFoundError",
    "MediaReadError",
    "MediaUnreadableError",
    "VisionReportError",
    # Model
    "LogEntry",
    "Media",
    "MediaType",
    "ReportType",
    "Status",
    "TestCase",
    # API
    "VisionReport",
    # Config
    "OutputConfig",
    "OutputFormat",
    "ReportConfig",
    "ValidationResult",
    "load_report_config",
    "validate_report_config_yaml",
    # Generation
    "ConsoleReportGenerator",
    "JSONReportGenerator",
    "ReportGenerator",
    "create_generator",
]
