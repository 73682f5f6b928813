"""
Generator factory for creating report generators from configuration.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from .base import ReportGenerator
from .console import ConsoleReportGenerator
from .json_generator import JSONReportGenerator

if TYPE_CHECKING:
    from ..config import OutputConfig
    from ..model import ReportType


def create_generator(config: OutputConfig, report_type: ReportType) -> ReportGenerator:
    """
    Create a generator instance from OutputConfig.

    Args:
        config: Output settings from a loaded report config
        report_type: Used to name the artifact when config.filename is unset

    Returns:
        JSONReportGenerator or ConsoleReportGenerator

    Raises:
        ValueError: If the output format is unsupported

    Example:
        config, _ = load_report_config("visionreport.yaml")
        report = VisionReport.from_config(config)
        ...
        create_generator(config.output, report.report_type).generate(report)
    """
    from ..config import OutputFormat

    if config.format == OutputFormat.JSON:
        filename = config.filename or _default_filename(report_type, "json")
        return JSONReportGenerator(Path(config.directory) / filename)

    elif config.format == OutputFormat.CONSOLE:
        export_path = Path(config.directory) / config.filename if config.filename else None
        return ConsoleReportGenerator(export_path=export_path)

    else:
        raise ValueError(f"Unsupported output format: {config.format}")


def _default_filename(report_type: ReportType, extension: str) -> str:
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    return f"{report_type.value}-{timestamp}.{extension}"
