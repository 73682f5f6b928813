"""
Typed data structures for report configuration files.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..model import ReportType


class OutputFormat(str, Enum):
    """Supported report generators."""
    JSON = "json"
    CONSOLE = "console"


@dataclass
class OutputConfig:
    """Where and how the finished report is written."""
    format: OutputFormat = OutputFormat.JSON
    directory: str = "reports"
    filename: str | None = None  # generated from report type + timestamp if None


@dataclass
class ReportConfig:
    """Fully parsed and validated report configuration."""
    report_type: ReportType
    title: str | None = None
    project_name: str | None = None
    application_name: str | None = None
    environment: str | None = None
    domain: str | None = None
    tester_name: str | None = None
    business_analysts: list[str] = field(default_factory=list)
    output: OutputConfig = field(default_factory=OutputConfig)
