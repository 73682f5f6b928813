"""
Report generation

Generators are the rendering side of the library: they take a finished
VisionReport and turn it into an artifact.

Features:
    - ReportGenerator interface
    - JSON file output
    - Rich console summary, optionally saved as text
    - Factory driven by the output section of a report config

Usage:
    from visionreport.generation import JSONReportGenerator

    path = JSONReportGenerator("reports/run.json").generate(report)
"""

# Base
from .base import ReportGenerator

# Implementations
from .console import ConsoleReportGenerator
from .json_generator import JSONReportGenerator

# Factory
from .factory import create_generator

__all__ = [
    # Base
    "ReportGenerator",
    # Implementations
    "ConsoleReportGenerator",
    "JSONReportGenerator",
    # Factory
    "create_generator",
]
