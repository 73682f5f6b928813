"""
Public report-building API.

Usage:
    from visionreport.api import VisionReport
    from visionreport.model import ReportType, Status

    report = VisionReport(ReportType.API_TESTING).set_environment("staging")
    report.add_test("Create order").set_status(Status.PASS)
"""

from .report import NOT_AVAILABLE, VisionReport

__all__ = [
    "NOT_AVAILABLE",
    "VisionReport",
]
