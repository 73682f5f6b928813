"""
Report data model

This package holds the building blocks of a report below the top-level
VisionReport container.

Features:
    - Status, ReportType and MediaType enums
    - TestCase with per-test log ID counter
    - LogEntry steps with optional media
    - Media ingestion from file path, URL or data URI

Usage:
    from visionreport.model import Media, Status, TestCase

    test = TestCase("Checkout")
    test.add_log(Status.PASS, "Pay", media=Media.from_path("shots/pay.png"))
"""

# Models
from .models import (
    MediaType,
    ReportType,
    Status,
    clean_tags,
    has_text,
)

# Entities
from .media import Media
from .log_entry import LogEntry
from .test_case import TestCase

__all__ = [
    # Models
    "MediaType",
    "ReportType",
    "Status",
    "clean_tags",
    "has_text",
    # Entities
    "Media",
    "LogEntry",
    "TestCase",
]
