"""
Enums and small helpers shared by the report data model.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


# ─────────────────────────────────────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────────────────────────────────────

class Status(str, Enum):
    """Outcome of a test case or a single log step."""
    PASS = "pass"
    FAIL = "fail"
    SKIP = "skip"
    INFO = "info"
    WARNING = "warning"


class ReportType(str, Enum):
    """Category of a report. Each category carries a default title."""
    UI_TESTING = "ui_testing"
    API_TESTING = "api_testing"
    MOBILE_TESTING = "mobile_testing"
    DATABASE_TESTING = "database_testing"
    PERFORMANCE_TESTING = "performance_testing"
    E2E_TESTING = "e2e_testing"
    GENERIC = "generic"

    @property
    def default_title(self) -> str:
        return _DEFAULT_TITLES[self]


class MediaType(str, Enum):
    """How a renderer should treat Media.data."""
    URL = "url"  # absolute http(s) link
    BASE64 = "base64"  # data:<mime>;base64,<payload>


_DEFAULT_TITLES = {
    ReportType.UI_TESTING: "UI Test Automation Report",
    ReportType.API_TESTING: "API Test Automation Report",
    ReportType.MOBILE_TESTING: "Mobile Test Automation Report",
    ReportType.DATABASE_TESTING: "Database Test Report",
    ReportType.PERFORMANCE_TESTING: "Performance Test Report",
    ReportType.E2E_TESTING: "End-to-End Test Report",
    ReportType.GENERIC: "Test Execution Report",
}


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def has_text(value: Any) -> bool:
    """Return True if value is a string that is not blank after stripping."""
    return isinstance(value, str) and bool(value.strip())


def clean_tags(tags: Any) -> set[str]:
    """Strip each tag and drop None/blank ones. Duplicates collapse."""
    return {tag.strip() for tag in tags if has_text(tag)}
