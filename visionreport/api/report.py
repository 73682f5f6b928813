"""
The VisionReport container.

VisionReport is the entry point of the library: a fluent builder for
report-wide metadata and the owner of the ordered test case list and the
test ID counter. The finished object graph is handed to a ReportGenerator
(see visionreport.generation), which decides how it is rendered.

Not thread-safe: counters and collections are unguarded, so one caller
thread builds a report at a time.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from ..errors import InvalidArgumentError
from ..model import ReportType, TestCase, has_text

if TYPE_CHECKING:
    from ..config import ReportConfig

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


class VisionReport:
    """
    Top-level container for one test run.

    Example:
        report = VisionReport(ReportType.UI_TESTING).set_project_name("Shop")

        test = report.add_test("Successful Login", tags="Smoke, Regression")
        test.add_log(Status.PASS, "Logged in")
        test.set_status(Status.PASS)

        JSONReportGenerator("reports/run.json").generate(report)
    """

    def __init__(self, report_type: ReportType | str):
        if report_type is None:
            raise InvalidArgumentError("ReportType cannot be None.")
        try:
            self._report_type = ReportType(report_type)
        except ValueError:
            raise InvalidArgumentError(f"Unknown report type: {report_type!r}") from None

        self._title = self._report_type.default_title
        self._project_name = NOT_AVAILABLE
        self._application_name = NOT_AVAILABLE
        self._environment = NOT_AVAILABLE
        self._domain = NOT_AVAILABLE
        self._tester_name = NOT_AVAILABLE
        self._business_analysts: set[str] = set()

        self._test_cases: list[TestCase] = []
        self._test_counter = 0

    @classmethod
    def from_config(cls, config: ReportConfig) -> VisionReport:
        """
        Create a report from a loaded ReportConfig.

        Metadata goes through the normal setters, so null or blank config
        values leave the defaults in place.
        """
        report = cls(config.report_type)
        (
            report.set_title(config.title)
            .set_project_name(config.project_name)
            .set_application_name(config.application_name)
            .set_environment(config.environment)
            .set_domain(config.domain)
            .set_tester_name(config.tester_name)
        )
        for name in config.business_analysts:
            report.add_business_analyst(name)
        return report

    def _next_test_id(self) -> str:
        self._test_counter += 1
        return f"TC{self._test_counter:03d}"

    # ─────────────────────────────────────────────────────────────────────
    # Test case creation
    # ─────────────────────────────────────────────────────────────────────

    def add_test(
        self,
        name: str,
        test_id: str | None = None,
        description: str | None = None,
        tags: str | None = None,
    ) -> TestCase:
        """
        Create a test case, append it to the report and return it.

        Args:
            name: Name of the test case
            test_id: Custom ID; "TC<nnn>" from the report counter if omitted
            description: Optional description (blank is ignored)
            tags: Optional comma-separated tags, e.g. "Smoke, Regression"

        Returns:
            The new TestCase, for further configuration
        """
        test_case = TestCase(name)
        if test_id is None:
            test_id = self._next_test_id()
            logger.debug(f"Minted test ID {test_id} for {name!r}")
        test_case.set_test_id(test_id)
        test_case.set_description(description)
        if tags is not None:
            test_case.set_tags(*tags.split(","))
        self._test_cases.append(test_case)
        return test_case

    def add_test_with_tags(self, name: str, tags: str | None) -> TestCase:
        """Create a test case with an auto-generated ID and comma-separated tags."""
        return self.add_test(name, tags=tags)

    # ─────────────────────────────────────────────────────────────────────
    # Fluent configuration (None or blank input is ignored)
    # ─────────────────────────────────────────────────────────────────────

    def set_title(self, title: str | None) -> VisionReport:
        if has_text(title):
            self._title = title
        return self

    def set_project_name(self, project_name: str | None) -> VisionReport:
        if has_text(project_name):
            self._project_name = project_name
        return self

    def set_application_name(self, application_name: str | None) -> VisionReport:
        if has_text(application_name):
            self._application_name = application_name
        return self

    def set_environment(self, environment: str | None) -> VisionReport:
        if has_text(environment):
            self._environment = environment
        return self

    def set_domain(self, domain: str | None) -> VisionReport:
        if has_text(domain):
            self._domain = domain
        return self

    def set_tester_name(self, tester_name: str | None) -> VisionReport:
        if has_text(tester_name):
            self._tester_name = tester_name
        return self

    def add_business_analyst(self, name: str | None) -> VisionReport:
        if has_text(name):
            self._business_analysts.add(name)
        return self

    # ─────────────────────────────────────────────────────────────────────
    # Accessors
    # ─────────────────────────────────────────────────────────────────────

    @property
    def report_type(self) -> ReportType:
        return self._report_type

    @property
    def title(self) -> str:
        return self._title

    @property
    def project_name(self) -> str:
        return self._project_name

    @property
    def application_name(self) -> str:
        return self._application_name

    @property
    def environment(self) -> str:
        return self._environment

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def tester_name(self) -> str:
        return self._tester_name

    @property
    def business_analysts(self) -> set[str]:
        """A copy of the analyst set."""
        return set(self._business_analysts)

    @property
    def test_cases(self) -> list[TestCase]:
        """A copy of the test case list, in creation order."""
        return list(self._test_cases)

    def get_test(self, test_id: str) -> TestCase | None:
        """Get the first test case with the given ID."""
        for test_case in self._test_cases:
            if test_case.test_id == test_id:
                return test_case
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "report_type": self._report_type.value,
            "title": self._title,
            "project_name": self._project_name,
            "application_name": self._application_name,
            "environment": self._environment,
            "domain": self._domain,
            "tester_name": self._tester_name,
            "business_analysts": sorted(self._business_analysts),
            "test_cases": [test_case.to_dict() for test_case in self._test_cases],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def __repr__(self) -> str:
        return (
            f"VisionReport(report_type={self._report_type!r}, "
            f"title={self._title!r}, tests={len(self._test_cases)})"
        )
