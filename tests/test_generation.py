"""Tests for report generators."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from visionreport import (
    ConsoleReportGenerator,
    GenerationError,
    JSONReportGenerator,
    Media,
    OutputConfig,
    OutputFormat,
    ReportGenerator,
    ReportType,
    Status,
    VisionReport,
    create_generator,
)


@pytest.fixture
def filled_report(report: VisionReport) -> VisionReport:
    report.set_project_name("Shop").add_business_analyst("Ann")
    login = report.add_test("Login", tags="Smoke")
    login.add_log(Status.INFO, "Open page")
    login.add_log(Status.PASS, "Submit", message="Dashboard shown",
                  media=Media.from_url("https://a.b/c.png"))
    login.set_status(Status.PASS)
    report.add_test("Checkout", test_id="[co-1]").set_status(Status.FAIL)
    return report


class TestJSONReportGenerator:
    """Tests for JSONReportGenerator."""

    def test_writes_report_json(self, filled_report: VisionReport, tmp_path: Path):
        target = tmp_path / "nested" / "dir" / "run.json"

        path = JSONReportGenerator(target).generate(filled_report)

        assert path == target
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data == json.loads(filled_report.to_json())
        assert data["test_cases"][0]["logs"][1]["media"]["data"] == "https://a.b/c.png"

    def test_write_failure_raises_generation_error(self, filled_report: VisionReport, tmp_path: Path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")

        with pytest.raises(GenerationError) as exc_info:
            JSONReportGenerator(blocker / "run.json").generate(filled_report)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_does_not_modify_statuses(self, filled_report: VisionReport, tmp_path: Path):
        JSONReportGenerator(tmp_path / "run.json").generate(filled_report)
        assert [t.status for t in filled_report.test_cases] == [Status.PASS, Status.FAIL]
        assert filled_report.test_cases[0].duration is None


class TestConsoleReportGenerator:
    """Tests for ConsoleReportGenerator."""

    def test_prints_summary(self, filled_report: VisionReport):
        buffer = io.StringIO()
        console = Console(file=buffer, width=120, color_system=None)

        result = ConsoleReportGenerator(console=console).generate(filled_report)

        output = buffer.getvalue()
        assert result is None
        assert "UI Test Automation Report" in output
        assert "Shop" in output
        assert "TC001" in output
        assert "[co-1]" in output
        assert "Log #2" in output
        assert "Dashboard shown" in output
        assert "link media" in output
        assert "Tests: 2 total, 1 pass, 1 fail, 0 skip, 0 info, 0 warning" in output

    def test_export_to_text_file(self, filled_report: VisionReport, tmp_path: Path):
        target = tmp_path / "out" / "summary.txt"
        console = Console(file=io.StringIO(), width=120)

        path = ConsoleReportGenerator(console=console, export_path=target).generate(filled_report)

        assert path == target
        assert "Checkout" in target.read_text()

    def test_plain_string_statuses_render(self, report: VisionReport):
        report.add_test("Known").set_status("pass")
        report.add_test("Custom").set_status("blocked")
        buffer = io.StringIO()

        ConsoleReportGenerator(console=Console(file=buffer, width=120)).generate(report)

        output = buffer.getvalue()
        assert "PASS" in output
        assert "BLOCKED" in output
        assert "Tests: 2 total, 1 pass" in output

    def test_empty_report(self, report: VisionReport):
        buffer = io.StringIO()
        ConsoleReportGenerator(console=Console(file=buffer, width=120)).generate(report)
        assert "Tests: 0 total" in buffer.getvalue()


class TestCreateGenerator:
    """Tests for the generator factory."""

    def test_json_with_filename(self, tmp_path: Path):
        generator = create_generator(
            OutputConfig(format=OutputFormat.JSON, directory=str(tmp_path), filename="r.json"),
            ReportType.UI_TESTING,
        )
        assert isinstance(generator, JSONReportGenerator)
        assert generator.output_path == tmp_path / "r.json"

    def test_json_default_filename(self, tmp_path: Path):
        generator = create_generator(OutputConfig(directory=str(tmp_path)), ReportType.API_TESTING)
        assert generator.output_path.parent == tmp_path
        assert generator.output_path.name.startswith("api_testing-")
        assert generator.output_path.suffix == ".json"

    def test_console(self):
        generator = create_generator(OutputConfig(format=OutputFormat.CONSOLE), ReportType.GENERIC)
        assert isinstance(generator, ConsoleReportGenerator)
        assert generator.export_path is None

    def test_unsupported_format(self):
        with pytest.raises(ValueError):
            create_generator(OutputConfig(format="pdf"), ReportType.GENERIC)

    def test_generators_share_interface(self):
        assert issubclass(JSONReportGenerator, ReportGenerator)
        assert issubclass(ConsoleReportGenerator, ReportGenerator)
