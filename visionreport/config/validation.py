"""
Validation for report configuration files.

Checks raw parsed YAML against the config schema and collects every
problem with a helpful message, instead of stopping at the first one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..model import ReportType
from .models import OutputFormat


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """One problem in a report config, keyed by its dotted field path."""
    path: str  # e.g., "output.format"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        line = f"  • {self.path}: {self.message}"
        if self.value is not None:
            line += f" (got {self.value!r})"
        if self.suggestion:
            line += f"\n    hint: {self.suggestion}"
        return line


@dataclass
class ValidationResult:
    """Every problem found in one report config, in the order checked."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "Report config OK"
        count = len(self.errors)
        lines = [f"Report config has {count} problem{'' if count == 1 else 's'}:"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Config Validator
# ─────────────────────────────────────────────────────────────────────────────

class ConfigValidator:
    """Validates raw parsed YAML against the report config schema."""

    REQUIRED_TOP_LEVEL = {"report_type"}
    TEXT_FIELDS = (
        "title",
        "project_name",
        "application_name",
        "environment",
        "domain",
        "tester_name",
    )
    OPTIONAL_TOP_LEVEL = set(TEXT_FIELDS) | {"business_analysts", "output"}
    OUTPUT_KEYS = {"format", "directory", "filename"}
    VALID_REPORT_TYPES = {t.value for t in ReportType}
    VALID_FORMATS = {f.value for f in OutputFormat}

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_report_type()
        self._validate_text_fields()
        self._validate_business_analysts()
        self._validate_output()

        return self.result

    def _validate_top_level(self) -> None:
        """Check required and unknown top-level keys."""
        keys = set(self.data.keys())
        missing = self.REQUIRED_TOP_LEVEL - keys
        unknown = keys - self.REQUIRED_TOP_LEVEL - self.OPTIONAL_TOP_LEVEL

        for key in sorted(missing):
            self.result.add_error(
                key,
                f"Required field '{key}' is missing",
                suggestion=f"Add '{key}:' to your config file"
            )

        for key in sorted(unknown, key=str):
            self.result.add_error(
                str(key),
                f"Unknown top-level field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL))}"
            )

    def _validate_report_type(self) -> None:
        report_type = self.data.get("report_type")
        if not isinstance(report_type, str) or report_type not in self.VALID_REPORT_TYPES:
            self.result.add_error(
                "report_type",
                "Invalid report type",
                value=report_type,
                suggestion=f"Valid report types: {', '.join(sorted(self.VALID_REPORT_TYPES))}"
            )

    def _validate_text_fields(self) -> None:
        # null and blank strings are allowed: the report keeps its default
        for name in self.TEXT_FIELDS:
            value = self.data.get(name)
            if value is not None and not isinstance(value, str):
                self.result.add_error(
                    name,
                    "Must be a string",
                    value=value,
                    suggestion="Quote the value if it looks like a number or boolean"
                )

    def _validate_business_analysts(self) -> None:
        analysts = self.data.get("business_analysts")
        if analysts is None:
            return
        if not isinstance(analysts, list):
            self.result.add_error(
                "business_analysts",
                "Must be a list of names",
                value=analysts,
                suggestion="Use 'business_analysts: [Ann, Bob]'"
            )
            return

        for i, name in enumerate(analysts):
            if name is not None and not isinstance(name, str):
                self.result.add_error(
                    f"business_analysts[{i}]",
                    "Must be a string",
                    value=name
                )

    def _validate_output(self) -> None:
        output = self.data.get("output")
        if output is None:
            return
        if not isinstance(output, dict):
            self.result.add_error(
                "output",
                "Must be an object",
                value=output
            )
            return

        for key in sorted(set(output.keys()) - self.OUTPUT_KEYS, key=str):
            self.result.add_error(
                f"output.{key}",
                "Unknown output field",
                suggestion=f"Valid fields are: {', '.join(sorted(self.OUTPUT_KEYS))}"
            )

        fmt = output.get("format")
        if fmt is not None and (not isinstance(fmt, str) or fmt not in self.VALID_FORMATS):
            self.result.add_error(
                "output.format",
                "Invalid output format",
                value=fmt,
                suggestion=f"Valid formats: {', '.join(sorted(self.VALID_FORMATS))}"
            )

        directory = output.get("directory")
        if directory is not None:
            if not isinstance(directory, str):
                self.result.add_error(
                    "output.directory",
                    "Must be a string",
                    value=directory
                )
            elif not directory.strip():
                self.result.add_error(
                    "output.directory",
                    "Cannot be empty",
                    suggestion="Omit the field to use the default 'reports'"
                )

        filename = output.get("filename")
        if filename is not None and not isinstance(filename, str):
            self.result.add_error(
                "output.filename",
                "Must be a string",
                value=filename
            )
