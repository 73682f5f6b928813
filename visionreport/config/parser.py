"""
Config parser for report configuration files.

Converts validated YAML data into a typed ReportConfig, replacing
{{env.NAME}} placeholders with values from the process environment.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Any, Mapping

from ..model import ReportType
from .models import OutputConfig, OutputFormat, ReportConfig

logger = logging.getLogger(__name__)


class ConfigParser:
    """Parses and converts validated YAML to a typed ReportConfig."""

    # Template interpolation: {{env.KEY}}
    ENV_PATTERN = re.compile(r"\{\{env\.(\w+)\}\}")

    def __init__(self, data: dict[str, Any], environ: Mapping[str, str] | None = None):
        self.data = data
        self.environ = os.environ if environ is None else environ

    def parse(self) -> ReportConfig:
        """Convert validated data to typed ReportConfig."""
        return ReportConfig(
            report_type=ReportType(self.data["report_type"]),
            title=self._text("title"),
            project_name=self._text("project_name"),
            application_name=self._text("application_name"),
            environment=self._text("environment"),
            domain=self._text("domain"),
            tester_name=self._text("tester_name"),
            business_analysts=[
                self.interpolate(name)
                for name in self.data.get("business_analysts") or []
                if name is not None
            ],
            output=self._parse_output(),
        )

    def interpolate(self, value: str) -> str:
        """Replace {{env.NAME}} placeholders. Unknown names are left in place."""
        def replace_env(match: re.Match) -> str:
            var_name = match.group(1)
            if var_name not in self.environ:
                logger.warning(f"Environment variable {var_name} is not set; keeping placeholder")
                return match.group(0)
            return self.environ[var_name]
        return self.ENV_PATTERN.sub(replace_env, value)

    def _text(self, key: str) -> str | None:
        value = self.data.get(key)
        if value is None:
            return None
        return self.interpolate(value)

    def _parse_output(self) -> OutputConfig:
        # null fields fall back to the defaults, same as omitted ones
        output = self.data.get("output") or {}
        filename = output.get("filename")
        return OutputConfig(
            format=OutputFormat(output.get("format") or OutputFormat.JSON.value),
            directory=self.interpolate(output.get("directory") or "reports"),
            filename=self.interpolate(filename) if filename else None,
        )
