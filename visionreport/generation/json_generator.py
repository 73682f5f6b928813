"""
JSON file generator.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import GenerationError
from .base import ReportGenerator

if TYPE_CHECKING:
    from ..api import VisionReport

logger = logging.getLogger(__name__)


class JSONReportGenerator(ReportGenerator):
    """Writes VisionReport.to_json() to a file, creating parent directories."""

    def __init__(self, output_path: str | Path, indent: int = 2):
        self.output_path = Path(output_path)
        self.indent = indent

    def generate(self, report: VisionReport) -> Path:
        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            self.output_path.write_text(report.to_json(indent=self.indent), encoding="utf-8")
        except OSError as e:
            raise GenerationError(f"Failed to write JSON report to {self.output_path}: {e}") from e

        logger.info(f"Generated JSON report: {self.output_path}")
        return self.output_path
