"""
Base generator interface for rendering finished reports.

A generator consumes a completed VisionReport and writes an artifact
somewhere it chooses. The report model never calls generators itself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..api import VisionReport


class ReportGenerator(ABC):
    """
    Abstract base class for report generators.

    Implementations render the report (JSON file, console summary, ...)
    and report failures as GenerationError.
    """

    @abstractmethod
    def generate(self, report: VisionReport) -> Path | None:
        """
        Render the report.

        Args:
            report: The finished report

        Returns:
            Path of the written artifact, or None if nothing was written

        Raises:
            GenerationError: If the artifact could not be produced
        """
        pass
