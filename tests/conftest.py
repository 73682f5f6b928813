"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from visionreport import ReportType, VisionReport

# 1x1 transparent PNG
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d49484452000000010000000108060000001f15c489"
    "0000000d49444154789c6360000002000001e221bc330000000049454e44ae426082"
)


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """A small PNG screenshot on disk."""
    path = tmp_path / "screenshot.png"
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def report() -> VisionReport:
    """A fresh UI testing report."""
    return VisionReport(ReportType.UI_TESTING)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A complete report config file writing JSON into tmp_path."""
    path = tmp_path / "visionreport.yaml"
    path.write_text(
        f"""
report_type: api_testing
title: Nightly API run
project_name: Shop
application_name: Shop API
environment: staging
domain: Retail
tester_name: QA Bot
business_analysts: [Ann, Bob]
output:
  format: json
  directory: {tmp_path / "out"}
  filename: run.json
"""
    )
    return path
