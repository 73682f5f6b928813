#!/usr/bin/env python3
"""
VisionReport CLI - helpers around report configs and media

Usage:
    visionreport validate <visionreport.yaml>
    visionreport render <visionreport.yaml>
    visionreport media <path-or-url-or-data-uri> [--kind auto|path|url|base64]
    visionreport --version
"""

import logging
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .api import VisionReport
from .config import load_report_config
from .errors import GenerationError, MediaError
from .generation import create_generator
from .model import Media

app = typer.Typer(
    name="visionreport",
    help="📸 VisionReport - Programmatic Test Report Builder",
    add_completion=False,
)
console = Console()


class MediaKind(str, Enum):
    AUTO = "auto"
    PATH = "path"
    URL = "url"
    BASE64 = "base64"


def version_callback(value: bool):
    if value:
        console.print(f"📸 VisionReport v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-V",
        help="Show debug logging"
    ),
):
    """
    📸 VisionReport - Programmatic Test Report Builder

    Validate report configs and inspect media attachments.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def resolve_media(source: str, kind: MediaKind) -> Media:
    """Run the Media factory matching kind, guessing it from source for AUTO."""
    if kind == MediaKind.AUTO:
        if source.startswith(("http://", "https://")):
            kind = MediaKind.URL
        elif source.strip().startswith("data:"):
            kind = MediaKind.BASE64
        else:
            kind = MediaKind.PATH

    if kind == MediaKind.URL:
        return Media.from_url(source)
    elif kind == MediaKind.BASE64:
        return Media.from_base64(source)
    return Media.from_path(source)


@app.command()
def validate(
    config_file: Path = typer.Argument(
        ...,
        help="Path to the report config YAML file",
    ),
):
    """
    Validate a report config file.

    Check the schema and show the resulting report metadata.
    """
    console.print(f"\n📄 Validating: {config_file}")

    config, validation = load_report_config(config_file)

    if not validation.is_valid:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(str(validation), markup=False)
        raise typer.Exit(code=1)

    report = VisionReport.from_config(config)
    console.print(f"\n[green]✅ Valid config:[/green] {report.report_type.value}")

    table = Table(title="Report Metadata")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Title", escape(report.title))
    table.add_row("Project", escape(report.project_name))
    table.add_row("Application", escape(report.application_name))
    table.add_row("Environment", escape(report.environment))
    table.add_row("Domain", escape(report.domain))
    table.add_row("Tester", escape(report.tester_name))
    table.add_row("Analysts", escape(", ".join(sorted(report.business_analysts))) or "N/A")
    table.add_row("Output", f"{config.output.format.value} → {config.output.directory}")

    console.print()
    console.print(table)
    raise typer.Exit(code=0)


@app.command()
def render(
    config_file: Path = typer.Argument(
        ...,
        help="Path to the report config YAML file",
    ),
):
    """
    Render an empty report from a config file.

    Useful to check metadata and output settings before wiring the
    report into a test suite.
    """
    config, validation = load_report_config(config_file)

    if not validation.is_valid:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(str(validation), markup=False)
        raise typer.Exit(code=1)

    report = VisionReport.from_config(config)
    generator = create_generator(config.output, report.report_type)

    try:
        path = generator.generate(report)
    except GenerationError as e:
        console.print(f"[red]❌ Generation failed:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    if path is not None:
        console.print(f"\n📁 Report saved: {path}")
    raise typer.Exit(code=0)


@app.command()
def media(
    source: str = typer.Argument(
        ...,
        help="File path, http(s) URL or data URI",
    ),
    kind: MediaKind = typer.Option(
        MediaKind.AUTO, "--kind", "-k",
        help="How to read SOURCE (auto guesses from its prefix)"
    ),
    preview: int = typer.Option(
        60, "--preview", "-p",
        help="Number of data characters to show"
    ),
):
    """
    Convert a media source the way a log attachment would.
    """
    try:
        result = resolve_media(source, kind)
    except MediaError as e:
        console.print(f"[red]❌ {type(e).__name__}:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(code=1)

    data = result.data
    shown = data if len(data) <= preview else data[:preview] + "..."
    console.print(f"[green]✅ {result.media_type.value}[/green] ({len(data)} chars)")
    console.print(shown, markup=False, highlight=False)


@app.command()
def info():
    """
    Show information about VisionReport.
    """
    console.print(f"""
📸 [bold]VisionReport[/bold] v{__version__}

Programmatic Test Report Builder

[bold]Features:[/bold]
  • Fluent report, test case and log step API
  • Auto-generated test (TC001) and log (Log #1) IDs
  • Screenshots from files, URLs or data URIs
  • YAML report configs with {{{{env.NAME}}}} placeholders
  • JSON and console report generators

[bold]Quick Start:[/bold]
  visionreport validate visionreport.yaml
  visionreport media screenshots/login.png
""")


if __name__ == "__main__":
    app()
