"""CLI for formpress: render / inspect / layout commands."""

from __future__ import annotations

import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from formpress.core.config import AppSettings, ObservabilityConfig
from formpress.exceptions import FormPressError
from formpress.formatters.json_renderer import JSONRenderer
from formpress.hooks.logging_config import setup_logging
from formpress.models import FormTemplate
from formpress.services.document_service import DocumentAssembler
from formpress.templates.compiler import compile_template

app = typer.Typer(name="formpress", help="Lay out form answers as a paginated PDF")
console = Console()


def _configure(settings: AppSettings, verbose: bool) -> None:
    obs = settings.observability
    if verbose:
        obs = ObservabilityConfig(log_level="DEBUG", log_format=obs.log_format)
    setup_logging(obs)


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid JSON: {exc}") from exc


def _load_form_data(path: Path) -> dict[str, Any]:
    raw = _load_json(path)
    if isinstance(raw, dict):
        return raw
    raise typer.BadParameter(f"Expected JSON object in {path}")


def _load_summary(path: Optional[Path]) -> list[dict[str, Any]]:
    if path is None:
        return []
    raw = _load_json(path)
    if isinstance(raw, list):
        return raw
    raise typer.BadParameter(f"Expected JSON array in {path}")


def _build_template(schema_file: Path, name: Optional[str]) -> FormTemplate:
    return compile_template(_load_json(schema_file), name=name)


@app.command()
def render(
    schema_file: Path = typer.Argument(..., help="JSON form schema (section -> field -> config)"),
    data_file: Path = typer.Argument(..., help="JSON object of field id -> answer"),
    summary_file: Optional[Path] = typer.Option(None, "--summary", help="JSON array of extracted items"),
    name: Optional[str] = typer.Option(None, "--name", help="Document title"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output PDF path"),
    timestamp: Optional[datetime] = typer.Option(None, "--timestamp", help="Fixed generation time (ISO 8601)"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Render a filled form to PDF."""
    settings = AppSettings()
    _configure(settings, verbose)

    template = _build_template(schema_file, name)
    assembler = DocumentAssembler(settings)
    try:
        result = assembler.generate_result(
            template,
            _load_form_data(data_file),
            _load_summary(summary_file),
            generated_at=timestamp,
        )
    except (FormPressError, ValidationError) as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(code=1) from exc

    out_path = output or Path(result.filename)
    out_path.write_bytes(result.content)

    table = Table(title="Rendered document")
    table.add_column("Output")
    table.add_column("Pages", justify="right")
    table.add_column("Bytes", justify="right")
    table.add_row(str(out_path), str(result.page_count), str(len(result.content)))
    console.print(table)


@app.command()
def inspect(
    schema_file: Path = typer.Argument(..., help="JSON form schema"),
    name: Optional[str] = typer.Option(None, "--name", help="Document title"),
) -> None:
    """Show the template compiled from a schema."""
    template = _build_template(schema_file, name)

    table = Table(title=f"{template.name} ({template.id})")
    table.add_column("Section")
    table.add_column("Field ID", no_wrap=True)
    table.add_column("Label")
    table.add_column("Type")
    table.add_column("Required")
    table.add_column("Max length", justify="right")
    for section in template.sections:
        if not section.fields:
            table.add_row(section.title, "-", "-", "-", "-", "-")
        for mapping in section.fields:
            table.add_row(
                section.title,
                mapping.field_id,
                mapping.pdf_field_name,
                mapping.field_type.value,
                "yes" if mapping.required else "no",
                "" if mapping.max_length is None else str(mapping.max_length),
            )
    console.print(table)


@app.command()
def layout(
    schema_file: Path = typer.Argument(..., help="JSON form schema"),
    data_file: Path = typer.Argument(..., help="JSON object of field id -> answer"),
    summary_file: Optional[Path] = typer.Option(None, "--summary", help="JSON array of extracted items"),
    name: Optional[str] = typer.Option(None, "--name", help="Document title"),
    timestamp: Optional[datetime] = typer.Option(None, "--timestamp", help="Fixed generation time (ISO 8601)"),
) -> None:
    """Print the laid-out draw instructions as JSON."""
    settings = AppSettings()
    template = _build_template(schema_file, name)
    try:
        document = DocumentAssembler(settings).compose(
            template,
            _load_form_data(data_file),
            _load_summary(summary_file),
            generated_at=timestamp,
        )
    except (FormPressError, ValidationError) as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(code=1) from exc
    sys.stdout.write(JSONRenderer().render(document).decode())
    sys.stdout.write("\n")


if __name__ == "__main__":
    app()
