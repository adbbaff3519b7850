"""CLI interface for rosetta-asserter using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from rosetta_asserter import __description__, __version__
from rosetta_asserter.config import AsserterConfig, Endpoint, ReportFormat, load_config
from rosetta_asserter.validation import ValidationFramework, ValidationResult

app = typer.Typer(
    name="rosetta-asserter",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

_LOG_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"rosetta-asserter version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """rosetta-asserter - Validate Rosetta construction API responses."""


def _configure_logging(config: AsserterConfig) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS.get(config.logging.level, logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_documents(path: Path, batch: bool) -> list[Any]:
    with open(path, encoding="utf-8") as f:
        data = jsonlib.load(f)

    if not batch:
        return [data]
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of documents in {path}")
    return data


@app.command()
def validate(
    endpoint: Annotated[
        str,
        typer.Argument(help="Endpoint the document came from: " + ", ".join(e.value for e in Endpoint))
    ],
    path: Annotated[
        Path,
        typer.Argument(help="JSON file holding the response document")
    ],
    batch: Annotated[
        bool,
        typer.Option("--batch", "-b", help="Treat the file as a JSON array of documents")
    ] = False,
    format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Output format: table, json, markdown (default: from config)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .rosetta-asserter.json)")
    ] = None,
) -> None:
    """Validate construction response documents."""
    valid_endpoints = [e.value for e in Endpoint]
    valid_formats = [f.value for f in ReportFormat]

    if endpoint not in valid_endpoints:
        console.print(f"[red]Error:[/red] Invalid endpoint '{endpoint}'. Must be one of: {', '.join(valid_endpoints)}")
        raise typer.Exit(1)

    try:
        asserter_config = load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    _configure_logging(asserter_config)

    format = format or asserter_config.output.format
    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    if not path.exists():
        console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)

    try:
        documents = _load_documents(path, batch)
    except jsonlib.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] Invalid JSON in {path}: {e}")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    framework = ValidationFramework(asserter_config)
    framework.create_default_rules()

    try:
        result = framework.validate_many(endpoint, documents)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if format == ReportFormat.JSON:
        print(jsonlib.dumps(result.to_dict(), indent=2))
    elif format == ReportFormat.MARKDOWN:
        _print_markdown(result)
    else:
        _print_table(result)

    raise typer.Exit(result.exit_code)


def _print_markdown(result: ValidationResult) -> None:
    console.print("# Validation Report")
    console.print(f"**Status:** {result.status.value}")
    console.print(f"**Exit Code:** {result.exit_code}")
    console.print()

    if result.counters:
        console.print("## Counters")
        for key, value in result.counters.items():
            console.print(f"- {key}: {value}")
        console.print()

    if result.issues:
        console.print("## Issues")
        for issue in result.issues:
            console.print(f"- **{issue.kind.upper()}** {issue.rule}: {issue.message}")


def _print_table(result: ValidationResult) -> None:
    status_color = "green" if result.status.value == "pass" else "red"
    console.print(f"[{status_color}]Validation Status: {result.status.value.upper()}[/{status_color}]")
    console.print(f"Exit Code: {result.exit_code}")

    if result.counters:
        console.print("\n[blue]Counters:[/blue]")
        counter_table = Table()
        counter_table.add_column("Metric", style="cyan")
        counter_table.add_column("Count", style="white", justify="right")

        for key, value in sorted(result.counters.items()):
            counter_table.add_row(key.replace("_", " ").title(), str(value))

        console.print(counter_table)

    if not result.issues:
        console.print("\n[green]No issues found![/green]")
        return

    console.print("\n[blue]Issues Found:[/blue]")
    issues_table = Table()
    issues_table.add_column("Rule", style="cyan")
    issues_table.add_column("Kind", style="red")
    issues_table.add_column("Message", style="white")
    issues_table.add_column("Location", style="dim")

    for issue in result.issues:
        location = []
        if issue.document is not None:
            location.append(f"document {issue.document}")
        if issue.index is not None:
            location.append(f"element {issue.index}")
        if issue.path:
            location.append(issue.path)

        issues_table.add_row(issue.rule, issue.kind, issue.message, ", ".join(location))

    console.print(issues_table)


@app.command()
def endpoints() -> None:
    """List endpoints that can be validated."""
    framework = ValidationFramework(AsserterConfig())
    framework.create_default_rules()

    table = Table(title="Construction endpoints")
    table.add_column("Endpoint", style="cyan")
    table.add_column("Rule", style="yellow")

    for rule in framework.rules:
        table.add_row(rule.endpoint.value, rule.name)

    console.print(table)


if __name__ == "__main__":
    app()
