"""Typer CLI for creating, checking, and inspecting MAEC packages."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from maec_v5.domain import (
    MalwareFamily,
    Package,
    extract_type_from_id,
    generate_maec_id,
    is_valid_ref_for_type,
)
from maec_v5.exceptions import MaecError

from .deps import get_container, reset_container

app = typer.Typer(help="MAEC 5.0 package utilities")
console = Console()


def _configure_logging(level: str) -> None:
    package_logger = logging.getLogger("maec_v5")
    if not any(isinstance(handler, RichHandler) for handler in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
        package_logger.propagate = False
    package_logger.setLevel(level)


def _load(path: Path) -> Package:
    try:
        return get_container().codec.read(path)
    except MaecError as exc:
        typer.echo(f"{path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _display_name(obj: object) -> str:
    name = getattr(obj, "name", None)
    if name is None:
        return "-"
    return str(name)


@app.callback()
def main(
    env_file: Path | None = typer.Option(None, help="Load settings from this .env file"),
) -> None:
    """Load environment overrides and configure logging."""

    env_path = env_file or Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=True)
        reset_container()
    _configure_logging(get_container().settings.log_level)


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved settings."""

    settings = get_container().settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Resolver policy:\t" + settings.resolver_policy.value)
    typer.echo("JSON indent:\t" + str(settings.json_indent))


@app.command("new-id")
def new_id(object_type: str) -> None:
    """Generate an identifier for OBJECT_TYPE, e.g. malware-family."""

    typer.echo(generate_maec_id(object_type))


@app.command("validate-id")
def validate_id(
    identifier: str,
    expected_type: str | None = typer.Option(None, "--type", help="Required object type"),
) -> None:
    """Check IDENTIFIER's syntax and, optionally, its object type."""

    object_type = extract_type_from_id(identifier)
    if object_type is None:
        typer.echo(f"Invalid identifier: {identifier}", err=True)
        raise typer.Exit(code=1)
    if expected_type is not None and not is_valid_ref_for_type(identifier, expected_type):
        typer.echo(f"Identifier is a {object_type}, expected {expected_type}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Valid {object_type} identifier")


@app.command("validate")
def validate(path: Path) -> None:
    """Decode and validate the package stored at PATH."""

    package = _load(path)
    typer.echo(f"Valid package {package.id} ({len(package.maec_objects)} objects)")


@app.command("summary")
def summary(path: Path) -> None:
    """Show the objects contained in the package at PATH."""

    package = _load(path)
    counts = Counter(obj.type for obj in package.maec_objects)

    table = Table(title=f"Package {package.id}")
    table.add_column("Type")
    table.add_column("Name")
    table.add_column("ID", overflow="fold")
    for obj in package.maec_objects:
        table.add_row(obj.type, _display_name(obj), obj.id)
    console.print(table)

    for object_type, count in sorted(counts.items()):
        typer.echo(f"{object_type}: {count}")
    typer.echo(f"relationships: {len(package.relationships)}")


@app.command("format")
def format_package(
    path: Path,
    output: Path | None = typer.Option(None, help="Write here instead of stdout"),
) -> None:
    """Re-encode the package at PATH using the configured indentation."""

    package = _load(path)
    codec = get_container().codec
    if output is None:
        typer.echo(codec.to_json(package))
        return
    try:
        codec.write(output, package)
    except MaecError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Wrote {output}")


@app.command("scaffold")
def scaffold(
    output: Path,
    family: str = typer.Option(..., help="Malware family name"),
    labels: str = typer.Option("", help="Comma separated family labels"),
    description: str | None = typer.Option(None, help="Family description"),
) -> None:
    """Write a new package containing a single malware family to OUTPUT."""

    builder = MalwareFamily.builder().name(family)
    for label in (item.strip() for item in labels.split(",")):
        if label:
            builder = builder.add_label(label)
    if description:
        builder = builder.description(description)

    try:
        package = Package.builder().add_malware_family(builder.build()).build()
        get_container().codec.write(output, package)
    except MaecError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Created package {package.id}")
