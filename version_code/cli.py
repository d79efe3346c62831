"""Typer-based CLI for encoding and comparing version codes.

Every command reads its default schema from :mod:`version_code.config`; the
``--schema`` options accept the same ``"Name:bits,..."`` syntax.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .__about__ import __version__
from .code import Factory, VersionCode
from .config import get_settings
from .errors import VersionCodeError, VersionFormatError
from .schema import parse_schema_spec
from .semantic import SemanticVersion
from .utils.helpers import split_dotted

app = typer.Typer(help="Encode multi-component versions into a single integer.")
console = Console()
err_console = Console(stderr=True, soft_wrap=True)

logger = logging.getLogger(__name__)

RELATIONS = {-1: "<", 0: "=", 1: ">"}


class Component(str, Enum):
    """Semantic version component that ``bump`` can increment."""

    major = "major"
    minor = "minor"
    patch = "patch"


def version_callback(value: bool) -> None:
    """Print the package version and exit if requested.

    Args:
        value: Whether the ``--version`` flag was provided.
    """
    if value:
        console.print(f"version-code {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(  # noqa: UP007 - Optional for clarity in help
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Root command callback.

    Configures logging from settings before any subcommand runs.

    Args:
        ctx: Typer context object.
        version: If provided, prints version and exits.
    """
    ctx.ensure_object(dict)
    try:
        settings = get_settings()
    except ValidationError as e:
        raise _fail(e) from e
    logging.basicConfig(level=settings.log_level)


def _fail(error: Exception) -> typer.Exit:
    logger.debug("Command failed", exc_info=error)
    err_console.print(f"[red]Error:[/red] {escape(str(error))}", markup=True, highlight=False)
    return typer.Exit(1)


def _factory(schema: Optional[str]) -> Factory:  # noqa: UP007
    if schema is None:
        return get_settings().factory()
    return Factory(*parse_schema_spec(schema))


def _create(factory: Factory, text: str) -> VersionCode:
    try:
        values = split_dotted(text)
    except ValueError as e:
        raise VersionFormatError(f"Invalid version '{text}': {e}") from e
    return factory.create(*values)


@app.command()
def encode(
    version: str = typer.Argument(..., help="Dotted version, e.g. 1.2.3"),
    schema: Optional[str] = typer.Option(None, "--schema", "-s", help="Schema, e.g. Major:7,Minor:19,Patch:5"),  # noqa: UP007
) -> None:
    """Print the encoded integer of a version."""
    try:
        code = _create(_factory(schema), version)
    except VersionCodeError as e:
        raise _fail(e) from e
    console.print(code.value)


@app.command()
def decode(
    value: int = typer.Argument(..., help="Encoded integer"),
    schema: Optional[str] = typer.Option(None, "--schema", "-s", help="Schema, e.g. Major:7,Minor:19,Patch:5"),  # noqa: UP007
) -> None:
    """Show the components packed in an encoded integer."""
    try:
        code = _factory(schema).decode(value)
    except VersionCodeError as e:
        raise _fail(e) from e

    table = Table(title=str(code))
    table.add_column("Component")
    table.add_column("Bits", justify="right")
    table.add_column("Value", justify="right")
    for component in code.components:
        table.add_row(component.display_name, str(component.bits), str(component.value))
    console.print(table)


@app.command()
def compare(
    first: str = typer.Argument(..., help="First dotted version"),
    second: str = typer.Argument(..., help="Second dotted version"),
    schema_a: Optional[str] = typer.Option(None, "--schema-a", help="Schema of the first version"),  # noqa: UP007
    schema_b: Optional[str] = typer.Option(None, "--schema-b", help="Schema of the second version"),  # noqa: UP007
) -> None:
    """Compare two versions, possibly encoded with different schemas."""
    try:
        a = _create(_factory(schema_a), first)
        b = _create(_factory(schema_b), second)
    except VersionCodeError as e:
        raise _fail(e) from e
    console.print(f"{first} {RELATIONS[a.compare_to(b)]} {second}", highlight=False)


@app.command()
def bump(
    version: str = typer.Argument(..., help="Semantic version, e.g. 1.2.3"),
    component: Component = typer.Option(Component.patch, "--component", "-c", help="Component to increment"),
) -> None:
    """Increment one component of a semantic version and print the result."""
    try:
        current = SemanticVersion.parse(version)
        bumped = getattr(current, f"bump_{component.value}")()
    except VersionCodeError as e:
        raise _fail(e) from e
    console.print(f"{bumped.major}.{bumped.minor}.{bumped.patch} {bumped.value}", highlight=False)


if __name__ == "__main__":  # pragma: no cover
    app()
