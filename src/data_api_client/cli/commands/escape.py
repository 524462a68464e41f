"""Escaping helpers exposed on the command line."""

from __future__ import annotations

from typing import Annotated

import typer

from data_api_client.core.escape import ident, literal

escape_app = typer.Typer(help="Escape identifiers and literals for SQL text")


@escape_app.command("ident")
def ident_command(
    name: Annotated[str, typer.Argument(help="Table, column or schema name")],
) -> None:
    """Print NAME quoted as a SQL identifier when needed."""
    typer.echo(ident(name))


@escape_app.command("literal")
def literal_command(
    values: Annotated[list[str], typer.Argument(help="One value, or several for a list")],
) -> None:
    """Print VALUES escaped as a SQL literal (several values form a list)."""
    typer.echo(literal(values[0] if len(values) == 1 else values))
