"""Transaction pass-through commands."""

from __future__ import annotations

import asyncio
from typing import Annotated

import typer

from data_api_client.cli.commands._shared import get_client
from data_api_client.cli.output import write_response
from data_api_client.core.exceptions import InputError

transaction_app = typer.Typer(help="Begin, commit or roll back a transaction")


@transaction_app.command("begin")
def begin_command(ctx: typer.Context) -> None:
    """Begin a transaction and print its id."""
    client = get_client(ctx)
    database = client.config.database
    if not database:
        raise InputError("No 'database' provided.")
    response = asyncio.run(
        client.begin_transaction(
            secretArn=client.config.secret_arn,
            resourceArn=client.config.resource_arn,
            database=database,
        )
    )
    write_response(response)


@transaction_app.command("commit")
def commit_command(
    ctx: typer.Context,
    transaction_id: Annotated[str, typer.Argument(help="Transaction id from 'begin'")],
) -> None:
    """Commit a transaction."""
    client = get_client(ctx)
    response = asyncio.run(
        client.commit_transaction(
            secretArn=client.config.secret_arn,
            resourceArn=client.config.resource_arn,
            transactionId=transaction_id,
        )
    )
    write_response(response)


@transaction_app.command("rollback")
def rollback_command(
    ctx: typer.Context,
    transaction_id: Annotated[str, typer.Argument(help="Transaction id from 'begin'")],
) -> None:
    """Roll back a transaction."""
    client = get_client(ctx)
    response = asyncio.run(
        client.rollback_transaction(
            secretArn=client.config.secret_arn,
            resourceArn=client.config.resource_arn,
            transactionId=transaction_id,
        )
    )
    write_response(response)
