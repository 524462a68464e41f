"""data-api main entry point and command registration."""

from __future__ import annotations

import atexit
from pathlib import Path  # noqa: TC003
from typing import Annotated

import sentry_sdk
import typer
from botocore.exceptions import BotoCoreError, ClientError, ConnectTimeoutError, ReadTimeoutError

from data_api_client.__about__ import __version__
from data_api_client.cli.commands.escape import escape_app
from data_api_client.cli.commands.query import query_command
from data_api_client.cli.commands.transaction import transaction_app
from data_api_client.cli.output import OutputFormat  # noqa: TC001
from data_api_client.core.exceptions import DataApiError
from data_api_client.core.exit_codes import ExitCode
from data_api_client.core.logging import setup_logging
from data_api_client.core.monitoring import setup_sentry

app = typer.Typer(
    help="data-api - query Aurora through the RDS Data API",
    no_args_is_help=True,
)

app.add_typer(transaction_app, name="transaction")
app.add_typer(escape_app, name="escape")
app.command("query")(query_command)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"data-api {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable verbose logging"),
    ] = False,
    log_json: Annotated[
        bool,
        typer.Option("--log-json", help="Write logs to stderr as JSON lines"),
    ] = False,
    profile: Annotated[
        str | None,
        typer.Option("--profile", "-P", help="Named configuration profile"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config file"),
    ] = None,
    secret_arn: Annotated[
        str | None,
        typer.Option("--secret-arn", help="Secrets Manager ARN holding the credentials"),
    ] = None,
    resource_arn: Annotated[
        str | None,
        typer.Option("--resource-arn", help="Aurora cluster ARN"),
    ] = None,
    database: Annotated[
        str | None,
        typer.Option("--database", "-d", help="Database name"),
    ] = None,
    region: Annotated[
        str | None,
        typer.Option("--region", help="AWS region"),
    ] = None,
    format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format: table|json|csv"),
    ] = None,
    compact: Annotated[
        bool,
        typer.Option("--compact", help="Compact JSON output (no indentation)"),
    ] = False,
    width: Annotated[
        int,
        typer.Option("--width", help="Column width for table format"),
    ] = 40,
    no_header: Annotated[
        bool,
        typer.Option("--no-header", help="Suppress header row in CSV output"),
    ] = False,
) -> None:
    """data-api - query Aurora through the RDS Data API."""
    setup_logging(verbose, json_logs=log_json)
    setup_sentry()

    transaction = sentry_sdk.start_transaction(
        op="cli", name=ctx.invoked_subcommand or "data-api"
    )
    transaction.__enter__()

    def cleanup() -> None:
        transaction.__exit__(None, None, None)
        sentry_sdk.flush(timeout=2)

    atexit.register(cleanup)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["profile"] = profile
    ctx.obj["config_file"] = config_file
    ctx.obj["secret_arn"] = secret_arn
    ctx.obj["resource_arn"] = resource_arn
    ctx.obj["database"] = database
    ctx.obj["region"] = region

    ctx.obj["format"] = format.value if format else None
    ctx.obj["compact"] = compact
    ctx.obj["width"] = width
    ctx.obj["no_header"] = no_header


def run() -> None:
    """Entry point with global error handling."""
    try:
        app()
    except DataApiError as e:
        sentry_sdk.capture_exception(e)
        typer.echo(f"Error: {e.message}", err=True)
        raise SystemExit(e.exit_code) from None
    except (ConnectTimeoutError, ReadTimeoutError) as e:
        sentry_sdk.capture_exception(e)
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(ExitCode.TIMEOUT) from None
    except (ClientError, BotoCoreError) as e:
        sentry_sdk.capture_exception(e)
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(ExitCode.NETWORK_ERROR) from None
    except SystemExit:
        raise
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    except Exception as e:
        sentry_sdk.capture_exception(e)
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None
