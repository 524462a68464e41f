"""Shared test fixtures for data-api-client."""

from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner

from data_api_client.cli.main import app
from data_api_client.core.client import DataApiClient
from data_api_client.core.models import ClientConfig
from tests.aws_config import RESOURCE_ARN, SECRET_ARN


@pytest.fixture
def runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def cli_runner(runner):
    """Invoke the CLI app with the given arguments."""

    def invoke(*args: str, **kwargs):
        return runner.invoke(app, list(args), **kwargs)

    return invoke


@pytest.fixture
def temp_dir():
    """Temporary directory for test files."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def client_config():
    return ClientConfig(
        secret_arn=SECRET_ARN,
        resource_arn=RESOURCE_ARN,
        database="testdb",
    )


@pytest.fixture
def fake_rds():
    """Stand-in for a boto3 rds-data client."""
    rds = MagicMock()
    rds.execute_statement.return_value = {"numberOfRecordsUpdated": 0, "records": []}
    rds.batch_execute_statement.return_value = {"updateResults": []}
    return rds


@pytest.fixture
def client(client_config, fake_rds):
    return DataApiClient(client_config, rds=fake_rds)
