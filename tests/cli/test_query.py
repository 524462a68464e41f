"""Tests for the query command."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

FIXTURE_SQL = str(Path(__file__).parent.parent / "fixtures" / "select_42.sql")


@pytest.fixture
def patched_client(client):
    with patch("data_api_client.cli.commands.query.get_client", return_value=client):
        yield client


# -- Help --


@pytest.mark.unit
def test_query_help(cli_runner):
    result = cli_runner("query", "--help")
    assert result.exit_code == 0
    assert "Execute a SQL query" in result.stdout
    assert "--execute" in result.stdout


# -- Execution --


@pytest.mark.unit
def test_query_inline_json(cli_runner, patched_client, fake_rds):
    fake_rds.execute_statement.return_value = {
        "columnMetadata": [{"label": "num"}],
        "numberOfRecordsUpdated": 0,
        "records": [[{"longValue": 1}]],
    }

    result = cli_runner("--format", "json", "query", "-e", "SELECT 1 AS num")

    assert result.exit_code == 0, f"output: {result.stdout}"
    assert json.loads(result.stdout) == [{"num": 1}]


@pytest.mark.unit
def test_query_from_file(cli_runner, patched_client, fake_rds):
    fake_rds.execute_statement.return_value = {
        "columnMetadata": [{"label": "answer"}],
        "numberOfRecordsUpdated": 0,
        "records": [[{"longValue": 42}]],
    }

    result = cli_runner("--format", "csv", "query", FIXTURE_SQL)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["answer", "42"]
    _, kwargs = fake_rds.execute_statement.call_args
    assert kwargs["sql"] == "SELECT 42 AS answer"


@pytest.mark.unit
def test_query_parameters(cli_runner, patched_client, fake_rds):
    result = cli_runner(
        "--format",
        "json",
        "query",
        "-e",
        "SELECT * FROM t WHERE id = :id AND name = :name AND ok = :ok",
        "-p",
        "id=7",
        "-p",
        "name=alice",
        "-p",
        "ok=true",
    )

    assert result.exit_code == 0
    _, kwargs = fake_rds.execute_statement.call_args
    assert kwargs["parameters"] == [
        {"name": "id", "value": {"longValue": 7}},
        {"name": "name", "value": {"stringValue": "alice"}},
        {"name": "ok", "value": {"booleanValue": True}},
    ]


@pytest.mark.unit
def test_query_no_hydrate_and_transaction(cli_runner, patched_client, fake_rds):
    fake_rds.execute_statement.return_value = {
        "numberOfRecordsUpdated": 0,
        "records": [[{"stringValue": "x"}]],
    }

    result = cli_runner(
        "--format", "json", "query", "-e", "SELECT 'x'", "--no-hydrate", "--transaction-id", "tx-1"
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [["x"]]
    _, kwargs = fake_rds.execute_statement.call_args
    assert kwargs["transactionId"] == "tx-1"
    assert "includeResultMetadata" not in kwargs


@pytest.mark.unit
def test_query_invalid_parameter_flag(cli_runner, patched_client):
    result = cli_runner("query", "-e", "SELECT 1", "-p", "novalue")
    assert result.exit_code == 3


@pytest.mark.unit
def test_query_missing_file(cli_runner, patched_client):
    result = cli_runner("query", "/nonexistent/query.sql")
    assert result.exit_code == 3
