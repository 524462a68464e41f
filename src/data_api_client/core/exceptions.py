"""Exception hierarchy for data-api-client.

All exceptions carry an exit_code for CLI return value mapping.
Errors raised by boto3/botocore are never wrapped in these types.
"""

from data_api_client.core.exit_codes import ExitCode


class DataApiError(Exception):
    """Base exception for all data-api-client errors."""

    exit_code: int = ExitCode.GENERAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InputError(DataApiError):
    """Missing SQL, invalid parameters, bad per-call overrides."""

    exit_code: int = ExitCode.INPUT_ERROR


class ConfigError(DataApiError):
    """Missing ARNs, malformed config file, unknown profile."""

    exit_code: int = ExitCode.CONFIG_ERROR
