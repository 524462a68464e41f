"""Standard exit codes for the data-api CLI.

Exit codes follow Unix conventions.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for data-api commands."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INPUT_ERROR = 3
    NETWORK_ERROR = 5
    TIMEOUT = 6
    CONFIG_ERROR = 7
