"""Where the CLI reads its SQL statement from.

An inline ``-e`` statement wins over a file argument, and a file argument
wins over piped stdin. A file argument of ``-`` reads stdin explicitly.
"""

from __future__ import annotations

import sys
from pathlib import Path

from data_api_client.core.exceptions import InputError

STDIN_PATH = "-"


def _read_stdin() -> str:
    return sys.stdin.read()


def resolve_query_source(
    inline: str | None,
    file_path: str | None,
) -> str:
    """Return the statement text, stripped of surrounding whitespace.

    Raises InputError when no source is available or the statement is blank,
    since the Data API would reject an empty ``sql`` field anyway.
    """
    if inline is not None:
        sql = inline
    elif file_path == STDIN_PATH:
        sql = _read_stdin()
    elif file_path is not None:
        p = Path(file_path)
        if not p.is_file():
            msg = (
                f"Query file not found: {file_path}\n"
                "Use -e for inline statements or pipe the statement via stdin."
            )
            raise InputError(msg)
        sql = p.read_text()
    elif not sys.stdin.isatty():
        sql = _read_stdin()
    else:
        raise InputError("No query provided. Use -e, a file path, or pipe to stdin.")

    sql = sql.strip()
    if not sql:
        raise InputError("Query is empty")
    return sql
