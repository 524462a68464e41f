"""Identifier and literal escaping for SQL text sent to the Data API.

Parameters should be preferred whenever the value is data. These helpers
cover the places parameters cannot go: table and column names, and
ad-hoc literals in generated SQL.
"""

from __future__ import annotations

import re
from typing import Any

from data_api_client.core.exceptions import InputError

# PostgreSQL reserved keywords plus the Aurora/Redshift extensions.
# Membership is checked against the lowercased identifier.
RESERVED_WORDS: frozenset[str] = frozenset(
    """
    aes128 aes256 all allowoverwrite analyse analyze and any array as asc
    authorization backup between binary blanksasnull both bytedict case
    cast check collate column constraint create credentials cross
    current_date current_time current_timestamp current_user
    current_user_id default deferrable deflate defrag delta delta32k desc
    disable distinct do else emptyasnull enable encode encrypt encryption
    end except explicit false for foreign freeze from full globaldict256
    globaldict64k grant group gzip having identity ignore ilike in
    initially inner intersect into is isnull join leading left like limit
    localtime localtimestamp lun luns lzo lzop minus mostly13 mostly32
    mostly8 natural new not notnull null nulls off offline offset old on
    only open or order outer overlaps parallel partition percent placing
    primary raw readratio recover references rejectlog resort restore
    right select session_user similar some sysdate system table tag tdes
    text255 text32k then to top trailing true truncatecolumns union
    unique user using verbose wallet when where with without
    """.split()
)

_PLAIN_IDENT = re.compile(r"^[a-z_][a-z0-9_$]*$", re.IGNORECASE)


def _is_plain_identifier(name: str) -> bool:
    if name.lower() in RESERVED_WORDS:
        return False
    return _PLAIN_IDENT.match(name) is not None


def ident(name: str | None) -> str:
    """Escape a table, column or schema name.

    Plain, non-reserved names are returned unchanged. Anything else is
    wrapped in double quotes with internal double quotes doubled.

    Raises InputError when name is None.
    """
    if name is None:
        raise InputError("identifier required")
    if _is_plain_identifier(name):
        return name
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def literal(value: Any) -> str:
    """Escape a value for use as a SQL literal.

    None becomes NULL, lists and tuples become a parenthesized,
    comma-separated list of escaped elements. Strings containing a
    backslash use the E'' escape-string syntax.
    """
    if value is None:
        return "NULL"

    if isinstance(value, (list, tuple)):
        return "(" + ", ".join(literal(v) for v in value) + ")"

    text = _stringify(value)
    escaped = text.replace("'", "''")
    if "\\" in text:
        escaped = escaped.replace("\\", "\\\\")
        return f"E'{escaped}'"
    return f"'{escaped}'"
