"""Typed failures of the stats store.

An empty lookup result is not an error; these are raised only when the store
can't answer at all.
"""
from __future__ import annotations

import sqlite3

_SCHEMA_MARKERS = ("no such table", "no such column", "syntax error")


class StatsError(Exception):
    """Base class for store failures."""


class ConnectivityError(StatsError):
    """Store unreachable, unreadable, or the connection went away mid-query."""


class QueryError(StatsError):
    """Query doesn't match the actual schema (or rows don't match the expected shape)."""


def translate_db_error(exc: sqlite3.Error) -> StatsError:
    msg = str(exc)
    if isinstance(exc, sqlite3.OperationalError) and any(m in msg.lower() for m in _SCHEMA_MARKERS):
        return QueryError(msg)
    return ConnectivityError(msg)
