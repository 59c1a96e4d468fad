from __future__ import annotations

# weapon_stats/db.py
import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import yaml

from .errors import translate_db_error

logger = logging.getLogger(__name__)

# DB path resolution order:
# 1) explicit db_path argument
# 2) env WEAPON_STATS_DB_PATH
# 3) config.yaml test_db_path (under tests) / db_path
# 4) fallback: weapon_stats.db at the project root
_PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
_ROOT_DB = os.path.join(_PROJECT_ROOT, "weapon_stats.db")
_DEFAULT_BUSY_TIMEOUT_S = 5.0


def _read_config_yaml() -> dict:
    cfg_path = os.path.join(_PROJECT_ROOT, "config.yaml")
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("ignoring unreadable config %s: %s", cfg_path, e)
        return {}
    if not isinstance(cfg, dict):
        logger.warning("ignoring config %s: top level is not a mapping", cfg_path)
        return {}
    out = {}
    for k in ("db_path", "test_db_path"):
        v = cfg.get(k)
        if isinstance(v, str) and v.strip():
            out[k] = v.strip()
    timeout = cfg.get("busy_timeout_s")
    if isinstance(timeout, (int, float)) and not isinstance(timeout, bool) and timeout >= 0:
        out["busy_timeout_s"] = float(timeout)
    return out


def get_db_path(db_path: str | None = None) -> str:
    if db_path:
        return db_path
    env_path = os.environ.get("WEAPON_STATS_DB_PATH")
    if env_path:
        return env_path
    cfg = _read_config_yaml()
    is_test = (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)
    if is_test and cfg.get("test_db_path"):
        return cfg["test_db_path"]
    if cfg.get("db_path"):
        return cfg["db_path"]
    return _ROOT_DB


def get_busy_timeout() -> float:
    return _read_config_yaml().get("busy_timeout_s", _DEFAULT_BUSY_TIMEOUT_S)


def _read_only_uri(path: str) -> str:
    return Path(path).resolve().as_uri() + "?mode=ro"


@contextmanager
def get_conn(db_path: str | None = None, read_only: bool = False) -> Iterator[sqlite3.Connection]:
    """
    Open a SQLite connection for the duration of the block.

    The explicit db_path wins, otherwise get_db_path() decides. Read-only
    connections never create a missing database file, so an absent store
    surfaces as ConnectivityError. Driver errors raised inside the block are
    translated into StatsError subclasses.
    """
    path = get_db_path(db_path)
    target = _read_only_uri(path) if read_only else path
    try:
        conn = sqlite3.connect(
            target,
            detect_types=sqlite3.PARSE_DECLTYPES | sqlite3.PARSE_COLNAMES,
            check_same_thread=False,
            isolation_level=None,
            timeout=get_busy_timeout(),
            uri=read_only,
        )
    except sqlite3.Error as e:
        logger.warning("cannot open store %s: %s", path, e)
        raise translate_db_error(e) from e
    try:
        conn.execute("PRAGMA foreign_keys = ON;")
        conn.row_factory = sqlite3.Row
        yield conn
    except sqlite3.Error as e:
        logger.warning("store error on %s: %s", path, e)
        raise translate_db_error(e) from e
    finally:
        conn.close()
