from __future__ import annotations

from sqlite3 import Connection
from typing import Dict, Iterable

STATS_TABLES = ("weapons", "ammo_types", "weapon_ammo_stats")


def table_counts(conn: Connection, tables: Iterable[str] = STATS_TABLES) -> Dict[str, int]:
    out: Dict[str, int] = {}
    for t in tables:
        if t not in STATS_TABLES:
            raise ValueError(f"unknown table: {t}")
        out[t] = conn.execute(f"SELECT COUNT(*) AS cnt FROM {t}").fetchone()["cnt"]
    return out


def count_orphan_stats(conn: Connection) -> int:
    """Stat rows pointing at a weapon or ammo type that doesn't exist."""
    sql = """
    SELECT COUNT(*) AS cnt FROM weapon_ammo_stats s
    WHERE NOT EXISTS (SELECT 1 FROM weapons w WHERE w.weapon_id = s.weapon_id)
       OR NOT EXISTS (SELECT 1 FROM ammo_types a WHERE a.ammo_id = s.ammo_id)
    """
    return conn.execute(sql).fetchone()["cnt"]


def count_bad_magazine_sizes(conn: Connection) -> int:
    row = conn.execute(
        "SELECT COUNT(*) AS cnt FROM weapon_ammo_stats WHERE magazine_size IS NULL OR magazine_size < 1"
    ).fetchone()
    return row["cnt"]


def count_bad_headshot_multipliers(conn: Connection) -> int:
    row = conn.execute(
        "SELECT COUNT(*) AS cnt FROM weapon_ammo_stats WHERE headshot_multiplier IS NULL OR headshot_multiplier <= 0"
    ).fetchone()
    return row["cnt"]
