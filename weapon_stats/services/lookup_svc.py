"""
Weapon stats lookup.

WeaponStatsLookup only talks to a WeaponStatsRepository, so the SQLite store
can be swapped for the in-memory one in tests or for callers that already
hold the rows.
"""
from __future__ import annotations

import logging
from decimal import InvalidOperation
from typing import Iterable, List, Optional, Protocol

from pydantic import ValidationError

from ..db import get_conn
from ..errors import QueryError
from ..models import WeaponAmmoStatRecord
from ..repository import weapon_ammo_repo

logger = logging.getLogger(__name__)


class WeaponStatsRepository(Protocol):
    def fetch_ammo_stats(self, weapon_name: str) -> List[WeaponAmmoStatRecord]:
        ...


class SqliteWeaponStatsRepository:
    """Reads weapon_ammo_stats through a fresh read-only connection per call."""

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path

    def fetch_ammo_stats(self, weapon_name: str) -> List[WeaponAmmoStatRecord]:
        try:
            weapon_name.encode("utf-8")
        except UnicodeEncodeError:
            # lone surrogates; no stored name can match
            logger.debug("lookup %r is not valid UTF-8, no match", weapon_name)
            return []
        with get_conn(self.db_path, read_only=True) as conn:
            rows = weapon_ammo_repo.list_ammo_stats(conn, weapon_name)
        out = []
        for r in rows:
            try:
                out.append(WeaponAmmoStatRecord.from_row(r))
            except (ValidationError, InvalidOperation) as e:
                raise QueryError(f"stat row for {weapon_name!r} does not match the expected shape: {e}") from e
        return out


class InMemoryWeaponStatsRepository:
    def __init__(self, records: Iterable[WeaponAmmoStatRecord] = ()):
        self._records: List[WeaponAmmoStatRecord] = []
        seen = set()
        for rec in records:
            key = (rec.weapon_name, rec.ammo_type_name)
            if key in seen:
                raise ValueError(f"duplicate stats for {key[0]!r} / {key[1]!r}")
            seen.add(key)
            self._records.append(rec)

    def fetch_ammo_stats(self, weapon_name: str) -> List[WeaponAmmoStatRecord]:
        matched = [r for r in self._records if r.weapon_name == weapon_name]
        return sorted(matched, key=lambda r: r.ammo_type_name)


class WeaponStatsLookup:
    def __init__(self, repository: Optional[WeaponStatsRepository] = None):
        self.repository = repository if repository is not None else SqliteWeaponStatsRepository()

    def lookup(self, weapon_name: str) -> List[WeaponAmmoStatRecord]:
        """
        All ammo-type stats for a weapon, ascending by ammo type name.

        The name must match the stored one exactly. Unknown weapons and
        weapons without stats give an empty list; store failures raise
        ConnectivityError / QueryError.
        """
        if not isinstance(weapon_name, str):
            raise TypeError(f"weapon_name must be str, got {type(weapon_name).__name__}")
        records = list(self.repository.fetch_ammo_stats(weapon_name))
        logger.debug("lookup %r -> %d record(s)", weapon_name, len(records))
        return records


def lookup(weapon_name: str, db_path: Optional[str] = None) -> List[WeaponAmmoStatRecord]:
    return WeaponStatsLookup(SqliteWeaponStatsRepository(db_path)).lookup(weapon_name)
