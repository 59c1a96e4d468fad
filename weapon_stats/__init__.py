"""Read-only lookup of per-weapon, per-ammo-type ballistic stats (SQLite)."""
from __future__ import annotations

from .errors import ConnectivityError, QueryError, StatsError
from .models import ValidationReport, WeaponAmmoStatRecord
from .services.health_svc import ping, validate_data
from .services.lookup_svc import (
    InMemoryWeaponStatsRepository,
    SqliteWeaponStatsRepository,
    WeaponStatsLookup,
    WeaponStatsRepository,
    lookup,
)

__version__ = "0.1.0"

__all__ = [
    "ConnectivityError",
    "InMemoryWeaponStatsRepository",
    "QueryError",
    "SqliteWeaponStatsRepository",
    "StatsError",
    "ValidationReport",
    "WeaponAmmoStatRecord",
    "WeaponStatsLookup",
    "WeaponStatsRepository",
    "lookup",
    "ping",
    "validate_data",
]
