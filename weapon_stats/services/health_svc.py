# weapon_stats/services/health_svc.py
from __future__ import annotations

import logging
from typing import Optional

from ..db import get_conn
from ..models import ValidationReport
from ..repository import integrity_repo

logger = logging.getLogger(__name__)


def ping(db_path: Optional[str] = None) -> None:
    """Raises ConnectivityError when the store can't be reached."""
    with get_conn(db_path, read_only=True) as conn:
        conn.execute("SELECT 1").fetchone()
    logger.debug("store ping ok")


def validate_data(db_path: Optional[str] = None) -> ValidationReport:
    """Read-only integrity report over weapons / ammo_types / weapon_ammo_stats."""
    report = ValidationReport()
    with get_conn(db_path, read_only=True) as conn:
        report.table_counts = integrity_repo.table_counts(conn)
        checks = [
            (integrity_repo.count_orphan_stats(conn), "ammo stats have invalid references"),
            (integrity_repo.count_bad_magazine_sizes(conn), "ammo stats have magazine_size below 1"),
            (integrity_repo.count_bad_headshot_multipliers(conn), "ammo stats have non-positive headshot_multiplier"),
        ]

    for table, cnt in report.table_counts.items():
        if cnt == 0:
            report.is_valid = False
            report.issues.append(f"Table '{table}' is empty")
    for cnt, description in checks:
        if cnt > 0:
            report.is_valid = False
            report.issues.append(f"{cnt} {description}")

    if report.is_valid:
        logger.info("store validation passed")
    else:
        logger.info("store validation failed - %d issue(s)", len(report.issues))
    return report
