from __future__ import annotations

from sqlite3 import Connection, Row
from typing import List

# Inner joins drop weapons without stats; ORDER BY re-sorts on every call.
AMMO_STATS_SQL = """
SELECT w.weapon_name, a.ammo_type_name, s.magazine_size,
       s.empty_reload_time, s.tactical_reload_time,
       s.headshot_multiplier, s.pellet_count
FROM weapons w
JOIN weapon_ammo_stats s ON s.weapon_id = w.weapon_id
JOIN ammo_types a ON a.ammo_id = s.ammo_id
WHERE w.weapon_name = ?
ORDER BY a.ammo_type_name
"""


def list_ammo_stats(conn: Connection, weapon_name: str) -> List[Row]:
    """All stat rows for one weapon, matched exactly on its stored name."""
    return conn.execute(AMMO_STATS_SQL, (weapon_name,)).fetchall()
