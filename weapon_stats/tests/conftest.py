import os
import sys
import sqlite3
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

SCHEMA_PATH = _PROJECT_ROOT / "schema.sql"


def apply_schema(path) -> None:
    schema = SCHEMA_PATH.read_text(encoding="utf-8")
    conn = sqlite3.connect(str(path))
    try:
        conn.executescript(schema)
        conn.commit()
    finally:
        conn.close()


@pytest.fixture(scope="session")
def tmp_db_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("db") / "weapon_stats_test.db"
    # Point weapon_stats to this temp DB
    os.environ["WEAPON_STATS_DB_PATH"] = str(path)
    apply_schema(path)
    return str(path)


@pytest.fixture(autouse=True)
def _clean_db(tmp_db_path):
    # Safety: ensure we only ever wipe the temp DB, never a real one
    assert os.environ.get("WEAPON_STATS_DB_PATH") == tmp_db_path, "Refusing to clean non-temp DB"
    conn = sqlite3.connect(tmp_db_path)
    try:
        for t in ("weapon_ammo_stats", "weapons", "ammo_types"):
            conn.execute(f"DELETE FROM {t}")
        conn.commit()
    finally:
        conn.close()
    yield


@pytest.fixture()
def seed(tmp_db_path):
    """Insert one weapon_ammo_stats row (creating the weapon / ammo type on demand).

    Decimals are bound as text, the way a provisioning script would bind them.
    """
    def _seed(weapon, ammo, magazine_size, empty_reload=None, tactical_reload=None,
              headshot="1.5", pellets=None, db_path=None):
        conn = sqlite3.connect(db_path or tmp_db_path)
        try:
            conn.execute("INSERT OR IGNORE INTO weapons(weapon_name) VALUES(?)", (weapon,))
            conn.execute("INSERT OR IGNORE INTO ammo_types(ammo_type_name) VALUES(?)", (ammo,))
            wid = conn.execute("SELECT weapon_id FROM weapons WHERE weapon_name=?", (weapon,)).fetchone()[0]
            aid = conn.execute("SELECT ammo_id FROM ammo_types WHERE ammo_type_name=?", (ammo,)).fetchone()[0]
            conn.execute(
                "INSERT INTO weapon_ammo_stats(weapon_id, ammo_id, magazine_size, empty_reload_time, "
                "tactical_reload_time, headshot_multiplier, pellet_count) VALUES(?,?,?,?,?,?,?)",
                (wid, aid, magazine_size,
                 None if empty_reload is None else str(empty_reload),
                 None if tactical_reload is None else str(tactical_reload),
                 None if headshot is None else str(headshot),
                 pellets),
            )
            conn.commit()
        finally:
            conn.close()
    return _seed


@pytest.fixture()
def make_db(tmp_path):
    """Create a fresh database from schema.sql (or from custom DDL) under tmp_path."""
    def _make(name="other.db", ddl=None):
        path = tmp_path / name
        if ddl is None:
            apply_schema(path)
        else:
            conn = sqlite3.connect(str(path))
            try:
                conn.executescript(ddl)
                conn.commit()
            finally:
                conn.close()
        return str(path)
    return _make
