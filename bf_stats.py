#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Weapon stats lookup (SQLite)

Commands:
  lookup NAME         Print per-ammo-type stats for a weapon (exact name)
  check               Ping the store and print the integrity report

Notes:
- The store must already be provisioned and seeded; nothing here writes to it.
- Exit codes: 0 ok (an unknown weapon is ok), 1 integrity check failed,
  2 store unreachable, 3 query/schema mismatch.
"""

import argparse
import json
import logging
import sys

from weapon_stats.errors import ConnectivityError, QueryError
from weapon_stats.services.health_svc import ping, validate_data
from weapon_stats.services.lookup_svc import SqliteWeaponStatsRepository, WeaponStatsLookup

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UNREACHABLE = 2
EXIT_QUERY = 3


def _fmt(v) -> str:
    return "-" if v is None else str(v)


def cmd_lookup(args) -> int:
    records = WeaponStatsLookup(SqliteWeaponStatsRepository(args.db)).lookup(args.name)
    if args.json:
        print(json.dumps([r.model_dump(mode="json") for r in records], ensure_ascii=False, indent=2))
        return EXIT_OK
    if not records:
        print(f"no stats for weapon {args.name!r}")
        return EXIT_OK
    for r in records:
        print(
            f"{r.weapon_name} | {r.ammo_type_name} | mag={r.magazine_size} "
            f"empty_reload={_fmt(r.empty_reload_time)} tactical_reload={_fmt(r.tactical_reload_time)} "
            f"headshot=x{r.headshot_multiplier} pellets={_fmt(r.pellet_count)}"
        )
    return EXIT_OK


def cmd_check(args) -> int:
    ping(args.db)
    report = validate_data(args.db)
    for table, cnt in report.table_counts.items():
        print(f"{table}: {cnt}")
    for issue in report.issues:
        print(f"ISSUE: {issue}")
    print("OK" if report.is_valid else "INVALID")
    return EXIT_OK if report.is_valid else EXIT_INVALID


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Weapon ammo stats lookup (SQLite)")
    parser.add_argument("--db", help="database path; default from WEAPON_STATS_DB_PATH / config.yaml", default=None)
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_lookup = sub.add_parser("lookup", help="print stats for one weapon")
    p_lookup.add_argument("name", help="exact weapon name, e.g. AK-24")
    p_lookup.add_argument("--json", action="store_true", help="print a JSON array")
    p_lookup.set_defaults(func=cmd_lookup)

    p_check = sub.add_parser("check", help="ping the store and validate data integrity")
    p_check.set_defaults(func=cmd_check)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except ConnectivityError as e:
        print(f"[bf-stats] store unreachable: {e}", file=sys.stderr)
        return EXIT_UNREACHABLE
    except QueryError as e:
        print(f"[bf-stats] query failed: {e}", file=sys.stderr)
        return EXIT_QUERY


if __name__ == "__main__":
    sys.exit(main())
