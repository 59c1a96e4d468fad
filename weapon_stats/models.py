from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

# Scales of the DECIMAL columns in weapon_ammo_stats.
RELOAD_TIME_QUANTUM = Decimal("0.01")
HEADSHOT_QUANTUM = Decimal("0.1")

RECORD_FIELDS = (
    "weapon_name",
    "ammo_type_name",
    "magazine_size",
    "empty_reload_time",
    "tactical_reload_time",
    "headshot_multiplier",
    "pellet_count",
)


def to_decimal(value: Any, quantum: Decimal) -> Optional[Decimal]:
    """None stays None; anything else becomes an exact Decimal at the column scale.

    Raises decimal.InvalidOperation for text that isn't a number, for
    non-finite values, and for values too large to quantize.
    """
    if value is None:
        return None
    if isinstance(value, Decimal):
        d = value
    elif isinstance(value, float):
        # repr of a float is its shortest round-tripping decimal form
        d = Decimal(repr(value))
    else:
        d = Decimal(str(value))
    if not d.is_finite():
        raise InvalidOperation(f"not a finite decimal: {value!r}")
    return d.quantize(quantum, rounding=ROUND_HALF_UP)


class WeaponAmmoStatRecord(BaseModel):
    """One (weapon, ammo type) stat row. None means "not applicable"."""

    model_config = ConfigDict(frozen=True)

    weapon_name: str
    ammo_type_name: str
    magazine_size: int = Field(ge=1)
    empty_reload_time: Optional[Decimal] = None
    tactical_reload_time: Optional[Decimal] = None
    headshot_multiplier: Decimal = Field(gt=0)
    pellet_count: Optional[int] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "WeaponAmmoStatRecord":
        return cls(
            weapon_name=row["weapon_name"],
            ammo_type_name=row["ammo_type_name"],
            magazine_size=row["magazine_size"],
            empty_reload_time=to_decimal(row["empty_reload_time"], RELOAD_TIME_QUANTUM),
            tactical_reload_time=to_decimal(row["tactical_reload_time"], RELOAD_TIME_QUANTUM),
            headshot_multiplier=to_decimal(row["headshot_multiplier"], HEADSHOT_QUANTUM),
            pellet_count=row["pellet_count"],
        )


class ValidationReport(BaseModel):
    is_valid: bool = True
    issues: List[str] = Field(default_factory=list)
    table_counts: Dict[str, int] = Field(default_factory=dict)
