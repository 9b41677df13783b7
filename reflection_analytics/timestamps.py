from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import re

# Resolver for the restricted timestamp form YYYY-MM-DDTHH:MM[:SS[.fff]][Z].
# No range validation: month 13 or hour 25 come back as given.

DAY_NAMES = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"\+?[0-9]+")

@dataclass(frozen=True)
class ResolvedTimestamp:
    year: int
    month: int
    day: int
    hour: int
    minute: int
    weekday: int  # 0=Sunday .. 6=Saturday

I32_MIN, I32_MAX = -(2 ** 31), 2 ** 31 - 1
U32_MAX = 2 ** 32 - 1

def _to_int(s: str, signed: bool = False) -> Optional[int]:
    # year is a signed 32-bit field, the rest unsigned 32-bit; anything wider fails
    pattern = _SIGNED if signed else _UNSIGNED
    if not pattern.fullmatch(s):
        return None
    digits = s.lstrip("+-").lstrip("0") or "0"
    if len(digits) > 10:
        return None
    v = -int(digits) if s.startswith("-") else int(digits)
    lo, hi = (I32_MIN, I32_MAX) if signed else (0, U32_MAX)
    if v < lo or v > hi:
        return None
    return v

def calculate_weekday(year: int, month: int, day: int) -> int:
    """Zeller's congruence, remapped from 0=Saturday to 0=Sunday."""
    y, m = year, month
    if m < 3:
        m += 12
        y -= 1
    k = y % 100
    j = y // 100
    h = (day + (13 * (m + 1)) // 5 + k + k // 4 + j // 4 - 2 * j) % 7
    return (h + 6) % 7

def resolve_timestamp(ts: str) -> Optional[ResolvedTimestamp]:
    """Return calendar fields for ``ts`` or None when it does not parse."""
    if not isinstance(ts, str):
        return None
    parts = ts.split("T")
    if len(parts) != 2:
        return None

    date_parts = parts[0].split("-")
    if len(date_parts) != 3:
        return None
    year = _to_int(date_parts[0], signed=True)
    month = _to_int(date_parts[1])
    day = _to_int(date_parts[2])
    if year is None or month is None or day is None:
        return None

    # seconds and fractions are not read; only hour and minute matter
    time_parts = parts[1].rstrip("Z").split(":")
    if len(time_parts) < 2:
        return None
    hour = _to_int(time_parts[0])
    minute = _to_int(time_parts[1])
    if hour is None or minute is None:
        return None

    return ResolvedTimestamp(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        weekday=calculate_weekday(year, month, day),
    )

def month_key(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"

def day_key(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"
