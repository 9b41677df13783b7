from __future__ import annotations
from typing import List, Sequence
import math
from .models import Reflection, TrendDataPoint, TrendsResult
from .timestamps import resolve_timestamp, day_key, month_key
from .buckets import BucketMap, emotion_of

# Trends: daily, weekly and monthly series, each point carrying its single top emotion.
# Series are ordered by label string. Week labels (YYYY-Www) are therefore only
# chronological inside one year; that format is kept as-is for consumers.

DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0

def day_of_year(year: int, month: int, day: int) -> int:
    # out-of-range months clamp to "no months before" / "all twelve before"
    preceding = max(0, min(month - 1, len(DAYS_IN_MONTH)))
    n = day + sum(DAYS_IN_MONTH[:preceding])
    if is_leap_year(year) and month > 2:
        n += 1
    return n

def week_key(year: int, month: int, day: int) -> str:
    """YYYY-Www with week = ceil(day_of_year / 7)."""
    week = math.ceil(day_of_year(year, month, day) / 7)
    return f"{year:04d}-W{week:02d}"

def _format_trends(buckets: BucketMap) -> List[TrendDataPoint]:
    points = []
    for label, b in buckets.items():
        ranked = b.ranked_emotions(1)
        points.append(TrendDataPoint(
            date=label,
            count=b.count,
            average_intensity=b.average_intensity(),
            top_emotion=ranked[0] if ranked else None,
        ))
    points.sort(key=lambda p: p.date)
    return points

def compute_trends(reflections: Sequence[Reflection]) -> TrendsResult:
    daily = BucketMap()
    weekly = BucketMap()
    monthly = BucketMap()

    for r in reflections:
        ts = resolve_timestamp(r.timestamp)
        if ts is None:
            continue
        emotion_id, emotion_name = emotion_of(r)
        daily.add(day_key(ts.year, ts.month, ts.day), emotion_id, emotion_name, r.intensity)
        weekly.add(week_key(ts.year, ts.month, ts.day), emotion_id, emotion_name, r.intensity)
        monthly.add(month_key(ts.year, ts.month), emotion_id, emotion_name, r.intensity)

    return TrendsResult(
        daily=_format_trends(daily),
        weekly=_format_trends(weekly),
        monthly=_format_trends(monthly),
    )
