from __future__ import annotations
from typing import List, Sequence, Tuple
from .models import Reflection, TimePattern, TimePatternsResult
from .timestamps import DAY_NAMES, resolve_timestamp, month_key
from .buckets import BucketMap, emotion_of

# Time patterns: how reflections spread over the week, the day and the calendar.
# Policy:
# - Records whose timestamp does not resolve are skipped silently.
# - Hours are read as written (no timezone conversion).
# - Each pattern lists at most TOP_EMOTIONS_LIMIT emotions, count desc.

TIME_OF_DAY_NAMES = ("morning", "afternoon", "evening", "night")
TOP_EMOTIONS_LIMIT = 5

def _time_of_day(hour: int) -> str:
    # morning [5,12), afternoon [12,17), evening [17,22), night otherwise
    if 5 <= hour < 12:
        return "morning"
    if 12 <= hour < 17:
        return "afternoon"
    if 17 <= hour < 22:
        return "evening"
    return "night"

def _format_patterns(buckets: BucketMap, order: Sequence[str] = ()) -> List[TimePattern]:
    patterns = [
        TimePattern(
            period=period,
            count=b.count,
            average_intensity=b.average_intensity(),
            top_emotions=b.ranked_emotions(TOP_EMOTIONS_LIMIT),
        )
        for period, b in buckets.items()
    ]
    if order:
        rank = {name: i for i, name in enumerate(order)}

        def _key(p: TimePattern) -> Tuple[int, int, int, str]:
            # known labels first in canonical order; unknown ones after, count desc
            if p.period in rank:
                return (0, rank[p.period], 0, "")
            return (1, 0, -p.count, p.period)

        patterns.sort(key=_key)
    else:
        patterns.sort(key=lambda p: (-p.count, p.period))
    return patterns

def compute_time_patterns(reflections: Sequence[Reflection]) -> TimePatternsResult:
    day_of_week = BucketMap()
    time_of_day = BucketMap()
    month = BucketMap()

    for r in reflections:
        ts = resolve_timestamp(r.timestamp)
        if ts is None:
            continue
        emotion_id, emotion_name = emotion_of(r)
        day_of_week.add(DAY_NAMES[ts.weekday], emotion_id, emotion_name, r.intensity)
        time_of_day.add(_time_of_day(ts.hour), emotion_id, emotion_name, r.intensity)
        month.add(month_key(ts.year, ts.month), emotion_id, emotion_name, r.intensity)

    return TimePatternsResult(
        day_of_week=_format_patterns(day_of_week, DAY_NAMES),
        time_of_day=_format_patterns(time_of_day, TIME_OF_DAY_NAMES),
        month=_format_patterns(month),
    )
