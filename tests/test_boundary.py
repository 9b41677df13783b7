"""Tests for the encoded-text boundary."""

import json
import logging

import pytest

from reflection_analytics.boundary import (
    Fallback,
    Ok,
    calculate_co_occurrence,
    calculate_statistics,
    calculate_time_patterns,
    calculate_trends,
    decode_numbers,
    decode_reflections,
)
from reflection_analytics.models import Location, Person

EMPTY_STATS = '{"mean":0,"median":0,"min":0,"max":0,"percentiles":{}}'

RECORDS = [
    {
        "timestamp": "2024-01-15T10:00:00Z",
        "emotionId": "joy",
        "emotionName": "Joy",
        "intensity": 7,
        "relatedEmotions": ["excitement"],
        "location": {"placeName": "Park", "city": "Kyoto"},
        "people": [{"id": "p1", "name": "Aki"}],
        "copingStrategies": ["walk"],
        "moodBefore": 4,
        "moodAfter": 6.5,
        "notes": "ignored",
    },
]


def test_statistics_round_trip():
    payload = json.loads(calculate_statistics("[1,2,3,4,5]"))

    assert payload["mean"] == 3.0
    assert payload["median"] == 3.0
    assert payload["min"] == 1.0
    assert payload["max"] == 5.0
    assert payload["percentiles"]["p50"] == 3.0


@pytest.mark.parametrize(
    "raw",
    ["[]", "", "not json", "{}", '{"values": [1]}', '["1"]', "[true]", "[null]", "[NaN]", "[Infinity]", "[1e400]", "[[1]]"],
)
def test_statistics_fallback(raw):
    """Bad or empty input resolves to the zeroed default."""
    assert calculate_statistics(raw) == EMPTY_STATS


def test_statistics_overflow_encodes_null():
    payload = json.loads(calculate_statistics("[1e308, 1e308]"))

    assert payload["mean"] is None
    assert payload["max"] == 1e308


@pytest.mark.parametrize(
    "raw",
    ["[]", "garbage", '{"timestamp": "2024-01-15T10:00:00Z"}', '[{"emotionId": "joy"}]', '[{"timestamp": 5}]',
     '[{"timestamp": "2024-01-15T10:00:00Z", "intensity": "7"}]', '[1, 2]'],
)
def test_reflection_fallbacks(raw):
    assert json.loads(calculate_time_patterns(raw)) == {"dayOfWeek": [], "timeOfDay": [], "month": []}
    assert json.loads(calculate_trends(raw)) == {"daily": [], "weekly": [], "monthly": []}
    assert calculate_co_occurrence(raw) == "[]"


def test_one_bad_element_fails_whole_decode():
    raw = json.dumps(RECORDS + [{"timestamp": None}])

    assert isinstance(decode_reflections(raw), Fallback)


def test_decode_reflections_maps_all_fields():
    outcome = decode_reflections(json.dumps(RECORDS))

    assert isinstance(outcome, Ok)
    r = outcome.value[0]
    assert r.emotion_id == "joy"
    assert r.intensity == 7.0
    assert r.related_emotions == ("excitement",)
    assert r.location == Location(place_name="Park", city="Kyoto", country=None)
    assert r.people == (Person(id="p1", name="Aki"),)
    assert r.coping_strategies == ("walk",)
    assert (r.mood_before, r.mood_after) == (4.0, 6.5)


def test_decode_accepts_bytes():
    assert isinstance(decode_reflections(json.dumps(RECORDS).encode("utf-8")), Ok)
    assert isinstance(decode_numbers(b"[1, 2.5]"), Ok)


def test_decode_empty_reason():
    assert decode_numbers("[]") == Fallback("empty")
    assert decode_reflections("{}") == Fallback("not_a_list")


def test_time_patterns_encoded():
    payload = json.loads(calculate_time_patterns(json.dumps(RECORDS)))

    assert payload["dayOfWeek"][0]["period"] == "monday"
    assert payload["dayOfWeek"][0]["averageIntensity"] == 7.0
    assert payload["timeOfDay"][0]["period"] == "morning"
    assert payload["month"][0]["topEmotions"] == [{"emotionId": "joy", "emotionName": "Joy", "count": 1}]


def test_unparseable_timestamp_gives_empty_patterns_but_pairs():
    raw = json.dumps([{"timestamp": "yesterday", "emotionId": "joy", "relatedEmotions": ["calm"]}])

    assert json.loads(calculate_time_patterns(raw)) == {"dayOfWeek": [], "timeOfDay": [], "month": []}
    assert json.loads(calculate_co_occurrence(raw))[0]["count"] == 1


def test_co_occurrence_encoded():
    assert json.loads(calculate_co_occurrence(json.dumps(RECORDS))) == [
        {"emotionPair": ["excitement", "joy"], "count": 1, "percentage": 100.0},
    ]


def test_trends_encoded():
    payload = json.loads(calculate_trends(json.dumps(RECORDS)))

    assert payload["daily"][0]["date"] == "2024-01-15"
    assert payload["weekly"][0]["date"] == "2024-W03"
    assert payload["monthly"][0]["topEmotion"]["emotionId"] == "joy"


def test_repeated_calls_are_identical():
    raw = json.dumps(RECORDS * 3)

    assert calculate_trends(raw) == calculate_trends(raw)
    assert calculate_time_patterns(raw) == calculate_time_patterns(raw)


def test_fallback_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="reflection_analytics"):
        calculate_statistics("oops")

    events = [json.loads(rec.getMessage()) for rec in caplog.records if rec.name == "reflection_analytics"]
    assert events[-1]["event"] == "analytics_fallback"
    assert events[-1]["operation"] == "statistics"
    assert events[-1]["reason"].startswith("invalid_json")


@pytest.mark.parametrize(
    "timestamp",
    [
        "1" * 5000 + "-01-15T10:00:00Z",
        "2024-01-15T" + "1" * 5000 + ":00:00Z",
        "99999999999-01-15T10:00:00Z",
    ],
)
def test_oversized_timestamp_fields_are_dropped(timestamp):
    """Overlong or out-of-range numbers drop the record instead of raising."""
    raw = json.dumps([
        {"timestamp": timestamp, "emotionId": "joy"},
        {"timestamp": "2024-01-15T10:00:00Z", "emotionId": "calm"},
    ])

    patterns = json.loads(calculate_time_patterns(raw))
    trends = json.loads(calculate_trends(raw))

    assert [p["period"] for p in patterns["month"]] == ["2024-01"]
    assert patterns["month"][0]["count"] == 1
    assert [p["date"] for p in trends["daily"]] == ["2024-01-15"]
