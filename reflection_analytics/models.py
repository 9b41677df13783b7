from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Optional, Tuple, Any

@dataclass(frozen=True)
class Location:
    place_name: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None

@dataclass(frozen=True)
class Person:
    id: Optional[str] = None
    name: Optional[str] = None

@dataclass(frozen=True)
class Reflection:
    timestamp: str                  # ISO-8601, UTC
    emotion_id: Optional[str] = None
    emotion_name: Optional[str] = None
    intensity: Optional[float] = None
    related_emotions: Optional[Tuple[str, ...]] = None
    location: Optional[Location] = None
    people: Optional[Tuple[Person, ...]] = None
    coping_strategies: Optional[Tuple[str, ...]] = None
    mood_before: Optional[float] = None
    mood_after: Optional[float] = None

@dataclass
class EmotionCount:
    emotion_id: str
    emotion_name: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"emotionId": self.emotion_id, "emotionName": self.emotion_name, "count": self.count}

@dataclass
class TimePattern:
    period: str
    count: int
    average_intensity: Optional[float]
    top_emotions: List[EmotionCount] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "period": self.period,
            "count": self.count,
            "averageIntensity": self.average_intensity,
            "topEmotions": [e.to_dict() for e in self.top_emotions],
        }

@dataclass
class TimePatternsResult:
    day_of_week: List[TimePattern] = field(default_factory=list)
    time_of_day: List[TimePattern] = field(default_factory=list)
    month: List[TimePattern] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dayOfWeek": [p.to_dict() for p in self.day_of_week],
            "timeOfDay": [p.to_dict() for p in self.time_of_day],
            "month": [p.to_dict() for p in self.month],
        }

@dataclass
class TrendDataPoint:
    date: str  # period label: YYYY-MM-DD / YYYY-Www / YYYY-MM
    count: int
    average_intensity: Optional[float]
    top_emotion: Optional[EmotionCount] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "count": self.count,
            "averageIntensity": self.average_intensity,
            "topEmotion": self.top_emotion.to_dict() if self.top_emotion else None,
        }

@dataclass
class TrendsResult:
    daily: List[TrendDataPoint] = field(default_factory=list)
    weekly: List[TrendDataPoint] = field(default_factory=list)
    monthly: List[TrendDataPoint] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "daily": [p.to_dict() for p in self.daily],
            "weekly": [p.to_dict() for p in self.weekly],
            "monthly": [p.to_dict() for p in self.monthly],
        }

@dataclass
class CoOccurrence:
    emotion_pair: Tuple[str, str]  # sorted ascending
    count: int
    percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return {"emotionPair": list(self.emotion_pair), "count": self.count, "percentage": self.percentage}

@dataclass
class StatisticsResult:
    mean: float = 0.0
    median: float = 0.0
    min: float = 0.0
    max: float = 0.0
    percentiles: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mean": self.mean,
            "median": self.median,
            "min": self.min,
            "max": self.max,
            "percentiles": dict(self.percentiles),
        }
