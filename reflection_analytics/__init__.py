
from .models import Reflection, Location, Person, EmotionCount, TimePattern, TimePatternsResult, TrendDataPoint, TrendsResult, CoOccurrence, StatisticsResult
from .timestamps import resolve_timestamp, calculate_weekday
from .time_patterns import compute_time_patterns
from .trends import compute_trends, week_key
from .co_occurrence import compute_co_occurrence
from .stats import compute_statistics
from .boundary import calculate_time_patterns, calculate_co_occurrence, calculate_trends, calculate_statistics
