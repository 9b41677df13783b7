from __future__ import annotations
from typing import List, Sequence, Tuple
from collections import Counter
from .models import Reflection, CoOccurrence

# Emotion co-occurrence: unordered pairs of emotions logged together in one reflection.
# Timestamps are ignored here, so every record counts towards the total.

TOP_PAIRS_LIMIT = 20

def _emotions_of(r: Reflection) -> List[str]:
    # primary first, then related, duplicates kept as given
    emotions = []
    if r.emotion_id is not None:
        emotions.append(r.emotion_id)
    if r.related_emotions:
        emotions.extend(r.related_emotions)
    return emotions

def count_pairs(reflections: Sequence[Reflection]) -> Counter:
    """(a, b) with a <= b -> number of times the two appeared in one record."""
    pairs: Counter = Counter()
    for r in reflections:
        emotions = _emotions_of(r)
        for i in range(len(emotions)):
            for j in range(i + 1, len(emotions)):
                a, b = emotions[i], emotions[j]
                key: Tuple[str, str] = (a, b) if a <= b else (b, a)
                pairs[key] += 1
    return pairs

def compute_co_occurrence(reflections: Sequence[Reflection]) -> List[CoOccurrence]:
    total = len(reflections)
    pairs = count_pairs(reflections)
    ordered = sorted(pairs.items(), key=lambda kv: (-kv[1], kv[0]))[:TOP_PAIRS_LIMIT]
    return [
        CoOccurrence(
            emotion_pair=pair,
            count=count,
            percentage=(count / total * 100.0) if total > 0 else 0.0,
        )
        for pair, count in ordered
    ]
