from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from .models import Reflection, EmotionCount

UNKNOWN_EMOTION_ID = "unknown"
UNKNOWN_EMOTION_NAME = "Unknown"

def emotion_of(r: Reflection) -> Tuple[str, str]:
    """Primary (id, name) of a reflection with placeholder fallbacks."""
    emotion_id = r.emotion_id if r.emotion_id is not None else UNKNOWN_EMOTION_ID
    emotion_name = r.emotion_name if r.emotion_name is not None else UNKNOWN_EMOTION_NAME
    return emotion_id, emotion_name

@dataclass
class Bucket:
    count: int = 0
    intensities: List[float] = field(default_factory=list)
    # emotion_id -> [display name (first seen), count]
    emotions: Dict[str, list] = field(default_factory=dict)

    def add(self, emotion_id: str, emotion_name: str, intensity: Optional[float]) -> None:
        self.count += 1
        if intensity is not None:
            self.intensities.append(float(intensity))
        entry = self.emotions.setdefault(emotion_id, [emotion_name, 0])
        entry[1] += 1

    def average_intensity(self) -> Optional[float]:
        if not self.intensities:
            return None
        return sum(self.intensities) / len(self.intensities)

    def ranked_emotions(self, limit: Optional[int] = None) -> List[EmotionCount]:
        # count desc, then emotion id asc for a stable order between runs
        ordered = sorted(self.emotions.items(), key=lambda kv: (-kv[1][1], kv[0]))
        if limit is not None:
            ordered = ordered[:limit]
        return [EmotionCount(emotion_id=k, emotion_name=v[0], count=v[1]) for k, v in ordered]

class BucketMap(dict):
    """period label -> Bucket"""

    def add(self, period: str, emotion_id: str, emotion_name: str, intensity: Optional[float]) -> None:
        bucket = self.get(period)
        if bucket is None:
            bucket = self[period] = Bucket()
        bucket.add(emotion_id, emotion_name, intensity)
