from reflection_analytics import Reflection, compute_time_patterns, compute_trends, compute_co_occurrence, compute_statistics

# sample reflections (UTC)
reflections = [
    Reflection(timestamp="2025-10-01T09:12:00Z", emotion_id="sadness", emotion_name="Sadness", intensity=4, related_emotions=("anxiety",)),
    Reflection(timestamp="2025-10-01T22:40:00Z", emotion_id="peace", emotion_name="Peace", intensity=6),
    Reflection(timestamp="2025-10-02T08:10:00.250Z", emotion_id="joy", emotion_name="Joy", intensity=8, related_emotions=("excitement", "peace")),
    Reflection(timestamp="2025-10-03T19:05:00Z", emotion_id="anxiety", emotion_name="Anxiety", intensity=5, related_emotions=("sadness",)),
    Reflection(timestamp="2025-10-04T21:33:00Z", emotion_id="peace", emotion_name="Peace"),
    Reflection(timestamp="not-a-date", emotion_id="joy", emotion_name="Joy", intensity=7, related_emotions=("peace",)),
]

patterns = compute_time_patterns(reflections)
trends = compute_trends(reflections)
pairs = compute_co_occurrence(reflections)
stats = compute_statistics([r.intensity for r in reflections if r.intensity is not None])

print("=== Time Patterns ===")
print(patterns.to_dict())
print("\n=== Trends ===")
print(trends.to_dict())
print("\n=== Co-occurrence ===")
print([p.to_dict() for p in pairs])
print("\n=== Statistics ===")
print(stats.to_dict())
