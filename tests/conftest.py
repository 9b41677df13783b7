"""Shared fixtures for reflection analytics tests."""

import pytest

from reflection_analytics.models import Reflection


@pytest.fixture
def sample_reflections():
    """A small week of reflections, one with an unreadable timestamp."""
    return [
        Reflection(timestamp="2024-01-15T10:00:00Z", emotion_id="joy", emotion_name="Joy", intensity=7.0),
        Reflection(timestamp="2024-01-14T13:00:00Z", emotion_id="sadness", emotion_name="Sadness", intensity=3.0),
        Reflection(timestamp="2024-01-15T18:30:00.500Z", emotion_id="joy", emotion_name="Joy"),
        Reflection(timestamp="garbage", emotion_id="joy", emotion_name="Joy", intensity=5.0),
        Reflection(timestamp="2024-02-03T23:00:00Z", intensity=4.0),
    ]
