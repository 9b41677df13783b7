# -*- coding: utf-8 -*-
"""Wire models for reflection analytics
----------------------------------------
camelCase JSON <-> core dataclasses.

- Reflection.timestamp is the only required key.
- Unknown keys are ignored; wrongly typed known keys fail validation.
- Numbers must be JSON numbers (no numeric strings, no booleans).
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr, TypeAdapter

from .models import Location, Person, Reflection


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LocationPayload(_WireModel):
    place_name: Optional[StrictStr] = Field(default=None, alias="placeName")
    city: Optional[StrictStr] = Field(default=None)
    country: Optional[StrictStr] = Field(default=None)

    def to_model(self) -> Location:
        return Location(place_name=self.place_name, city=self.city, country=self.country)


class PersonPayload(_WireModel):
    id: Optional[StrictStr] = Field(default=None)
    name: Optional[StrictStr] = Field(default=None)

    def to_model(self) -> Person:
        return Person(id=self.id, name=self.name)


class ReflectionPayload(_WireModel):
    timestamp: StrictStr = Field(..., description="ISO-8601 (UTC)")
    emotion_id: Optional[StrictStr] = Field(default=None, alias="emotionId")
    emotion_name: Optional[StrictStr] = Field(default=None, alias="emotionName")
    intensity: Optional[StrictFloat] = Field(default=None, description="unconstrained range")
    related_emotions: Optional[List[StrictStr]] = Field(default=None, alias="relatedEmotions")
    location: Optional[LocationPayload] = Field(default=None)
    people: Optional[List[PersonPayload]] = Field(default=None)
    coping_strategies: Optional[List[StrictStr]] = Field(default=None, alias="copingStrategies")
    mood_before: Optional[StrictFloat] = Field(default=None, alias="moodBefore")
    mood_after: Optional[StrictFloat] = Field(default=None, alias="moodAfter")

    def to_model(self) -> Reflection:
        return Reflection(
            timestamp=self.timestamp,
            emotion_id=self.emotion_id,
            emotion_name=self.emotion_name,
            intensity=self.intensity,
            related_emotions=tuple(self.related_emotions) if self.related_emotions is not None else None,
            location=self.location.to_model() if self.location else None,
            people=tuple(p.to_model() for p in self.people) if self.people is not None else None,
            coping_strategies=tuple(self.coping_strategies) if self.coping_strategies is not None else None,
            mood_before=self.mood_before,
            mood_after=self.mood_after,
        )


REFLECTION_LIST = TypeAdapter(List[ReflectionPayload])
NUMBER_LIST = TypeAdapter(List[StrictFloat])
