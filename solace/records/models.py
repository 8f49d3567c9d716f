"""Domain models for the personal wellness records."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class Mood(str, Enum):
    """Moods a user can log."""

    happy = "happy"
    calm = "calm"
    anxious = "anxious"
    sad = "sad"
    energetic = "energetic"
    stressed = "stressed"


@dataclass
class EmergencyContact:
    """Someone to reach when the user needs help."""

    id: str
    name: str
    phone: str
    relationship: str
    created_at: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            self.id = uuid.uuid4().hex
        if not self.created_at:
            self.created_at = _now()


@dataclass
class CycleTracking:
    """A logged menstrual cycle."""

    id: str
    start_date: str
    cycle_length: int = 28
    period_length: int = 5
    created_at: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            self.id = uuid.uuid4().hex
        if not self.created_at:
            self.created_at = _now()


@dataclass
class MoodEntry:
    """A single mood check-in."""

    id: str
    mood: Mood
    notes: Optional[str] = None
    created_at: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            self.id = uuid.uuid4().hex
        if not self.created_at:
            self.created_at = _now()
        if isinstance(self.mood, str):
            self.mood = Mood(self.mood)


@dataclass
class WellnessMetric:
    """Daily water, sleep and exercise figures."""

    id: str
    date: str
    water_intake: int = 0  # ml
    sleep_hours: Optional[int] = None
    exercise_minutes: Optional[int] = None
    created_at: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            self.id = uuid.uuid4().hex
        if not self.created_at:
            self.created_at = _now()


DEFAULT_VOICE_NAME = "Google US English Female"


@dataclass
class VoiceSettings:
    """Speech synthesis preferences.  Pitch and rate are tenths (10 == 1.0)."""

    id: str
    voice_name: str = DEFAULT_VOICE_NAME
    pitch: int = 10
    rate: int = 10
    updated_at: str = ""

    def __post_init__(self) -> None:
        if not self.updated_at:
            self.updated_at = _now()
