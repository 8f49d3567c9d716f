"""Personal wellness records: emergency contacts, health logs, voice settings."""

from solace.records.models import (
    CycleTracking,
    EmergencyContact,
    Mood,
    MoodEntry,
    VoiceSettings,
    WellnessMetric,
)
from solace.records.store import RecordStore

__all__ = [
    "CycleTracking",
    "EmergencyContact",
    "Mood",
    "MoodEntry",
    "RecordStore",
    "VoiceSettings",
    "WellnessMetric",
]
