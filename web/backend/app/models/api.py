"""Pydantic models for API request/response serialization.

These models mirror the Solace dataclasses and expose the camelCase field
names the browser client uses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr


class _CamelModel(BaseModel):
    """Accepts either the camelCase alias or the Python field name."""

    model_config = ConfigDict(populate_by_name=True)


# ---------------------------------------------------------------------------
# Chat / conversation models
# ---------------------------------------------------------------------------


class ChatRequest(_CamelModel):
    """Body of ``POST /api/chat``."""

    message: StrictStr = ""


class ConversationResponse(_CamelModel):
    """Mirrors solace.conversations.models.ConversationEntry."""

    id: str
    user_message: str = Field(alias="userMessage")
    ai_response: str = Field(alias="aiResponse")
    is_safety_alert: bool = Field(alias="isSafetyAlert")
    created_at: str = Field(alias="createdAt")


# ---------------------------------------------------------------------------
# Safety keyword models
# ---------------------------------------------------------------------------


class SafetyKeywordCreateRequest(_CamelModel):
    keyword: StrictStr
    is_active: StrictBool = Field(True, alias="isActive")


class SafetyKeywordUpdateRequest(_CamelModel):
    is_active: StrictBool = Field(alias="isActive")


class SafetyKeywordResponse(_CamelModel):
    """Mirrors solace.safety.models.SafetyKeyword."""

    id: str
    keyword: str
    is_active: bool = Field(alias="isActive")
    created_at: str = Field(alias="createdAt")


# ---------------------------------------------------------------------------
# Emergency contact models
# ---------------------------------------------------------------------------


class EmergencyContactRequest(_CamelModel):
    name: StrictStr
    phone: StrictStr
    relationship: StrictStr


class EmergencyContactResponse(_CamelModel):
    """Mirrors solace.records.models.EmergencyContact."""

    id: str
    name: str
    phone: str
    relationship: str
    created_at: str = Field(alias="createdAt")


# ---------------------------------------------------------------------------
# Health tracking models
# ---------------------------------------------------------------------------


class CycleTrackingRequest(_CamelModel):
    start_date: StrictStr = Field(alias="startDate")
    cycle_length: StrictInt = Field(28, alias="cycleLength")
    period_length: StrictInt = Field(5, alias="periodLength")


class CycleTrackingResponse(_CamelModel):
    id: str
    start_date: str = Field(alias="startDate")
    cycle_length: int = Field(alias="cycleLength")
    period_length: int = Field(alias="periodLength")
    created_at: str = Field(alias="createdAt")


class MoodEntryRequest(_CamelModel):
    mood: StrictStr
    notes: Optional[StrictStr] = None


class MoodEntryResponse(_CamelModel):
    id: str
    mood: str
    notes: Optional[str] = None
    created_at: str = Field(alias="createdAt")


class WellnessMetricRequest(_CamelModel):
    date: StrictStr
    water_intake: StrictInt = Field(0, alias="waterIntake")
    sleep_hours: Optional[StrictInt] = Field(None, alias="sleepHours")
    exercise_minutes: Optional[StrictInt] = Field(None, alias="exerciseMinutes")


class WellnessMetricResponse(_CamelModel):
    id: str
    date: str
    water_intake: int = Field(alias="waterIntake")
    sleep_hours: Optional[int] = Field(None, alias="sleepHours")
    exercise_minutes: Optional[int] = Field(None, alias="exerciseMinutes")
    created_at: str = Field(alias="createdAt")


# ---------------------------------------------------------------------------
# Voice settings models
# ---------------------------------------------------------------------------


class VoiceSettingsRequest(_CamelModel):
    voice_name: StrictStr = Field("Google US English Female", alias="voiceName")
    pitch: StrictInt = 10
    rate: StrictInt = 10


class VoiceSettingsResponse(_CamelModel):
    id: str
    voice_name: str = Field(alias="voiceName")
    pitch: int
    rate: int
    updated_at: str = Field(alias="updatedAt")


# ---------------------------------------------------------------------------
# Misc
# ---------------------------------------------------------------------------


class SuccessResponse(BaseModel):
    success: bool = True
