"""In-memory storage for emergency contacts, health logs and voice settings.

Nothing here is persisted; a new :class:`RecordStore` starts empty.
"""

from __future__ import annotations

import threading
import uuid
from datetime import date, datetime, timezone
from typing import Optional

from solace.errors import NotFoundError, ValidationError
from solace.records.models import (
    CycleTracking,
    EmergencyContact,
    Mood,
    MoodEntry,
    VoiceSettings,
    WellnessMetric,
)

MAX_VOICE_LEVEL = 20


# ---------------------------------------------------------------------------
# Field validation helpers
# ---------------------------------------------------------------------------


def _require_text(value: object, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must be a non-empty string")
    return value


def _require_int(
    value: object,
    field_name: str,
    minimum: int = 0,
    maximum: Optional[int] = None,
) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer")
    if value < minimum or (maximum is not None and value > maximum):
        raise ValidationError(f"{field_name} is out of range")
    return value


def _optional_int(value: object, field_name: str) -> Optional[int]:
    if value is None:
        return None
    return _require_int(value, field_name)


def _to_utc(value: datetime) -> str:
    # Naive values are taken as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc).isoformat()
    return value.astimezone(timezone.utc).isoformat()


def _require_timestamp(value: object, field_name: str) -> str:
    """Accept a date, datetime or ISO-8601 string; return UTC ISO text.

    Every stored value shares the UTC offset, so text order is instant order.
    """
    if isinstance(value, datetime):
        return _to_utc(value)
    if isinstance(value, date):
        return _to_utc(datetime(value.year, value.month, value.day))
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            pass
        else:
            return _to_utc(parsed)
    raise ValidationError(f"{field_name} must be an ISO-8601 date")


class RecordStore:
    """Keeps the user's wellness records in memory."""

    def __init__(self) -> None:
        self._contacts: dict[str, EmergencyContact] = {}
        self._cycles: dict[str, CycleTracking] = {}
        self._moods: dict[str, MoodEntry] = {}
        self._metrics: dict[str, WellnessMetric] = {}
        self._voice: Optional[VoiceSettings] = None
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Emergency contacts
    # ------------------------------------------------------------------

    def list_contacts(self) -> list[EmergencyContact]:
        """Newest first."""
        with self._lock:
            return list(reversed(list(self._contacts.values())))

    def get_contact(self, contact_id: str) -> EmergencyContact:
        contact = self._contacts.get(contact_id)
        if contact is None:
            raise NotFoundError("Contact not found")
        return contact

    def create_contact(self, name: str, phone: str, relationship: str) -> EmergencyContact:
        contact = EmergencyContact(
            id="",
            name=_require_text(name, "name"),
            phone=_require_text(phone, "phone"),
            relationship=_require_text(relationship, "relationship"),
        )
        with self._lock:
            self._contacts[contact.id] = contact
        return contact

    def update_contact(
        self, contact_id: str, name: str, phone: str, relationship: str
    ) -> EmergencyContact:
        """Replace a contact's fields, keeping its id and creation time."""
        name = _require_text(name, "name")
        phone = _require_text(phone, "phone")
        relationship = _require_text(relationship, "relationship")
        with self._lock:
            existing = self._contacts.get(contact_id)
            if existing is None:
                raise NotFoundError("Contact not found")
            updated = EmergencyContact(
                id=contact_id,
                name=name,
                phone=phone,
                relationship=relationship,
                created_at=existing.created_at,
            )
            self._contacts[contact_id] = updated
        return updated

    def delete_contact(self, contact_id: str) -> None:
        """Remove a contact.  Unknown ids are ignored."""
        with self._lock:
            self._contacts.pop(contact_id, None)

    # ------------------------------------------------------------------
    # Cycle tracking
    # ------------------------------------------------------------------

    def list_cycles(self) -> list[CycleTracking]:
        """Most recent start date first."""
        with self._lock:
            cycles = list(self._cycles.values())
        return sorted(cycles, key=lambda c: datetime.fromisoformat(c.start_date), reverse=True)

    def create_cycle(
        self,
        start_date: str | date,
        cycle_length: int = 28,
        period_length: int = 5,
    ) -> CycleTracking:
        cycle = CycleTracking(
            id="",
            start_date=_require_timestamp(start_date, "startDate"),
            cycle_length=_require_int(cycle_length, "cycleLength", minimum=1),
            period_length=_require_int(period_length, "periodLength", minimum=1),
        )
        with self._lock:
            self._cycles[cycle.id] = cycle
        return cycle

    # ------------------------------------------------------------------
    # Mood entries
    # ------------------------------------------------------------------

    def list_moods(self) -> list[MoodEntry]:
        """Newest first."""
        with self._lock:
            return list(reversed(list(self._moods.values())))

    def create_mood(self, mood: str, notes: Optional[str] = None) -> MoodEntry:
        try:
            mood_value = Mood(mood)
        except ValueError:
            raise ValidationError(f"Unknown mood {mood!r}") from None
        if notes is not None and not isinstance(notes, str):
            raise ValidationError("notes must be a string")
        entry = MoodEntry(id="", mood=mood_value, notes=notes)
        with self._lock:
            self._moods[entry.id] = entry
        return entry

    # ------------------------------------------------------------------
    # Wellness metrics
    # ------------------------------------------------------------------

    def list_metrics(self) -> list[WellnessMetric]:
        """Most recent date first."""
        with self._lock:
            metrics = list(self._metrics.values())
        return sorted(metrics, key=lambda m: datetime.fromisoformat(m.date), reverse=True)

    def create_metric(
        self,
        date: str,
        water_intake: int = 0,
        sleep_hours: Optional[int] = None,
        exercise_minutes: Optional[int] = None,
    ) -> WellnessMetric:
        metric = WellnessMetric(
            id="",
            date=_require_timestamp(date, "date"),
            water_intake=_require_int(water_intake, "waterIntake"),
            sleep_hours=_optional_int(sleep_hours, "sleepHours"),
            exercise_minutes=_optional_int(exercise_minutes, "exerciseMinutes"),
        )
        with self._lock:
            self._metrics[metric.id] = metric
        return metric

    # ------------------------------------------------------------------
    # Voice settings
    # ------------------------------------------------------------------

    def get_voice_settings(self) -> VoiceSettings:
        """Return saved settings, or the defaults when none were saved."""
        if self._voice is None:
            return VoiceSettings(id="default")
        return self._voice

    def upsert_voice_settings(
        self,
        voice_name: str,
        pitch: int,
        rate: int,
    ) -> VoiceSettings:
        voice_name = _require_text(voice_name, "voiceName")
        pitch = _require_int(pitch, "pitch", maximum=MAX_VOICE_LEVEL)
        rate = _require_int(rate, "rate", maximum=MAX_VOICE_LEVEL)
        with self._lock:
            settings = VoiceSettings(
                id=self._voice.id if self._voice else uuid.uuid4().hex,
                voice_name=voice_name,
                pitch=pitch,
                rate=rate,
            )
            self._voice = settings
        return settings
