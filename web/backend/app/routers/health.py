"""Health tracking router -- cycle, mood and wellness logs."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from solace.records.models import MoodEntry
from solace.service import CompanionService
from web.backend.app.dependencies import get_service
from web.backend.app.models.api import (
    CycleTrackingRequest,
    CycleTrackingResponse,
    MoodEntryRequest,
    MoodEntryResponse,
    WellnessMetricRequest,
    WellnessMetricResponse,
)

router = APIRouter(prefix="/api", tags=["health"])


def _mood_response(entry: MoodEntry) -> MoodEntryResponse:
    return MoodEntryResponse(
        id=entry.id,
        mood=entry.mood.value,
        notes=entry.notes,
        created_at=entry.created_at,
    )


# ---------------------------------------------------------------------------
# Cycle tracking
# ---------------------------------------------------------------------------


@router.get("/cycle-tracking", response_model=list[CycleTrackingResponse])
def list_cycles(service: CompanionService = Depends(get_service)):
    return [CycleTrackingResponse.model_validate(asdict(c)) for c in service.records.list_cycles()]


@router.post("/cycle-tracking", response_model=CycleTrackingResponse)
def create_cycle(
    req: CycleTrackingRequest,
    service: CompanionService = Depends(get_service),
):
    cycle = service.records.create_cycle(
        start_date=req.start_date,
        cycle_length=req.cycle_length,
        period_length=req.period_length,
    )
    return CycleTrackingResponse.model_validate(asdict(cycle))


# ---------------------------------------------------------------------------
# Mood entries
# ---------------------------------------------------------------------------


@router.get("/mood-entries", response_model=list[MoodEntryResponse])
def list_moods(service: CompanionService = Depends(get_service)):
    return [_mood_response(m) for m in service.records.list_moods()]


@router.post("/mood-entries", response_model=MoodEntryResponse)
def create_mood(
    req: MoodEntryRequest,
    service: CompanionService = Depends(get_service),
):
    """Log a mood (happy, calm, anxious, sad, energetic or stressed)."""
    entry = service.records.create_mood(req.mood, notes=req.notes)
    return _mood_response(entry)


# ---------------------------------------------------------------------------
# Wellness metrics
# ---------------------------------------------------------------------------


@router.get("/wellness-metrics", response_model=list[WellnessMetricResponse])
def list_metrics(service: CompanionService = Depends(get_service)):
    return [WellnessMetricResponse.model_validate(asdict(m)) for m in service.records.list_metrics()]


@router.post("/wellness-metrics", response_model=WellnessMetricResponse)
def create_metric(
    req: WellnessMetricRequest,
    service: CompanionService = Depends(get_service),
):
    metric = service.records.create_metric(
        date=req.date,
        water_intake=req.water_intake,
        sleep_hours=req.sleep_hours,
        exercise_minutes=req.exercise_minutes,
    )
    return WellnessMetricResponse.model_validate(asdict(metric))
