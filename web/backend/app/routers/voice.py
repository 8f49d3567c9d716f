"""Voice settings router."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from solace.service import CompanionService
from web.backend.app.dependencies import get_service
from web.backend.app.models.api import VoiceSettingsRequest, VoiceSettingsResponse

router = APIRouter(prefix="/api/voice-settings", tags=["voice"])


@router.get("", response_model=VoiceSettingsResponse)
def get_voice_settings(service: CompanionService = Depends(get_service)):
    """Return saved settings, or the defaults (id ``default``) if none saved."""
    return VoiceSettingsResponse.model_validate(asdict(service.records.get_voice_settings()))


@router.post("", response_model=VoiceSettingsResponse)
def save_voice_settings(
    req: VoiceSettingsRequest,
    service: CompanionService = Depends(get_service),
):
    settings = service.records.upsert_voice_settings(
        voice_name=req.voice_name,
        pitch=req.pitch,
        rate=req.rate,
    )
    return VoiceSettingsResponse.model_validate(asdict(settings))
