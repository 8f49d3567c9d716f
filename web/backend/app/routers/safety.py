"""Safety keywords router -- list, add and toggle alert keywords."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from solace.safety.models import SafetyKeyword
from solace.service import CompanionService
from web.backend.app.dependencies import get_service
from web.backend.app.models.api import (
    SafetyKeywordCreateRequest,
    SafetyKeywordResponse,
    SafetyKeywordUpdateRequest,
)

router = APIRouter(prefix="/api/safety-keywords", tags=["safety"])


def _keyword_response(keyword: SafetyKeyword) -> SafetyKeywordResponse:
    return SafetyKeywordResponse.model_validate(asdict(keyword))


@router.get("", response_model=list[SafetyKeywordResponse])
def list_keywords(service: CompanionService = Depends(get_service)):
    """Return every safety keyword, newest first."""
    return [_keyword_response(k) for k in service.list_safety_keywords()]


@router.post("", response_model=SafetyKeywordResponse)
def add_keyword(
    req: SafetyKeywordCreateRequest,
    service: CompanionService = Depends(get_service),
):
    """Add a keyword.  Blank keywords are rejected with 400."""
    keyword = service.add_safety_keyword(req.keyword, is_active=req.is_active)
    return _keyword_response(keyword)


@router.patch("/{keyword_id}", response_model=SafetyKeywordResponse)
def set_keyword_active(
    keyword_id: str,
    req: SafetyKeywordUpdateRequest,
    service: CompanionService = Depends(get_service),
):
    """Activate or deactivate a keyword.  Unknown ids return 404."""
    keyword = service.set_safety_keyword_active(keyword_id, req.is_active)
    return _keyword_response(keyword)
