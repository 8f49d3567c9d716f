"""Emergency contacts router -- contact CRUD."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from solace.records.models import EmergencyContact
from solace.service import CompanionService
from web.backend.app.dependencies import get_service
from web.backend.app.models.api import (
    EmergencyContactRequest,
    EmergencyContactResponse,
    SuccessResponse,
)

router = APIRouter(prefix="/api/emergency-contacts", tags=["emergency-contacts"])


def _contact_response(contact: EmergencyContact) -> EmergencyContactResponse:
    return EmergencyContactResponse.model_validate(asdict(contact))


@router.get("", response_model=list[EmergencyContactResponse])
def list_contacts(service: CompanionService = Depends(get_service)):
    """Return all emergency contacts, newest first."""
    return [_contact_response(c) for c in service.records.list_contacts()]


@router.post("", response_model=EmergencyContactResponse)
def create_contact(
    req: EmergencyContactRequest,
    service: CompanionService = Depends(get_service),
):
    contact = service.records.create_contact(req.name, req.phone, req.relationship)
    return _contact_response(contact)


@router.patch("/{contact_id}", response_model=EmergencyContactResponse)
def update_contact(
    contact_id: str,
    req: EmergencyContactRequest,
    service: CompanionService = Depends(get_service),
):
    """Replace a contact's details.  Unknown ids return 404."""
    contact = service.records.update_contact(
        contact_id, req.name, req.phone, req.relationship
    )
    return _contact_response(contact)


@router.delete("/{contact_id}", response_model=SuccessResponse)
def delete_contact(
    contact_id: str,
    service: CompanionService = Depends(get_service),
):
    service.records.delete_contact(contact_id)
    return SuccessResponse()
