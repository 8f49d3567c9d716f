"""Chat router -- submit a message and list logged conversations."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from solace.conversations.models import ConversationEntry
from solace.service import CompanionService
from web.backend.app.dependencies import get_service
from web.backend.app.models.api import ChatRequest, ConversationResponse

router = APIRouter(prefix="/api", tags=["chat"])


def _conversation_response(entry: ConversationEntry) -> ConversationResponse:
    return ConversationResponse.model_validate(asdict(entry))


@router.post("/chat", response_model=ConversationResponse)
def submit_chat(
    req: ChatRequest,
    service: CompanionService = Depends(get_service),
):
    """Run one chat turn.

    Returns the logged conversation entry, including the safety alert flag.
    An empty message is rejected with 400; a failed completion call returns
    502 and nothing is logged.
    """
    entry = service.submit_chat_message(req.message)
    return _conversation_response(entry)


@router.get("/conversations", response_model=list[ConversationResponse])
def list_conversations(service: CompanionService = Depends(get_service)):
    """Return every logged chat turn, oldest first."""
    return [_conversation_response(e) for e in service.list_conversations()]
