"""
Assistant route: /chat

The client owns the conversation and sends the full history with every
message; nothing is stored server-side.
"""

from fastapi import APIRouter, Depends

from veritas.analysis.service import ModelService
from veritas.core.action_guard import ActionGuardRegistry
from veritas.core.dependencies import get_client_id, get_guards, get_model_service, run_guarded
from veritas.schemas.chat import ChatRequest, ChatResponse
from veritas.services.chat_service import converse

router = APIRouter(tags=["Chat"])

ACTION = "chat"


@router.post("/chat", response_model=ChatResponse)
async def chat(
    payload: ChatRequest,
    service: ModelService = Depends(get_model_service),
    guards: ActionGuardRegistry = Depends(get_guards),
    client_id: str = Depends(get_client_id),
):
    reply = await run_guarded(
        guards, client_id, ACTION,
        lambda: converse(service, payload.history, payload.message),
    )
    return ChatResponse(reply=reply)
