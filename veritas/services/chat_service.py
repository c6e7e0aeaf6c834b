import logging
from typing import Sequence

from veritas.analysis.builder import build_chat_request
from veritas.analysis.service import ModelService
from veritas.config import settings
from veritas.core.errors import InputError, ServiceError
from veritas.schemas.chat import ConversationTurn

logger = logging.getLogger(__name__)


async def converse(service: ModelService, history: Sequence[ConversationTurn], message: str) -> str:
    """
    Next assistant turn for `history` + `message`. Failures return the fallback
    text; the caller owns the history and decides what to keep.
    """
    if not message or not message.strip():
        raise InputError("empty chat message")

    try:
        response = await service.generate(build_chat_request(history, message))
        if not response.text:
            raise ServiceError("assistant returned an empty reply")
        return response.text
    except ServiceError as e:
        logger.error(f"[CHAT] Reply failed: {e}")
        return settings.chat_fallback_message
