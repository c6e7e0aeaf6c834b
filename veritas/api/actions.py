"""
Action invalidation: /actions/{action}/invalidate

Called by the client when it navigates away from a screen with a request in
flight; the late result of that request is then discarded.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from veritas.api import chat, claims, forensics, offers
from veritas.core.action_guard import ActionGuardRegistry
from veritas.core.dependencies import get_client_id, get_guards

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Actions"])

ACTIONS = {forensics.ACTION, offers.ACTION, claims.ACTION, chat.ACTION}


@router.post("/actions/{action}/invalidate", status_code=204)
async def invalidate(
    action: str,
    guards: ActionGuardRegistry = Depends(get_guards),
    client_id: str = Depends(get_client_id),
):
    if action not in ACTIONS:
        raise HTTPException(status_code=404, detail="Unknown action")
    guards.get(client_id, action).invalidate()
    logger.info(f"[GUARDS] {client_id} invalidated {action}")
    return Response(status_code=204)
