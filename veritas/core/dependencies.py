"""
FastAPI dependencies.

The model service and the guard registry live on `app.state` (set up in the
lifespan); routes receive them through these functions so tests can swap them
with `app.dependency_overrides`.
"""

import logging
from typing import Awaitable, Callable, Optional, TypeVar

from fastapi import Header, HTTPException, Request

from veritas.analysis.service import ModelService
from veritas.core.action_guard import ActionGuardRegistry
from veritas.core.errors import AnalysisFailedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_model_service(request: Request) -> ModelService:
    service = getattr(request.app.state, "model_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Model service unavailable")
    return service


def get_guards(request: Request) -> ActionGuardRegistry:
    return request.app.state.guards


def get_client_id(request: Request, device_id: Optional[str] = Header(None, alias="X-Device-ID")) -> str:
    if device_id:
        return device_id
    return request.client.host if request.client else "anonymous"


def _stale(action: str, client_id: str) -> HTTPException:
    logger.info(f"[GUARDS] Dropping stale {action} outcome for {client_id}")
    return HTTPException(
        status_code=409,
        detail={"code": "STALE_RESULT", "message": "Action was superseded"}
    )


async def run_guarded(
    guards: ActionGuardRegistry, client_id: str, action: str, call: Callable[[], Awaitable[T]]
) -> T:
    """
    Single-flight execution of `call`. An outcome superseded by an
    invalidation is dropped, whether it is a result or an analysis failure.
    """
    guard = guards.get(client_id, action)
    async with guard.hold() as token:
        try:
            result = await call()
        except AnalysisFailedError as e:
            if not guard.is_current(token):
                raise _stale(action, client_id) from e
            raise

    if not guard.is_current(token):
        raise _stale(action, client_id)
    return result
