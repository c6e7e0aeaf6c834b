"""
Job-offer vetting route: /offers/vet

JSON body { "text": "...", "deep": false }. Deep mode spends a large thinking
budget and can take minutes; clients must not apply a short timeout to it.
"""

import logging

from fastapi import APIRouter, Depends

from veritas.analysis.service import ModelService
from veritas.core.action_guard import ActionGuardRegistry
from veritas.core.dependencies import get_client_id, get_guards, get_model_service, run_guarded
from veritas.schemas.offers import OfferRequest, OfferVettingResult
from veritas.services.offers_service import vet_job_offer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Offers"])

ACTION = "offers"


@router.post("/offers/vet", response_model=OfferVettingResult)
async def vet_offer(
    payload: OfferRequest,
    service: ModelService = Depends(get_model_service),
    guards: ActionGuardRegistry = Depends(get_guards),
    client_id: str = Depends(get_client_id),
):
    return await run_guarded(
        guards, client_id, ACTION,
        lambda: vet_job_offer(service, payload.text, deep=payload.deep),
    )
