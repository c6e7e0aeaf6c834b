"""
Job-offer vetting: grounded fast check (two-stage) or deep reasoning check
(single schema call).
"""

import logging

from veritas.analysis.builder import build_offer_plan
from veritas.analysis.pipeline import execute_plan
from veritas.analysis.service import ModelService
from veritas.core.errors import InputError
from veritas.schemas.offers import OfferVettingResult
from veritas.services.workflow import run_workflow

logger = logging.getLogger(__name__)


async def _vet(service: ModelService, job_text: str, deep: bool) -> OfferVettingResult:
    outcome = await execute_plan(service, build_offer_plan(job_text, deep=deep))
    logger.info(f"[OFFERS] Verdict {outcome.result.verdict} (deep={deep})")
    return outcome.result


async def vet_job_offer(service: ModelService, job_text: str, deep: bool = False) -> OfferVettingResult:
    if not job_text or not job_text.strip():
        raise InputError("offer text is empty")
    return await run_workflow("OFFERS", _vet(service, job_text, deep))
