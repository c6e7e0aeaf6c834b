"""
Claim verification: grounded answer → formatter call, with the grounding
citations of the first stage merged into the final result.
"""

import logging
from typing import Optional

from veritas.analysis.builder import build_claim_plan
from veritas.analysis.pipeline import execute_plan
from veritas.analysis.service import ModelService
from veritas.core.errors import InputError
from veritas.integrations.gemini.prompts import CLAIM_IMAGE_ONLY_PROMPT
from veritas.media.encoder import encode_bytes
from veritas.schemas.claims import ClaimVerificationResult
from veritas.schemas.media import MediaPayload
from veritas.services.workflow import run_workflow

logger = logging.getLogger(__name__)


async def _verify(service: ModelService, claim: str, image: Optional[MediaPayload]) -> ClaimVerificationResult:
    outcome = await execute_plan(service, build_claim_plan(claim, image=image))
    assessment = outcome.result
    logger.info(f"[CLAIMS] Verdict {assessment.verdict} with {len(outcome.sources)} sources")
    return ClaimVerificationResult(
        verdict=assessment.verdict,
        correction=assessment.correction,
        sources=outcome.sources,
    )


async def verify_claim(
    service: ModelService, claim: str, image: Optional[MediaPayload] = None
) -> ClaimVerificationResult:
    claim = (claim or "").strip()
    if not claim and image is None:
        raise InputError("no claim text or image")
    return await run_workflow("CLAIMS", _verify(service, claim or CLAIM_IMAGE_ONLY_PROMPT, image))


async def _encode_and_verify(
    service: ModelService, claim: str, image_data: bytes, content_type: Optional[str]
) -> ClaimVerificationResult:
    image = encode_bytes(image_data, content_type)
    return await _verify(service, claim or CLAIM_IMAGE_ONLY_PROMPT, image)


async def verify_claim_upload(
    service: ModelService,
    claim: str,
    image_data: Optional[bytes] = None,
    content_type: Optional[str] = None,
) -> ClaimVerificationResult:
    """Entry point for raw uploads: the optional image is encoded inside the failure boundary."""
    if not image_data:
        return await verify_claim(service, claim)
    return await run_workflow(
        "CLAIMS", _encode_and_verify(service, (claim or "").strip(), image_data, content_type)
    )
