"""
Claim verification route: /claims/verify

Accepts multipart/form-data with a 'claim' text field and/or an 'image' file.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from veritas.analysis.service import ModelService
from veritas.core.action_guard import ActionGuardRegistry
from veritas.core.dependencies import get_client_id, get_guards, get_model_service, run_guarded
from veritas.core.file_validator import validate_upload
from veritas.schemas.claims import ClaimVerificationResult
from veritas.services.claims_service import verify_claim_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Claims"])

ACTION = "claims"


@router.post("/claims/verify", response_model=ClaimVerificationResult)
async def verify(
    claim: str = Form(""),
    image: Optional[UploadFile] = File(None),
    service: ModelService = Depends(get_model_service),
    guards: ActionGuardRegistry = Depends(get_guards),
    client_id: str = Depends(get_client_id),
):
    image_data, content_type = None, None
    if image is not None:
        image_data = await image.read()
        content_type = image.content_type
        if image_data:
            validate_upload(image.filename or "image", content_type, len(image_data), allow_video=False)

    return await run_guarded(
        guards, client_id, ACTION,
        lambda: verify_claim_upload(service, claim, image_data, content_type),
    )
