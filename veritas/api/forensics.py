"""
Media forensics route: /forensics

Accepts multipart/form-data with a 'file' field (image or video) and, for
videos, an optional 'position_ms' form field: the timestamp the user paused
the player at. Only that frame is analyzed.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from veritas.analysis.service import ModelService
from veritas.core.action_guard import ActionGuardRegistry
from veritas.core.dependencies import get_client_id, get_guards, get_model_service, run_guarded
from veritas.core.errors import InputError
from veritas.core.file_validator import validate_upload
from veritas.schemas.forensics import ForensicsResult
from veritas.services.forensics_service import analyze_media_file

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Forensics"])

ACTION = "forensics"


@router.post("/forensics", response_model=ForensicsResult)
async def forensics(
    file: Optional[UploadFile] = File(None),
    position_ms: Optional[float] = Form(None),
    service: ModelService = Depends(get_model_service),
    guards: ActionGuardRegistry = Depends(get_guards),
    client_id: str = Depends(get_client_id),
):
    if file is None:
        raise InputError("no media selected")

    content = await file.read()
    filename = file.filename or "uploaded_file"
    validate_upload(filename, file.content_type, len(content))
    logger.info(f"[FORENSICS] {client_id} submitted {filename} ({file.content_type}, {len(content)} bytes)")

    return await run_guarded(
        guards, client_id, ACTION,
        lambda: analyze_media_file(service, content, file.content_type, position_ms=position_ms),
    )
