"""
Media forensics orchestration: encode (image or paused video frame), one
schema call, validated ForensicsResult.
"""

import logging
import mimetypes
import os
import tempfile
from typing import Optional

from veritas.analysis.builder import build_forensics_plan
from veritas.analysis.pipeline import execute_plan
from veritas.analysis.service import ModelService
from veritas.core.errors import InputError
from veritas.media.encoder import capture_frame, encode_bytes
from veritas.media.video import VideoFileFrameSource
from veritas.schemas.forensics import ForensicsResult
from veritas.schemas.media import MediaPayload
from veritas.services.workflow import run_workflow

logger = logging.getLogger(__name__)


async def _analyze(service: ModelService, payload: MediaPayload) -> ForensicsResult:
    outcome = await execute_plan(service, build_forensics_plan(payload))
    result = outcome.result
    logger.info(f"[FORENSICS] {result.verdict} ({result.percent_ai}% AI)")
    return result


async def detect_media_forgery(service: ModelService, payload: Optional[MediaPayload]) -> ForensicsResult:
    if payload is None or not payload.data:
        raise InputError("no media selected")
    return await run_workflow("FORENSICS", _analyze(service, payload))


async def _capture_video_frame(data: bytes, content_type: str, position_ms: Optional[float]) -> MediaPayload:
    suffix = mimetypes.guess_extension(content_type) or ".mp4"
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as tmp_file:
        tmp_file.write(data)
        temp_path = tmp_file.name

    try:
        return await capture_frame(VideoFileFrameSource(temp_path, position_ms=position_ms))
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)


async def _encode_and_analyze(
    service: ModelService, data: bytes, content_type: str, position_ms: Optional[float]
) -> ForensicsResult:
    if content_type.startswith("video/"):
        payload = await _capture_video_frame(data, content_type, position_ms)
    else:
        payload = encode_bytes(data, content_type)
    return await _analyze(service, payload)


async def analyze_media_file(
    service: ModelService,
    data: bytes,
    content_type: Optional[str],
    *,
    position_ms: Optional[float] = None,
) -> ForensicsResult:
    """Entry point for raw uploads: videos are analyzed at the paused frame only."""
    if not data:
        raise InputError("no media selected")
    return await run_workflow(
        "FORENSICS", _encode_and_analyze(service, data, content_type or "", position_ms)
    )
