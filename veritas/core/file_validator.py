"""
Upload validation: type and size checks that run before anything is encoded
or sent to the model.
"""

import logging

from fastapi import HTTPException

from veritas.config import settings

logger = logging.getLogger(__name__)


def validate_upload(filename: str, content_type: str, filesize: int, allow_video: bool = True) -> None:
    """Reject unsupported media types and oversized files."""
    content_type = content_type or ""

    if content_type.startswith("image/"):
        if filesize > settings.max_image_upload_bytes:
            raise HTTPException(
                status_code=413,
                detail=f"Image too large. Max {settings.max_image_upload_mb}MB allowed."
            )
    elif allow_video and content_type.startswith("video/"):
        if filesize > settings.max_video_upload_bytes:
            raise HTTPException(
                status_code=413,
                detail=f"Video too large. Max {settings.max_video_upload_mb}MB allowed."
            )
    else:
        logger.info(f"[UPLOAD] Rejected {filename} with content type {content_type!r}")
        raise HTTPException(status_code=415, detail="Unsupported file format.")
