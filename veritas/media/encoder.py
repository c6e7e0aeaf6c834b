"""
Media encoder: turns uploads and paused video frames into MediaPayloads.

Still images are passed through untouched (only verified to decode), so the
payload always round-trips to the exact uploaded bytes. Video frames are
rendered at native resolution and re-encoded as JPEG at a fixed quality.
"""

import asyncio
import io
import logging
from typing import Optional, Protocol

import cv2
import numpy as np
import pillow_heif
from PIL import Image

from veritas.config import settings
from veritas.core.errors import EncodingError
from veritas.schemas.media import MediaPayload

# HEIC/HEIF stills from phones
pillow_heif.register_heif_opener()

# Prevent decompression-bomb attacks during verification
Image.MAX_IMAGE_PIXELS = settings.pil_max_image_pixels

logger = logging.getLogger(__name__)

FRAME_CONTENT_TYPE = "image/jpeg"


class FrameSource(Protocol):
    """Anything that can show one video frame: a paused player, a seeked file, a test fixture."""

    @property
    def paused(self) -> bool: ...

    def pause(self) -> None: ...

    @property
    def has_current_frame(self) -> bool: ...

    async def wait_for_data(self) -> None:
        """Resolve once the current frame is decodable (the data-loaded signal)."""
        ...

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def current_frame(self) -> Optional[np.ndarray]:
        """BGR pixels of the frame currently displayed, or None."""
        ...


def encode_bytes(data: bytes, content_type: Optional[str]) -> MediaPayload:
    """Wrap still-image bytes as a payload tagged with their declared type."""
    if not data:
        raise EncodingError("empty file")
    if not content_type or not content_type.startswith("image/"):
        raise EncodingError(f"not an image content type: {content_type!r}")

    try:
        with Image.open(io.BytesIO(data)) as img:
            img.verify()
    except Exception as e:
        raise EncodingError(f"undecodable image ({content_type}): {e}") from e

    return MediaPayload.from_bytes(data, content_type)


async def encode(upload) -> MediaPayload:
    """Read an UploadFile-like object (async `read()`, `content_type`) and encode it."""
    try:
        data = await upload.read()
    except Exception as e:
        raise EncodingError(f"could not read upload: {e}") from e
    return encode_bytes(data, getattr(upload, "content_type", None))


async def capture_frame(source: FrameSource) -> MediaPayload:
    """
    Capture the frame the source is currently showing.

    Pauses playback, waits for the frame to become decodable, draws it onto a
    raster of the video's native size and serializes it as JPEG. The reported
    content type is always image/jpeg, whatever the container was.
    """
    if not source.paused:
        source.pause()

    if not source.has_current_frame:
        try:
            await asyncio.wait_for(source.wait_for_data(), timeout=settings.frame_ready_timeout_sec)
        except asyncio.TimeoutError as e:
            raise EncodingError("no decodable frame became available") from e

    frame = source.current_frame()
    if frame is None or frame.size == 0:
        raise EncodingError("frame source returned no pixels")

    width, height = source.width, source.height
    if width <= 0 or height <= 0:
        raise EncodingError(f"invalid native frame size {width}x{height}")

    raster = frame
    if frame.shape[1] != width or frame.shape[0] != height:
        raster = cv2.resize(frame, (width, height), interpolation=cv2.INTER_LINEAR)

    encode_param = [int(cv2.IMWRITE_JPEG_QUALITY), settings.frame_jpeg_quality]
    success, encoded_image = cv2.imencode(".jpg", raster, encode_param)
    if not success:
        raise EncodingError("JPEG encoding of the captured frame failed")

    logger.info(f"[VIDEO] Captured {width}x{height} frame ({len(encoded_image)} bytes)")
    return MediaPayload.from_bytes(encoded_image.tobytes(), FRAME_CONTENT_TYPE)
