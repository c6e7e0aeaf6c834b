"""
Unit tests for capture_frame() and VideoFileFrameSource.

Frame selection is tested with MockFrameSource (a fixed frame) rather than
real playback; one test writes a small MJPG clip to exercise the OpenCV path.
"""

import cv2
import numpy as np
import pytest

from tests.mocks.frame_source_mock import MockFrameSource, solid_frame

from veritas.core.errors import EncodingError
from veritas.media.encoder import FRAME_CONTENT_TYPE, capture_frame
from veritas.media.video import VideoFileFrameSource


def _decode(payload) -> np.ndarray:
    buf = np.frombuffer(payload.to_bytes(), dtype=np.uint8)
    return cv2.imdecode(buf, cv2.IMREAD_COLOR)


# ---------------------------------------------------------------------------
# capture_frame: readiness and playback
# ---------------------------------------------------------------------------


async def test_capture_reports_jpeg_content_type():
    payload = await capture_frame(MockFrameSource(solid_frame()))
    assert payload.content_type == FRAME_CONTENT_TYPE == "image/jpeg"


async def test_capture_pauses_playing_source():
    source = MockFrameSource(solid_frame(), playing=True)
    await capture_frame(source)

    assert source.paused is True
    assert source.pause_calls == 1


async def test_capture_does_not_pause_already_paused_source():
    source = MockFrameSource(solid_frame())
    await capture_frame(source)
    assert source.pause_calls == 0


async def test_capture_waits_for_data_when_frame_not_ready():
    source = MockFrameSource(solid_frame(), loaded=False)
    payload = await capture_frame(source)

    assert source.wait_calls == 1
    assert payload.to_bytes()


async def test_capture_skips_wait_when_frame_ready():
    source = MockFrameSource(solid_frame())
    await capture_frame(source)
    assert source.wait_calls == 0


async def test_capture_times_out_when_frame_never_loads(monkeypatch):
    from veritas.config import settings

    monkeypatch.setattr(settings, "frame_ready_timeout_sec", 0.05)
    source = MockFrameSource(solid_frame(), loaded=False, never_loads=True)

    with pytest.raises(EncodingError):
        await capture_frame(source)


async def test_capture_without_frame_raises():
    with pytest.raises(EncodingError):
        await capture_frame(MockFrameSource(None, width=64, height=48))


# ---------------------------------------------------------------------------
# capture_frame: raster size
# ---------------------------------------------------------------------------


async def test_capture_keeps_native_dimensions():
    payload = await capture_frame(MockFrameSource(solid_frame(width=80, height=60)))
    decoded = _decode(payload)
    assert decoded.shape[:2] == (60, 80)


async def test_capture_scales_to_native_dimensions():
    # Decoded frame is smaller than the video's declared native size.
    source = MockFrameSource(solid_frame(width=40, height=30), width=80, height=60)
    decoded = _decode(await capture_frame(source))
    assert decoded.shape[:2] == (60, 80)


async def test_capture_preserves_frame_content():
    payload = await capture_frame(MockFrameSource(solid_frame(color=(30, 120, 200))))
    decoded = _decode(payload)
    # JPEG is lossy; a flat colour survives within a small tolerance.
    assert np.allclose(decoded.mean(axis=(0, 1)), (30, 120, 200), atol=4)


# ---------------------------------------------------------------------------
# VideoFileFrameSource
# ---------------------------------------------------------------------------


def _write_clip(path, frames=10, width=64, height=48) -> str:
    writer = cv2.VideoWriter(str(path), cv2.VideoWriter_fourcc(*"MJPG"), 10, (width, height))
    for i in range(frames):
        writer.write(solid_frame(width, height, color=(i * 20, 100, 100)))
    writer.release()
    return str(path)


async def test_video_file_source_captures_native_size_jpeg(tmp_path):
    path = _write_clip(tmp_path / "clip.avi")
    source = VideoFileFrameSource(path, position_ms=300)

    payload = await capture_frame(source)

    assert payload.content_type == "image/jpeg"
    assert _decode(payload).shape[:2] == (48, 64)
    assert (source.width, source.height) == (64, 48)


async def test_video_file_source_defaults_to_middle_frame(tmp_path):
    path = _write_clip(tmp_path / "clip.avi")
    payload = await capture_frame(VideoFileFrameSource(path))
    assert payload.to_bytes()


async def test_video_file_source_unreadable_file_raises(tmp_path):
    bogus = tmp_path / "broken.mp4"
    bogus.write_bytes(b"not a video")

    with pytest.raises(EncodingError):
        await capture_frame(VideoFileFrameSource(str(bogus)))
