"""
OpenCV-backed frame source for uploaded video files.

A file on disk has no playback clock, so it is always "paused" at the position
the user stopped the player at. Decoding happens on a worker thread; the
readiness event is the data-loaded signal `capture_frame` waits on.
"""

import asyncio
import logging
from typing import Optional

import cv2
import numpy as np

logger = logging.getLogger(__name__)


class VideoFileFrameSource:
    def __init__(self, video_path: str, position_ms: Optional[float] = None):
        self.video_path = video_path
        self.position_ms = position_ms
        self._frame: Optional[np.ndarray] = None
        self._width = 0
        self._height = 0
        self._loaded = asyncio.Event()

    @property
    def paused(self) -> bool:
        return True

    def pause(self) -> None:
        pass

    @property
    def has_current_frame(self) -> bool:
        return self._loaded.is_set() and self._frame is not None

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def current_frame(self) -> Optional[np.ndarray]:
        return self._frame

    async def wait_for_data(self) -> None:
        if not self._loaded.is_set():
            self._frame, self._width, self._height = await asyncio.to_thread(self._decode)
            self._loaded.set()

    def _decode(self) -> tuple:
        """Seek to the paused position (middle of the clip by default) and read one frame."""
        cap = cv2.VideoCapture(self.video_path)
        try:
            if not cap.isOpened():
                logger.error(f"[VIDEO] Could not open video stream: {self.video_path}")
                return None, 0, 0

            width = int(cap.get(cv2.CAP_PROP_FRAME_WIDTH))
            height = int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT))

            if self.position_ms is not None:
                cap.set(cv2.CAP_PROP_POS_MSEC, float(self.position_ms))
            else:
                total_frames = int(cap.get(cv2.CAP_PROP_FRAME_COUNT))
                if total_frames > 0:
                    cap.set(cv2.CAP_PROP_POS_FRAMES, int(total_frames * 0.5))

            ret, frame = cap.read()
            if not ret:
                logger.warning(f"[VIDEO] No frame at position {self.position_ms} ms")
                return None, width, height

            if width <= 0 or height <= 0:
                height, width = frame.shape[:2]
            return frame, width, height
        finally:
            cap.release()
