"""Per-stream state for a caller-driven render loop.

The conversion functions are stateless. A capture loop that wants the
behaviour of a live preview (drop frames while busy, track FPS, remember the
last grid, take snapshots) keeps one LiveSession and calls ``submit`` once
per available frame.
"""

import logging
import threading
import time
from dataclasses import dataclass, replace
from datetime import datetime

from asciicam.charsets import DEFAULT_PALETTE
from asciicam.converter import rasterize
from asciicam.engine import GlyphGrid
from asciicam.frame import FrameBuffer
from asciicam.planner import CHAR_ASPECT, DEFAULT_SIZE_CLASS, AspectConfig, plan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionConfig:
    size_class: str = DEFAULT_SIZE_CLASS
    palette: str = DEFAULT_PALETTE
    char_aspect: float = CHAR_ASPECT
    colour: bool = False


@dataclass(frozen=True)
class Capture:
    grid: GlyphGrid
    taken_at: datetime


class LiveSession:
    def __init__(self, config: SessionConfig | None = None, clock=time.monotonic):
        self.config = config or SessionConfig()
        self.aspect = AspectConfig(char_aspect=self.config.char_aspect)
        self.source_size: tuple[int, int] | None = None
        self.current: GlyphGrid | None = None
        self.captured: Capture | None = None
        self.fps = 0
        self.frames = 0
        self.dropped_frames = 0
        self._clock = clock
        self._last_timestamp: float | None = None
        self._lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    def configure(self, **changes) -> SessionConfig:
        """Swap palette, size class or aspect between frames."""
        if not self._lock.acquire(blocking=False):
            raise RuntimeError("Cannot reconfigure while a frame is being converted")
        try:
            self.config = replace(self.config, **changes)
            if self.config.char_aspect != self.aspect.char_aspect:
                self.aspect = replace(self.aspect, char_aspect=self.config.char_aspect)
            return self.config
        finally:
            self._lock.release()

    def _update_source(self, frame: FrameBuffer) -> None:
        size = (frame.width, frame.height)
        if frame.width <= 0 or frame.height <= 0 or size == self.source_size:
            return
        self.source_size = size
        self.aspect = AspectConfig.for_source(frame.width, frame.height, self.config.char_aspect)
        logger.info("Source resolution: %dx%d (%.2f:1)", frame.width, frame.height, self.aspect.source_aspect)

    def _tick(self, timestamp: float | None) -> None:
        if timestamp is None:
            timestamp = self._clock()
        if self._last_timestamp is not None:
            delta = timestamp - self._last_timestamp
            if delta > 0:
                self.fps = round(1.0 / delta)
        self._last_timestamp = timestamp

    def submit(self, frame: FrameBuffer, timestamp: float | None = None) -> GlyphGrid | None:
        """Convert a frame, or drop it and return None if one is in flight."""
        if not self._lock.acquire(blocking=False):
            self.dropped_frames += 1
            return None

        try:
            self._tick(timestamp)
            self._update_source(frame)
            width, height = plan(self.config.size_class, frame.width, frame.height, self.aspect.char_aspect)
            grid = rasterize(frame, width, height, self.config.palette, colour=self.config.colour)
            if not grid.is_empty:
                self.current = grid
            self.frames += 1
            return grid
        finally:
            self._lock.release()

    def capture(self, now: datetime | None = None) -> Capture | None:
        if self.current is None or self.current.is_empty:
            logger.warning("No frame available to capture")
            return None
        self.captured = Capture(grid=self.current, taken_at=now or datetime.now())
        logger.info("Captured %dx%d frame", self.current.width, self.current.height)
        return self.captured

    def stats(self) -> dict:
        grid = self.current
        return {
            "source": self.source_size,
            "grid": grid.size if grid is not None and not grid.is_empty else None,
            "fps": self.fps,
            "frames": self.frames,
            "dropped": self.dropped_frames,
        }
