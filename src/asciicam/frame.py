from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image

from asciicam.errors import InvalidDimensions

CHANNELS = 4


@dataclass(frozen=True)
class FrameBuffer:
    """Read-only view of one decoded frame: row-major RGBA bytes."""

    width: int
    height: int
    data: bytes | bytearray | memoryview | np.ndarray

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensions(f"Frame size must be positive, got {self.width}x{self.height}")
        expected = self.width * self.height * CHANNELS
        available = self.data.size if isinstance(self.data, np.ndarray) else len(self.data)
        if available < expected:
            raise InvalidDimensions(f"Frame buffer holds {available} bytes, {expected} needed")

    def pixels(self) -> np.ndarray:
        """Return a read-only (height, width, 4) uint8 view of the buffer."""
        self.validate()
        if isinstance(self.data, np.ndarray):
            flat = np.asarray(self.data, dtype=np.uint8).reshape(-1)
        else:
            flat = np.frombuffer(self.data, dtype=np.uint8)
        view = flat[: self.width * self.height * CHANNELS].reshape(self.height, self.width, CHANNELS).view()
        view.flags.writeable = False
        return view

    @classmethod
    def from_image(cls, image: Image.Image | str | Path) -> "FrameBuffer":
        if not isinstance(image, Image.Image):
            image = Image.open(image)
        image = image.convert("RGBA")
        return cls(width=image.width, height=image.height, data=image.tobytes())

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "FrameBuffer":
        """Wrap an (H, W), (H, W, 3) or (H, W, 4) uint8 array."""
        arr = np.asarray(arr, dtype=np.uint8)
        if arr.ndim == 2:
            arr = np.repeat(arr[:, :, np.newaxis], 3, axis=2)
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise InvalidDimensions(f"Expected an (H, W, 3|4) array, got shape {arr.shape}")
        if arr.shape[2] == 3:
            alpha = np.full(arr.shape[:2] + (1,), 255, dtype=np.uint8)
            arr = np.concatenate([arr, alpha], axis=2)
        height, width = arr.shape[:2]
        return cls(width=width, height=height, data=np.ascontiguousarray(arr).tobytes())
