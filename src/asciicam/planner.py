"""Pick the character-grid size for a frame.

Presets are fixed grids already adjusted for 16:9 sources and 2:1 glyph
cells. The ``native`` size class derives the grid from the live source
resolution instead.
"""

import logging
import math
from dataclasses import dataclass

from asciicam.errors import UnknownSizeClass

logger = logging.getLogger(__name__)

# Rendered glyph cells are about twice as tall as they are wide
CHAR_ASPECT = 2.0
DEFAULT_ASPECT = 16 / 9

# Native mode: one column per 8 source pixels, capped for per-frame cost
NATIVE_DIVISOR = 8
MAX_NATIVE_WIDTH = 240


@dataclass(frozen=True)
class SizeClass:
    name: str
    width: int = 0
    height: int = 0

    @property
    def is_native(self) -> bool:
        return self.width == 0 and self.height == 0


SIZE_CLASSES = {
    s.name: s
    for s in (
        SizeClass("ultra-low", 40, 22),
        SizeClass("low", 60, 34),
        SizeClass("medium", 100, 56),
        SizeClass("high", 140, 79),
        SizeClass("ultra", 180, 101),
        SizeClass("native"),
    )
}
DEFAULT_SIZE_CLASS = "medium"


@dataclass(frozen=True)
class AspectConfig:
    source_aspect: float = DEFAULT_ASPECT
    char_aspect: float = CHAR_ASPECT

    @classmethod
    def for_source(cls, width: int, height: int, char_aspect: float = CHAR_ASPECT) -> "AspectConfig":
        if width <= 0 or height <= 0:
            return cls(char_aspect=char_aspect)
        return cls(source_aspect=width / height, char_aspect=char_aspect)


def lookup_size_class(key: str) -> SizeClass:
    try:
        return SIZE_CLASSES[key]
    except KeyError:
        raise UnknownSizeClass(key) from None


def get_size_class(key: str | SizeClass | None) -> SizeClass:
    if isinstance(key, SizeClass):
        return key
    try:
        return lookup_size_class(key)
    except UnknownSizeClass:
        logger.warning("Unknown size class %r, using %r", key, DEFAULT_SIZE_CLASS)
        return SIZE_CLASSES[DEFAULT_SIZE_CLASS]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def plan(
    size_class: str | SizeClass,
    source_width: int,
    source_height: int,
    char_aspect: float = CHAR_ASPECT,
) -> tuple[int, int]:
    """Return the (columns, rows) grid to render a source frame into.

    Degenerate source sizes in native mode give a 1x1 grid rather than
    dividing by zero.
    """
    size = get_size_class(size_class)
    if not size.is_native:
        return (size.width, size.height)

    if source_width <= 0 or source_height <= 0 or not math.isfinite(char_aspect) or char_aspect <= 0:
        return (1, 1)

    source_aspect = source_width / source_height
    width = min(source_width / NATIVE_DIVISOR, MAX_NATIVE_WIDTH)
    height = width / source_aspect * char_aspect
    if not math.isfinite(height):
        return (1, 1)
    return (max(1, _round_half_up(width)), max(1, _round_half_up(height)))
