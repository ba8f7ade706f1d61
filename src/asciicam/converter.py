import logging

import numpy as np

from asciicam.charsets import Palette, get_palette
from asciicam.engine import GlyphGrid
from asciicam.errors import InvalidDimensions
from asciicam.frame import FrameBuffer
from asciicam.planner import CHAR_ASPECT, SizeClass, plan
from asciicam.sampling import crop_rect, luminance, quantize, resample_nearest

logger = logging.getLogger(__name__)


def validate_target(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidDimensions(f"Target grid must be positive, got {width}x{height}")


def rasterize(
    frame: FrameBuffer,
    target_width: int,
    target_height: int,
    palette: Palette | str | None = None,
    colour: bool = False,
) -> GlyphGrid:
    """Convert one frame into a target_width x target_height glyph grid.

    Degenerate frames or targets give an empty grid instead of raising, so a
    single bad frame never stops a stream.
    """
    palette = get_palette(palette)
    try:
        validate_target(target_width, target_height)
        pixels = frame.pixels()
        rect = crop_rect(frame.width, frame.height, target_width, target_height)
        if rect[2] <= 0 or rect[3] <= 0:
            raise InvalidDimensions(f"Empty crop rectangle {rect}")
    except InvalidDimensions as e:
        logger.debug("Skipping frame: %s", e)
        return GlyphGrid.empty()

    rgb = resample_nearest(pixels, rect, target_width, target_height)
    indices = quantize(luminance(rgb), len(palette))

    glyphs = np.array(list(palette.glyphs))
    rows = ["".join(glyphs[row]) for row in indices]
    colours = np.ascontiguousarray(rgb, dtype=np.uint8) if colour else None
    return GlyphGrid(rows=rows, width=target_width, height=target_height, colours=colours)


def frame_to_ascii(
    frame: FrameBuffer,
    size_class: SizeClass | str = "medium",
    palette: Palette | str | None = None,
    char_aspect: float = CHAR_ASPECT,
    colour: bool = False,
) -> GlyphGrid:
    """Plan the grid for this frame's resolution and rasterize it."""
    width, height = plan(size_class, frame.width, frame.height, char_aspect)
    return rasterize(frame, width, height, palette, colour=colour)
