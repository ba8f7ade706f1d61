"""Presentation formats for captured grids: ANSI, PNG, printable HTML, text."""

import html
import logging
import time
from datetime import datetime
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from asciicam.engine import GlyphGrid

logger = logging.getLogger(__name__)

CHAR_WIDTH = 8
CHAR_HEIGHT = 16
PADDING = 20
BACKGROUND = "#000000"
FOREGROUND = "#00ff00"
MONOSPACE_FONTS = ("DejaVuSansMono.ttf", "LiberationMono-Regular.ttf", "cour.ttf")

PRINT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>ASCII Camera Print</title>
    <style>
        body {{ font-family: 'Courier New', monospace; background: white; color: black; padding: 20px; }}
        pre {{ font-size: 4px; line-height: 1; white-space: pre; margin: 0; }}
        .header {{ text-align: center; margin-bottom: 20px; border-bottom: 2px solid #000; padding-bottom: 10px; }}
        @media print {{ body {{ padding: 0; }} }}
    </style>
</head>
<body>
    <div class="header">
        <h1>ASCII Camera Capture</h1>
        <p>Generated on {generated}</p>
    </div>
    <pre>{text}</pre>
</body>
</html>
"""


def to_ansi(grid: GlyphGrid) -> str:
    """Wrap each glyph in a truecolor foreground escape; plain text if no colours."""
    if grid.colours is None:
        return grid.to_text()
    out = []
    for r, line in enumerate(grid.rows):
        parts = []
        for c, char in enumerate(line):
            red, green, blue = (int(v) for v in grid.colours[r, c])
            parts.append(f"\033[38;2;{red};{green};{blue}m{char}")
        parts.append("\033[0m")
        out.append("".join(parts))
    return "\n".join(out)


def _load_font(size: int) -> ImageFont.ImageFont:
    for name in MONOSPACE_FONTS:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    logger.debug("No monospace TrueType font found, using Pillow default")
    return ImageFont.load_default()


def render_png(
    grid: GlyphGrid,
    char_width: int = CHAR_WIDTH,
    char_height: int = CHAR_HEIGHT,
    padding: int = PADDING,
    title: str | None = None,
) -> Image.Image:
    """Draw the grid as green-on-black text with a title line."""
    if title is None:
        title = f"ASCII Camera - {datetime.now():%Y-%m-%d %H:%M:%S}"
    image = Image.new(
        "RGB",
        (grid.width * char_width + 2 * padding, grid.height * char_height + 2 * padding),
        BACKGROUND,
    )
    draw = ImageDraw.Draw(image)
    font = _load_font(char_height)
    draw.text((padding, 10), title, fill=FOREGROUND, font=font)
    for y, line in enumerate(grid.rows):
        draw.text((padding, 30 + y * char_height), line, fill=FOREGROUND, font=font)
    return image


def render_print_html(grid: GlyphGrid, generated: datetime | None = None) -> str:
    generated = generated or datetime.now()
    return PRINT_TEMPLATE.format(
        generated=html.escape(generated.strftime("%Y-%m-%d %H:%M:%S")),
        text=html.escape(grid.to_text(trailing_newline=True)),
    )


def export_filename(ext: str, now: float | None = None) -> str:
    if now is None:
        now = time.time()
    return f"ascii-camera-{int(now * 1000)}.{ext.lstrip('.')}"


def write_export(grid: GlyphGrid, path: str | Path, trailing_newline: bool = True) -> Path:
    """Write the grid in the format implied by the file suffix."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".png":
        render_png(grid).save(path)
    elif suffix in (".html", ".htm"):
        path.write_text(render_print_html(grid), encoding="utf-8")
    elif suffix in (".txt", ""):
        path.write_text(grid.to_text(trailing_newline=trailing_newline), encoding="utf-8")
    else:
        raise ValueError(f"Unsupported export format: {suffix}")
    logger.info("Wrote %dx%d grid to %s", grid.width, grid.height, path)
    return path
