import logging
from dataclasses import dataclass

from asciicam.errors import UnknownPaletteKey

logger = logging.getLogger(__name__)

# Ramps ordered darkest to lightest (dense glyph first), except INVERSE
SIMPLE = "@%#*+=-:. "

DETAILED = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "

# Full block, dark/medium/light shade, space
BLOCKS = "█▓▒░ "

INVERSE = SIMPLE[::-1]

BINARY = "01"


@dataclass(frozen=True)
class Palette:
    name: str
    glyphs: str

    def __post_init__(self):
        if len(self.glyphs) < 2:
            raise ValueError(f"Palette {self.name!r} needs at least 2 glyphs, got {len(self.glyphs)}")

    def __len__(self) -> int:
        return len(self.glyphs)

    def __getitem__(self, index: int) -> str:
        return self.glyphs[index]


PALETTES = {
    p.name: p
    for p in (
        Palette("simple", SIMPLE),
        Palette("detailed", DETAILED),
        Palette("blocks", BLOCKS),
        Palette("inverse", INVERSE),
        Palette("binary", BINARY),
    )
}
DEFAULT_PALETTE = "detailed"


def lookup_palette(key: str) -> Palette:
    try:
        return PALETTES[key]
    except KeyError:
        raise UnknownPaletteKey(key) from None


def get_palette(key: str | Palette | None) -> Palette:
    """Resolve a palette key, falling back to the detailed ramp for unknown keys."""
    if isinstance(key, Palette):
        return key
    try:
        return lookup_palette(key)
    except UnknownPaletteKey:
        logger.debug("Unknown palette %r, using %r", key, DEFAULT_PALETTE)
        return PALETTES[DEFAULT_PALETTE]
