import pytest

from asciicam.charsets import DETAILED, PALETTES, SIMPLE, Palette, get_palette, lookup_palette
from asciicam.errors import UnknownPaletteKey


def test_known_palettes():
    assert set(PALETTES) == {"simple", "detailed", "blocks", "inverse", "binary"}
    assert PALETTES["simple"].glyphs == "@%#*+=-:. "
    assert PALETTES["blocks"].glyphs == "█▓▒░ "
    assert PALETTES["inverse"].glyphs == " .:-=+*#%@"
    assert PALETTES["binary"].glyphs == "01"


def test_detailed_ramp():
    assert len(DETAILED) == 70
    assert DETAILED[0] == "$"
    assert DETAILED[-1] == " "


def test_inverse_is_reversed_simple():
    assert PALETTES["inverse"].glyphs == SIMPLE[::-1]


def test_every_palette_has_two_extremes():
    for palette in PALETTES.values():
        assert len(palette) >= 2
        assert palette[0] != palette[len(palette) - 1]


def test_unknown_key_falls_back_to_detailed():
    assert get_palette("rainbow") is PALETTES["detailed"]
    assert get_palette(None) is PALETTES["detailed"]


def test_get_palette_passthrough():
    custom = Palette("custom", "ab")
    assert get_palette(custom) is custom


def test_lookup_palette_strict():
    with pytest.raises(UnknownPaletteKey):
        lookup_palette("rainbow")


def test_palette_needs_two_glyphs():
    with pytest.raises(ValueError, match="at least 2"):
        Palette("tiny", "#")
    with pytest.raises(ValueError):
        Palette("empty", "")
