from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass
class GlyphGrid:
    rows: list[str] = field(default_factory=list)  # one string per row
    width: int = 0
    height: int = 0
    colours: np.ndarray | None = None  # (height, width, 3) uint8, or None

    @classmethod
    def empty(cls) -> GlyphGrid:
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def to_text(self, trailing_newline: bool = False) -> str:
        """Rows joined by newlines; optionally terminate the last row too."""
        text = "\n".join(self.rows)
        if trailing_newline and self.rows:
            text += "\n"
        return text

    def __str__(self) -> str:
        return self.to_text()

    @classmethod
    def from_text(cls, text: str) -> GlyphGrid:
        """Parse text with or without a trailing newline back into a grid."""
        rows = [line for line in text.split("\n") if line]
        width = len(rows[0]) if rows else 0
        return cls(rows=rows, width=width, height=len(rows))
