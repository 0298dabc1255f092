from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np


class GridCell(NamedTuple):
    glyph: str
    r: int
    g: int
    b: int


@dataclass
class CellGrid:
    glyphs: np.ndarray  # (rows, cols) str
    colours: np.ndarray  # (rows, cols, 3) uint8

    @property
    def width(self) -> int:
        return self.glyphs.shape[1]

    @property
    def height(self) -> int:
        return self.glyphs.shape[0]

    def rows(self) -> Iterator[list[GridCell]]:
        """Yield each row of cells, top to bottom."""
        for y in range(self.height):
            yield [
                GridCell(str(glyph), int(r), int(g), int(b))
                for glyph, (r, g, b) in zip(self.glyphs[y], self.colours[y])
            ]

    def __iter__(self) -> Iterator[GridCell]:
        for row in self.rows():
            yield from row
