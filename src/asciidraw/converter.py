import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np

from asciidraw.charsets import DEFAULT_CHARS
from asciidraw.encoding import encode_structured, encode_terminal
from asciidraw.engine import CellGrid
from asciidraw.errors import ProcessingError
from asciidraw.sampling import decode_image, fit_grid, glyph_indices, resample

logger = logging.getLogger(__name__)

# Upper bound on output columns; the caller controls width and it is otherwise unbounded
MAX_WIDTH = 2000

# Upper bound on output cells; a square image at MAX_WIDTH fits exactly
MAX_CELLS = MAX_WIDTH * MAX_WIDTH // 2

TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
FALSE_STRINGS = frozenset({"", "0", "false", "no", "off"})


@dataclass(frozen=True)
class ConversionOptions:
    width: int = 100
    chars: str = DEFAULT_CHARS
    is_terminal: bool = False
    # None or 1.0 leaves luminance untouched; see sampling.stretch_contrast
    contrast: float | None = None

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError(f"Width must be positive: {self.width}")
        if self.contrast is not None and self.contrast <= 0:
            raise ValueError(f"Contrast must be positive: {self.contrast}")
        if self.width > MAX_WIDTH:
            logger.warning("Clamping width %d to %d columns", self.width, MAX_WIDTH)
            object.__setattr__(self, "width", MAX_WIDTH)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ConversionOptions":
        """Build options from a request-style record such as ``{"width": 80, "isTerminal": True}``."""
        is_terminal = mapping.get("isTerminal", mapping.get("is_terminal"))
        width = mapping.get("width")
        values = {
            "width": None if width is None else int(width),
            "chars": mapping.get("chars"),
            "is_terminal": None if is_terminal is None else _parse_flag(is_terminal),
            "contrast": mapping.get("contrast"),
        }
        return cls(**{k: v for k, v in values.items() if v is not None})

    @property
    def ramp(self) -> str:
        # An empty ramp degenerates to a single blank glyph
        return self.chars or " "


def convert_to_grid(buffer: bytes, options: ConversionOptions | None = None) -> CellGrid:
    """Decode ``buffer`` and map it onto a grid of coloured glyphs."""
    options = options or ConversionOptions()
    try:
        image = decode_image(buffer)
        size = fit_grid(image.width, image.height, options.width, MAX_CELLS)
        if size[0] < options.width:
            logger.warning(
                "Narrowed %dx%d image to %d columns to stay within %d cells",
                image.width,
                image.height,
                size[0],
                MAX_CELLS,
            )
        pixels = resample(image, size)
    except Exception as exc:
        logger.error("Image conversion failed: %s", exc)
        raise ProcessingError("Failed to process image") from exc

    logger.debug("Resampled %dx%d image to %dx%d cells", image.width, image.height, *size)
    ramp = np.array(list(options.ramp))
    indices = glyph_indices(pixels, len(ramp), options.contrast)
    return CellGrid(glyphs=ramp[indices], colours=pixels)


def convert(buffer: bytes, options: ConversionOptions | None = None) -> str:
    """Render ``buffer`` as ANSI text or as the structured cell encoding."""
    options = options or ConversionOptions()
    grid = convert_to_grid(buffer, options)
    if options.is_terminal:
        return encode_terminal(grid)
    return encode_structured(grid)



def _parse_flag(value: Any) -> bool:
    """Read a boolean that may arrive as a form string such as ``"false"``."""
    if not isinstance(value, str):
        return bool(value)
    text = value.strip().lower()
    if text in TRUE_STRINGS:
        return True
    if text in FALSE_STRINGS:
        return False
    raise ValueError(f"Not a boolean flag: {value!r}")
