import io
import math

import numpy as np
from PIL import Image

# Monospace cells are roughly twice as tall as they are wide
CELL_ASPECT = 0.5

# ITU-R BT.709 luma weights scaled to integers so that white is exactly 1.0
LUMA_WEIGHTS = np.array([2126, 7152, 722], dtype=np.int64)
LUMA_SCALE = 255 * int(LUMA_WEIGHTS.sum())


def decode_image(buffer: bytes) -> Image.Image:
    """Fully decode ``buffer`` to an RGB image, dropping any alpha channel.

    Animated images contribute only their first frame.
    """
    with Image.open(io.BytesIO(buffer)) as image:
        image.seek(0)
        image.load()
        if image.mode == "I" or image.mode.startswith("I;16"):
            # convert() clips wide samples at 255; keep the top 8 bits instead
            wide = np.clip(np.asarray(image, dtype=np.int64), 0, 65535)
            return Image.fromarray((wide >> 8).astype(np.uint8)).convert("RGB")
        return image.convert("RGB")


def target_size(source_width: int, source_height: int, width: int) -> tuple[int, int]:
    """Grid size for ``width`` columns that keeps the source aspect ratio on screen."""
    aspect = source_height / (source_width or 1)
    # Round half up, so 2.5 rows becomes 3 rather than banker's 2
    height = math.floor(width * aspect * CELL_ASPECT + 0.5)
    return width, max(1, height)


def fit_grid(source_width: int, source_height: int, width: int, max_cells: int) -> tuple[int, int]:
    """Like target_size, but narrows the grid until it holds at most ``max_cells`` cells.

    Raises ValueError when even a single column is too many cells.
    """
    cols, rows = target_size(source_width, source_height, width)
    if cols * rows <= max_cells:
        return cols, rows
    # Rows grow linearly with columns, so the cell count grows with the square
    start = int(width * math.sqrt(max_cells / (cols * rows)))
    for candidate in range(max(1, start), 0, -1):
        cols, rows = target_size(source_width, source_height, candidate)
        if cols * rows <= max_cells:
            return cols, rows
    raise ValueError(f"{source_width}x{source_height} image cannot fit in {max_cells} cells")


def resample(image: Image.Image, size: tuple[int, int]) -> np.ndarray:
    """Box-filter the whole image onto ``size`` (fill, no cropping).

    Returns array of shape (rows, cols, 3) as uint8.
    """
    resized = image.resize(size, Image.BOX)
    return np.asarray(resized, dtype=np.uint8)


def luminance(pixels: np.ndarray) -> np.ndarray:
    """Relative luminance in [0, 1] of an (..., 3) RGB array."""
    weighted = pixels.astype(np.int64) @ LUMA_WEIGHTS
    return np.clip(weighted / LUMA_SCALE, 0.0, 1.0)


def stretch_contrast(lum: np.ndarray, contrast: float) -> np.ndarray:
    """Linear stretch of luminance around the midpoint, clipped back to [0, 1]."""
    return np.clip((lum - 0.5) * contrast + 0.5, 0.0, 1.0)


def glyph_indices(pixels: np.ndarray, count: int, contrast: float | None = None) -> np.ndarray:
    """Map each RGB pixel to a ramp index, 0 for the darkest pixels.

    ``count`` is the ramp length. Ramps of one glyph (or none) map everything to 0.
    """
    shape = pixels.shape[:-1]
    if count <= 1:
        return np.zeros(shape, dtype=np.intp)

    if contrast is None or contrast == 1.0:
        # Exact integer floor(L * (count - 1)), no float rounding at L == 1.0
        weighted = pixels.astype(np.int64) @ LUMA_WEIGHTS
        indices = weighted * (count - 1) // LUMA_SCALE
    else:
        lum = stretch_contrast(luminance(pixels), contrast)
        indices = np.floor(lum * (count - 1)).astype(np.int64)

    return np.clip(indices, 0, count - 1).astype(np.intp)
