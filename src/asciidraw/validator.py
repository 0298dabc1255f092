import io
import logging

from PIL import Image

logger = logging.getLogger(__name__)

ALLOWED_FORMATS = frozenset({"JPEG", "PNG", "WEBP", "GIF"})

# Images larger than this on either side are refused before any pixel decode
MAX_DIMENSION = 4000


def validate_image(buffer: bytes | None) -> bool:
    """Return True if ``buffer`` holds a supported, reasonably sized still image.

    Only the header is parsed (``Image.open`` is lazy), followed by a structural
    ``verify()``. Any decoder failure is a rejection, never an exception.
    """
    if not buffer:
        return False
    try:
        with Image.open(io.BytesIO(buffer)) as image:
            if image.format not in ALLOWED_FORMATS:
                logger.debug("Rejected image format %r", image.format)
                return False
            width, height = image.size
            if width > MAX_DIMENSION or height > MAX_DIMENSION:
                logger.debug("Rejected oversized image %dx%d", width, height)
                return False
            image.verify()
    except Exception as exc:
        logger.debug("Rejected undecodable image: %s", exc)
        return False
    return True
