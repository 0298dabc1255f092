"""Upload boundary: the checks a request handler runs before and around conversion.

Rejections raise InvalidImageError and conversion failures raise ProcessingError,
each carrying a short message that is safe to show to the user.
"""

import logging

from asciidraw.converter import ConversionOptions, convert
from asciidraw.errors import InvalidImageError
from asciidraw.validator import validate_image

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 5 * 1024 * 1024

DEFAULT_TERMINAL_WIDTH = 80
DEFAULT_WEB_WIDTH = 150


def is_terminal_client(user_agent: str | None) -> bool:
    """Guess whether the request came from a command-line client such as curl."""
    return "curl" in (user_agent or "")


def render_upload(
    data: bytes | None,
    *,
    width: int | None = None,
    is_terminal: bool = False,
    chars: str | None = None,
    contrast: float | None = None,
) -> str:
    if not data:
        raise InvalidImageError("No file uploaded")
    if len(data) > MAX_UPLOAD_BYTES:
        logger.info("Rejected upload of %d bytes", len(data))
        raise InvalidImageError("File too large")
    if not validate_image(data):
        logger.info("Rejected invalid image upload")
        raise InvalidImageError("Invalid or malicious image file")

    if width is None:
        width = DEFAULT_TERMINAL_WIDTH if is_terminal else DEFAULT_WEB_WIDTH
    options = ConversionOptions.from_mapping(
        {"width": width, "chars": chars, "isTerminal": is_terminal, "contrast": contrast}
    )
    return convert(data, options)
