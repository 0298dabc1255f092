import os
import sys

from asciidraw.converter import MAX_WIDTH
from asciidraw.service import DEFAULT_TERMINAL_WIDTH


def terminal_columns() -> int:
    """Usable output width: the tty's columns, or DEFAULT_TERMINAL_WIDTH when piped."""
    if not sys.stdout.isatty():
        return DEFAULT_TERMINAL_WIDTH
    try:
        columns = os.get_terminal_size(sys.stdout.fileno()).columns
    except OSError:
        return DEFAULT_TERMINAL_WIDTH
    return max(1, min(columns, MAX_WIDTH))
