import numpy as np
import pytest

from asciidraw.encoding import CELL_DELIMITER, encode_structured, encode_terminal, parse_structured
from asciidraw.engine import CellGrid, GridCell


def make_grid(rows):
    """Build a CellGrid from nested lists of (glyph, r, g, b)."""
    glyphs = np.array([[cell[0] for cell in row] for row in rows])
    colours = np.array([[cell[1:] for cell in row] for row in rows], dtype=np.uint8)
    return CellGrid(glyphs=glyphs, colours=colours)


def test_terminal_encoding_exact():
    grid = make_grid([[("@", 1, 2, 3), (" ", 255, 255, 255)], [("#", 0, 0, 0), (".", 9, 8, 7)]])
    assert encode_terminal(grid) == (
        "\033[38;2;1;2;3m@\033[38;2;255;255;255m \033[0m\n"
        "\033[38;2;0;0;0m#\033[38;2;9;8;7m.\033[0m\n"
    )


def test_structured_encoding_exact():
    grid = make_grid([[("@", 1, 2, 3), ("|", 4, 5, 6)]])
    assert encode_structured(grid) == '["@", 1, 2, 3]\t["|", 4, 5, 6]\t\n'


def test_structured_roundtrip_awkward_glyphs():
    rows = [
        [("\t", 1, 2, 3), ("\n", 4, 5, 6), ('"', 7, 8, 9)],
        [("\\", 10, 11, 12), ("█", 13, 14, 15), (",", 16, 17, 18)],
    ]
    text = encode_structured(make_grid(rows))
    assert text.count("\n") == 2
    assert parse_structured(text) == [[GridCell(*cell) for cell in row] for row in rows]


def test_delimiter_never_inside_cell_token():
    grid = make_grid([[("\t", 0, 0, 0)]])
    token = encode_structured(grid).rstrip("\n").rstrip(CELL_DELIMITER)
    assert CELL_DELIMITER not in token


def test_parse_ignores_blank_lines():
    assert parse_structured('["a", 1, 2, 3]\t\n\n') == [[GridCell("a", 1, 2, 3)]]


@pytest.mark.parametrize("text", ['["a", 1, 2]\t\n', "nonsense\t\n", '[1, 2, 3, 4]\t\n', "7\t\n"])
def test_parse_rejects_malformed_cells(text):
    with pytest.raises(ValueError, match="Malformed cell"):
        parse_structured(text)


def test_grid_iterates_row_major():
    grid = make_grid([[("a", 0, 0, 0), ("b", 0, 0, 0)], [("c", 0, 0, 0), ("d", 0, 0, 0)]])
    assert [cell.glyph for cell in grid] == ["a", "b", "c", "d"]
    assert (grid.width, grid.height) == (2, 2)
