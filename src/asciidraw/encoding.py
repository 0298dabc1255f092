import json

from asciidraw.engine import CellGrid, GridCell

ANSI_RESET = "\033[0m"

# JSON escapes tabs and newlines inside strings, so neither can occur within a cell token
CELL_DELIMITER = "\t"
ROW_DELIMITER = "\n"


def encode_terminal(grid: CellGrid) -> str:
    """Prefix each glyph with a truecolor foreground escape, resetting at row end."""
    out = []
    for row in grid.rows():
        parts = [f"\033[38;2;{r};{g};{b}m{glyph}" for glyph, r, g, b in row]
        parts.append(ANSI_RESET + "\n")
        out.append("".join(parts))
    return "".join(out)


def encode_structured(grid: CellGrid) -> str:
    """Serialize cells as ``["c", r, g, b]`` tokens, one row per line."""
    out = []
    for row in grid.rows():
        parts = [json.dumps(list(cell)) + CELL_DELIMITER for cell in row]
        parts.append(ROW_DELIMITER)
        out.append("".join(parts))
    return "".join(out)


def parse_structured(text: str) -> list[list[GridCell]]:
    rows = []
    for line in text.split(ROW_DELIMITER):
        if not line:
            continue
        row = []
        for token in line.split(CELL_DELIMITER):
            if not token:
                continue
            try:
                glyph, r, g, b = json.loads(token)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Malformed cell: {token!r}") from exc
            if not isinstance(glyph, str) or not all(isinstance(v, int) for v in (r, g, b)):
                raise ValueError(f"Malformed cell: {token!r}")
            row.append(GridCell(glyph, r, g, b))
        rows.append(row)
    return rows
