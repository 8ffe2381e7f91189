"""
ASCII board frames.

draw_grid() produces the 8x8 frame shared by the piece-raise diagram and the
position diagram: rank 8 at the top, file a on the left, a "+---+" border
between rows, the rank number right of each row and a file-label line last.

    +---+---+---+---+---+---+---+---+
    |   |   |   |   |   |   |   |   |  8
    ...
    +---+---+---+---+---+---+---+---+
      a   b   c   d   e   f   g   h
"""

from collections.abc import Callable

BORDER = "+---+---+---+---+---+---+---+---+\n"
FILE_LABELS = "  a   b   c   d   e   f   g   h\n"

RANKS = "87654321"
FILES = "abcdefgh"

RAISED = "#"
BLANK = " "


def draw_grid(cell: Callable[[str, str], str]) -> str:
    """
    Draw the frame, asking `cell(file, rank)` for each one-character cell.

    Args:
        cell: Called with a file letter ("a".."h") and a rank digit ("1".."8");
              must return exactly one character.

    Returns:
        The multi-line diagram, newline-terminated.
    """
    rows = []
    for rank in RANKS:
        rows.append(BORDER)
        cells = "".join(f"| {cell(file, rank)} " for file in FILES)
        rows.append(f"{cells}|  {rank}\n")
    rows.append(BORDER)
    rows.append(FILE_LABELS)
    return "".join(rows)


def render(highlight: str | None = None) -> str:
    """
    Diagram with at most one raised square marked "#".

    Args:
        highlight: Two-character square such as "e4", or None for no mark.
                   A value that matches no cell leaves the board unmarked.
    """
    def cell(file: str, rank: str) -> str:
        if highlight is not None and highlight[:1] == file and highlight[1:2] == rank:
            return RAISED
        return BLANK

    return draw_grid(cell)
