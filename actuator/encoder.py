"""
Square encoding for the board actuator.

Squares are numbered bottom-left to top-right as seen from White:

    index = file (a=0 .. h=7) + 8 * (rank - 1)

so a1 = 0, h1 = 7, a2 = 8, e4 = 28 and h8 = 63. The actuator is driven by the
binary digits of that index, most significant bit first and WITHOUT padding:
28 encodes as "11100" and a1 (index 0) encodes as the empty string. The
actuator firmware expects this variable-width output, so do not zero-pad.
"""

from ledger.errors import InvalidSquare

FILES = "ABCDEFGH"


def to_index(square: str) -> int:
    """
    Convert an algebraic square such as "e4" (any case) to its 0..63 index.

    Raises:
        InvalidSquare: The file is outside A..H or the rank outside 1..8.
    """
    if len(square) != 2:
        raise InvalidSquare(square)
    file_letter, rank_digit = square[0].upper(), square[1]
    if file_letter not in FILES or rank_digit not in "12345678":
        raise InvalidSquare(square)
    return (ord(file_letter) - ord("A")) + 8 * (int(rank_digit) - 1)


def to_binary(index: int) -> str:
    """
    Binary digits of `index`, most significant bit first, leading zeros dropped.

    >>> to_binary(28)
    '11100'
    >>> to_binary(0)
    ''

    Raises:
        InvalidSquare: `index` is outside 0..63.
    """
    if not 0 <= index <= 63:
        raise InvalidSquare(index)
    return format(index, "b") if index else ""
