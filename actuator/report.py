"""
Piece-raise report: which physical square the actuator should raise.

The report is always built from the ledger's last entry and always carries
all of its fields together: the last canonical move, the destination square,
its decimal index, its binary code and the diagram with that square raised.
An empty history produces no report at all ("No pieces raised").
"""

from dataclasses import asdict, dataclass

from actuator import encoder, render
from ledger.history import MoveLedger

NO_PIECES_RAISED = "No pieces raised"


@dataclass(frozen=True)
class PieceRaise:
    """
    Attributes:
        last_move: Canonical string of the last accepted move.
        square:    Destination square of the last token, e.g. "e4".
        index:     0..63 square index (a1 = 0).
        binary:    Unpadded binary digits of `index` ("" for a1).
        diagram:   render.render(square).
    """

    last_move: str
    square: str
    index: int
    binary: str
    diagram: str

    def as_dict(self) -> dict:
        return asdict(self)

    def format(self) -> str:
        return (
            f"\nLast Move:\t\t{self.last_move}\n"
            f"Piece to raise:\t\t{self.square}\n"
            f"Decimal Equivalent\t{self.index}\n"
            f"Binary Output:\t\t{self.binary}\n"
            f"{self.diagram}"
        )


def piece_raise(ledger: MoveLedger) -> PieceRaise | None:
    """Build the report for the ledger's last move, or None if it is empty."""
    square = ledger.last_destination_square()
    if square is None:
        return None
    index = encoder.to_index(square)
    return PieceRaise(
        last_move=ledger.last_canonical() or "",
        square=square,
        index=index,
        binary=encoder.to_binary(index),
        diagram=render.render(square),
    )


def format_piece_raise(ledger: MoveLedger) -> str:
    """Report text as printed on the protocol channel."""
    report = piece_raise(ledger)
    return NO_PIECES_RAISED if report is None else report.format()
