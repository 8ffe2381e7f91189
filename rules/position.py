"""
PositionModel: the rules authority as seen by the ledger.

python-chess owns the board representation and legal-move generation. This
module only adapts it to the replay-string protocol:

    rebuild_from("startpos moves e2e4 e7e5 ")  -> chess.Board
    resolve(board, "g1f3")                     -> "g1f3" or None
    render(board)                              -> piece diagram + FEN/Key/Checkers

Positions are disposable: every query rebuilds a fresh chess.Board from the
full replay string and nothing here is mutated incrementally.

Castling conventions:
    Both "e1g1" (king moves two squares) and "e1h1" (king captures own rook)
    are accepted as input. The canonical string uses the standard form unless
    the model was built with chess960=True, in which case castling is written
    king-captures-rook. Promotion needs a fifth character, so a four-character
    pawn move onto the last rank never resolves.
"""

import logging

import chess
import chess.polyglot

from actuator.render import draw_grid

_log = logging.getLogger(__name__)


class PositionModel:
    """
    Stateless adapter over python-chess.

    Attributes:
        chess960: Render castling as king-captures-rook in canonical strings.
    """

    def __init__(self, chess960: bool = False) -> None:
        self.chess960 = chess960

    def rebuild_from(self, replay: str) -> chess.Board:
        """
        Rebuild a position from a replay string.

        Formats:
            startpos [moves t1 t2 ...]
            fen <FEN> [moves t1 t2 ...]

        Tokens are replayed in order; replay stops silently at the first token
        that is not a legal move in the position reached so far.

        Raises:
            ValueError: Unknown position kind or an unparseable FEN.
        """
        tokens = replay.split()
        if not tokens:
            raise ValueError("empty replay string")

        kind, rest = tokens[0], tokens[1:]
        if "moves" in rest:
            moves_idx = rest.index("moves")
            head, move_tokens = rest[:moves_idx], rest[moves_idx + 1:]
        else:
            head, move_tokens = rest, []

        if kind == "startpos":
            board = chess.Board(chess960=self.chess960)
        elif kind == "fen":
            board = chess.Board(" ".join(head), chess960=self.chess960)
        else:
            raise ValueError(f"unknown position kind: {kind!r}")

        for token in move_tokens:
            move = self._parse(board, token)
            if move is None:
                _log.debug("replay stopped at %r after %d moves", token, len(board.move_stack))
                break
            board.push(move)
        return board

    def resolve(self, board: chess.Board, token: str) -> str | None:
        """
        Canonical move string for `token` in `board`, or None.

        None covers both "no matching legal move" and the null move "0000".
        """
        move = self._parse(board, token)
        if move is None:
            return None
        return board.uci(move, chess960=self.chess960)

    def render(self, board: chess.Board) -> str:
        """Piece diagram followed by the FEN, Polyglot key and checking squares."""
        def cell(file: str, rank: str) -> str:
            piece = board.piece_at(chess.parse_square(file + rank))
            return piece.symbol() if piece else " "

        key = chess.polyglot.zobrist_hash(board)
        checkers = " ".join(chess.square_name(square) for square in board.checkers())
        return (
            f"{draw_grid(cell)}\n"
            f"Fen: {board.fen()}\n"
            f"Key: {key:016X}\n"
            f"Checkers: {checkers}"
        )

    @staticmethod
    def _parse(board: chess.Board, token: str) -> chess.Move | None:
        try:
            move = board.parse_uci(token)
        except ValueError:
            # InvalidMoveError and IllegalMoveError both derive from ValueError
            return None
        if not move:
            return None
        return move
