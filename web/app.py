"""
FastAPI web application for the blind chessboard.

Exposes the same operations as the text protocol over REST so a networked
controller (or a browser during bring-up) can drive the board:

    POST   /api/move        apply a move through the legality gate
    DELETE /api/move        undo the last accepted move
    GET    /api/pgn         numbered move list
    GET    /api/pieceraise  square the actuator should raise
    GET    /api/position    replay string and position diagram
    POST   /api/reset       clear the move history

Architecture notes:
- Sync endpoints (not async): FastAPI runs sync handlers in a thread pool,
  so the single process-wide session is guarded by a lock. Each request
  still runs one full-history replay at most, exactly like one CLI command.
- One session per process, built from BLINDBOARD_* settings at import time.
  Tests swap it through get_session / app.dependency_overrides.
"""

import logging
import threading

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, field_validator

from actuator.report import NO_PIECES_RAISED
from interface.config import Settings
from interface.session import BoardSession
from ledger.errors import IllegalMove, MalformedToken

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

_settings = Settings.from_env()
logging.basicConfig(level=_settings.log_level)
_log = logging.getLogger(__name__)

_session = BoardSession.from_settings(_settings)
_session_lock = threading.Lock()

app = FastAPI(title="Blind Chessboard", version="1.0.0")


def get_session() -> BoardSession:
    return _session


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class MoveRequest(BaseModel):
    """
    Client request to apply a move.

    Fields:
        move: Coordinate move such as "e2e4". Surrounding whitespace is
              stripped; the length check itself is left to the legality gate
              so HTTP and CLI report the same error.
    """

    move: str

    @field_validator("move")
    @classmethod
    def strip_move(cls, v: str) -> str:
        return v.strip()


class PieceRaiseResponse(BaseModel):
    last_move: str
    square: str
    index: int
    binary: str
    diagram: str


class MoveResponse(BaseModel):
    """
    Result of an accepted move.

    Fields:
        move:        The token as submitted.
        canonical:   Rules-authority rendering recorded in the move list.
        pgn:         Numbered move list after the move.
        piece_raise: Piece-raise report for the move.
    """

    move: str
    canonical: str
    pgn: str
    piece_raise: PieceRaiseResponse


class PgnResponse(BaseModel):
    pgn: str
    moves: list[str]


class PositionResponse(BaseModel):
    replay: str
    diagram: str


def _pgn(session: BoardSession) -> PgnResponse:
    return PgnResponse(pgn=session.pgn(), moves=session.ledger.display_list)


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------


@app.post("/api/move", response_model=MoveResponse)
def api_move(request: MoveRequest, session: BoardSession = Depends(get_session)) -> MoveResponse:
    """
    Apply a move and return the piece-raise report for it.

    Raises:
        HTTPException 400: Malformed token or illegal move. The ledger is
                           unchanged.
    """
    with _session_lock:
        try:
            canonical = session.apply_move(request.move)
        except (MalformedToken, IllegalMove) as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        report = session.piece_raise()
        pgn = session.pgn()

    _log.info("move=%s canonical=%s ply=%d", request.move, canonical, len(session.ledger))
    return MoveResponse(
        move=request.move,
        canonical=canonical,
        pgn=pgn,
        piece_raise=PieceRaiseResponse(**report.as_dict()),
    )


@app.delete("/api/move", response_model=PgnResponse)
def api_remove_last_move(session: BoardSession = Depends(get_session)) -> PgnResponse:
    """Undo the last accepted move; a no-op on an empty history."""
    with _session_lock:
        session.remove_last_move()
        return _pgn(session)


@app.get("/api/pgn", response_model=PgnResponse)
def api_pgn(session: BoardSession = Depends(get_session)) -> PgnResponse:
    with _session_lock:
        return _pgn(session)


@app.get("/api/pieceraise", response_model=PieceRaiseResponse)
def api_piece_raise(session: BoardSession = Depends(get_session)) -> PieceRaiseResponse:
    """
    Report the square the actuator should raise.

    Raises:
        HTTPException 404: No move has been accepted yet.
    """
    with _session_lock:
        report = session.piece_raise()
    if report is None:
        raise HTTPException(status_code=404, detail=NO_PIECES_RAISED)
    return PieceRaiseResponse(**report.as_dict())


@app.get("/api/position", response_model=PositionResponse)
def api_position(session: BoardSession = Depends(get_session)) -> PositionResponse:
    with _session_lock:
        return PositionResponse(
            replay=session.ledger.replay_string(),
            diagram=session.position_text(),
        )


@app.post("/api/reset", response_model=PgnResponse)
def api_reset(session: BoardSession = Depends(get_session)) -> PgnResponse:
    with _session_lock:
        session.reset()
        return _pgn(session)
