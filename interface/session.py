"""
BoardSession: the explicit handle for one game session.

A process holds exactly one session: one ledger, the rules authority that
judges it and the search engine the bestmove command delegates to. The
command dispatcher and the HTTP app both act through this object instead of
reaching for module-level state.
"""

import logging
from dataclasses import dataclass, field

import chess.engine

from actuator.report import PieceRaise, piece_raise
from interface.config import Settings
from ledger.gate import try_apply_move
from ledger.history import MoveLedger
from rules.position import PositionModel
from rules.search import SearchEngine, UciSearchEngine

_log = logging.getLogger(__name__)


@dataclass
class BoardSession:
    """
    Attributes:
        settings:  Runtime settings the session was built from.
        positions: Rules authority (rebuild / resolve / render).
        search:    Search collaborator used by start_search().
        ledger:    The session's move history.
    """

    settings: Settings
    positions: PositionModel
    search: SearchEngine
    ledger: MoveLedger = field(default_factory=MoveLedger)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "BoardSession":
        settings = settings or Settings()
        return cls(
            settings=settings,
            positions=PositionModel(chess960=settings.chess960),
            search=UciSearchEngine(settings.engine_path),
        )

    def apply_move(self, token: str) -> str:
        """Run the legality gate; see ledger.gate.try_apply_move."""
        return try_apply_move(self.ledger, self.positions, token)

    def remove_last_move(self) -> None:
        self.ledger.rollback()

    def reset(self) -> None:
        self.ledger.clear()

    def board(self) -> chess.Board:
        """Fresh position rebuilt from the full replay string."""
        return self.positions.rebuild_from(self.ledger.replay_string())

    def position_text(self) -> str:
        return self.positions.render(self.board())

    def pgn(self) -> str:
        return self.ledger.display_string()

    def piece_raise(self) -> PieceRaise | None:
        return piece_raise(self.ledger)

    def start_search(self) -> None:
        """Hand the current position to the search engine without waiting."""
        limit = chess.engine.Limit(depth=self.settings.bestmove_depth)
        _log.info("starting search at depth %d", self.settings.bestmove_depth)
        self.search.start_thinking(self.board(), limit)

    def close(self) -> None:
        self.search.stop()
