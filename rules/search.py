"""
UciSearchEngine: best-move computation delegated to an external UCI engine.

The bestmove command hands the current position to a separate engine process
(Stockfish by default) and returns immediately. The search runs on a daemon
thread so the command loop keeps reading input while the engine thinks.

The result is NOT printed on the protocol channel: the command loop never
waits for it. The worker reports the move through the logger (stderr) only.

Threading model:
    One worker thread per start_thinking() call. Starting a new search, or
    calling stop(), closes the running engine process and joins the previous
    worker with a short timeout so a misbehaving engine cannot hang the loop.
    An engine still launching when its search is cancelled is closed by its
    worker the moment popen_uci returns.
"""

import logging
import threading
from typing import Protocol

import chess
import chess.engine

_log = logging.getLogger(__name__)


class SearchEngine(Protocol):
    """What the dispatcher needs from a search collaborator."""

    def start_thinking(self, board: chess.Board, limit: chess.engine.Limit) -> None: ...

    def stop(self) -> None: ...


class UciSearchEngine:
    """
    Fire-and-forget search through python-chess' synchronous engine wrapper.

    Attributes:
        engine_path:   Executable launched with SimpleEngine.popen_uci.
        search_thread: The active worker, or None if no search is running.
        last_result:   PlayResult of the most recent completed search.
    """

    def __init__(self, engine_path: str = "stockfish") -> None:
        self.engine_path = engine_path
        self.search_thread: threading.Thread | None = None
        self.last_result: chess.engine.PlayResult | None = None
        self._engine: chess.engine.SimpleEngine | None = None
        self._cancel = threading.Event()
        self._lock = threading.Lock()

    def start_thinking(self, board: chess.Board, limit: chess.engine.Limit) -> None:
        """
        Start searching `board` under `limit` on a daemon thread.

        The board is copied so the caller may rebuild or discard its own.
        Each search gets its own cancel event; a worker whose event is set
        closes its engine as soon as it has one and never records a result.
        """
        self.stop()
        board_copy = board.copy()
        cancel = threading.Event()
        self._cancel = cancel

        def search_and_log() -> None:
            try:
                engine = chess.engine.SimpleEngine.popen_uci(self.engine_path)
            except (OSError, chess.engine.EngineError) as exc:
                _log.error("could not launch search engine %r: %s", self.engine_path, exc)
                return

            with self._lock:
                if cancel.is_set():
                    _log.debug("search cancelled while the engine was launching")
                    engine.close()
                    return
                self._engine = engine
            try:
                result = engine.play(board_copy, limit)
                with self._lock:
                    if cancel.is_set():
                        return
                    self.last_result = result
                move = result.move.uci() if result.move else "(none)"
                _log.info("bestmove %s (fen %s)", move, board_copy.fen())
            except (chess.engine.EngineError, chess.engine.EngineTerminatedError) as exc:
                _log.warning("search ended without a result: %s", exc)
            finally:
                with self._lock:
                    if self._engine is engine:
                        self._engine = None
                engine.close()

        self.search_thread = threading.Thread(target=search_and_log, daemon=True)
        self.search_thread.start()

    def stop(self) -> None:
        """
        Cancel the current search and wait up to two seconds for the worker.

        A running engine is closed here; one that is still launching is closed
        by its worker as soon as popen_uci returns.
        """
        with self._lock:
            self._cancel.set()
            engine = self._engine
            self._engine = None
        if engine is not None:
            engine.close()
        if self.search_thread is not None and self.search_thread.is_alive():
            self.search_thread.join(timeout=2.0)
        self.search_thread = None
