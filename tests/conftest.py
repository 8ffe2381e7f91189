"""Shared pytest fixtures used across the test suite."""

import io

import chess
import chess.engine
import pytest

from interface.board import CommandDispatcher
from interface.config import Settings
from interface.session import BoardSession
from ledger.history import MoveLedger
from rules.position import PositionModel


class FakeSearch:
    """Records start_thinking/stop calls instead of launching an engine."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, chess.engine.Limit]] = []
        self.stopped = 0

    def start_thinking(self, board: chess.Board, limit: chess.engine.Limit) -> None:
        self.calls.append((board.fen(), limit))

    def stop(self) -> None:
        self.stopped += 1


@pytest.fixture
def ledger() -> MoveLedger:
    return MoveLedger()


@pytest.fixture
def positions() -> PositionModel:
    return PositionModel()


@pytest.fixture
def search() -> FakeSearch:
    return FakeSearch()


@pytest.fixture
def session(positions, search) -> BoardSession:
    return BoardSession(settings=Settings(), positions=positions, search=search)


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def dispatcher(session, out) -> CommandDispatcher:
    return CommandDispatcher(session, out=out)
