"""
LegalityGate: decides whether a candidate move token enters the ledger.

No incremental legality check is available, so every candidate is judged by
replaying the entire history through the rules authority. That costs
O(history length) per move, which is fine at human pace but not for
engine-speed self-play (see tools/bench.py).

Algorithm for try_apply_move():
    1. Reject tokens whose length is not MOVE_TOKEN_LENGTH (MalformedToken);
       the ledger is not touched.
    2. Speculatively append the token to the ledger.
    3. Rebuild the position the token is played from, out of the ledger's
       replay string.
    4. Resolve the trailing token against that position. "No matching legal
       move" and "null move" both count as failure.
    5. On failure roll the speculative entry back and raise IllegalMove; the
       ledger is byte-identical to its state before the call.
    6. On success complete the entry with the canonical string and return it.
"""

import logging
from typing import Protocol

import chess

from ledger.constants import MOVE_TOKEN_LENGTH, NO_MOVE, NULL_MOVE
from ledger.errors import IllegalMove, MalformedToken
from ledger.history import MoveLedger

_log = logging.getLogger(__name__)


class RulesAuthority(Protocol):
    """The two PositionModel operations the gate depends on."""

    def rebuild_from(self, replay: str) -> chess.Board: ...

    def resolve(self, board: chess.Board, token: str) -> str | None: ...


def try_apply_move(ledger: MoveLedger, positions: RulesAuthority, token: str) -> str:
    """
    Apply `token` to the ledger if, and only if, it is legal.

    Args:
        ledger:    The session's move history. Mutated only on success.
        positions: Rules authority used to rebuild and resolve.
        token:     Candidate coordinate move, e.g. "e2e4".

    Returns:
        The canonical move string now recorded in the ledger's DisplayList.

    Raises:
        MalformedToken: len(token) != MOVE_TOKEN_LENGTH.
        IllegalMove:    No legal move in the current position matches.
    """
    if len(token) != MOVE_TOKEN_LENGTH:
        _log.debug("rejected malformed token %r", token)
        raise MalformedToken(token)

    ledger.append(token)
    try:
        board = positions.rebuild_from(ledger.replay_string(upto=len(ledger) - 1))
        canonical = positions.resolve(board, token)
    except Exception:
        ledger.rollback()
        raise

    if canonical is None or canonical in (NO_MOVE, NULL_MOVE):
        ledger.rollback()
        _log.debug("rejected illegal move %r", token)
        raise IllegalMove(token)

    ledger.settle(canonical)
    _log.info("accepted move %s as %s (ply %d)", token, canonical, len(ledger))
    return canonical
