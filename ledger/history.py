"""
MoveLedger: the append-only move history of one session.

The history is kept in two synchronized views:

    ReplayBuffer — the raw input tokens, rendered as "startpos moves e2e4 ..."
                   so the rules authority can rebuild the position from scratch.
    DisplayList  — the canonical move strings the rules authority returned for
                   each accepted token (castling normalized), shown by getPGN.

Both views are derived from a single list of MoveRecord entries, so they can
never drift apart: record i holds the token at replay position i and the
canonical string it produced. Rollback pops the last record as a whole; no
view is ever trimmed by counting characters, so tokens of any width round-trip.

The ledger performs no validation. LegalityGate is the only caller allowed to
append, and only after (or while) confirming legality.
"""

from dataclasses import dataclass, replace

from ledger.constants import EMPTY_HISTORY, REPLAY_HEADER


@dataclass(frozen=True)
class MoveRecord:
    """
    One accepted move.

    Attributes:
        token:     Coordinate move exactly as the user typed it (e.g. "e1h1").
        canonical: Rules-authority rendering of the same move (e.g. "e1g1").
                   None only while LegalityGate is deciding on a speculative
                   entry; never None once the gate returns.
    """

    token: str
    canonical: str | None = None

    @property
    def destination(self) -> str:
        """Trailing square of the token, e.g. "e4" for "e2e4"."""
        return self.token[2:4]


class MoveLedger:
    """
    Sole owner and writer of the session's move history.

    Attributes:
        records: Accepted moves in play order. Treat as read-only outside
                 this class; use append/settle/rollback to change it.
    """

    def __init__(self) -> None:
        self.records: list[MoveRecord] = []

    def __len__(self) -> int:
        return len(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)

    # -----------------------------------------------------------------------
    # Mutation
    # -----------------------------------------------------------------------

    def append(self, token: str, canonical: str | None = None) -> None:
        """
        Push a token (and its canonical rendering) onto both views.

        Args:
            token:     Coordinate move text.
            canonical: Canonical move string. May be omitted for a speculative
                       entry that is completed later with settle().
        """
        self.records.append(MoveRecord(token, canonical))

    def settle(self, canonical: str) -> None:
        """
        Complete the most recent entry with its canonical move string.

        Raises:
            IndexError: The history is empty.
        """
        self.records[-1] = replace(self.records[-1], canonical=canonical)

    def rollback(self) -> None:
        """Remove the most recent entry from both views; no-op when empty."""
        if self.records:
            self.records.pop()

    def clear(self) -> None:
        self.records.clear()

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------

    @property
    def tokens(self) -> list[str]:
        return [record.token for record in self.records]

    @property
    def display_list(self) -> list[str]:
        return [record.canonical or "" for record in self.records]

    def last_token(self) -> str | None:
        return self.records[-1].token if self.records else None

    def last_canonical(self) -> str | None:
        return self.records[-1].canonical if self.records else None

    def last_destination_square(self) -> str | None:
        """Destination square of the last token, or None for an empty history."""
        return self.records[-1].destination if self.records else None

    def replay_string(self, upto: int | None = None) -> str:
        """
        Build the position-reconstruction string for the rules authority.

        Args:
            upto: Replay only the first `upto` moves. None replays all of them.

        Returns:
            REPLAY_HEADER followed by one "<token> " segment per move, e.g.
            "startpos moves e2e4 e7e5 ".
        """
        records = self.records if upto is None else self.records[:upto]
        return REPLAY_HEADER + "".join(f"{record.token} " for record in records)

    def display_string(self) -> str:
        """
        Numbered, space-joined canonical list, e.g. "1. e2e4 2. e7e5".

        Returns EMPTY_HISTORY when no move has been accepted.
        """
        if not self.records:
            return EMPTY_HISTORY
        return " ".join(
            f"{number}. {canonical}"
            for number, canonical in enumerate(self.display_list, start=1)
        )
