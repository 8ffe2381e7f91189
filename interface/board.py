"""
Blind-chessboard command protocol.

A line-oriented text protocol between a controller (a person at a terminal,
or the board's microcontroller over a serial bridge) and the move ledger.
Each line is one command; the first whitespace-separated token selects it.

Commands:
    quit | stop          end the session
    printposition        diagram of the current position
    move <e2e4>          apply a move if legal, then report the piece to raise
    bestmove             start a background search (result goes to the log)
    removelastmove       undo the last accepted move
    getpieceraise        report the square the actuator should raise
    getPGN               numbered list of accepted moves

Every processed command is followed by a separator block. Errors are reported
as one line of text and never end the loop; only quit/stop (or the end of
input) do.

Modes:
    Interactive: no arguments. Lines are read from stdin until quit/stop or
                 EOF (which is treated as quit).
    Batch:       all arguments are joined with spaces into a single command,
                 processed once, after which the session ends.

Critical rule: stdout carries protocol output only. Diagnostics go to the
logger, which the entry point attaches to stderr.
"""

import enum
import logging
import os
import sys
from collections.abc import Iterable
from typing import TextIO

# ---------------------------------------------------------------------------
# Path setup: make the sibling packages importable when this script is run
# directly as `python interface/board.py` from the repo root.
# ---------------------------------------------------------------------------
_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from pydantic import ValidationError

from actuator.report import format_piece_raise
from interface.config import Settings
from interface.session import BoardSession
from ledger.constants import SEPARATOR
from ledger.errors import BoardError, MalformedToken, UnknownCommand

_log = logging.getLogger(__name__)


class DispatcherState(enum.Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class CommandDispatcher:
    """
    Single-threaded protocol loop over one BoardSession.

    One command is processed completely, including any full-history replay
    through the rules authority, before the next one is read.

    Attributes:
        session: The game session every command acts on.
        out:     Stream receiving protocol output (stdout by default).
        state:   RUNNING until quit/stop or end of input, then TERMINATED.
    """

    def __init__(self, session: BoardSession, out: TextIO | None = None) -> None:
        self.session = session
        self.out = out if out is not None else sys.stdout
        self.state = DispatcherState.RUNNING

    @property
    def running(self) -> bool:
        return self.state is DispatcherState.RUNNING

    def _send(self, text: str) -> None:
        print(text, file=self.out, flush=True)

    # -----------------------------------------------------------------------
    # Loop drivers
    # -----------------------------------------------------------------------

    def run(self, lines: Iterable[str]) -> None:
        """
        Interactive mode: process lines until quit/stop or end of input.

        Running out of input synthesizes a quit command.
        """
        for raw_line in lines:
            self.execute(raw_line.rstrip("\r\n"))
            if not self.running:
                return
        if self.running:
            self.execute("quit")

    def run_batch(self, args: list[str]) -> None:
        """Batch mode: join `args` into one command, process it once, end."""
        self.execute(" ".join(args))
        self._terminate()

    def execute(self, line: str) -> None:
        """
        Process one command line and print the separator.

        Error handling:
            BoardError subclasses are reported as their one-line message.
            Anything else is a bug in a handler or a collaborator: it is
            logged with its traceback and the loop carries on.
        """
        tokens = line.split()
        command = tokens[0] if tokens else ""
        args = tokens[1:]

        try:
            if command in ("quit", "stop"):
                self.handle_quit()
            elif command == "printposition":
                self.handle_printposition()
            elif command == "move":
                self.handle_move(args)
            elif command == "bestmove":
                self.handle_bestmove()
            elif command == "removelastmove":
                self.handle_removelastmove()
            elif command == "getpieceraise":
                self.handle_getpieceraise()
            elif command == "getPGN":
                self.handle_getpgn()
            else:
                raise UnknownCommand(line)

        except BoardError as e:
            _log.debug("command %r failed: %s", command, e)
            self._send(str(e))
        except Exception:
            _log.exception("unhandled error for command %r", command)

        self._send(SEPARATOR)

    # -----------------------------------------------------------------------
    # Command handlers
    # -----------------------------------------------------------------------

    def handle_quit(self) -> None:
        self._terminate()

    def handle_printposition(self) -> None:
        self._send(self.session.position_text())

    def handle_move(self, args: list[str]) -> None:
        """
        Apply a move through the legality gate.

        On success prints the rebuilt position, the numbered move list and the
        piece-raise report. On failure the gate has already restored the
        ledger and the raised BoardError is reported by execute().
        """
        if not args:
            raise MalformedToken("")
        self.session.apply_move(args[0])
        self._send(self.session.position_text() + "\n")
        self.handle_getpgn()
        self.handle_getpieceraise()

    def handle_bestmove(self) -> None:
        """
        Start a fixed-depth search and return at once.

        Nothing is printed here: the loop does not wait for the engine, and
        the worker reports its move through the logger only.
        """
        self.session.start_search()

    def handle_removelastmove(self) -> None:
        self.session.remove_last_move()

    def handle_getpieceraise(self) -> None:
        self._send(format_piece_raise(self.session.ledger))

    def handle_getpgn(self) -> None:
        self._send(f"PGN vector: {self.session.pgn()}\n")

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    def _terminate(self) -> None:
        if self.running:
            self.state = DispatcherState.TERMINATED
            self.session.close()


def main(argv: list[str] | None = None) -> int:
    """
    Console entry point.

    Args:
        argv: Command arguments without the program name. None reads
              sys.argv[1:]. Any argument selects batch mode.

    Returns:
        Process exit status: 0, or 2 for invalid BLINDBOARD_* settings.
    """
    args = sys.argv[1:] if argv is None else argv

    try:
        settings = Settings.from_env()
    except ValidationError as exc:
        print(f"invalid settings: {exc}", file=sys.stderr, flush=True)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    dispatcher = CommandDispatcher(BoardSession.from_settings(settings))
    if args:
        dispatcher.run_batch(args)
    else:
        dispatcher.run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
