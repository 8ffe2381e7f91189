"""
Ledger constants: replay header, token width, sentinels and protocol defaults.

Every literal that shows up in the command protocol output, or that the ledger
relies on to stay consistent with the rules authority, is defined here so the
rest of the code never repeats a magic string.
"""

# ---------------------------------------------------------------------------
# Move history
# ---------------------------------------------------------------------------
# The replay string is handed verbatim to the rules authority to rebuild the
# position from the initial setup. Each accepted token is appended as
# "<token> ", so the empty history replays as the bare header.
REPLAY_HEADER: str = "startpos moves "

# Coordinate moves are origin square + destination square, e.g. "e2e4".
MOVE_TOKEN_LENGTH: int = 4

# Shown by getPGN when no move has been accepted yet.
EMPTY_HISTORY: str = "(empty)"

# ---------------------------------------------------------------------------
# Rules authority sentinels
# ---------------------------------------------------------------------------
# Textual renderings of "no matching legal move" and "null move". A resolved
# move equal to either of these is never recorded.
NO_MOVE: str = "(none)"
NULL_MOVE: str = "0000"

# ---------------------------------------------------------------------------
# Command protocol
# ---------------------------------------------------------------------------
# Printed after every processed command, including quit.
SEPARATOR: str = "\n*****************************************\n"

# Depth handed to the search engine by the bestmove command.
BESTMOVE_DEPTH: int = 22
MAX_BESTMOVE_DEPTH: int = 64
