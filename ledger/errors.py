"""Error kinds raised by the ledger, the legality gate and the square encoder."""


class BoardError(Exception):
    """Base class for every recoverable, user-facing error."""

    #: One line of text printed on the protocol channel.
    message: str = "Error"

    def __str__(self) -> str:
        return self.message


class MalformedToken(BoardError):
    """Move text is not exactly four characters; the ledger is never touched."""

    message = "Invalid move format"

    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token


class IllegalMove(BoardError):
    """Well-formed token that no legal move in the current position matches."""

    message = "Not a legal move"

    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token


class InvalidSquare(BoardError):
    """Square text outside a-h / 1-8, or an index outside 0..63."""

    def __init__(self, square: object) -> None:
        super().__init__(square)
        self.square = square
        self.message = f"Invalid square: {square}"


class UnknownCommand(BoardError):
    """Unrecognised command keyword; the dispatcher keeps running."""

    def __init__(self, line: str) -> None:
        super().__init__(line)
        self.line = line
        self.message = f"Unknown command: {line}"
