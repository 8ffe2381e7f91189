"""
Actuator package: translates the last move into a physical square signal.

Modules:
    encoder — Algebraic square -> 0..63 index -> binary digit string
    render  — ASCII 8x8 frame with a single raised square
    report  — Piece-raise report composed from the ledger's last move
"""
