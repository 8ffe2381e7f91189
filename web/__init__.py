"""
Web package: HTTP surface over the blind-chessboard session.

Modules:
    app — FastAPI application exposing the move ledger and piece-raise report
"""
