"""
Rules package: adapters over the external chess rules authority and search.

Modules:
    position — PositionModel: rebuild, resolve and render via python-chess
    search   — UciSearchEngine: fire-and-forget bestmove via chess.engine
"""
