"""
Interface package: the text command protocol and its session handle.

Modules:
    config  — Settings loaded from BLINDBOARD_* environment variables
    session — BoardSession: one ledger with its rules and search collaborators
    board   — CommandDispatcher and the `blindboard` console entry point.
              Can be run as a standalone script: python interface/board.py
"""
