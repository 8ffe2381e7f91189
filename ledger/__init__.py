"""
Ledger package: the move history and the legality gate in front of it.

Modules:
    constants — Replay header, token width, sentinels and protocol defaults
    errors    — Error kinds raised by the ledger, gate and square encoder
    history   — MoveLedger: append-only move history with rollback
    gate      — LegalityGate: accepts or rejects a candidate move token
"""
