#!/usr/bin/env python3
"""
Benchmark: measure the cost of the legality gate as the move history grows.

Every move is judged by replaying the entire history through the rules
authority, so the time per "move" command grows with the game length. Run this
after any change to the ledger, the gate or the position adapter to see the
per-ply cost and whether it stays within human-interactive bounds.

Usage: python3 tools/bench.py
"""
import os
import subprocess
import sys
import time

REPO = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
PYTHON = sys.executable
BOARD = os.path.join(REPO, "interface", "board.py")
SEPARATOR_LINE = "*****************************************"

# Closed Ruy Lopez, 17 moves each side. Fixed forever so runs stay comparable.
GAME = (
    "e2e4 e7e5 g1f3 b8c6 f1b5 a7a6 b5a4 g8f6 e1g1 f8e7 f1e1 b7b5 "
    "a4b3 d7d6 c2c3 e8g8 h2h3 c6a5 b3c2 c7c5 d2d4 d8c7 b1d2 c5d4 "
    "c3d4 a5c6 d2b3 a6a5 c1e3 a5a4 b3d2 c8d7 a1c1 c7b7"
).split()


def send_command(proc: subprocess.Popen, command: str) -> tuple[list[str], float]:
    """Send one command and collect its output up to the separator.

    Args:
        proc: Running board process with text-mode pipes.
        command: Command line without trailing newline.

    Returns:
        The output lines and the elapsed wall time in milliseconds.
    """
    start = time.perf_counter()
    proc.stdin.write(command + "\n")
    proc.stdin.flush()

    lines = []
    for line in proc.stdout:
        line = line.rstrip("\n")
        if line == SEPARATOR_LINE:
            break
        lines.append(line)
    return lines, (time.perf_counter() - start) * 1000


def main() -> None:
    """Play GAME move by move and print per-ply timings."""
    env = {**os.environ, "PYTHONPATH": REPO}
    proc = subprocess.Popen(
        [PYTHON, BOARD],
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
        text=True,
        env=env,
    )

    print(f"Blind chessboard gate benchmark — {PYTHON}")
    print(f"Board: {BOARD}")
    print()
    print(f"{'Ply':>4} {'Move':<6} {'Result':<8} {'Time(ms)':>9}")
    print("-" * 30)

    timings = []
    for ply, token in enumerate(GAME, start=1):
        lines, elapsed = send_command(proc, f"move {token}")
        result = "illegal" if "Not a legal move" in lines else "ok"
        timings.append(elapsed)
        print(f"{ply:>4} {token:<6} {result:<8} {elapsed:>9.2f}")

    proc.stdin.write("quit\n")
    proc.stdin.flush()
    proc.wait(timeout=5)

    if timings:
        print("-" * 30)
        print(f"{'AVERAGE':<20} {sum(timings) / len(timings):>9.2f}")
        print(f"{'FIRST / LAST':<20} {timings[0]:>4.2f} / {timings[-1]:.2f}")


if __name__ == "__main__":
    main()
