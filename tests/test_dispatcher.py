import logging

import pytest

from interface.board import CommandDispatcher, DispatcherState, main

SEPARATOR_LINE = "*****************************************"


def run(dispatcher, *commands):
    dispatcher.out.seek(0)
    dispatcher.out.truncate()
    for command in commands:
        dispatcher.execute(command)
    return dispatcher.out.getvalue()


def diagram_rows(text):
    return [line for line in text.splitlines() if line.startswith("|") and line.count("|") == 9]


def test_move_then_piece_raise(dispatcher):
    output = run(dispatcher, "move e2e4")
    assert "PGN vector: 1. e2e4" in output
    assert "Fen: rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1" in output

    output = run(dispatcher, "getpieceraise")
    assert "Last Move:\t\te2e4" in output
    assert "Piece to raise:\t\te4" in output
    assert "Decimal Equivalent\t28" in output
    assert "Binary Output:\t\t11100" in output
    rows = diagram_rows(output)
    assert len(rows) == 8
    assert rows[4] == "|   |   |   |   | # |   |   |   |  4"
    assert output.count("#") == 1


def test_move_output_contains_all_report_fields(dispatcher):
    output = run(dispatcher, "move g1f3")
    assert "Piece to raise:\t\tf3" in output
    assert "Decimal Equivalent\t21" in output
    assert "Binary Output:\t\t10101" in output
    assert output.rstrip().endswith(SEPARATOR_LINE)


def test_illegal_move_reported(dispatcher):
    output = run(dispatcher, "move e2e5")
    assert output.startswith("Not a legal move\n")
    assert "PGN vector: (empty)" in run(dispatcher, "getPGN")


def test_remove_last_move_clears_raise(dispatcher):
    run(dispatcher, "move e2e4", "removelastmove")
    output = run(dispatcher, "getpieceraise")
    assert output.startswith("No pieces raised\n")


def test_malformed_move(dispatcher):
    output = run(dispatcher, "move abc")
    assert output.startswith("Invalid move format\n")
    assert "PGN vector: (empty)" in run(dispatcher, "getPGN")


def test_move_without_token(dispatcher):
    assert run(dispatcher, "move").startswith("Invalid move format\n")


def test_get_pgn_numbers_moves(dispatcher):
    run(dispatcher, "move e2e4", "move e7e5", "move g1f3")
    assert "PGN vector: 1. e2e4 2. e7e5 3. g1f3\n" in run(dispatcher, "getPGN")


def test_remove_last_move_on_empty_history(dispatcher):
    output = run(dispatcher, "removelastmove")
    assert output.strip() == SEPARATOR_LINE
    assert dispatcher.session.ledger.replay_string() == "startpos moves "


def test_print_position(dispatcher):
    run(dispatcher, "move d2d4")
    output = run(dispatcher, "printposition")
    assert "Fen: rnbqkbnr/pppppppp/8/8/3P4/8/PPP1PPPP/RNBQKBNR b KQkq - 0 1" in output


@pytest.mark.parametrize("line", ["foo bar", "GETPGN", "Move e2e4"])
def test_unknown_command(dispatcher, line):
    output = run(dispatcher, line)
    assert output.startswith(f"Unknown command: {line}\n")
    assert dispatcher.running


def test_blank_line_is_unknown(dispatcher):
    assert run(dispatcher, "").startswith("Unknown command: \n")


def test_bestmove_starts_search_and_prints_nothing(dispatcher, search):
    run(dispatcher, "move e2e4")
    output = run(dispatcher, "bestmove")
    assert output.strip() == SEPARATOR_LINE
    assert len(search.calls) == 1
    fen, limit = search.calls[0]
    assert fen == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"
    assert limit.depth == 22


@pytest.mark.parametrize("command", ["quit", "stop"])
def test_quit_and_stop_terminate(dispatcher, search, command):
    dispatcher.run([f"{command}\n", "move e2e4\n"])
    assert dispatcher.state is DispatcherState.TERMINATED
    assert search.stopped == 1
    assert len(dispatcher.session.ledger) == 0


def test_end_of_input_synthesizes_quit(dispatcher, search):
    dispatcher.run(["move e2e4\n", "getPGN\n"])
    assert not dispatcher.running
    assert search.stopped == 1
    assert dispatcher.out.getvalue().count(SEPARATOR_LINE) == 3


def test_batch_mode_processes_once(dispatcher, search):
    dispatcher.run_batch(["move", "e2e4"])
    assert dispatcher.state is DispatcherState.TERMINATED
    assert search.stopped == 1
    assert dispatcher.session.ledger.display_string() == "1. e2e4"
    assert dispatcher.out.getvalue().count(SEPARATOR_LINE) == 1


def test_handler_failure_does_not_escape(dispatcher, monkeypatch, caplog):
    def broken():
        raise RuntimeError("boom")

    monkeypatch.setattr(dispatcher.session, "position_text", broken)
    with caplog.at_level(logging.ERROR, logger="interface.board"):
        output = run(dispatcher, "printposition")
    assert output.strip() == SEPARATOR_LINE
    assert "boom" in caplog.text
    assert dispatcher.running


def test_dispatcher_defaults_to_stdout(session, capsys):
    CommandDispatcher(session).execute("getPGN")
    assert "PGN vector: (empty)" in capsys.readouterr().out


def test_main_batch(monkeypatch, capsys):
    for name in ("ENGINE", "DEPTH", "CHESS960", "LOG_LEVEL"):
        monkeypatch.delenv(f"BLINDBOARD_{name}", raising=False)
    assert main(["move", "e2e4"]) == 0
    assert "Piece to raise:\t\te4" in capsys.readouterr().out


def test_main_rejects_bad_settings(monkeypatch, capsys):
    monkeypatch.setenv("BLINDBOARD_LOG_LEVEL", "LOUD")
    assert main(["getPGN"]) == 2
    assert "invalid settings" in capsys.readouterr().err


def test_move_output_separates_position_from_move_list(dispatcher):
    output = run(dispatcher, "move e2e4")
    assert "Checkers: \n\nPGN vector: 1. e2e4\n" in output
