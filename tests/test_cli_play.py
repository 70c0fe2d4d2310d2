from pathlib import Path

import pytest
from apps.cli.play import main, run_game
from packages.engine import GameConfig, GameSession, GameState


def _scripted(*lines):
    """Line source that raises EOFError once the script runs out, like input()."""
    it = iter(lines)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def test_run_game_win(capsys):
    s = GameSession(("table", "water"), target="table")
    state = run_game(s, _scripted("gr4pe", "water", "table"))
    out = capsys.readouterr().out
    assert state is GameState.WON
    assert "You have 6 attempts." in out
    assert "Invalid guess." in out
    assert "Feedback: _Ate_" in out
    assert "Feedback: TABLE" in out
    assert "Congratulations" in out


def test_run_game_loss_prints_target(capsys):
    s = GameSession(("table",), GameConfig(max_attempts=2), target="table")
    state = run_game(s, _scripted("grape", "peach"))
    out = capsys.readouterr().out
    assert state is GameState.LOST
    assert "The correct word was: table" in out


def test_run_game_eof_abandons(capsys):
    s = GameSession(("table",), target="table")
    state = run_game(s, _scripted("grape"))
    assert state is GameState.IN_PROGRESS
    assert s.attempts_used == 1
    assert "correct word" not in capsys.readouterr().out


def test_run_game_strict_message(capsys):
    s = GameSession(("table",), GameConfig(require_known_words=True), target="table")
    run_game(s, _scripted("zzzzz", "table"))
    assert "known 5-letter word" in capsys.readouterr().out


def test_main_with_dictionary(tmp_path: Path, monkeypatch, capsys):
    d = tmp_path / "dictionary.txt"
    d.write_text("crane\n", encoding="utf-8")
    monkeypatch.setattr("builtins.input", _scripted("crane"))

    assert main(["--dictionary", str(d), "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "uniq=1" in out
    assert "Feedback: CRANE" in out


def test_main_missing_dictionary_uses_fallback(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", _scripted())
    assert main(["--dictionary", str(tmp_path / "nope.txt")]) == 0
    assert "missing" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ["--word-length", "3"],
    ["--max-attempts", "0"],
])
def test_main_configuration_error_exits_1(tmp_path: Path, capsys, argv):
    assert main(["--dictionary", str(tmp_path / "nope.txt")] + argv) == 1
    assert "Error:" in capsys.readouterr().err


def test_main_unreadable_dictionary_uses_fallback(tmp_path: Path, monkeypatch, capsys):
    d = tmp_path / "dictionary.txt"
    d.write_text("crane\n", encoding="utf-8")
    real_open, real_read_text = Path.open, Path.read_text

    def deny(real):
        def wrapper(self, *args, **kwargs):
            if self == d:
                raise PermissionError(13, "Permission denied", str(self))
            return real(self, *args, **kwargs)
        return wrapper

    monkeypatch.setattr(Path, "open", deny(real_open))
    monkeypatch.setattr(Path, "read_text", deny(real_read_text))
    monkeypatch.setattr("builtins.input", _scripted())

    assert main(["--dictionary", str(d), "--seed", "3"]) == 0
    assert "UNUSABLE" in capsys.readouterr().out
