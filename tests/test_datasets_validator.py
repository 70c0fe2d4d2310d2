from pathlib import Path
from packages.datasets import inspect_wordlist, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_inspect_wordlist_happy_path(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    _write(d, ["crane", "raise", "stare"])

    rep = inspect_wordlist(5, str(d))
    assert rep["usable"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert rep["invalid_lines"] == 0
    assert rep["issues"] == []
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "uniq=3" in s and s.endswith("| OK")


def test_inspect_wordlist_flags_skips_and_duplicates(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    # blank line, digit, wrong length are skipped; CRANE duplicates crane
    _write(d, ["crane", "CRANE", "gr4pe", "grapes", ""])

    rep = inspect_wordlist(5, str(d))
    assert rep["usable"] is True
    assert rep["count"] == 2 and rep["unique_count"] == 1
    assert rep["invalid_lines"] == 3
    assert any("skipped" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_inspect_wordlist_no_words_of_length(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    _write(d, ["crane", "raise"])

    rep = inspect_wordlist(6, str(d))
    assert rep["usable"] is False
    assert any("0 valid 6-letter" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("UNUSABLE")


def test_inspect_wordlist_missing_file(tmp_path: Path):
    rep = inspect_wordlist(5, str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["usable"] is False
    assert "missing" in pretty_summary(rep)


def _deny_reads(monkeypatch, name):
    """Make every read of files called `name` fail like a chmod 000 file."""
    real_open, real_read_text = Path.open, Path.read_text

    def fake_open(self, *args, **kwargs):
        if self.name == name:
            raise PermissionError(13, "Permission denied", str(self))
        return real_open(self, *args, **kwargs)

    def fake_read_text(self, *args, **kwargs):
        if self.name == name:
            raise PermissionError(13, "Permission denied", str(self))
        return real_read_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "open", fake_open)
    monkeypatch.setattr(Path, "read_text", fake_read_text)


def test_inspect_wordlist_unreadable_file(tmp_path: Path, monkeypatch):
    d = tmp_path / "dictionary.txt"
    _write(d, ["crane"])
    _deny_reads(monkeypatch, "dictionary.txt")

    rep = inspect_wordlist(5, str(d))
    assert rep["exists"] is True
    assert rep["usable"] is False
    assert rep["sha256"] == ""
    assert any("unreadable" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("UNUSABLE")
