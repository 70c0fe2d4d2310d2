"""
Dictionary inspector.

What this module does:
- Inspect a dictionary file (one word per line) for a given word length N.
- Count usable words, invalid lines (blank, non a–z, wrong length) and
  duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary,
  which the console game prints at start-up.

Unlike wordlist.load_words, nothing is rejected here: the report simply
describes what the loader will (or won't) be able to use.

Typical use:
    from packages.datasets import inspect_wordlist, pretty_summary
    rep = inspect_wordlist(5, "dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from .wordlist import clean_words


# -----------------------------
# Dataclass for the structured report
# -----------------------------

@dataclass
class WordlistReport:
    """Diagnostics and metadata for one dictionary file."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of usable lines (before dedupe)
    unique_count: int    # usable words after dedupe
    invalid_lines: int   # lines the loader will skip
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    usable: bool         # at least one N-letter word available
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path, N: int) -> Tuple[int, int, int]:
    """
    Walk the file once and classify each line with the loader's own rules.

    Returns:
      (usable_lines, unique_words, invalid_lines)
    """
    usable = 0
    invalid = 0
    seen = set()

    with path.open("r", encoding="utf-8-sig") as f:
        for raw in f:
            ok = clean_words([raw], N)
            if ok:
                usable += 1
                seen.update(ok)
            else:
                invalid += 1

    return usable, len(seen), invalid


# -----------------------------
# Public API
# -----------------------------

def inspect_wordlist(N: int, path: str) -> Dict:
    """
    Inspect a dictionary file for word length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport) with counts,
        SHA-256, `usable` flag and a list of human-friendly `issues`.
    """
    p = Path(path)
    try:
        found = p.is_file()
    except OSError:
        # e.g. no permission to stat inside the parent directory
        found = False
    if not found:
        rep = WordlistReport(N=N, path=str(path), exists=False, count=0, unique_count=0,
                             invalid_lines=0, sha256="", usable=False,
                             issues=[f"dictionary file not found: {path}"])
        return asdict(rep)

    issues: List[str] = []
    sha = ""
    try:
        sha = _sha256_file(p)
        usable, unique, invalid = _scan(p, N)
    except UnicodeDecodeError as e:
        issues.append(f"dictionary is not valid UTF-8: {e.reason}")
        usable = unique = invalid = 0
    except OSError as e:
        # the loader falls back to the built-in list in this case
        issues.append(f"dictionary unreadable: {e}")
        usable = unique = invalid = 0

    if unique == 0:
        issues.append(f"dictionary contains 0 valid {N}-letter words")
    if invalid:
        issues.append(f"dictionary has {invalid} skipped line(s)")
    if usable != unique:
        issues.append(f"dictionary contains {usable - unique} duplicate word(s)")

    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        count=usable,
        unique_count=unique,
        invalid_lines=invalid,
        sha256=sha,
        usable=unique > 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for the console.

    Example:
        N=5 | dictionary.txt: 2315 words (uniq=2315, skipped=0, sha=abc123...) | OK
    """
    status = "OK" if report["usable"] else "UNUSABLE"
    if not report["exists"]:
        return f"N={report['N']} | {report['path']}: missing | {status}"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | {report['path']}: {report['count']} words "
        f"(uniq={report['unique_count']}, skipped={report['invalid_lines']}, sha={sha}) "
        f"| {status}"
    )
