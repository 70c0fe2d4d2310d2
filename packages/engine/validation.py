"""
Guess validation.

This module answers the question: "Is this guess well-formed?"
A guess is valid iff:
  - it is a string made of ASCII characters only
  - it has exact length N (surrounding whitespace counts; nothing is trimmed)
  - every character is a letter a–z, in either case

Dictionary membership is NOT required by default: any well-formed string is
accepted. Pass `allowed` to additionally require that the guess is a known
word (the session does this when `require_known_words` is set).
"""

from typing import Collection, Optional

_ASCII_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")


def normalize_guess(raw: str) -> str:
    """Canonical form of a player's input: lower-case."""
    return raw.lower()


def is_word(w: str, N: int) -> bool:
    """True if `w` is exactly N lower-case ASCII letters."""
    return len(w) == N and all(ch in _ASCII_LOWER for ch in w)


def is_valid_guess(raw: str, N: int, allowed: Optional[Collection[str]] = None) -> bool:
    """
    Return True if `raw` is a valid guess per the rules above.

    Args:
      raw     : player input (any case)
      N       : required word length
      allowed : optional collection of known words (lower-case). Prefer a
                set or tuple built once by the caller; it is not rebuilt here.
    """
    if not isinstance(raw, str):
        return False

    # lower() folds some non-ASCII letters onto a–z (KELVIN SIGN -> 'k'),
    # so reject them before normalizing
    if not raw.isascii():
        return False

    w = normalize_guess(raw)
    if not is_word(w, N):
        return False

    if allowed is not None:
        return w in allowed
    return True
