"""
Word repository: turn a plain-text dictionary into a WordCollection.

Dictionary format: UTF-8, one word per line. Lines are trimmed and lower-cased;
only purely alphabetic a–z lines of the requested length are kept, and
duplicates are dropped.

If the file is missing, unreadable, or yields no usable word, the built-in
FALLBACK_WORDS list is used instead (filtered the same way). If that is empty
too (e.g. an unusual word length), ConfigurationError is raised: no game can
start without at least one word.

A WordCollection is a sorted tuple, so a seeded RNG always draws the same
target from the same dictionary.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Tuple

from packages.engine.config import ConfigurationError, WORD_LENGTH
from .io import read_lines

logger = logging.getLogger(__name__)

WordCollection = Tuple[str, ...]

_ALPHA_RE = re.compile(r"[a-z]+")

# Built-in list for when no dictionary file is available.
FALLBACK_WORDS: Tuple[str, ...] = (
    "apple", "table", "chair", "water", "lemon", "bread", "grape", "peach", "plumb", "bison",
    "plane", "stone", "tiger", "beach", "vocal", "music", "sharp", "blaze", "sweet", "flame",
    "witch", "piano", "mount", "beard", "earth", "shone", "flood", "lunar", "fresh", "sugar",
    "comic", "flute", "drain", "plant", "block", "jumpy", "crowd", "light", "pouch", "frank",
    "green", "shark", "blink", "storm", "rainy", "molar", "beast", "minor", "glove", "frill",
    "flint", "purse", "touch", "unite", "proud",
)


def clean_words(lines: Iterable[str], N: int = WORD_LENGTH) -> WordCollection:
    """
    Normalize raw dictionary lines into a WordCollection of N-letter words.

    Blank lines, lines with non a–z characters (digits, hyphens, accents,
    apostrophes) and words of any other length are skipped.
    """
    keep = set()
    for raw in lines:
        w = raw.strip().lower()
        if len(w) == N and _ALPHA_RE.fullmatch(w):
            keep.add(w)
    return tuple(sorted(keep))


def load_words(
        path: Path | str | None,
        N: int = WORD_LENGTH,
        *,
        fallback: Iterable[str] = FALLBACK_WORDS,
) -> WordCollection:
    """
    Load the dictionary at `path`, falling back to `fallback` when needed.

    Args:
      path     : dictionary file; None skips straight to the fallback
      N        : required word length
      fallback : words used when the file gives nothing usable

    Raises:
      ConfigurationError if neither source yields an N-letter word.
    """
    words: WordCollection = ()

    if path is not None:
        try:
            words = clean_words(read_lines(path), N)
        except OSError as e:
            # FileNotFoundError, permission problems, directories, ...
            logger.warning(f"Could not read dictionary {path}: {e}")
        except UnicodeDecodeError as e:
            logger.warning(f"Dictionary {path} is not valid UTF-8: {e}")
        else:
            if not words:
                logger.warning(f"Dictionary {path} has no {N}-letter words")
            else:
                logger.info(f"Loaded {len(words)} {N}-letter words from {path}")

    if not words:
        words = clean_words(fallback, N)
        if words:
            logger.info(f"Using fallback word list ({len(words)} words)")

    if not words:
        raise ConfigurationError(f"no valid {N}-letter words available")
    return words
