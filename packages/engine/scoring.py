"""
Feedback for a single (target, guess) pair.

Each guess position is classified as:
  - EXACT   : correct letter in the correct position
  - PRESENT : letter occurs in the target, but not at this position
  - ABSENT  : letter does not occur in the target

Algorithm (two-pass, exact-match-first):
  1) First pass marks every EXACT position.
  2) Second pass classifies the remaining positions. How repeated letters are
     handled depends on the DuplicatePolicy:
       - LENIENT: PRESENT if the letter occurs anywhere in the target. Target
         letters are never consumed, so "error" vs "crane" marks all three
         r's (one EXACT, two PRESENT).
       - COUNTED: PRESENT only while the target still has an unmatched copy of
         the letter; each PRESENT consumes one copy.

Feedback is an immutable tuple of Mark values. Two text forms are provided:
  render(guess, fb)  -> "_Ate_"  (EXACT upper-case, PRESENT lower-case, ABSENT '_')
  to_pattern(fb)     -> "-GYY-"  (G green, Y yellow, '-' gray)
"""

from collections import Counter
from enum import Enum
from typing import Tuple

from .config import DuplicatePolicy


class Mark(str, Enum):
    EXACT = "exact"
    PRESENT = "present"
    ABSENT = "absent"


Feedback = Tuple[Mark, ...]

_PATTERN_CHARS = {Mark.EXACT: "G", Mark.PRESENT: "Y", Mark.ABSENT: "-"}
ABSENT_CHAR = "_"


def evaluate(target: str, guess: str,
             policy: DuplicatePolicy = DuplicatePolicy.LENIENT) -> Feedback:
    """
    Classify every position of `guess` against `target`.

    Preconditions:
      - both words are already validated and lower-case
      - len(guess) == len(target)

    Examples (shown via render / to_pattern):
      evaluate("table", "water")                          -> "_Ate_"
      evaluate("crane", "error")                          -> "YGY-Y"
      evaluate("crane", "error", DuplicatePolicy.COUNTED) -> "YG---"
    """
    assert len(guess) == len(target), "Guess and target must be the same length"

    marks = [Mark.ABSENT] * len(guess)

    # Pass 1: exact matches. Unmatched target letters are counted for the
    # COUNTED policy; LENIENT ignores the counts.
    remaining = Counter()
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            marks[i] = Mark.EXACT
        else:
            remaining[t] += 1

    # Pass 2: present/absent for everything that isn't exact.
    counted = DuplicatePolicy(policy) is DuplicatePolicy.COUNTED
    for i, g in enumerate(guess):
        if marks[i] is Mark.EXACT:
            continue
        if counted:
            if remaining[g] > 0:
                marks[i] = Mark.PRESENT
                remaining[g] -= 1
        elif g in target:
            marks[i] = Mark.PRESENT

    return tuple(marks)


def is_solved(feedback: Feedback) -> bool:
    return all(m is Mark.EXACT for m in feedback)


def render(guess: str, feedback: Feedback, exact_upper: bool = True) -> str:
    """
    One character per position: EXACT -> upper-case letter,
    PRESENT -> lower-case letter, ABSENT -> '_'.

    With exact_upper=False EXACT letters stay lower-case, as the classic
    console game printed them ("table" rather than "TABLE").
    """
    out = []
    for ch, mark in zip(guess, feedback):
        if mark is Mark.EXACT:
            out.append(ch.upper() if exact_upper else ch.lower())
        elif mark is Mark.PRESENT:
            out.append(ch.lower())
        else:
            out.append(ABSENT_CHAR)
    return "".join(out)


def to_pattern(feedback: Feedback) -> str:
    """Colour pattern string, e.g. 'GY--G'."""
    return "".join(_PATTERN_CHARS[m] for m in feedback)
