"""
Game configuration.

A GameConfig fixes the rules for one session:
  - max_attempts       : how many valid guesses the player gets (Wordle: 6)
  - word_length        : size of the target and of every guess (Wordle: 5)
  - duplicate_policy   : how repeated letters are scored (see scoring.py)
  - require_known_words: if True, guesses must also be in the word collection

Configs are immutable and validated on construction, so a bad value fails
before any session is created.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping

# Defaults mirror the classic game.
MAX_ATTEMPTS = 6
WORD_LENGTH = 5


class ConfigurationError(ValueError):
    """Fatal setup problem: bad option values or no usable words."""


class DuplicatePolicy(str, Enum):
    """
    Scoring rule for letters that occur more than once.

    LENIENT : a non-exact letter is PRESENT whenever it occurs anywhere in
              the target, even if that occurrence is already matched.
    COUNTED : PRESENT marks are capped by the target's remaining letter
              counts (conventional Wordle).
    """
    LENIENT = "lenient"
    COUNTED = "counted"


def _not_positive_int(x: Any) -> bool:
    # bool is an int subclass; True must not pass as 1
    return isinstance(x, bool) or not isinstance(x, int) or x <= 0


@dataclass(frozen=True)
class GameConfig:
    max_attempts: int = MAX_ATTEMPTS
    word_length: int = WORD_LENGTH
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.LENIENT
    require_known_words: bool = False

    def __post_init__(self) -> None:
        if _not_positive_int(self.max_attempts):
            raise ConfigurationError(f"max_attempts must be a positive int: {self.max_attempts!r}")
        if _not_positive_int(self.word_length):
            raise ConfigurationError(f"word_length must be a positive int: {self.word_length!r}")
        # Accept the plain string form ("counted") as well as the enum.
        try:
            policy = DuplicatePolicy(self.duplicate_policy)
        except ValueError as e:
            choices = [p.value for p in DuplicatePolicy]
            raise ConfigurationError(
                f"unknown duplicate_policy {self.duplicate_policy!r}; expected one of {choices}") from e
        object.__setattr__(self, "duplicate_policy", policy)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "GameConfig":
        """
        Build a config from a plain dict (e.g. parsed CLI args or a JSON blob).

        Unknown keys are rejected so typos don't silently fall back to defaults.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ConfigurationError(f"unknown config option(s): {unknown}. Recognized: {sorted(known)}")
        return cls(**dict(options))
