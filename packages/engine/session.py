"""
Game session state machine.

One GameSession = one game against one hidden target word.

    IN_PROGRESS --(guess == target)-----------------> WON
    IN_PROGRESS --(attempts_used == max_attempts)---> LOST

- Invalid input never reaches the transition step: no attempt is consumed,
  no feedback is produced, and the caller simply re-prompts.
- The target stays hidden (`target_word is None`) until the game is over,
  unless the caller explicitly asks for it with reveal().
- A finished session rejects further guesses with SessionClosedError.

Sessions hold no external resources; discard one at any time.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Collection, List, Optional, Tuple

from .config import ConfigurationError, GameConfig
from .scoring import Feedback, evaluate
from .selection import select_target
from .validation import is_valid_guess, normalize_guess

logger = logging.getLogger(__name__)


class GameState(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class SessionClosedError(RuntimeError):
    """Raised when a guess is submitted to a game that is already over."""


@dataclass(frozen=True)
class GuessOutcome:
    """Result of one submit_guess call. `feedback` is None for rejected input."""
    feedback: Optional[Feedback]
    state: GameState
    attempts_used: int

    @property
    def accepted(self) -> bool:
        return self.feedback is not None


class GameSession:
    def __init__(self, words: Collection[str], config: GameConfig | None = None, *,
                 rng: random.Random | None = None, target: str | None = None):
        """
        Args:
            words:  validated word collection (see datasets.wordlist.load_words)
            config: game rules; defaults to GameConfig()
            rng:    RNG used to draw the target (seed it for reproducible games)
            target: force a specific target instead of drawing one (tests, replays)
        """
        self.config = config or GameConfig()
        if not words:
            raise ConfigurationError("word collection is empty; cannot start a game")

        # Membership set is only needed in strict mode; build it once.
        self._allowed = frozenset(words) if self.config.require_known_words else None

        if target is None:
            target = select_target(words, rng)
        if not is_valid_guess(target, self.config.word_length):
            raise ConfigurationError(
                f"target must be {self.config.word_length} letters a-z; got {target!r}")

        self._target = normalize_guess(target)
        self._attempts = 0
        self._state = GameState.IN_PROGRESS
        self._history: List[Tuple[str, Feedback]] = []
        logger.debug(f"New session: {len(words)} candidate words, {self.config}")

    @classmethod
    def start(cls, words: Collection[str], config: GameConfig | None = None,
              seed: int | None = None) -> "GameSession":
        """Convenience constructor: draw the target with a seeded RNG."""
        return cls(words, config, rng=random.Random(seed))

    # -------------------------
    # Read-only views
    # -------------------------
    @property
    def state(self) -> GameState:
        return self._state

    @property
    def attempts_used(self) -> int:
        return self._attempts

    @property
    def attempts_remaining(self) -> int:
        return self.config.max_attempts - self._attempts

    @property
    def is_over(self) -> bool:
        return self._state is not GameState.IN_PROGRESS

    @property
    def history(self) -> List[Tuple[str, Feedback]]:
        """(guess, feedback) for every accepted guess, oldest first."""
        return list(self._history)

    @property
    def target_word(self) -> Optional[str]:
        """The target, once the game is over; None while it is still running."""
        return self._target if self.is_over else None

    def reveal(self) -> str:
        """Explicitly expose the target regardless of state (e.g. a 'give up' button)."""
        if not self.is_over:
            logger.info("Target revealed before the game ended")
        return self._target

    # -------------------------
    # Transitions
    # -------------------------
    def submit_guess(self, raw_input: str) -> GuessOutcome:
        """
        Validate and apply one guess.

        Returns a GuessOutcome; `feedback` is None when the input was rejected,
        in which case neither the state nor the attempt counter changed.

        Raises:
            SessionClosedError: the game is already WON or LOST.
        """
        if self.is_over:
            raise SessionClosedError(f"game is over ({self._state.value}); start a new session")

        if not is_valid_guess(raw_input, self.config.word_length, self._allowed):
            logger.debug(f"Rejected guess {raw_input!r}")
            return GuessOutcome(None, self._state, self._attempts)

        guess = normalize_guess(raw_input)
        return self._apply(guess)

    def _apply(self, guess: str) -> GuessOutcome:
        feedback = evaluate(self._target, guess, self.config.duplicate_policy)
        self._attempts += 1
        self._history.append((guess, feedback))

        if guess == self._target:
            self._state = GameState.WON
        elif self._attempts == self.config.max_attempts:
            self._state = GameState.LOST

        if self.is_over:
            logger.info(f"Game {self._state.value} after {self._attempts} attempt(s)")
        return GuessOutcome(feedback, self._state, self._attempts)
