from .config import GameConfig, DuplicatePolicy, ConfigurationError, MAX_ATTEMPTS, WORD_LENGTH
from .scoring import Mark, Feedback, evaluate, render, to_pattern, is_solved
from .selection import select_target
from .session import GameSession, GameState, GuessOutcome, SessionClosedError
from .validation import is_valid_guess, normalize_guess

__all__ = [
    "GameConfig", "DuplicatePolicy", "ConfigurationError", "MAX_ATTEMPTS", "WORD_LENGTH",
    "Mark", "Feedback", "evaluate", "render", "to_pattern", "is_solved",
    "select_target",
    "GameSession", "GameState", "GuessOutcome", "SessionClosedError",
    "is_valid_guess", "normalize_guess",
]
