# apps/cli/play.py
"""
Interactive console game.

This script:
  1) Inspects the dictionary file and prints a one-line summary.
  2) Loads the words (falling back to the built-in list if needed).
  3) Starts a GameSession and runs the prompt loop until the word is found,
     the attempts run out, or stdin closes.

Usage:
    python -m apps.cli.play --dictionary dictionary.txt
    python -m apps.cli.play --duplicates counted --strict --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from packages.datasets import inspect_wordlist, load_words, pretty_summary
from packages.engine import (
    ConfigurationError,
    DuplicatePolicy,
    GameConfig,
    GameSession,
    GameState,
    MAX_ATTEMPTS,
    WORD_LENGTH,
    render,
)

logger = logging.getLogger(__name__)


def run_game(session: GameSession, read: Optional[Callable[[str], str]] = None) -> GameState:
    """
    Drive one session from a line source (input() by default).

    Returns the final state; IN_PROGRESS means the input ended early.
    """
    read = read or input
    cfg = session.config
    print(f"Welcome to Wordle! Try to guess the {cfg.word_length}-letter word.")
    print(f"You have {cfg.max_attempts} attempts.")

    while not session.is_over:
        try:
            raw = read(f"Attempt {session.attempts_used + 1}: Enter your guess: ")
        except EOFError:
            print()
            logger.info("Input closed; abandoning game")
            return session.state

        outcome = session.submit_guess(raw)
        if not outcome.accepted:
            if cfg.require_known_words:
                print(f"Invalid guess. Please enter a known {cfg.word_length}-letter word.")
            else:
                print(f"Invalid guess. Please enter a valid {cfg.word_length}-letter word.")
            continue

        guess, feedback = session.history[-1]
        print(f"Feedback: {render(guess, feedback)}")

    if session.state is GameState.WON:
        print("Congratulations! You guessed the word correctly!")
    else:
        print(f"Sorry, you've used all attempts. The correct word was: {session.target_word}")
    return session.state


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Guess the hidden word in a limited number of tries.")
    ap.add_argument("--dictionary", default="dictionary.txt",
                    help="word list, one word per line (falls back to a built-in list)")
    ap.add_argument("--max-attempts", type=int, default=MAX_ATTEMPTS,
                    help="number of valid guesses allowed")
    ap.add_argument("--word-length", type=int, default=WORD_LENGTH,
                    help="letters per word")
    ap.add_argument("--duplicates", choices=[p.value for p in DuplicatePolicy],
                    default=DuplicatePolicy.LENIENT.value,
                    help="repeated-letter scoring: lenient marks every occurrence present, "
                         "counted caps present marks by the target's letter counts")
    ap.add_argument("--strict", action="store_true",
                    help="only accept guesses that are in the dictionary")
    ap.add_argument("--seed", type=int, help="RNG seed for the target word (reproducible games)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = GameConfig.from_mapping({
            "max_attempts": args.max_attempts,
            "word_length": args.word_length,
            "duplicate_policy": args.duplicates,
            "require_known_words": args.strict,
        })
        print(pretty_summary(inspect_wordlist(config.word_length, args.dictionary)))
        words = load_words(args.dictionary, config.word_length)
        session = GameSession.start(words, config, seed=args.seed)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    run_game(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
