from __future__ import annotations

import random
from typing import Collection, Sequence

from .config import ConfigurationError


def select_target(words: Collection[str], rng: random.Random | None = None) -> str:
    """
    Pick a target uniformly at random from `words`.

    Pass a seeded random.Random for reproducible games; otherwise the module
    RNG is used. An empty collection is a setup error, never a game state.
    """
    if not words:
        raise ConfigurationError("cannot select a target from an empty word collection")
    # Sets have no stable order; sort so a seeded RNG always draws the same word.
    pool: Sequence[str] = words if isinstance(words, Sequence) else sorted(words)
    rng = rng or random
    return rng.choice(pool)
