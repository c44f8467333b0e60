"""
Random sources for color generation. A source is a zero-argument callable returning a float in [0, 1).
Default is crypto-quality (secrets); seeded sources are for reproducible runs and tests.
"""
import random
import secrets
from typing import Callable, Iterable


def secure_random() -> float:
    """Cryptographically secure random float in [0, 1)."""
    return secrets.SystemRandom().random()


def seeded_random(seed: int | None) -> Callable[[], float]:
    """Reproducible source: same seed gives the same sequence of draws. None falls back to secure_random."""
    if seed is None:
        return secure_random
    return random.Random(seed).random


def sequence_random(values: Iterable[float]) -> Callable[[], float]:
    """
    Replay fixed draws in order (scripted runs, tests).
    Raises RuntimeError once the values are used up.
    """
    it = iter(values)

    def _next() -> float:
        try:
            return next(it)
        except StopIteration:
            raise RuntimeError("sequence_random: no draws left") from None

    return _next
