"""
Ball outcomes and the random sources that draw them
"""
import random
import enum
from typing import Iterable, Optional, Protocol


class BallOutcome(enum.Enum):
    DOT = 0
    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3
    FOUR = 4
    SIX = 6
    WICKET = "wicket"

    @property
    def is_wicket(self) -> bool:
        return self is BallOutcome.WICKET

    @property
    def runs(self) -> int:
        return 0 if self.is_wicket else self.value


# Seven equally likely outcomes; five runs is never drawn
OUTCOMES = list(BallOutcome)


class OutcomeSource(Protocol):
    def __call__(self) -> BallOutcome: ...


class RandomOutcomeSource:
    """Uniform draw over OUTCOMES, reproducible for a given seed"""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def __call__(self) -> BallOutcome:
        return self._rng.choice(OUTCOMES)


class SequenceOutcomeSource:
    """
    Replays a fixed list of outcomes. Once exhausted it keeps returning
    `fallback`, or raises if no fallback was given.
    """

    def __init__(self, outcomes: Iterable[BallOutcome], fallback: Optional[BallOutcome] = None):
        self._outcomes = iter(list(outcomes))
        self.fallback = fallback

    def __call__(self) -> BallOutcome:
        try:
            return next(self._outcomes)
        except StopIteration:
            if self.fallback is None:
                raise RuntimeError("Scripted outcomes exhausted") from None
            return self.fallback
