"""
Number Generators

Sources of integers used by ProbabilityDistribution.pick to make weighted
choices. Two variants exist:

    - RandomNumberGenerator: uniform draws backed by numpy's Generator.
    - ListNumberGenerator: replays a fixed list of pre-recorded integers, so a
      walk through the MarkovChain can be forced to a known outcome.
"""

import numpy as np


class NumberGeneratorExhaustedError(LookupError):
    """Raised when a replay generator is asked for more numbers than it holds."""


class NumberGenerator:
    """
    Base class for integer sources.

    Subclasses implement `next(bound)` and must return an integer in the
    half-open range [0, bound).
    """

    def next(self, bound):
        raise NotImplementedError


class RandomNumberGenerator(NumberGenerator):
    """
    Draws uniformly distributed integers.

    Args:
        seed (int, optional): Seed for the underlying numpy Generator. Passing
            the same seed reproduces the same sequence of draws.
    """

    def __init__(self, seed=None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next(self, bound):
        """
        Return an integer in [0, bound).

        Raises:
            ValueError: If bound is not positive.
        """
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return int(self._rng.integers(0, bound))

    def __repr__(self):
        return f"RandomNumberGenerator(seed={self.seed!r})"


class ListNumberGenerator(NumberGenerator):
    """
    Replays a finite, ordered list of integers.

    Each call to `next` returns the next recorded value and ignores `bound`;
    callers are responsible for recording values that fit the distributions
    they will be applied to.
    """

    def __init__(self, numbers):
        if numbers is None:
            raise ValueError("numbers cannot be None")
        self.numbers = [int(n) for n in numbers]
        self._position = 0

    @property
    def remaining(self):
        return len(self.numbers) - self._position

    def next(self, bound):
        if self._position >= len(self.numbers):
            raise NumberGeneratorExhaustedError(
                f"All {len(self.numbers)} recorded numbers have been used"
            )
        value = self.numbers[self._position]
        self._position += 1
        return value

    def __repr__(self):
        return f"ListNumberGenerator({self.numbers!r}, remaining={self.remaining})"
