"""
Random sources used to place mines.
"""
from abc import ABC, abstractmethod
from typing import Optional, Union

import numpy as np


class RandomSource(ABC):
    """Supplies uniform integers for mine placement."""

    @abstractmethod
    def uniform(self, upper: int) -> int:
        """Return an integer drawn uniformly from [0, upper)."""


class NumpyRandomSource(RandomSource):
    """
    RandomSource backed by a numpy Generator.

    Accepts either a seed (None draws fresh OS entropy) or an existing
    Generator, so a gymnasium environment can share its np_random.
    """

    def __init__(
        self, seed: Optional[Union[int, np.random.Generator]] = None
    ) -> None:
        if isinstance(seed, np.random.Generator):
            self.rng = seed
        else:
            self.rng = np.random.default_rng(seed)

    def uniform(self, upper: int) -> int:
        if upper <= 0:
            raise ValueError("upper bound must be positive")
        return int(self.rng.integers(upper))
