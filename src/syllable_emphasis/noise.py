from __future__ import annotations

import math
from abc import ABC, abstractmethod
from itertools import cycle
from typing import Callable, Iterable

import numpy as np

UniformSource = Callable[[], float]


class NormalSampler(ABC):
    """Abstract source of standard-normal samples."""

    @abstractmethod
    def sample(self) -> float:
        """Return one draw from N(0, 1)."""
        raise NotImplementedError


class BoxMullerSampler(NormalSampler):
    """
    Standard-normal sampler built on the Box-Muller transform.

    ``uniform`` must return floats in [0, 1); zero draws are redrawn so the
    logarithm stays finite. When omitted, a fresh numpy Generator is used.
    """

    def __init__(self, uniform: UniformSource | None = None, seed: int | None = None) -> None:
        if uniform is None:
            uniform = np.random.default_rng(seed).random
        self._uniform = uniform

    def _nonzero_uniform(self) -> float:
        value = 0.0
        while value == 0.0:
            value = float(self._uniform())
        return value

    def sample(self) -> float:
        u = self._nonzero_uniform()
        v = self._nonzero_uniform()
        return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)


class SequenceSampler(NormalSampler):
    """Replays a fixed sequence of samples, cycling when exhausted."""

    def __init__(self, values: Iterable[float]) -> None:
        values = [float(value) for value in values]
        if not values:
            raise ValueError("SequenceSampler needs at least one value.")
        self._values = cycle(values)

    def sample(self) -> float:
        return next(self._values)


def create_sampler(seed: int | None = None) -> NormalSampler:
    """Factory for the default Box-Muller sampler, optionally seeded."""
    return BoxMullerSampler(seed=seed)
