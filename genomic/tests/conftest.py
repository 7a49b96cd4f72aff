"""Shared fixtures for the genomic test suite."""

from __future__ import annotations

from typing import Any, Callable, Iterable

import numpy as np
import pytest
from numpy.random import Generator


class ScriptedRng:
    """Random source replaying fixed draws, for exact scenarios."""

    def __init__(self, reals: Iterable[float] = (), integers: Iterable[int] = ()):
        self.reals = list(reals)
        self.integer_draws = list(integers)
        self.integer_calls: list[tuple[Any, Any]] = []

    def random(self) -> float:
        return self.reals.pop(0)

    def integers(
        self,
        low: int,
        high: int | None = None,
        size: Any = None,
        dtype: Any = np.int64,
        endpoint: bool = False,
    ) -> int:
        self.integer_calls.append((low, high))
        return self.integer_draws.pop(0)


@pytest.fixture
def rng() -> Generator:
    """Seeded random generator."""

    return np.random.default_rng(seed=42)


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRng]:
    """Factory for random sources with predetermined draws."""

    return ScriptedRng
