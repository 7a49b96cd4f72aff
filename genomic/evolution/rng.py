"""Random source used by the traversal contexts."""

from __future__ import annotations

from typing import Any, Protocol

import numpy as np
from numpy.random import Generator


class RandomSource(Protocol):
    """Uniform sampling capability consumed by mutation and crossover.

    ``numpy.random.Generator`` satisfies this protocol.
    """

    def random(self) -> float:
        ...

    def integers(
        self,
        low: int,
        high: int | None = None,
        size: Any = None,
        dtype: Any = np.int64,
        endpoint: bool = False,
    ) -> Any:
        ...


def default_rng(seed: int | None = None) -> Generator:
    """Create a generator, seeded when ``seed`` is given."""

    return np.random.default_rng(seed)
