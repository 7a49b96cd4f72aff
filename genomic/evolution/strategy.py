"""Perturbation strategies for genes without a default mutation."""

from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod
from typing import Any, Sequence

import numpy as np

from genomic.evolution.errors import ConfigurationError
from genomic.evolution.rng import RandomSource

INT64 = np.iinfo(np.int64)
UINT64 = np.iinfo(np.uint64)


def integer_dtype(low: int, high: int) -> type[np.integer]:
    """Smallest 64-bit numpy dtype able to sample ``[low, high]``."""

    if INT64.min <= low and high <= INT64.max:
        return np.int64
    if 0 <= low and high <= UINT64.max:
        return np.uint64
    raise ConfigurationError(f"cannot sample [{low}, {high}] with 64-bit integers")


class Strategy(ABC):
    """Resampling rule built around a gene's current value.

    A strategy is created at the call site for a single mutation step and
    discarded afterwards.
    """

    def __init__(self, value: Any) -> None:
        self.value = value

    @abstractmethod
    def apply(self, rng: RandomSource) -> Any:
        """Return the replacement value."""


class UniformStrategy(Strategy):
    """Uniform replacement within ``[low, high]``.

    Integer bounds yield integers (both ends inclusive); any other bounds
    yield floats in ``[low, high)`` and must be finite. The current value
    does not influence the draw.
    """

    def __init__(self, value: Any, low: Any, high: Any) -> None:
        self.integral = isinstance(low, numbers.Integral) and isinstance(
            high, numbers.Integral
        )
        if self.integral:
            low, high = int(low), int(high)
        elif not (math.isfinite(low) and math.isfinite(high)):
            raise ConfigurationError(f"bounds must be finite, got [{low}, {high}]")
        if low > high:
            raise ConfigurationError(f"low must not exceed high, got [{low}, {high}]")
        super().__init__(value)
        self.low = low
        self.high = high
        self.dtype = integer_dtype(low, high) if self.integral else None

    def apply(self, rng: RandomSource) -> Any:
        if self.integral:
            return int(
                rng.integers(self.low, self.high, endpoint=True, dtype=self.dtype)
            )
        low = float(self.low)
        return low + (float(self.high) - low) * float(rng.random())


class FixedBitsStrategy(Strategy):
    """Resample only the ``bits`` least significant bits of an integer.

    Unsigned values keep their higher bits. Signed values are treated as a
    ``bits``-wide two's complement integer and replaced within
    ``[-2**(bits-1), 2**(bits-1) - 1]``.
    """

    MAX_BITS = 64

    def __init__(self, value: int, bits: int, signed: bool = False) -> None:
        if not 1 <= bits <= self.MAX_BITS:
            raise ConfigurationError(
                f"bits must be in [1, {self.MAX_BITS}], got {bits}"
            )
        super().__init__(int(value))
        self.bits = bits
        self.signed = signed

    def bounds(self) -> tuple[int, int]:
        if self.signed:
            half = 1 << (self.bits - 1)
            return -half, half - 1
        return 0, (1 << self.bits) - 1

    def apply(self, rng: RandomSource) -> int:
        low, high = self.bounds()
        sample = int(
            rng.integers(low, high, endpoint=True, dtype=integer_dtype(low, high))
        )
        if self.signed:
            return sample
        return (self.value & ~high) | sample


class SwapStrategy(Strategy):
    """Exchange two distinct positions of a sequence.

    Used for order-based genes such as permutations, where resampling
    individual items would break the encoding.
    """

    def __init__(self, value: Sequence[Any]) -> None:
        super().__init__(value)

    def apply(self, rng: RandomSource) -> Sequence[Any]:
        items = list(self.value)
        if len(items) < 2:
            return self._rebuild(items)

        first = int(rng.integers(0, len(items) - 1, endpoint=True))
        second = int(rng.integers(0, len(items) - 2, endpoint=True))
        if second >= first:
            second += 1
        items[first], items[second] = items[second], items[first]
        return self._rebuild(items)

    def _rebuild(self, items: list[Any]) -> Sequence[Any]:
        return tuple(items) if isinstance(self.value, tuple) else items
