"""Chromosome cells: the trainable values held by a genome."""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

import numpy as np

from genomic.config import Config
from genomic.evolution.errors import ConfigurationError
from genomic.evolution.rng import RandomSource


@dataclass
class Gene:
    """A single value owned by a genome.

    Genes take part in crossover but carry no default mutation. Use a
    ``Chromosome`` subclass for values that know how to resample themselves,
    or mutate a plain gene through ``Mutator.wrap_ch`` with a strategy.
    """

    value: Any

    def __post_init__(self) -> None:
        self.value = self.coerce(self.value)

    def coerce(self, value: Any) -> Any:
        """Validate and normalize a candidate value."""

        return value

    def assign(self, value: Any) -> None:
        """Replace the value, rejecting values the gene cannot hold."""

        self.value = self.coerce(value)

    def _check_peer(self, peer: Gene) -> None:
        if type(peer) is not type(self):
            raise TypeError(
                f"cannot cross {type(self).__name__} with {type(peer).__name__}"
            )

    def swap(self, peer: Gene) -> None:
        """Exchange values with ``peer`` unconditionally."""

        self._check_peer(peer)
        self.value, peer.value = peer.value, self.value

    def crossover(self, peer: Gene, rng: RandomSource) -> bool:
        """Swap values with ``peer`` with probability ``Config.SWAP_PROBABILITY``.

        Returns True when the values were exchanged.
        """

        self._check_peer(peer)
        if rng.random() < Config.SWAP_PROBABILITY:
            self.swap(peer)
            return True
        return False


@dataclass
class Chromosome(Gene, ABC):
    """Gene with a default in-place mutation."""

    @abstractmethod
    def mutate(self, rng: RandomSource) -> None:
        """Replace ``value`` with a freshly sampled one."""


@dataclass
class IntChromosome(Chromosome):
    """Fixed-width integer.

    The default mutation replaces the value with one drawn uniformly across
    the full representable range of ``DTYPE``.
    """

    DTYPE: ClassVar[type[np.integer]] = np.int64

    def coerce(self, value: Any) -> int:
        if not isinstance(value, numbers.Integral):
            raise ConfigurationError(
                f"{type(self).__name__} value must be an integer, got {value!r}"
            )
        value = int(value)
        low, high = self.bounds()
        if not low <= value <= high:
            raise ConfigurationError(
                f"{type(self).__name__} value must be in [{low}, {high}], got {value}"
            )
        return value

    @classmethod
    def bounds(cls) -> tuple[int, int]:
        info = np.iinfo(cls.DTYPE)
        return int(info.min), int(info.max)

    def mutate(self, rng: RandomSource) -> None:
        low, high = self.bounds()
        self.value = int(rng.integers(low, high, endpoint=True, dtype=self.DTYPE))


class Int8(IntChromosome):
    DTYPE = np.int8


class Int16(IntChromosome):
    DTYPE = np.int16


class Int32(IntChromosome):
    DTYPE = np.int32


class Int64(IntChromosome):
    DTYPE = np.int64


class UInt8(IntChromosome):
    DTYPE = np.uint8


class UInt16(IntChromosome):
    DTYPE = np.uint16


class UInt32(IntChromosome):
    DTYPE = np.uint32


class UInt64(IntChromosome):
    DTYPE = np.uint64


@dataclass
class Bool(Chromosome):
    """Boolean flag, resampled with equal odds on mutation."""

    def coerce(self, value: Any) -> bool:
        return bool(value)

    def mutate(self, rng: RandomSource) -> None:
        self.value = bool(rng.integers(0, 1, endpoint=True))


@dataclass
class Real(Gene):
    """Floating-point gene.

    Reals have no sensible default range, so they are not chromosomes: mutate
    them with ``Mutator.wrap_ch`` and a bounded strategy.
    """

    def coerce(self, value: Any) -> float:
        return float(value)
