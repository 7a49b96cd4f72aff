"""Traversal contexts driven field by field by a genome."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable

from genomic.config import Config
from genomic.evolution.chromosome import Chromosome, Gene
from genomic.evolution.errors import ConfigurationError, ContractViolation
from genomic.evolution.genome import Genome, Item
from genomic.evolution.rng import RandomSource
from genomic.evolution.strategy import Strategy


def check_rate(rate: float) -> float:
    """Return ``rate`` as a float, rejecting values outside the accepted range."""

    rate = float(rate)
    if not Config.validate_rate(rate):
        raise ConfigurationError(
            f"mutation rate must be in [{Config.MIN_RATE}, {Config.MAX_RATE}], "
            f"got {rate}"
        )
    return rate


class Mutator:
    """Applies mutation to each visited field with probability ``rate``.

    Each visit consumes one uniform draw from ``rng``; the field is mutated
    when the draw is strictly below the rate, so a rate of 0.0 never mutates
    and a rate of 1.0 always does.
    """

    def __init__(self, rate: float, rng: RandomSource) -> None:
        self._rate = check_rate(rate)
        self._rng = rng
        self._visited = 0
        self.mutations = 0

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def rng(self) -> RandomSource:
        return self._rng

    @property
    def visited(self) -> int:
        return self._visited

    def _triggered(self) -> bool:
        self._visited += 1
        if self._rng.random() < self._rate:
            self.mutations += 1
            return True
        return False

    def chromosome(self, chromosome: Chromosome) -> Mutator:
        """Mutate ``chromosome`` with its default rule."""

        if not isinstance(chromosome, Chromosome):
            raise TypeError(
                f"{type(chromosome).__name__} has no default mutation, "
                "use wrap_ch with a strategy"
            )
        if self._triggered():
            chromosome.mutate(self._rng)
        return self

    def wrap_ch(self, strategy: Strategy, gene: Gene) -> Mutator:
        """Mutate ``gene`` by assigning the result of ``strategy``."""

        if self._triggered():
            gene.assign(strategy.apply(self._rng))
        return self

    def genome(self, genome: Genome) -> Mutator:
        """Mutate a nested genome."""

        genome.mutate(self)
        return self

    def iter(self, items: Iterable[Item]) -> Mutator:
        """Mutate chromosomes and nested genomes in order."""

        for item in items:
            if isinstance(item, Genome):
                self.genome(item)
            else:
                self.chromosome(item)
        return self

    def group(self, callback: Callable[[Mutator], None]) -> Mutator:
        """Run ``callback``; everything it visits counts as a single field."""

        visited = self._visited
        callback(self)
        self._visited = visited + 1
        return self

    def multiply_rate(
        self, multiplier: float, callback: Callable[[Mutator], None]
    ) -> Mutator:
        """Run ``callback`` with the rate scaled by ``multiplier``."""

        if math.isnan(multiplier):
            raise ConfigurationError("rate multiplier must be a number, got nan")
        rate = self._rate
        self._rate = min(max(rate * multiplier, Config.MIN_RATE), Config.MAX_RATE)
        try:
            callback(self)
        finally:
            self._rate = rate
        return self


@dataclass(frozen=True)
class KPoint:
    """Cut the genome at ``points`` positions and swap every other segment.

    The first segment is kept, the second swapped, and so on. With more
    points than fields every field starts a new segment.
    """

    points: int

    def __post_init__(self) -> None:
        if self.points < 0:
            raise ConfigurationError(f"points must be non-negative, got {self.points}")


class Crossover:
    """Pairs fields of two genomes and decides which pairs to swap.

    By default each gene decides on its own swap. A ``KPoint`` method makes
    the context decide instead, from the cuts drawn over ``length`` fields.
    Inside ``group`` the context carries a fixed decision that applies to
    every pair visited.
    """

    def __init__(
        self,
        rng: RandomSource,
        swap: bool | None = None,
        method: KPoint | None = None,
        length: int = 0,
    ) -> None:
        self._rng = rng
        self._swap = swap
        self._method = method
        self._length = length
        self._cuts = 0
        self._decided = 0
        self._visited = 0
        self.swaps = 0

    @property
    def rng(self) -> RandomSource:
        return self._rng

    @property
    def visited(self) -> int:
        return self._visited

    def _next_cut(self) -> bool:
        # Spread the remaining cuts over the remaining fields.
        remaining = self._length - self._decided
        wanted = self._method.points - self._cuts
        self._decided += 1
        if remaining > 0 and wanted > 0:
            if self._rng.random() < wanted / remaining:
                self._cuts += 1
        return self._cuts % 2 == 1

    def _decision(self) -> bool | None:
        """Swap decision imposed by the context, or None to let the gene decide."""

        if self._swap is not None:
            return self._swap
        if self._method is not None:
            return self._next_cut()
        return None

    def chromosome(self, left: Gene, right: Gene) -> Crossover:
        """Cross a pair of genes."""

        self._visited += 1
        swapped = self._decision()
        if swapped is None:
            swapped = left.crossover(right, self._rng)
        elif swapped:
            left.swap(right)
        if swapped:
            self.swaps += 1
        return self

    def genome(self, left: Genome, right: Genome) -> Crossover:
        """Cross a pair of nested genomes."""

        left.crossover(right, self)
        return self

    def iter(self, lefts: Iterable[Item], rights: Iterable[Item]) -> Crossover:
        """Cross two sequences of chromosomes or nested genomes pairwise."""

        lefts = list(lefts)
        rights = list(rights)
        if len(lefts) != len(rights):
            raise ContractViolation(
                f"cannot pair {len(lefts)} items with {len(rights)} items"
            )
        for left, right in zip(lefts, rights):
            if isinstance(left, Genome):
                self.genome(left, right)
            else:
                self.chromosome(left, right)
        return self

    def group(self, callback: Callable[[Crossover], None]) -> Crossover:
        """Swap everything ``callback`` visits together, or nothing.

        The group counts as a single field.
        """

        swap = self._decision()
        if swap is None:
            swap = self._rng.random() < Config.SWAP_PROBABILITY
        fixed = Crossover(self._rng, swap=swap)
        callback(fixed)
        self._visited += 1
        self.swaps += fixed.swaps
        return self
