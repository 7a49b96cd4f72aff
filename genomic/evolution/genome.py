"""Genome capability: a caller-defined aggregate of chromosomes."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Iterator, Union

from genomic.evolution.chromosome import Chromosome, Gene

if TYPE_CHECKING:
    from genomic.evolution.traverse import Crossover, Mutator


class Genome(ABC):
    """An individual's trainable state.

    Implementations walk their chromosomes with the traversal contexts::

        class Pair(Genome):
            def __init__(self, left: int, right: int) -> None:
                self.left = Int32(left)
                self.right = Int32(right)

            def mutate(self, mutator: Mutator) -> None:
                mutator.chromosome(self.left).chromosome(self.right)

            def crossover(self, other: Pair, crossover: Crossover) -> None:
                crossover.chromosome(self.left, other.left).chromosome(
                    self.right, other.right
                )

            def size_hint(self) -> int:
                return 2

    ``mutate`` and ``crossover`` must visit the same fields in the same order
    on every call, and ``size_hint`` must return exactly that count. The
    operators check the count after each traversal.
    """

    @abstractmethod
    def mutate(self, mutator: Mutator) -> None:
        """Visit every chromosome with ``mutator``."""

    @abstractmethod
    def crossover(self, other: Genome, crossover: Crossover) -> None:
        """Visit every chromosome paired with the matching one in ``other``."""

    @abstractmethod
    def size_hint(self) -> int:
        """Number of fields visited by ``mutate`` and ``crossover``."""

    def clone(self) -> Genome:
        """Return an independent copy of this genome."""

        return copy.deepcopy(self)


Item = Union[Gene, Genome]
SequenceItem = Union[Chromosome, Genome]


def item_size(item: Item) -> int:
    """Fields contributed by a gene (one) or a sub-genome (its hint)."""

    if isinstance(item, Genome):
        return item.size_hint()
    return 1


class GenomeSequence(Genome):
    """Genome made of an ordered list of chromosomes and sub-genomes.

    Items are mutated with their default rule, so plain genes such as
    ``Real`` are rejected by ``mutate`` with ``TypeError`` whatever the rate.
    Wrap reals in a custom genome that mutates them through a strategy.
    """

    def __init__(self, items: Iterable[SequenceItem]) -> None:
        self.items: list[SequenceItem] = list(items)

    def mutate(self, mutator: Mutator) -> None:
        mutator.iter(self.items)

    def crossover(self, other: GenomeSequence, crossover: Crossover) -> None:
        crossover.iter(self.items, other.items)

    def size_hint(self) -> int:
        return sum(item_size(item) for item in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> SequenceItem:
        return self.items[index]

    def __iter__(self) -> Iterator[SequenceItem]:
        return iter(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GenomeSequence):
            return NotImplemented
        return self.items == other.items

    def __repr__(self) -> str:
        return f"GenomeSequence({self.items!r})"
