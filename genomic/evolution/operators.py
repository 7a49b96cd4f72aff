"""Genetic operators: mutation, crossover and reproduction."""

from __future__ import annotations

import logging

from genomic.config import Config
from genomic.evolution.errors import ContractViolation
from genomic.evolution.genome import Genome
from genomic.evolution.rng import RandomSource, default_rng
from genomic.evolution.traverse import Crossover, KPoint, Mutator, check_rate

logger = logging.getLogger(__name__)


def check_visited(genome: Genome, visited: int, operation: str) -> None:
    """Raise if a traversal visited a different number of fields than declared."""

    expected = genome.size_hint()
    if visited != expected:
        logger.error(
            "%s.%s visited %d fields but size_hint() is %d",
            type(genome).__name__,
            operation,
            visited,
            expected,
        )
        raise ContractViolation(
            f"{type(genome).__name__}.{operation} visited {visited} fields, "
            f"size_hint() declared {expected}"
        )


class GeneticOperators:
    """Genetic operators for genomes."""

    @staticmethod
    def mutate(
        genome: Genome,
        rate: float,
        rng: RandomSource | None = None,
    ) -> None:
        """Mutate ``genome`` in place, each field with probability ``rate``."""

        generator = rng or default_rng()
        mutator = Mutator(rate, generator)
        genome.mutate(mutator)
        check_visited(genome, mutator.visited, "mutate")

        logger.debug(
            "mutated %d of %d fields at rate %.3f",
            mutator.mutations,
            mutator.visited,
            mutator.rate,
        )

    @staticmethod
    def crossover(
        genome_a: Genome,
        genome_b: Genome,
        rng: RandomSource | None = None,
        method: KPoint | None = None,
    ) -> None:
        """Exchange chromosomes between two genomes in place.

        Each gene decides its own swap unless a ``KPoint`` method is given.
        """

        size_a = genome_a.size_hint()
        size_b = genome_b.size_hint()
        if size_a != size_b:
            raise ContractViolation(
                f"cannot cross genomes of {size_a} and {size_b} fields"
            )

        generator = rng or default_rng()
        context = Crossover(generator, method=method, length=size_a)
        genome_a.crossover(genome_b, context)
        check_visited(genome_a, context.visited, "crossover")

        logger.debug("swapped %d of %d fields", context.swaps, context.visited)

    @staticmethod
    def reproduce(
        genome_a: Genome,
        genome_b: Genome,
        rate: float | None = None,
        rng: RandomSource | None = None,
        method: KPoint | None = None,
    ) -> Genome:
        """Create one offspring; the parents are left untouched.

        The child starts as a copy of ``genome_a``, is crossed with a copy of
        ``genome_b`` and then mutated with ``rate`` (``Config.DEFAULT_MUTATION_RATE``
        when omitted).
        """

        child, _ = GeneticOperators.reproduce_pair(
            genome_a,
            genome_b,
            rate=rate,
            rng=rng,
            method=method,
            mutate_second=False,
        )
        return child

    @staticmethod
    def reproduce_pair(
        genome_a: Genome,
        genome_b: Genome,
        rate: float | None = None,
        rng: RandomSource | None = None,
        method: KPoint | None = None,
        mutate_second: bool = True,
    ) -> tuple[Genome, Genome]:
        """Create two complementary offspring from copies of both parents."""

        rate = check_rate(Config.DEFAULT_MUTATION_RATE if rate is None else rate)
        generator = rng or default_rng()

        child_a = genome_a.clone()
        child_b = genome_b.clone()
        GeneticOperators.crossover(child_a, child_b, generator, method=method)
        GeneticOperators.mutate(child_a, rate, generator)
        if mutate_second:
            GeneticOperators.mutate(child_b, rate, generator)

        return child_a, child_b
