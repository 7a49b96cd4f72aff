"""Generic mutation, crossover and reproduction for caller-defined genomes."""

from __future__ import annotations

from genomic.config import Config
from genomic.evolution.chromosome import (
    Bool,
    Chromosome,
    Gene,
    Int8,
    Int16,
    Int32,
    Int64,
    IntChromosome,
    Real,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)
from genomic.evolution.errors import ConfigurationError, ContractViolation
from genomic.evolution.genome import Genome, GenomeSequence
from genomic.evolution.operators import GeneticOperators
from genomic.evolution.rng import RandomSource, default_rng
from genomic.evolution.strategy import (
    FixedBitsStrategy,
    Strategy,
    SwapStrategy,
    UniformStrategy,
)
from genomic.evolution.traverse import Crossover, KPoint, Mutator

mutate = GeneticOperators.mutate
crossover = GeneticOperators.crossover
reproduce = GeneticOperators.reproduce
reproduce_pair = GeneticOperators.reproduce_pair

__all__ = [
    "Bool",
    "Chromosome",
    "Config",
    "ConfigurationError",
    "ContractViolation",
    "Crossover",
    "FixedBitsStrategy",
    "Gene",
    "GeneticOperators",
    "Genome",
    "GenomeSequence",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "IntChromosome",
    "KPoint",
    "Mutator",
    "RandomSource",
    "Real",
    "Strategy",
    "SwapStrategy",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "UniformStrategy",
    "crossover",
    "default_rng",
    "mutate",
    "reproduce",
    "reproduce_pair",
]
