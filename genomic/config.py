"""Project-wide configuration constants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Config:
    """Central configuration constants for genomic."""

    # Mutation parameters
    DEFAULT_MUTATION_RATE: ClassVar[float] = 0.1  # Rate used by reproduce()
    MIN_RATE: ClassVar[float] = 0.0  # Lowest accepted mutation rate
    MAX_RATE: ClassVar[float] = 1.0  # Highest accepted mutation rate

    # Crossover parameters
    SWAP_PROBABILITY: ClassVar[float] = 0.5  # Per-gene swap chance

    @classmethod
    def validate_rate(cls, rate: float) -> bool:
        """Return True when ``rate`` lies in the accepted range."""
        return cls.MIN_RATE <= rate <= cls.MAX_RATE
