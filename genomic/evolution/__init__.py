"""Evolution module: chromosomes, genomes and genetic operators."""

from __future__ import annotations

__all__ = [
    "errors",
    "rng",
    "chromosome",
    "strategy",
    "genome",
    "traverse",
    "operators",
]
