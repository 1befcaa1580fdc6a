"""
neuro_evolve/evolution/mutation.py

Mutation: the only source of new genetic material.

Crossover shuffles what already exists; mutation nudges genes to values
no parent had.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import numpy as np

from .chromosome import Chromosome


class MutationMethod(ABC):
    """Perturbs a chromosome in place."""

    @abstractmethod
    def mutate(self, rng: np.random.Generator, chromosome: Chromosome) -> None:
        pass


class GaussianMutation(MutationMethod):
    """
    Per-gene random nudge.

    Each gene mutates with probability `chance`. A mutated gene moves by
    sign * coeff * magnitude, with a fair random sign and magnitude uniform
    in [0, 1). Genes that do not mutate are left untouched.
    """

    def __init__(self, chance: float, coeff: float):
        if not 0.0 <= chance <= 1.0:
            raise ValueError(f"Mutation chance must be within [0, 1], got {chance}")
        self.chance = chance
        self.coeff = coeff

    def mutate(self, rng: np.random.Generator, chromosome: Chromosome) -> None:
        size = len(chromosome)
        fires = rng.random(size) < self.chance
        signs = np.where(rng.random(size) < 0.5, -1.0, 1.0)
        magnitudes = rng.random(size)

        chromosome.genes[fires] += (signs * self.coeff * magnitudes)[fires]

    def __repr__(self) -> str:
        return f"GaussianMutation(chance={self.chance}, coeff={self.coeff})"
