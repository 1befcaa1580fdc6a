"""
neuro_evolve/evolution/crossover.py

Crossover: recombine two parents into one child.

Crossover never invents alleles. Every child gene comes from one of the
parents at the same position.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import numpy as np

from .chromosome import Chromosome


def _check_lengths(parent_a: Chromosome, parent_b: Chromosome) -> None:
    if len(parent_a) != len(parent_b):
        raise ValueError(
            f"Cannot crossover chromosomes of different lengths "
            f"({len(parent_a)} vs {len(parent_b)})"
        )


class CrossoverMethod(ABC):
    """Combines two equal-length chromosomes into a new one."""

    @abstractmethod
    def crossover(
        self,
        rng: np.random.Generator,
        parent_a: Chromosome,
        parent_b: Chromosome,
    ) -> Chromosome:
        pass


class UniformCrossover(CrossoverMethod):
    """
    Uniform crossover.

    Each gene is taken from parent A or parent B on a fair coin flip.
    """

    def crossover(
        self,
        rng: np.random.Generator,
        parent_a: Chromosome,
        parent_b: Chromosome,
    ) -> Chromosome:
        _check_lengths(parent_a, parent_b)

        from_a = rng.random(len(parent_a)) < 0.5
        return Chromosome(np.where(from_a, parent_a.genes, parent_b.genes))


class SinglePointCrossover(CrossoverMethod):
    """
    Single-point crossover.

    Genes before a random cut come from parent A, the rest from parent B.
    Keeps runs of neighbouring genes (e.g. one neuron's weights) together.
    """

    def crossover(
        self,
        rng: np.random.Generator,
        parent_a: Chromosome,
        parent_b: Chromosome,
    ) -> Chromosome:
        _check_lengths(parent_a, parent_b)

        cut = int(rng.integers(len(parent_a) + 1))
        return Chromosome(np.concatenate([parent_a.genes[:cut], parent_b.genes[cut:]]))
