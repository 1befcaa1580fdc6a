"""
neuro_evolve/evolution/individual.py

The contract between the genetic algorithm and whatever it evolves.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from .chromosome import Chromosome


class Individual(ABC):
    """
    Anything that can be built from a chromosome and scored.

    An individual must support:
    - create: build a new individual from a chromosome
    - chromosome: expose its genes back (inverse of create)
    - fitness: a non-negative score supplied by the environment
    """

    @classmethod
    @abstractmethod
    def create(cls, chromosome: Chromosome) -> "Individual":
        """Build an individual from a chromosome of the expected length."""
        pass

    @abstractmethod
    def chromosome(self) -> Chromosome:
        """Return this individual's genes."""
        pass

    @abstractmethod
    def fitness(self) -> float:
        """Return this individual's fitness (non-negative)."""
        pass
