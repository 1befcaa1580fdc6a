"""
neuro_evolve/evolution/statistics.py

Summary of one generation's fitness.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Sequence
import numpy as np

from .individual import Individual


@dataclass(frozen=True)
class Statistics:
    """Fitness spread across a population."""
    population_size: int
    min_fitness: float
    max_fitness: float
    mean_fitness: float

    @classmethod
    def from_population(cls, population: Sequence[Individual]) -> "Statistics":
        if len(population) == 0:
            raise ValueError("Cannot compute statistics of an empty population")

        fitnesses = np.array([individual.fitness() for individual in population])
        return cls(
            population_size=len(population),
            min_fitness=float(fitnesses.min()),
            max_fitness=float(fitnesses.max()),
            mean_fitness=float(fitnesses.mean()),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
