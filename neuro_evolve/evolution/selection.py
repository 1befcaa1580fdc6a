"""
neuro_evolve/evolution/selection.py

Selection: who gets to reproduce.

Every method picks one parent per call, biased toward fitter
individuals, using only the generator it is handed.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Sequence, TypeVar
import logging

import numpy as np

from .individual import Individual

logger = logging.getLogger(__name__)

IndividualT = TypeVar("IndividualT", bound=Individual)


def _fitnesses(population: Sequence[Individual]) -> np.ndarray:
    if len(population) == 0:
        raise ValueError("Cannot select from an empty population")
    return np.array([individual.fitness() for individual in population], dtype=np.float64)


class SelectionMethod(ABC):
    """Picks one member of a population."""

    @abstractmethod
    def select(self, rng: np.random.Generator, population: Sequence[IndividualT]) -> IndividualT:
        pass


class RouletteWheelSelection(SelectionMethod):
    """
    Fitness-proportionate selection.

    P(individual) = fitness / total fitness. Negative, infinite and NaN
    fitness values are rejected.
    When every fitness is zero the wheel has no area, so the draw falls
    back to uniform.
    """

    def select(self, rng: np.random.Generator, population: Sequence[IndividualT]) -> IndividualT:
        fitnesses = _fitnesses(population)

        if not np.all(np.isfinite(fitnesses)):
            raise ValueError("Roulette wheel selection needs finite fitness values")
        if np.any(fitnesses < 0):
            raise ValueError(
                f"Roulette wheel selection needs non-negative fitness, "
                f"got minimum {fitnesses.min()}"
            )

        highest = fitnesses.max()
        if highest == 0:
            logger.debug("All fitness values are zero, selecting uniformly")
            return population[rng.integers(len(population))]

        # Scale into [0, 1] first so the sum cannot overflow
        weights = fitnesses / highest
        index = rng.choice(len(population), p=weights / weights.sum())
        return population[index]


class TournamentSelection(SelectionMethod):
    """
    Tournament selection.

    Draws `size` distinct contestants uniformly and keeps the fittest.
    Larger tournaments mean stronger selection pressure.
    """

    def __init__(self, size: int = 3):
        if size < 1:
            raise ValueError(f"Tournament size must be at least 1, got {size}")
        self.size = size

    def select(self, rng: np.random.Generator, population: Sequence[IndividualT]) -> IndividualT:
        fitnesses = _fitnesses(population)

        size = min(self.size, len(population))
        contestants = rng.choice(len(population), size=size, replace=False)
        winner = contestants[np.argmax(fitnesses[contestants])]
        return population[winner]


class RankSelection(SelectionMethod):
    """
    Linear ranking selection.

    Probability is proportional to rank (1 = worst, n = best), not raw
    fitness, which tames outliers.
    """

    def select(self, rng: np.random.Generator, population: Sequence[IndividualT]) -> IndividualT:
        fitnesses = _fitnesses(population)

        order = np.argsort(fitnesses, kind="stable")
        ranks = np.arange(1, len(population) + 1, dtype=np.float64)
        position = rng.choice(len(population), p=ranks / ranks.sum())
        return population[order[position]]
