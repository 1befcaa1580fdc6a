"""
neuro_evolve/evolution/algorithm.py

The generational step of the genetic algorithm.

One call to evolve() turns a scored population into the next one:
- Select two parents (fitness-biased)
- Cross their chromosomes into a child
- Mutate the child
- Rebuild an individual from the child's genes

The algorithm holds strategies, not state. Generation counting and
convergence tracking belong to whatever loop drives it.
"""

from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, TypeVar, Union
import logging

import numpy as np

from .chromosome import Chromosome
from .crossover import CrossoverMethod
from .individual import Individual
from .mutation import MutationMethod
from .selection import SelectionMethod

logger = logging.getLogger(__name__)

IndividualT = TypeVar("IndividualT", bound=Individual)


class GeneticAlgorithm:
    """
    Selection + crossover + mutation, wired together.

    Any implementation of each strategy base class can be plugged in
    without touching the evolution loop.
    """

    def __init__(
        self,
        selection_method: SelectionMethod,
        crossover_method: CrossoverMethod,
        mutation_method: MutationMethod,
    ):
        self.selection_method = selection_method
        self.crossover_method = crossover_method
        self.mutation_method = mutation_method

    def evolve(self, rng: np.random.Generator, population: Sequence[IndividualT]) -> List[IndividualT]:
        """
        Produce the next generation.

        Args:
            rng: Generator threaded through every draw, in slot order
            population: Non-empty, already scored

        Returns:
            New population of the same size and individual type
        """
        if len(population) == 0:
            raise ValueError("Cannot evolve an empty population")

        individual_type = type(population[0])
        logger.debug(f"Evolving population of {len(population)} {individual_type.__name__}")

        return [
            self._reproduce(rng, population, individual_type)
            for _ in range(len(population))
        ]

    def evolve_independent(
        self,
        seed: Union[int, np.random.SeedSequence],
        population: Sequence[IndividualT],
        max_workers: Optional[int] = None,
    ) -> List[IndividualT]:
        """
        Produce the next generation with one random stream per slot.

        Slot i draws from the i-th child of SeedSequence(seed), so the
        result depends only on the seed and the population, never on
        scheduling or worker count. The draw order differs from evolve(),
        so the two modes give different offspring for the same seed.

        Args:
            seed: Entropy for this generation (use a fresh one per generation)
            population: Non-empty, already scored
            max_workers: Thread pool size (default: executor's choice)
        """
        if len(population) == 0:
            raise ValueError("Cannot evolve an empty population")

        individual_type = type(population[0])
        seed_sequence = seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
        generators = [np.random.default_rng(child) for child in seed_sequence.spawn(len(population))]

        logger.debug(
            f"Evolving population of {len(population)} {individual_type.__name__} "
            f"on independent streams"
        )

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(
                lambda slot_rng: self._reproduce(slot_rng, population, individual_type),
                generators,
            ))

    def _reproduce(
        self,
        rng: np.random.Generator,
        population: Sequence[IndividualT],
        individual_type: type,
    ) -> IndividualT:
        parent_a = self.selection_method.select(rng, population).chromosome()
        parent_b = self.selection_method.select(rng, population).chromosome()

        child: Chromosome = self.crossover_method.crossover(rng, parent_a, parent_b)
        self.mutation_method.mutate(rng, child)

        return individual_type.create(child)

    def __repr__(self) -> str:
        return (
            f"GeneticAlgorithm(selection={type(self.selection_method).__name__}, "
            f"crossover={type(self.crossover_method).__name__}, "
            f"mutation={self.mutation_method!r})"
        )
