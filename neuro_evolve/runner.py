"""
neuro_evolve/runner.py

The outer evolution loop.

The core evolve() step is stateless. The runner owns everything around it:
1. Score each brain with an external fitness function
2. Record generation statistics
3. Track the best brain seen so far
4. Breed the next generation

The fitness function is the environment's business; the runner only
needs a number per network.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional
import logging
import time

import numpy as np

from .brain import Brain
from .config import EvolutionConfig, build_genetic_algorithm
from .evolution import GeneticAlgorithm, Statistics
from .network import Network

logger = logging.getLogger(__name__)

FitnessFunction = Callable[[Network], float]


class EvolutionRunner:
    """
    Drives generations of Brains through a GeneticAlgorithm.

    All randomness flows from one generator seeded by config.seed.
    """

    def __init__(
        self,
        config: EvolutionConfig,
        fitness_function: FitnessFunction,
        algorithm: Optional[GeneticAlgorithm] = None,
    ):
        if config.population_size < 1:
            raise ValueError(f"Population size must be at least 1, got {config.population_size}")

        self.config = config
        self.fitness_function = fitness_function
        self.algorithm = algorithm or build_genetic_algorithm(config)
        self.rng = np.random.default_rng(config.seed)

        self.brain_type = Brain.for_topology(config.layer_topologies())
        self.population: List[Brain] = [
            self.brain_type.random(self.rng, config.weight_range, config.bias_range)
            for _ in range(config.population_size)
        ]

        self.generation = 0
        self.history: List[Dict[str, Any]] = []
        self.best_brain: Optional[Brain] = None
        self.best_fitness = float('-inf')

        logger.info(
            f"Runner initialized: {config.population_size} brains, "
            f"{len(self.population[0].chromosome())} genes each"
        )

    def evaluate(self) -> Statistics:
        """Score the current population in place."""
        for brain in self.population:
            fitness = float(self.fitness_function(brain.network))
            if not np.isfinite(fitness) or fitness < 0:
                raise ValueError(f"Fitness must be finite and non-negative, got {fitness}")
            brain.score = fitness

        best = max(self.population, key=lambda b: b.score)
        if best.score > self.best_fitness:
            self.best_fitness = best.score
            self.best_brain = best

        return Statistics.from_population(self.population)

    def step(self) -> Dict[str, Any]:
        """
        Execute one generation.

        Returns generation statistics.
        """
        gen_start = time.time()

        stats = self.evaluate()

        if self.config.max_workers is None:
            self.population = self.algorithm.evolve(self.rng, self.population)
        else:
            seed = int(self.rng.integers(np.iinfo(np.int64).max))
            self.population = self.algorithm.evolve_independent(
                seed, self.population, max_workers=self.config.max_workers
            )

        record = {
            "generation": self.generation,
            **stats.to_dict(),
            "best_overall": self.best_fitness,
            "generation_time": time.time() - gen_start,
        }
        self.history.append(record)

        logger.info(
            f"Generation {self.generation}: "
            f"mean fitness {stats.mean_fitness:.4f}, "
            f"best fitness {stats.max_fitness:.4f}"
        )

        self.generation += 1
        return record

    def run(self, generations: Optional[int] = None) -> Dict[str, Any]:
        """
        Run evolution for the given number of generations.

        Args:
            generations: Number of generations (default: from config)

        Returns:
            Final statistics
        """
        generations = generations if generations is not None else self.config.generations
        start_time = time.time()

        logger.info(f"Starting evolution for {generations} generations")

        for _ in range(generations):
            self.step()

        # Score the last generation so best_brain covers it too
        final = self.evaluate()

        logger.info(
            f"Evolution complete: {self.generation} generations, "
            f"best fitness: {self.best_fitness:.4f}"
        )

        return {
            "total_generations": self.generation,
            "total_time": time.time() - start_time,
            "best_fitness": self.best_fitness,
            "final_mean_fitness": final.mean_fitness,
        }

    def get_best(self) -> Optional[Brain]:
        return self.best_brain
