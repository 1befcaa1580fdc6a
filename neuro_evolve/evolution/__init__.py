"""
neuro_evolve/evolution/

Genetic algorithm over abstract individuals.

The algorithm only sees chromosomes and fitness values. What a
chromosome means is decided by the Individual implementation.

Strategies:
- Selection: RouletteWheelSelection, TournamentSelection, RankSelection
- Crossover: UniformCrossover, SinglePointCrossover
- Mutation: GaussianMutation
"""

from .chromosome import Chromosome
from .individual import Individual
from .selection import (
    SelectionMethod,
    RouletteWheelSelection,
    TournamentSelection,
    RankSelection,
)
from .crossover import CrossoverMethod, UniformCrossover, SinglePointCrossover
from .mutation import MutationMethod, GaussianMutation
from .algorithm import GeneticAlgorithm
from .statistics import Statistics

__all__ = [
    "Chromosome",
    "Individual",
    "SelectionMethod",
    "RouletteWheelSelection",
    "TournamentSelection",
    "RankSelection",
    "CrossoverMethod",
    "UniformCrossover",
    "SinglePointCrossover",
    "MutationMethod",
    "GaussianMutation",
    "GeneticAlgorithm",
    "Statistics",
]
