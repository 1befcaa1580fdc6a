"""
neuro_evolve/config.py

Run configuration and strategy wiring.

Configs are plain dataclasses so they can be built in code, or loaded
from YAML for repeatable experiments:

    population_size: 50
    topology: [[3, 8], [8, 2]]
    selection: tournament
    tournament_size: 4
    mutation_chance: 0.01
    mutation_coeff: 0.3
    seed: 7
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union
import logging

import yaml

from .evolution import (
    GaussianMutation,
    GeneticAlgorithm,
    RankSelection,
    RouletteWheelSelection,
    SinglePointCrossover,
    TournamentSelection,
    UniformCrossover,
)
from .network import RANDOM_MIN_ENTRIES, LayerTopology, as_topologies, validate_topologies

logger = logging.getLogger(__name__)

SELECTION_METHODS = ("roulette", "tournament", "rank")
CROSSOVER_METHODS = ("uniform", "single_point")


@dataclass
class EvolutionConfig:
    """Configuration for an evolution run."""
    # Population
    population_size: int = 50
    generations: int = 100

    # Network shape: one [inputs, outputs] pair per layer
    topology: List[List[int]] = field(default_factory=lambda: [[3, 8], [8, 2]])
    weight_range: Tuple[float, float] = (-1.0, 1.0)
    bias_range: Tuple[float, float] = (-1.0, 1.0)

    # Strategies
    selection: str = "roulette"
    tournament_size: int = 3
    crossover: str = "uniform"
    mutation_chance: float = 0.01
    mutation_coeff: float = 0.3

    # Reproduction: None keeps the single-stream evolve(); an int runs
    # evolve_independent() on that many threads
    max_workers: Optional[int] = None

    # Random seed
    seed: int = 42

    def __post_init__(self):
        self.weight_range = tuple(self.weight_range)
        self.bias_range = tuple(self.bias_range)
        validate_topologies(self.layer_topologies(), min_entries=RANDOM_MIN_ENTRIES)

    def layer_topologies(self) -> List[LayerTopology]:
        return as_topologies(self.topology)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["weight_range"] = list(self.weight_range)
        data["bias_range"] = list(self.bias_range)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EvolutionConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data)


def load_config(path: Union[str, Path]) -> EvolutionConfig:
    """Load an EvolutionConfig from a YAML file."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    logger.info(f"Loaded evolution config from {path}")
    return EvolutionConfig.from_dict(data)


def build_genetic_algorithm(config: EvolutionConfig) -> GeneticAlgorithm:
    """Instantiate the strategies named in the config."""
    if config.selection == "roulette":
        selection = RouletteWheelSelection()
    elif config.selection == "tournament":
        selection = TournamentSelection(config.tournament_size)
    elif config.selection == "rank":
        selection = RankSelection()
    else:
        raise ValueError(
            f"Unknown selection method: {config.selection} (expected one of {SELECTION_METHODS})"
        )

    if config.crossover == "uniform":
        crossover = UniformCrossover()
    elif config.crossover == "single_point":
        crossover = SinglePointCrossover()
    else:
        raise ValueError(
            f"Unknown crossover method: {config.crossover} (expected one of {CROSSOVER_METHODS})"
        )

    mutation = GaussianMutation(config.mutation_chance, config.mutation_coeff)

    return GeneticAlgorithm(selection, crossover, mutation)
