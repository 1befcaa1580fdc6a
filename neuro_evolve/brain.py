"""
neuro_evolve/brain.py

A network that can be evolved.

The Brain is where the two halves meet: the genetic algorithm sees a
chromosome and a fitness score, the environment sees a network it can
feed observations to.

The chromosome is the genotype; the network is the phenotype.
"""

from __future__ import annotations
from typing import Sequence, Tuple
import numpy as np

from .evolution.chromosome import Chromosome
from .evolution.individual import Individual
from .network import RANDOM_MIN_ENTRIES, LayerTopology, Network, as_topologies, validate_topologies
from .network.topology import TopologyLike


class Brain(Individual):
    """
    Network-backed individual.

    The shape lives on the class so that create() can decode a bare
    chromosome. Use Brain.for_topology() to get a class bound to a shape.
    Fitness is assigned by whoever evaluates the brain.
    """

    topology: Tuple[LayerTopology, ...] = ()

    def __init__(self, network: Network, fitness: float = 0.0):
        self.network = network
        self.score = float(fitness)

    @classmethod
    def for_topology(cls, topology: Sequence[TopologyLike]) -> type:
        """Return a Brain subclass whose genomes decode into this shape."""
        topologies = tuple(as_topologies(topology))
        validate_topologies(topologies, min_entries=RANDOM_MIN_ENTRIES)
        return type(cls.__name__, (cls,), {"topology": topologies})

    @classmethod
    def _require_topology(cls) -> Tuple[LayerTopology, ...]:
        if not cls.topology:
            raise ValueError(
                f"{cls.__name__} has no topology; create one with Brain.for_topology()"
            )
        return cls.topology

    @classmethod
    def random(
        cls,
        rng: np.random.Generator,
        weight_range: Tuple[float, float] = (-1.0, 1.0),
        bias_range: Tuple[float, float] = (-1.0, 1.0),
    ) -> "Brain":
        network = Network.random(rng, cls._require_topology(), weight_range, bias_range)
        return cls(network)

    @classmethod
    def create(cls, chromosome: Chromosome) -> "Brain":
        return cls(Network.from_weights(cls._require_topology(), chromosome))

    def chromosome(self) -> Chromosome:
        return Chromosome(self.network.weights())

    def fitness(self) -> float:
        return self.score

    def propagate(self, inputs: Sequence[float]) -> np.ndarray:
        return self.network.propagate(inputs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.network!r}, fitness={self.score:.4f})"
