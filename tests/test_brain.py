"""
Tests for neuro_evolve/brain.py

The Brain ties the genome codec to the genetic algorithm.
"""

import pytest
import numpy as np

from neuro_evolve.brain import Brain
from neuro_evolve.evolution import (
    Chromosome,
    GaussianMutation,
    GeneticAlgorithm,
    TournamentSelection,
    UniformCrossover,
)
from neuro_evolve.network import LayerTopology, Network

TOPOLOGY = [(3, 4), (4, 2)]


class TestBrain:
    """Tests for Brain as an Individual."""

    def test_for_topology_binds_shape(self):
        """Bound class carries its topology."""
        brain_type = Brain.for_topology(TOPOLOGY)

        assert issubclass(brain_type, Brain)
        assert brain_type.topology == (LayerTopology(3, 4), LayerTopology(4, 2))
        assert Brain.topology == ()

    def test_for_topology_rejects_mismatch(self):
        """Unchainable shapes are rejected up front."""
        with pytest.raises(ValueError):
            Brain.for_topology([(3, 4), (5, 2)])

    def test_for_topology_rejects_single_entry(self):
        """A one-layer shape cannot seed random brains, so it is refused early."""
        with pytest.raises(ValueError, match="at least 2"):
            Brain.for_topology([(3, 2)])

    def test_random_brain(self):
        """Random brains have the bound shape and zero fitness."""
        brain_type = Brain.for_topology(TOPOLOGY)
        brain = brain_type.random(np.random.default_rng(42))

        assert isinstance(brain, brain_type)
        assert brain.fitness() == 0.0
        assert len(brain.propagate([0.1, 0.2, 0.3])) == 2

    def test_chromosome_length(self):
        """Chromosome holds every bias and weight."""
        brain = Brain.for_topology(TOPOLOGY).random(np.random.default_rng(42))

        assert len(brain.chromosome()) == (3 + 1) * 4 + (4 + 1) * 2

    def test_create_inverts_chromosome(self):
        """create(chromosome()) rebuilds an equivalent brain."""
        brain_type = Brain.for_topology(TOPOLOGY)
        brain = brain_type.random(np.random.default_rng(42))

        clone = brain_type.create(brain.chromosome())

        assert clone.chromosome() == brain.chromosome()
        np.testing.assert_array_equal(clone.propagate([1.0, -1.0, 0.5]), brain.propagate([1.0, -1.0, 0.5]))

    def test_create_wrong_length_raises(self):
        """Chromosome length must match the topology."""
        brain_type = Brain.for_topology(TOPOLOGY)

        with pytest.raises(ValueError):
            brain_type.create(Chromosome([0.0] * 5))

    def test_unbound_brain_raises(self):
        """Base Brain has no shape to decode into."""
        with pytest.raises(ValueError):
            Brain.create(Chromosome([0.0] * 26))

        with pytest.raises(ValueError):
            Brain.random(np.random.default_rng(42))

    def test_wraps_existing_network(self):
        """A brain can wrap a network built elsewhere."""
        network = Network.random(np.random.default_rng(1), TOPOLOGY)
        brain = Brain(network, fitness=2.5)

        assert brain.fitness() == 2.5
        assert brain.chromosome().to_list() == network.weights()


class TestBrainEvolution:
    """Brains flow through the genetic algorithm."""

    def test_evolve_brains(self):
        """A generation of brains yields brains of the same shape."""
        rng = np.random.default_rng(42)
        brain_type = Brain.for_topology(TOPOLOGY)
        population = [brain_type.random(rng) for _ in range(10)]
        for i, brain in enumerate(population):
            brain.score = float(i)

        algorithm = GeneticAlgorithm(
            TournamentSelection(size=3),
            UniformCrossover(),
            GaussianMutation(chance=0.1, coeff=0.2),
        )
        offspring = algorithm.evolve(rng, population)

        assert len(offspring) == 10
        assert all(type(child) is brain_type for child in offspring)
        assert all(child.network.topologies == list(brain_type.topology) for child in offspring)
        assert all(child.fitness() == 0.0 for child in offspring)
