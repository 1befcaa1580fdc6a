"""
neuro_evolve/network/network.py

Feedforward inference engine.

A network is a stack of fully-connected layers with a rectifier at every
neuron. It never learns by itself: its parameters only change when a
genome is decoded into a fresh network.

Canonical parameter order (used by the genome codec):
    for each layer, for each neuron: bias, then weights in input order
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple
import numpy as np

from .topology import (
    RANDOM_MIN_ENTRIES,
    LayerTopology,
    TopologyLike,
    as_topologies,
    parameter_count,
    validate_topologies,
)


@dataclass
class Neuron:
    """One bias and one weight per input."""
    bias: float
    weights: np.ndarray

    def __post_init__(self):
        self.bias = float(self.bias)
        self.weights = np.asarray(self.weights, dtype=np.float64)

    @property
    def input_size(self) -> int:
        return len(self.weights)

    @classmethod
    def random(
        cls,
        rng: np.random.Generator,
        input_size: int,
        weight_range: Tuple[float, float] = (-1.0, 1.0),
        bias_range: Tuple[float, float] = (-1.0, 1.0),
    ) -> "Neuron":
        bias = rng.uniform(*bias_range)
        weights = rng.uniform(*weight_range, size=input_size)
        return cls(bias=bias, weights=weights)

    def propagate(self, inputs: np.ndarray) -> float:
        """Weighted sum plus bias, clamped at zero."""
        if len(inputs) != self.input_size:
            raise ValueError(
                f"Neuron expects {self.input_size} inputs, got {len(inputs)}"
            )
        output = float(np.dot(self.weights, inputs)) + self.bias
        return max(output, 0.0)


class Layer:
    """A row of neurons that all read the same input vector."""

    def __init__(self, neurons: List[Neuron]):
        if not neurons:
            raise ValueError("A layer needs at least one neuron")
        widths = {n.input_size for n in neurons}
        if len(widths) != 1:
            raise ValueError(f"Neurons in a layer disagree on input width: {sorted(widths)}")
        self.neurons = list(neurons)

    @property
    def input_size(self) -> int:
        return self.neurons[0].input_size

    @property
    def output_size(self) -> int:
        return len(self.neurons)

    @property
    def topology(self) -> LayerTopology:
        return LayerTopology(self.input_size, self.output_size)

    @classmethod
    def random(
        cls,
        rng: np.random.Generator,
        input_size: int,
        output_size: int,
        weight_range: Tuple[float, float] = (-1.0, 1.0),
        bias_range: Tuple[float, float] = (-1.0, 1.0),
    ) -> "Layer":
        return cls([
            Neuron.random(rng, input_size, weight_range, bias_range)
            for _ in range(output_size)
        ])

    def propagate(self, inputs: np.ndarray) -> np.ndarray:
        return np.array([neuron.propagate(inputs) for neuron in self.neurons])

    def __repr__(self) -> str:
        return f"Layer({self.input_size} -> {self.output_size})"


class Network:
    """
    Fully-connected feedforward network.

    Principles:
    - Immutable after construction: propagation is a pure read
    - Every random draw comes from the caller's generator
    - Parameters flatten to, and rebuild from, a flat gene sequence
    """

    def __init__(self, layers: List[Layer]):
        if not layers:
            raise ValueError("A network needs at least one layer")
        validate_topologies([layer.topology for layer in layers])
        self.layers = list(layers)

    # ==================== Construction ====================

    @classmethod
    def random(
        cls,
        rng: np.random.Generator,
        topologies: Sequence[TopologyLike],
        weight_range: Tuple[float, float] = (-1.0, 1.0),
        bias_range: Tuple[float, float] = (-1.0, 1.0),
    ) -> "Network":
        """
        Build a network with uniformly random parameters.

        Args:
            rng: Source of every draw; nothing else is consulted
            topologies: At least two layer shapes, adjacent widths matching
            weight_range: (low, high) for weights
            bias_range: (low, high) for biases
        """
        topologies = as_topologies(topologies)
        validate_topologies(topologies, min_entries=RANDOM_MIN_ENTRIES)

        return cls([
            Layer.random(rng, t.input_neurons, t.output_neurons, weight_range, bias_range)
            for t in topologies
        ])

    @classmethod
    def from_weights(
        cls,
        topologies: Sequence[TopologyLike],
        weights: Iterable[float],
    ) -> "Network":
        """
        Rebuild a network from a flat parameter sequence.

        Genes are consumed in canonical order. The sequence length must
        equal the parameter count of the topology exactly.
        """
        topologies = as_topologies(topologies)
        if not topologies:
            raise ValueError("Cannot decode a network without a topology")
        validate_topologies(topologies)

        genes = np.asarray(
            weights if isinstance(weights, np.ndarray) else list(weights),
            dtype=np.float64,
        )
        expected = parameter_count(topologies)
        if len(genes) != expected:
            raise ValueError(
                f"Got {len(genes)} weights but topology needs {expected}"
            )

        layers = []
        offset = 0
        for t in topologies:
            neurons = []
            for _ in range(t.output_neurons):
                bias = genes[offset]
                weights_start = offset + 1
                offset = weights_start + t.input_neurons
                neurons.append(Neuron(bias=bias, weights=genes[weights_start:offset].copy()))
            layers.append(Layer(neurons))

        return cls(layers)

    # ==================== Inference ====================

    @property
    def input_size(self) -> int:
        return self.layers[0].input_size

    @property
    def output_size(self) -> int:
        return self.layers[-1].output_size

    @property
    def topologies(self) -> List[LayerTopology]:
        return [layer.topology for layer in self.layers]

    def propagate(self, inputs: Sequence[float]) -> np.ndarray:
        """Feed inputs through every layer in order."""
        values = np.asarray(inputs, dtype=np.float64)
        if values.ndim != 1 or len(values) != self.input_size:
            raise ValueError(
                f"Network expects {self.input_size} inputs, got shape {values.shape}"
            )

        for layer in self.layers:
            values = layer.propagate(values)
        return values

    # ==================== Genome codec ====================

    def iter_weights(self) -> Iterator[float]:
        for layer in self.layers:
            for neuron in layer.neurons:
                yield neuron.bias
                yield from (float(w) for w in neuron.weights)

    def weights(self) -> List[float]:
        """All parameters, flattened in canonical order."""
        return list(self.iter_weights())

    def __repr__(self) -> str:
        shape = " -> ".join(
            [str(self.input_size)] + [str(layer.output_size) for layer in self.layers]
        )
        return f"Network({shape})"


def encode(network: Network) -> List[float]:
    """Flatten a network's parameters into a gene sequence."""
    return network.weights()


def decode(topologies: Sequence[TopologyLike], weights: Iterable[float]) -> Network:
    """Rebuild a network of the given shape from a gene sequence."""
    return Network.from_weights(topologies, weights)
