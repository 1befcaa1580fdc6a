"""
neuro_evolve/network/topology.py

Layer shapes for feedforward networks.

A topology entry is one layer: how many values flow in, how many neurons
fire out. Stacked entries must agree at every boundary.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Union


@dataclass(frozen=True)
class LayerTopology:
    """Shape of one fully-connected layer."""
    input_neurons: int
    output_neurons: int

    def __post_init__(self):
        if self.input_neurons < 1 or self.output_neurons < 1:
            raise ValueError(
                f"Layer widths must be positive, got "
                f"({self.input_neurons}, {self.output_neurons})"
            )

    @property
    def parameter_count(self) -> int:
        """Biases plus weights: (inputs + 1) * outputs."""
        return (self.input_neurons + 1) * self.output_neurons


TopologyLike = Union[LayerTopology, Sequence[int]]

# Fewest entries a randomly built network accepts
RANDOM_MIN_ENTRIES = 2


def as_topologies(entries: Iterable[TopologyLike]) -> List[LayerTopology]:
    """Coerce `(inputs, outputs)` pairs into LayerTopology objects."""
    topologies = []
    for entry in entries:
        if isinstance(entry, LayerTopology):
            topologies.append(entry)
        else:
            inputs, outputs = entry
            topologies.append(LayerTopology(int(inputs), int(outputs)))
    return topologies


def validate_topologies(topologies: Sequence[LayerTopology], min_entries: int = 1) -> None:
    """
    Check that adjacent layers share their boundary width.

    Raises ValueError when fewer than `min_entries` layers are given, or
    on the first mismatch.
    """
    if len(topologies) < min_entries:
        raise ValueError(
            f"Topology needs at least {min_entries} entries, got {len(topologies)}"
        )
    for i, (current, following) in enumerate(zip(topologies, topologies[1:])):
        if current.output_neurons != following.input_neurons:
            raise ValueError(
                f"Layer {i} outputs {current.output_neurons} values but "
                f"layer {i + 1} expects {following.input_neurons}"
            )


def parameter_count(topologies: Sequence[LayerTopology]) -> int:
    """Total genes needed to encode a network of this shape."""
    return sum(t.parameter_count for t in topologies)
