"""
neuro_evolve/network/

Feedforward networks whose parameters live in a flat genome.

- topology: layer shapes and parameter counting
- network: Neuron, Layer, Network plus the encode/decode pair
"""

from .topology import (
    RANDOM_MIN_ENTRIES,
    LayerTopology,
    as_topologies,
    parameter_count,
    validate_topologies,
)
from .network import Neuron, Layer, Network, encode, decode

__all__ = [
    "RANDOM_MIN_ENTRIES",
    "LayerTopology",
    "as_topologies",
    "parameter_count",
    "validate_topologies",
    "Neuron",
    "Layer",
    "Network",
    "encode",
    "decode",
]
