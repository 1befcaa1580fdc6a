"""
Neuro-Evolve: Feedforward Networks Shaped by a Genetic Algorithm

A flat chromosome of real-valued genes decodes into the weights and
biases of a small rectifier network. Selection, crossover and mutation
act on the chromosome; the environment only ever sees the network.
"""

__version__ = "0.1.0"
