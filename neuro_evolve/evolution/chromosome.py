"""
neuro_evolve/evolution/chromosome.py

The chromosome: a flat, fixed-length sequence of real-valued genes.

It is the unit of storage, crossover and mutation. It knows nothing of
what its genes mean; decoding is the individual's business.
"""

from __future__ import annotations
from typing import Iterable, Iterator, List, Optional
import numpy as np


class Chromosome:
    """
    Ordered float64 genes backed by a numpy array.

    No validation happens here. Length agreement between chromosomes is
    checked by the operators that combine or decode them.
    """

    __slots__ = ("genes",)

    def __init__(self, genes: Iterable[float] = ()):
        if isinstance(genes, np.ndarray):
            self.genes = np.array(genes, dtype=np.float64)
        else:
            self.genes = np.array(list(genes), dtype=np.float64)

    def __len__(self) -> int:
        return len(self.genes)

    def __iter__(self) -> Iterator[float]:
        return (float(gene) for gene in self.genes)

    def __getitem__(self, index: int) -> float:
        if not -len(self.genes) <= index < len(self.genes):
            raise IndexError(
                f"Gene index {index} out of range for chromosome of length {len(self.genes)}"
            )
        return float(self.genes[index])

    def __setitem__(self, index: int, value: float) -> None:
        if not -len(self.genes) <= index < len(self.genes):
            raise IndexError(
                f"Gene index {index} out of range for chromosome of length {len(self.genes)}"
            )
        self.genes[index] = value

    def __array__(self, dtype: Optional[np.dtype] = None, copy: Optional[bool] = None) -> np.ndarray:
        if dtype is None:
            return self.genes.copy()
        return self.genes.astype(dtype)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chromosome):
            return NotImplemented
        return np.array_equal(self.genes, other.genes)

    __hash__ = None

    def to_list(self) -> List[float]:
        """Decompose back into plain floats, order preserved."""
        return self.genes.tolist()

    def copy(self) -> "Chromosome":
        return Chromosome(self.genes)

    def __repr__(self) -> str:
        preview = ", ".join(f"{g:.3f}" for g in self.genes[:4])
        if len(self.genes) > 4:
            preview += ", ..."
        return f"Chromosome(len={len(self.genes)}, [{preview}])"
