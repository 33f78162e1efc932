"""Core primitives.

Low-level types shared by the generator, writer and pipeline.
"""

from .complement import complement, reverse_complement
from .sequence import NUCLEOTIDES, Sequence
from .stats import RunStats, compute_stats, run_lengths

__all__ = [
    "NUCLEOTIDES",
    "RunStats",
    "Sequence",
    "complement",
    "compute_stats",
    "reverse_complement",
    "run_lengths",
]
