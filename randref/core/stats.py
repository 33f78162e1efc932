"""Run-length and composition statistics for generated sequences."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import numpy as np

from randref.core.sequence import NUCLEOTIDES, Sequence


@dataclass(frozen=True, slots=True)
class RunStats:
    """Summary of a sequence's base composition and homopolymer runs.

    - ``composition``: count per nucleotide
    - ``run_histogram``: maximal run length -> number of runs of that length
    """

    length: int
    composition: Mapping[str, int]
    gc_fraction: float
    run_histogram: Mapping[int, int] = field(default_factory=dict)
    mean_run_length: float = 0.0
    longest_run: int = 0

    def as_dict(self) -> dict[str, object]:
        return {
            "length": self.length,
            "composition": dict(self.composition),
            "gc_fraction": self.gc_fraction,
            "run_histogram": {str(k): v for k, v in self.run_histogram.items()},
            "mean_run_length": self.mean_run_length,
            "longest_run": self.longest_run,
        }


def run_lengths(tokens: str) -> np.ndarray:
    """Return the lengths of maximal runs of identical symbols, in order."""
    if not tokens:
        return np.zeros(0, dtype=np.int64)
    codes = np.frombuffer(tokens.encode("ascii"), dtype=np.uint8)
    # Indices where a new run starts, plus the end sentinel
    boundaries = np.flatnonzero(codes[1:] != codes[:-1]) + 1
    edges = np.concatenate(([0], boundaries, [codes.size]))
    return np.diff(edges)


def compute_stats(sequence: Sequence | str) -> RunStats:
    tokens = sequence.tokens if isinstance(sequence, Sequence) else sequence
    composition = {base: tokens.count(base) for base in NUCLEOTIDES}
    length = len(tokens)
    gc_fraction = (composition["G"] + composition["C"]) / length if length else 0.0

    runs = run_lengths(tokens)
    if runs.size == 0:
        return RunStats(length=0, composition=composition, gc_fraction=0.0)

    values, counts = np.unique(runs, return_counts=True)
    histogram = {int(v): int(c) for v, c in zip(values, counts)}
    return RunStats(
        length=length,
        composition=composition,
        gc_fraction=float(gc_fraction),
        run_histogram=histogram,
        mean_run_length=float(runs.mean()),
        longest_run=int(runs.max()),
    )
