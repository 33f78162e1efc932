"""Repetition-count model for the run-length generator."""

from __future__ import annotations

import math
import random
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields

import numpy as np


@dataclass(frozen=True, slots=True)
class RunLengthWeights:
    """Weighted categorical distribution over run lengths ``[0, max_run)``.

    weight(0) is always zero. For ``r >= 1`` the weight is a geometric term
    ``decay ** (r - 1)`` plus a tiered bonus that favours short runs.

    Parameters
    ----------
    decay : float
        Base of the geometric tail, in (0, 1].
    single_bonus : float
        Bonus for runs of length 1.
    short_bonus : float
        Bonus for runs of length 2 to 4.
    medium_bonus : float
        Bonus for runs of length 5 to 10.
    max_run : int
        Exclusive upper bound of the run-length domain.
    """

    decay: float = 0.9
    single_bonus: float = 2000.0
    short_bonus: float = 40.0
    medium_bonus: float = 1.0
    max_run: int = 100

    def __post_init__(self) -> None:
        for name in ("decay", "single_bonus", "short_bonus", "medium_bonus"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")
        if isinstance(self.max_run, bool) or not isinstance(self.max_run, int):
            raise ValueError(f"max_run must be an integer, got {self.max_run!r}")
        if not (0.0 < self.decay <= 1.0):
            raise ValueError(f"decay must be in (0.0, 1.0], got {self.decay}")
        for name in ("single_bonus", "short_bonus", "medium_bonus"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if self.max_run < 2:
            raise ValueError(f"max_run must be >= 2, got {self.max_run}")

    def weights(self) -> np.ndarray:
        """Return the weight of every run length in ``[0, max_run)``."""
        r = np.arange(self.max_run, dtype=np.float64)
        weights = np.power(self.decay, r - 1)
        weights[r == 1] += self.single_bonus
        weights[(r >= 2) & (r <= 4)] += self.short_bonus
        weights[(r >= 5) & (r <= 10)] += self.medium_bonus
        weights[0] = 0.0
        return weights

    def cumulative(self) -> np.ndarray:
        return np.cumsum(self.weights())

    def distribution(self) -> RunLengthDistribution:
        return RunLengthDistribution(self.cumulative())

    def as_dict(self) -> dict[str, float | int]:
        return asdict(self)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object] | None) -> RunLengthWeights:
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown run-length weight parameters: {sorted(unknown)}")
        return cls(**data)  # type: ignore[arg-type]


class RunLengthDistribution:
    """Sampler over a precomputed cumulative weight table."""

    def __init__(self, cumulative: np.ndarray) -> None:
        if cumulative.ndim != 1 or cumulative.size == 0:
            raise ValueError("cumulative table must be a non-empty 1-D array")
        total = float(cumulative[-1])
        if not total > 0.0:
            raise ValueError("run-length weights must have a positive total")
        self._cumulative = cumulative
        self._total = total

    def sample(self, rng: random.Random) -> int:
        """Draw one run length; zero-weight entries are never returned."""
        u = rng.random() * self._total
        return int(np.searchsorted(self._cumulative, u, side="right"))
