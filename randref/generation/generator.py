"""Weighted run-length generator for random reference sequences."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from randref.core.sequence import NUCLEOTIDES, Sequence
from randref.generation.weights import RunLengthDistribution, RunLengthWeights

_LOGGER = logging.getLogger(__name__)

REFERENCE_ID = "random_reference"


@dataclass
class RunLengthGenerator:
    """Emit sequences as runs of a uniformly chosen symbol.

    Each step picks a symbol uniformly from ``alphabet`` and a repetition count
    from ``weights``, then appends that many copies. The final run is cut short
    so the output is exactly the requested length.

    Parameters
    ----------
    alphabet : str
        Symbols to choose from (default: ``"ACGT"``).
    weights : RunLengthWeights
        Repetition-count distribution.
    seed : int | None
        Seed for the random source; ``None`` seeds from system entropy.
    """

    alphabet: str = NUCLEOTIDES
    weights: RunLengthWeights = field(default_factory=RunLengthWeights)
    seed: int | None = None
    _rng: random.Random = field(init=False, repr=False)
    _distribution: RunLengthDistribution = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.alphabet:
            raise ValueError("alphabet must be a non-empty string")
        self._rng = random.Random(self.seed)
        self._distribution = self.weights.distribution()

    def generate(self, length: int, *, id: str = REFERENCE_ID) -> Sequence:
        """Return a sequence of exactly ``length`` symbols."""
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")

        chunks: list[str] = []
        produced = 0
        runs = 0
        while produced < length:
            symbol = self._rng.choice(self.alphabet)
            repetitions = min(self._distribution.sample(self._rng), length - produced)
            chunks.append(symbol * repetitions)
            produced += repetitions
            runs += 1

        _LOGGER.debug("Generated %d symbols in %d runs (seed=%s)", length, runs, self.seed)
        return Sequence(
            id=id,
            tokens="".join(chunks),
            metadata={"seed": self.seed, "runs": runs},
        )


def generate(
    length: int,
    *,
    seed: int | None = None,
    weights: RunLengthWeights | None = None,
) -> Sequence:
    """Generate one sequence with a fresh :class:`RunLengthGenerator`."""
    generator = RunLengthGenerator(weights=weights or RunLengthWeights(), seed=seed)
    return generator.generate(length)
