"""Sequence data structures."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

NUCLEOTIDES = "ACGT"


@dataclass(frozen=True, slots=True)
class Sequence:
    """Immutable nucleotide sequence with the name used as its FASTA header."""

    id: str
    tokens: str
    metadata: Mapping[str, object] = field(default_factory=dict)

    def tail(self, n: int, *, id: str | None = None) -> Sequence:
        """Return the trailing ``n`` symbols as a new sequence."""
        if n < 0:
            raise ValueError(f"tail length must be non-negative, got {n}")
        if n > len(self.tokens):
            raise ValueError(
                f"tail length {n} exceeds sequence length {len(self.tokens)}"
            )
        tokens = self.tokens[len(self.tokens) - n :]
        return Sequence(id=id or self.id, tokens=tokens)

    def __len__(self) -> int:
        return len(self.tokens)
