"""Reverse complement of nucleotide sequences."""

from __future__ import annotations

from typing import overload

from randref.core.sequence import NUCLEOTIDES, Sequence

_COMPLEMENTS = {"A": "T", "C": "G", "G": "C", "T": "A"}
_TRANSLATION = str.maketrans(NUCLEOTIDES, "TGCA")


def complement(symbol: str) -> str:
    """Return the Watson-Crick partner of a single nucleotide."""
    try:
        return _COMPLEMENTS[symbol]
    except KeyError:
        raise ValueError(f"unexpected nucleotide: {symbol!r}") from None


@overload
def reverse_complement(sequence: Sequence, *, id: str | None = None) -> Sequence: ...


@overload
def reverse_complement(sequence: str, *, id: str | None = None) -> str: ...


def reverse_complement(sequence, *, id=None):
    """Reverse ``sequence`` and swap every base for its partner (A<->T, C<->G).

    Accepts either a :class:`Sequence` or a plain string and returns the same
    kind. A returned ``Sequence`` is named ``id`` or ``<original id>_rev``.

    Raises
    ------
    ValueError
        If any symbol is outside ``ACGT``. Generated sequences never contain
        such symbols, so hitting this means the input did not come from the
        generator.
    """
    tokens = sequence.tokens if isinstance(sequence, Sequence) else sequence

    invalid = set(tokens) - _COMPLEMENTS.keys()
    if invalid:
        raise ValueError(f"unexpected nucleotide(s): {sorted(invalid)}")

    reversed_tokens = tokens[::-1].translate(_TRANSLATION)
    if isinstance(sequence, Sequence):
        return Sequence(id=id or f"{sequence.id}_rev", tokens=reversed_tokens)
    return reversed_tokens
