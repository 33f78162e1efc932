import dataclasses

import pytest

from randref.core.sequence import Sequence


def test_tail_returns_trailing_symbols():
    seq = Sequence(id="ref", tokens="ACGTACGTTT")
    contig = seq.tail(3, id="random_contig")
    assert contig.tokens == "TTT"
    assert contig.id == "random_contig"


def test_tail_full_and_empty():
    seq = Sequence(id="ref", tokens="ACGT")
    assert seq.tail(4).tokens == "ACGT"
    assert seq.tail(0).tokens == ""


def test_tail_longer_than_sequence_raises():
    with pytest.raises(ValueError, match="exceeds sequence length"):
        Sequence(id="ref", tokens="ACGT").tail(5)


def test_sequence_is_frozen():
    seq = Sequence(id="ref", tokens="ACGT")
    with pytest.raises(dataclasses.FrozenInstanceError):
        seq.tokens = "TTTT"  # type: ignore[misc]


def test_len_counts_symbols():
    assert len(Sequence(id="ref", tokens="ACGTA")) == 5
    assert len(Sequence(id="empty", tokens="")) == 0
