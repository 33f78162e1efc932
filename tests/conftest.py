"""Shared test fixtures and configuration for randref tests."""

import pytest

from randref.core.sequence import Sequence


@pytest.fixture
def dna_alphabet():
    """DNA alphabet (ACGT)."""
    return "ACGT"


@pytest.fixture
def short_sequence():
    """Small hand-written sequence with known runs."""
    return Sequence(id="short", tokens="AACGTTTA")


@pytest.fixture
def output_paths(tmp_path):
    """Reference, contig and manifest targets inside a temporary directory."""
    return {
        "sequence_out": tmp_path / "reference.fasta",
        "subsequence_out": tmp_path / "contig.fasta",
        "manifest_out": tmp_path / "manifest.json",
    }
