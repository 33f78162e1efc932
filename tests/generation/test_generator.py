"""Tests for RunLengthGenerator."""

import pytest

from randref.core.sequence import Sequence
from randref.core.stats import compute_stats
from randref.generation import RunLengthGenerator, RunLengthWeights, generate


class TestRunLengthGenerator:
    """RunLengthGenerator unit tests."""

    @pytest.mark.parametrize("length", [0, 1, 2, 7, 99, 100, 1_000, 10_000])
    def test_exact_length(self, length, dna_alphabet):
        seq = RunLengthGenerator(seed=length).generate(length)
        assert isinstance(seq, Sequence)
        assert len(seq.tokens) == length
        assert set(seq.tokens) <= set(dna_alphabet)

    def test_zero_length_is_empty(self):
        seq = RunLengthGenerator(seed=1).generate(0)
        assert seq.tokens == ""
        assert seq.id == "random_reference"
        assert seq.metadata["runs"] == 0

    def test_negative_length_raises(self):
        with pytest.raises(ValueError, match="length must be non-negative"):
            RunLengthGenerator(seed=1).generate(-1)

    def test_empty_alphabet_raises(self):
        with pytest.raises(ValueError, match="alphabet"):
            RunLengthGenerator(alphabet="")

    def test_seed_reproducible_across_instances(self):
        """Generators with the same seed emit identical sequences."""
        seq_a = RunLengthGenerator(seed=123).generate(5_000)
        seq_b = RunLengthGenerator(seed=123).generate(5_000)
        assert seq_a.tokens == seq_b.tokens

    def test_different_seeds_differ(self):
        seq_a = RunLengthGenerator(seed=1).generate(5_000)
        seq_b = RunLengthGenerator(seed=2).generate(5_000)
        assert seq_a.tokens != seq_b.tokens

    def test_final_run_is_truncated(self):
        """Long runs are cut so the output never overshoots."""
        weights = RunLengthWeights(
            decay=1.0, single_bonus=0.0, short_bonus=0.0, medium_bonus=0.0
        )
        generator = RunLengthGenerator(weights=weights, seed=9)
        for length in (1, 3, 5, 17):
            assert len(generator.generate(length)) == length

    def test_unit_runs_only(self):
        generator = RunLengthGenerator(weights=RunLengthWeights(max_run=2), seed=4)
        seq = generator.generate(50)
        assert seq.metadata["runs"] == 50

    def test_metadata_records_seed(self):
        seq = RunLengthGenerator(seed=77).generate(10)
        assert seq.metadata["seed"] == 77

    def test_module_level_generate(self):
        assert generate(250, seed=8).tokens == RunLengthGenerator(seed=8).generate(250).tokens

    def test_run_length_distribution(self):
        """Single bases dominate and longer runs become strictly rarer."""
        seq = RunLengthGenerator(seed=31337).generate(300_000)
        histogram = compute_stats(seq).run_histogram

        assert max(histogram, key=histogram.get) == 1
        assert histogram[1] > sum(count for length, count in histogram.items() if length > 1)
        for length in range(4, 10):
            assert histogram.get(length, 0) > histogram.get(length + 1, 0)
