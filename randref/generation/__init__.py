"""Sequence generation."""

from .generator import REFERENCE_ID, RunLengthGenerator, generate
from .weights import RunLengthDistribution, RunLengthWeights

__all__ = [
    "REFERENCE_ID",
    "RunLengthDistribution",
    "RunLengthGenerator",
    "RunLengthWeights",
    "generate",
]
