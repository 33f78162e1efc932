"""randref public interface.

Generate random nucleotide references with a weighted run-length model and
write them, plus an optional trailing contig and its reverse complement, as
FASTA.
"""

from __future__ import annotations

from .core import Sequence, reverse_complement
from .generation import RunLengthGenerator, RunLengthWeights, generate
from .io import write_record

__all__ = [
    "RunLengthGenerator",
    "RunLengthWeights",
    "Sequence",
    "generate",
    "reverse_complement",
    "write_record",
]

__version__ = "0.1.0"
