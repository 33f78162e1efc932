"""FASTA serialization.

The writer only ever receives an open text stream; opening and closing the
underlying file is the caller's job.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import IO

from randref.core.sequence import Sequence


def write_record(
    name: str,
    sequence: Sequence | str,
    sink: IO[str],
    line_width: int | None = None,
) -> None:
    """Write one FASTA record.

    Parameters
    ----------
    name : str
        Header text, written after ``>``.
    sequence : Sequence | str
        Symbols to write.
    sink : IO[str]
        Open text stream. Write errors propagate unchanged.
    line_width : int | None
        Wrap sequence lines at this many symbols. ``None`` writes the whole
        sequence on a single line (an empty line for an empty sequence).
    """
    if line_width is not None and line_width <= 0:
        raise ValueError(f"line_width must be a positive integer, got {line_width}")

    tokens = sequence.tokens if isinstance(sequence, Sequence) else sequence
    sink.write(f">{name}\n")
    if line_width is None:
        sink.write(tokens)
        sink.write("\n")
        return

    for start in range(0, len(tokens), line_width):
        sink.write(tokens[start : start + line_width])
        sink.write("\n")


def write_records(
    records: Iterable[tuple[str, Sequence | str]],
    sink: IO[str],
    line_width: int | None = None,
) -> None:
    for name, sequence in records:
        write_record(name, sequence, sink, line_width)
