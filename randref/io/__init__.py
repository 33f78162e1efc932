"""File formats."""

from .fasta import write_record, write_records

__all__ = ["write_record", "write_records"]
