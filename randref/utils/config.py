"""Configuration utilities."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

try:
    import yaml
except ImportError:  # pragma: no cover - optional dependency
    yaml = None

from randref.generation.weights import RunLengthWeights

_PATH_FIELDS = ("sequence_out", "subsequence_out", "manifest_out")


@dataclass(slots=True)
class GeneratorConfig:
    """Everything one run needs: lengths, output targets and the model."""

    length: int
    sequence_out: Path
    subsequence_length: int | None = None
    subsequence_out: Path | None = None
    fasta_linewidth: int | None = None
    seed: int | None = None
    manifest_out: Path | None = None
    weights: RunLengthWeights = field(default_factory=RunLengthWeights)

    def validate(self) -> None:
        """Reject inconsistent settings before anything is generated or written."""
        if self.length < 0:
            raise ValueError(f"length must be non-negative, got {self.length}")
        if (self.subsequence_length is None) != (self.subsequence_out is None):
            raise ValueError("subsequence_length and subsequence_out must be given together")
        if self.subsequence_length is not None:
            if self.subsequence_length < 0:
                raise ValueError(
                    f"subsequence_length must be non-negative, got {self.subsequence_length}"
                )
            if self.subsequence_length > self.length:
                raise ValueError(
                    f"subsequence_length ({self.subsequence_length}) exceeds "
                    f"length ({self.length})"
                )
        if self.fasta_linewidth is not None and self.fasta_linewidth <= 0:
            raise ValueError(
                f"fasta_linewidth must be a positive integer, got {self.fasta_linewidth}"
            )

    def as_dict(self) -> dict[str, Any]:
        return {
            "length": self.length,
            "sequence_out": str(self.sequence_out),
            "subsequence_length": self.subsequence_length,
            "subsequence_out": str(self.subsequence_out) if self.subsequence_out else None,
            "fasta_linewidth": self.fasta_linewidth,
            "seed": self.seed,
            "manifest_out": str(self.manifest_out) if self.manifest_out else None,
            "weights": self.weights.as_dict(),
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GeneratorConfig:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        if data.get("length") is None:
            raise ValueError("length is required")
        if data.get("sequence_out") is None:
            raise ValueError("sequence_out is required")

        values = dict(data)
        for key in _PATH_FIELDS:
            if values.get(key) is not None:
                values[key] = Path(values[key])
        values["weights"] = RunLengthWeights.from_mapping(values.get("weights"))
        return cls(**values)


def load_config(path: Path) -> dict[str, Any]:
    """Read a YAML or JSON config file into a plain mapping."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    if path.suffix.lower() in {".json"}:
        data = json.loads(path.read_text())
    else:
        if yaml is None:
            raise RuntimeError("pyyaml is required for YAML configs. Install with `pip install pyyaml`. ")
        data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data
