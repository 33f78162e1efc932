"""Run manifest: enough to reproduce a generation run from its seed."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any


@dataclass(slots=True)
class Manifest:
    """Record of one generation run.

    ``config`` holds the resolved settings (seed and run-length weights
    included), ``stats`` the composition and run-length summary of the
    reference, and ``outputs`` the FASTA files written.
    """

    run_id: str
    timestamp: datetime
    version: str
    config: dict[str, Any]
    stats: dict[str, Any] = field(default_factory=dict)
    outputs: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "run_id": self.run_id,
            "timestamp": self.timestamp.isoformat(),
            "version": self.version,
            "config": self.config,
            "stats": self.stats,
            "outputs": self.outputs,
        }

    def save(self, path: str | Path) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        return target

    @staticmethod
    def load(path: str | Path) -> "Manifest":
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return Manifest(
            run_id=data["run_id"],
            timestamp=datetime.fromisoformat(data["timestamp"]),
            version=data["version"],
            config=data["config"],
            stats=data["stats"],
            outputs=data["outputs"],
        )
