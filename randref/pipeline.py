"""Generate a reference, write it, and optionally emit a trailing contig pair."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from randref import __version__
from randref.core.complement import reverse_complement
from randref.core.sequence import Sequence
from randref.core.stats import RunStats, compute_stats
from randref.generation.generator import REFERENCE_ID, RunLengthGenerator
from randref.io.fasta import write_records
from randref.manifests import Manifest
from randref.utils.config import GeneratorConfig

_LOGGER = logging.getLogger(__name__)

CONTIG_ID = "random_contig"
CONTIG_REV_ID = "random_contig_rev"


@dataclass(slots=True)
class RunResult:
    config: GeneratorConfig
    reference: Sequence
    stats: RunStats
    contig: Sequence | None = None
    contig_rev: Sequence | None = None
    manifest: Manifest | None = None

    @property
    def outputs(self) -> dict[str, str]:
        paths = {"sequence_out": str(self.config.sequence_out)}
        if self.config.subsequence_out is not None:
            paths["subsequence_out"] = str(self.config.subsequence_out)
        return paths


def run(config: GeneratorConfig) -> RunResult:
    """Run one generation end to end.

    The config is validated before any sequence is generated or file opened, so
    an oversized subsequence leaves no output behind. Each output file is
    closed before the next one is opened.
    """
    config.validate()

    generator = RunLengthGenerator(weights=config.weights, seed=config.seed)
    reference = generator.generate(config.length, id=REFERENCE_ID)
    stats = compute_stats(reference)
    _LOGGER.info(
        "Generated %s: %d bases in %s runs (seed=%s)",
        reference.id,
        len(reference),
        reference.metadata.get("runs"),
        config.seed,
    )
    _LOGGER.info(
        "GC fraction %.4f, mean run length %.3f, longest run %d",
        stats.gc_fraction,
        stats.mean_run_length,
        stats.longest_run,
    )

    _write_fasta(config.sequence_out, [(reference.id, reference)], config.fasta_linewidth)
    result = RunResult(config=config, reference=reference, stats=stats)

    if config.subsequence_length is not None and config.subsequence_out is not None:
        contig = reference.tail(config.subsequence_length, id=CONTIG_ID)
        contig_rev = reverse_complement(contig, id=CONTIG_REV_ID)
        _write_fasta(
            config.subsequence_out,
            [(contig.id, contig), (contig_rev.id, contig_rev)],
            config.fasta_linewidth,
        )
        result.contig = contig
        result.contig_rev = contig_rev

    if config.manifest_out is not None:
        result.manifest = build_manifest(result)
        result.manifest.save(config.manifest_out)
        _LOGGER.info("Wrote manifest to %s", config.manifest_out)

    return result


def build_manifest(result: RunResult) -> Manifest:
    return Manifest(
        run_id=uuid.uuid4().hex,
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        config=result.config.as_dict(),
        stats=result.stats.as_dict(),
        outputs=result.outputs,
    )


def _write_fasta(
    path: Path,
    records: list[tuple[str, Sequence]],
    line_width: int | None,
) -> None:
    with open(path, "w", encoding="ascii", newline="\n") as handle:
        write_records(records, handle, line_width)
    _LOGGER.info("Wrote %s to %s", ", ".join(name for name, _ in records), path)


__all__ = [
    "CONTIG_ID",
    "CONTIG_REV_ID",
    "RunResult",
    "build_manifest",
    "run",
]
