"""randref command-line interface."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from randref.pipeline import run
from randref.utils.config import GeneratorConfig, load_config
from randref.utils.logging import get_logger


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="randref",
        description="Generate a random reference sequence with repetitive runs as FASTA",
    )
    parser.add_argument("-l", "--length", type=_non_negative_int, help="Reference length")
    parser.add_argument(
        "-s",
        "--subsequence-length",
        type=_non_negative_int,
        help="Also emit the trailing N bases and their reverse complement",
    )
    parser.add_argument("--sequence-out", type=Path, help="FASTA output for the reference")
    parser.add_argument(
        "--subsequence-out",
        type=Path,
        help="FASTA output for the subsequence and its reverse complement",
    )
    parser.add_argument(
        "--fasta-linewidth",
        type=_positive_int,
        help="Wrap sequence lines at this width (default: one line per record)",
    )
    parser.add_argument("--seed", type=int, help="Random seed (default: system entropy)")
    parser.add_argument(
        "--single-run-bonus",
        type=float,
        help="Extra weight given to runs of length 1 (default: 2000)",
    )
    parser.add_argument("--config", type=Path, help="Path to YAML/JSON config file")
    parser.add_argument("--manifest-out", type=Path, help="Write a JSON run manifest here")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging verbosity (default: INFO)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    get_logger(level=args.log_level)

    if (args.subsequence_length is None) != (args.subsequence_out is None) and args.config is None:
        parser.error("--subsequence-length and --subsequence-out must be given together")

    data = _merge_options(args)
    if data.get("length") is None:
        parser.error("--length is required")
    if data.get("sequence_out") is None:
        parser.error("--sequence-out is required")

    config = GeneratorConfig.from_mapping(data)
    run(config)
    print("Done.")
    return 0


def _merge_options(args: argparse.Namespace) -> dict[str, Any]:
    """Combine the optional config file with CLI flags; flags win."""
    data: dict[str, Any] = load_config(args.config) if args.config else {}

    for key in (
        "length",
        "subsequence_length",
        "sequence_out",
        "subsequence_out",
        "fasta_linewidth",
        "seed",
        "manifest_out",
    ):
        value = getattr(args, key)
        if value is not None:
            data[key] = value

    if args.single_run_bonus is not None:
        weights = dict(data.get("weights") or {})
        weights["single_bonus"] = args.single_run_bonus
        data["weights"] = weights
    return data


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
