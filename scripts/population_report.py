#!/usr/bin/env python3
"""
Faith & AI Profile Engine — Scoring and Population Report CLI

Provides two subcommands:

  score      — Score one respondent and print the profile spectrum.
  aggregate  — Score a collection of respondents and print population stats.

Answer files are JSON: a single object for ``score``; a JSON array or
JSON-lines (one object per line) for ``aggregate``.

Usage examples
--------------
  # Profile spectrum plus validated scales for one respondent
  python scripts/population_report.py score answers.json

  # Score against measured population parameters from an earlier report
  python scripts/population_report.py score answers.json --population stats.json

  # Population report with summary table
  python scripts/population_report.py aggregate responses.jsonl

  # Raw JSON only, written to a file
  python scripts/population_report.py aggregate responses.json --json -o stats.json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

# Ensure the project root is importable
sys.path.insert(0, ".")

from faithprofile.catalog import DIMENSION_LABELS, DIMENSIONS, PROFILES_BY_ID
from faithprofile.config import get_settings
from faithprofile.engine import ScoringEngine
from faithprofile.exceptions import FaithProfileError
from faithprofile.logging_config import configure_logging
from faithprofile.schemas.population import PopulationStats


# ──────────────────────────────────────────────────────────────────────────────
# Input
# ──────────────────────────────────────────────────────────────────────────────

def load_answer_sets(path: Path) -> list[dict[str, Any]]:
    """Read a JSON array, a single JSON object or JSON-lines."""
    text = path.read_text(encoding="utf-8").strip()
    if not text:
        return []
    if text.startswith("["):
        return json.loads(text)
    try:
        return [json.loads(text)]
    except json.JSONDecodeError:
        return [json.loads(line) for line in text.splitlines() if line.strip()]


def _write(payload: str, output: Path | None) -> None:
    if output is None:
        print(payload)
    else:
        output.write_text(payload + "\n", encoding="utf-8")
        print(f"  Written to {output}")


# ──────────────────────────────────────────────────────────────────────────────
# Subcommand: score
# ──────────────────────────────────────────────────────────────────────────────

def cmd_score(args: argparse.Namespace, engine: ScoringEngine) -> None:
    """Print the profile spectrum and validated scales for one respondent."""
    answer_sets = load_answer_sets(args.answers)
    if len(answer_sets) != 1:
        raise FaithProfileError(f"expected one answer set, found {len(answer_sets)}")
    answers = answer_sets[0]

    population = None
    if args.population is not None:
        stats = PopulationStats.model_validate_json(args.population.read_text(encoding="utf-8"))
        population = stats.to_population_parameters()
        if population is None:
            print("  Population file has no data; using provisional parameters.", file=sys.stderr)

    spectrum = engine.compute_profile_spectrum(answers, population)
    validated = engine.compute_validated_scores(answers)

    if not args.json:
        primary = PROFILES_BY_ID[spectrum.primary.profile_id]
        print(f"\n{'=' * 60}")
        print(f"  {spectrum.interpretation.headline}")
        print(f"{'=' * 60}")
        print(f"  Primary:     {primary.title} ({spectrum.primary.match_score}%)")
        if spectrum.secondary is not None:
            secondary = PROFILES_BY_ID[spectrum.secondary.profile_id]
            print(f"  Secondary:   {secondary.title} ({spectrum.secondary.match_score}%)")
        print(f"  Sub-profile: {spectrum.sub_profile.profile_id}")

        print(f"\n  Dimensions:")
        for dimension in DIMENSIONS:
            score = spectrum.dimensions.get(dimension)
            print(
                f"    {DIMENSION_LABELS[dimension]:<32} {score.value:>4.1f}  "
                f"p{score.percentile:<3.0f} conf={score.confidence:.2f}"
            )

        print(f"\n  Validated scales:")
        print(f"    CRS-5:            {validated.crs5} ({validated.religiosity_level})")
        print(f"    AI adoption:      {validated.ai_adoption} ({validated.ai_adoption_level})")
        print(f"    Resistance index: {validated.resistance_index} ({validated.resistance_level})")
        print(f"    Bias:             {validated.bias_adjustment} "
              f"({validated.bias_items_answered} items)")
        print(f"{'=' * 60}\n")

    if not (args.json or args.output is not None):
        return
    payload = {
        "spectrum": spectrum.model_dump(mode="json"),
        "validated_scores": validated.model_dump(mode="json"),
    }
    _write(json.dumps(payload, indent=2, ensure_ascii=False), args.output)


# ──────────────────────────────────────────────────────────────────────────────
# Subcommand: aggregate
# ──────────────────────────────────────────────────────────────────────────────

def cmd_aggregate(args: argparse.Namespace, engine: ScoringEngine) -> None:
    """Print population statistics for a collection of respondents."""
    stats = engine.aggregate(load_answer_sets(args.answers))

    if not args.json:
        print(f"\n{'=' * 60}")
        print(f"  Population Report")
        print(f"{'=' * 60}")
        print(f"  Respondents:          {stats.n}")
        print(f"  Confidence:           {stats.caveat.confidence_level}")
        print(f"  Recalibration ready:  {stats.recalibration_ready}")

        print(f"\n  Dimensions:")
        for dimension in DIMENSIONS:
            dim_stats = stats.dimensions[dimension]
            if dim_stats is None:
                print(f"    {DIMENSION_LABELS[dimension]:<32} no data")
                continue
            print(
                f"    {DIMENSION_LABELS[dimension]:<32} mean={dim_stats.mean:.2f} "
                f"sd={dim_stats.stddev:.2f} median={dim_stats.median:.2f}"
            )

        print(f"\n  Profiles:")
        for profile_id, count in stats.profile_histogram.items():
            print(f"    {PROFILES_BY_ID[profile_id].title:<28} {count}")

        if stats.key_findings:
            print(f"\n  Key findings:")
            for finding in stats.key_findings:
                print(f"    [{finding.significance}] {finding.title}: {finding.description}")
        print(f"{'=' * 60}\n")

    if args.json or args.output is not None:
        _write(stats.model_dump_json(indent=2), args.output)


# ──────────────────────────────────────────────────────────────────────────────
# Entry point
# ──────────────────────────────────────────────────────────────────────────────

def main() -> None:
    parser = argparse.ArgumentParser(
        description="Faith & AI Profile Engine: score respondents and report on populations.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: LOG_LEVEL setting).",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available subcommands",
    )

    # ── score ─────────────────────────────────────────────────────────
    score_parser = subparsers.add_parser(
        "score",
        help="Score one respondent and print the profile spectrum.",
    )
    score_parser.add_argument("answers", type=Path, help="JSON file with one answer object.")
    score_parser.add_argument(
        "--population",
        type=Path,
        default=None,
        help="Population stats JSON from 'aggregate --json' to score against.",
    )

    # ── aggregate ─────────────────────────────────────────────────────
    aggregate_parser = subparsers.add_parser(
        "aggregate",
        help="Score a collection of respondents and print population stats.",
    )
    aggregate_parser.add_argument(
        "answers", type=Path, help="JSON array or JSON-lines file of answer objects.",
    )

    for sub in (score_parser, aggregate_parser):
        sub.add_argument(
            "--json",
            action="store_true",
            default=False,
            help="Output raw JSON instead of the summary.",
        )
        sub.add_argument(
            "--output", "-o",
            type=Path,
            default=None,
            help="Write the JSON output to this file.",
        )

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    settings = get_settings()
    configure_logging(args.log_level or settings.LOG_LEVEL)

    try:
        engine = ScoringEngine(settings)
        if args.command == "score":
            cmd_score(args, engine)
        elif args.command == "aggregate":
            cmd_aggregate(args, engine)
        else:
            parser.print_help()
            sys.exit(1)
    except FaithProfileError as exc:
        print(f"  Error: {exc}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
