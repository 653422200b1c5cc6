# apps/cli/run_batch.py
"""
CLI entry point for batch experiments.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Loads the words and instantiates the requested solver.
  3) Solves every word of the dictionary (or a deterministic sample) with a
     live progress bar and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, dictionary report, summary, git commit
  4) Prints the summary statistics.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from functools import partial
from pathlib import Path

from tqdm import tqdm

from wordlefreq.datasets import DEFAULT_WORDS, load_words, pretty_summary, validate_wordlist
from wordlefreq.harness import pretty_stats, run_batch, summarize
from wordlefreq.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest
from wordlefreq.solvers import DEFAULT_SOLVER, create_solver, get_solver_ids


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordlefreq — run solver experiments")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--words", default=str(DEFAULT_WORDS),
                    help="path to the dictionary (also the set of answers to solve)")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show run progress (auto=bar when stderr is a terminal)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate and print a one-liner summary
    rep = validate_wordlist(args.N, args.words)
    print(pretty_summary(rep))
    if not rep["exists"]:
        print(f"error: word list not found: {args.words}", file=sys.stderr)
        return 2

    # 2) Load words (malformed lines skipped) and the solver
    words = load_words(args.words, args.N).words
    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # 3) Choose cases (deterministic sample by seed)
    cases = list(words)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"
    progress = partial(tqdm, ncols=80, desc="Solving", unit="game", disable=(mode == "off"))

    results = run_batch(solver, cases, words=words, N=args.N, progress=progress)
    summary = summarize(results)

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), N=args.N)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "summary": summary,
    }, str(manifest_path))

    print(pretty_stats(summary))
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
