# apps/cli/solve.py
"""
CLI entry point: solve one hidden word against a dictionary.

Prints one line per guess:
    sound □■■□■ with 4 remaining words
and finally either
    could ■■■■■ in 3 attempts
or an exhaustion message if the answer is not in the dictionary.

Exit codes: 0 solved, 1 exhausted, 2 bad input.
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordlefreq.datasets import DEFAULT_WORDS, load_words
from wordlefreq.engine import check_word, graphic_score
from wordlefreq.errors import MalformedWord
from wordlefreq.harness import Observation, Solved, solve
from wordlefreq.solvers import DEFAULT_SOLVER, create_solver, get_solver_ids

log = logging.getLogger("wordlefreq.cli")


def _print_observation(obs: Observation) -> None:
    print(f"{obs.guess} {graphic_score(obs.score)} with {obs.remaining} remaining words")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordlefreq — solve one word")
    ap.add_argument("answer", help="the hidden word")
    ap.add_argument("--words", default=str(DEFAULT_WORDS),
                    help="path to the dictionary (one word per line)")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        answer = check_word(args.answer, args.N)
        words = load_words(args.words, args.N).words
        solver = create_solver(args.solver)
    except (FileNotFoundError, MalformedWord, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if answer not in words:
        log.warning("%r is not in %s; expect exhaustion", answer, args.words)

    final = solve(answer, words, N=args.N, solver=solver, report=_print_observation)

    if isinstance(final, Solved):
        print(f"{final.guess} {graphic_score(final.score)} in {final.attempts} attempts")
        return 0

    print(f"no candidates left after {final.attempts} guesses "
          f"(last guess: {final.last_guess or '-'}); is {answer!r} in the dictionary?")
    return 1


if __name__ == "__main__":
    sys.exit(main())
