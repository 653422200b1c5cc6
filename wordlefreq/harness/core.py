"""
Solver loop primitives.

- Running / Solved / Exhausted: the three states of one game.
- step:      a single guess -> score -> filter transition.
- solve:     drive `step` from the full dictionary to a terminal state.
- run_case:  solve one answer and flatten the outcome into a result dict.
- run_batch: run many answers in sequence (optionally a sample prefix).

There is no turn limit. A non-winning guess is always dropped from the
candidates (even a prefix of the answer, which scores all-exact against
itself), so a game ends after at most len(words) guesses, either Solved or
Exhausted (the answer was not in the dictionary).

These functions are UI-agnostic; reporting goes through the optional
`report` callback, which receives an Observation per non-terminal turn.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from ..engine import filter_candidates, is_finished, pattern_string, score_word
from ..engine.matching import Score
from ..errors import EmptyCandidates
from ..solvers import BaseSolver, create_solver

log = logging.getLogger(__name__)

History = Tuple[Tuple[str, Score], ...]


@dataclass(frozen=True)
class Running:
    attempts: int                  # number of the guess about to be made (1-based)
    candidates: Tuple[str, ...]
    last_guess: Optional[str] = None
    history: History = ()


@dataclass(frozen=True)
class Solved:
    guess: str
    score: Score
    attempts: int
    history: History = ()


@dataclass(frozen=True)
class Exhausted:
    last_guess: Optional[str]
    attempts: int                  # guesses made before running out
    history: History = ()


State = Union[Running, Solved, Exhausted]


@dataclass(frozen=True)
class Observation:
    guess: str
    score: Score
    remaining: int


Reporter = Callable[[Observation], None]


def step(state: Running, answer: str, solver: BaseSolver,
         report: Optional[Reporter] = None) -> State:
    """Advance a running game by one guess."""
    if not state.candidates:
        log.debug("no candidates left after %d guesses", state.attempts - 1)
        return Exhausted(state.last_guess, state.attempts - 1, state.history)

    try:
        guess = solver.next_guess({
            "turn": state.attempts,
            "candidates": state.candidates,
            "history": state.history,
            "N": solver.N,
        })
    except EmptyCandidates:
        return Exhausted(state.last_guess, state.attempts - 1, state.history)

    score = score_word(guess, answer)
    history = state.history + ((guess, score),)

    if is_finished(score, len(answer)):
        return Solved(guess, score, state.attempts, history)

    # a non-winning guess never stays a candidate, even a prefix of the answer
    remaining = tuple(c for c in filter_candidates(state.candidates, [(guess, score)])
                      if c != guess)
    log.debug("turn %d: %s %s -> %d remaining",
              state.attempts, guess, pattern_string(score), len(remaining))
    if report is not None:
        report(Observation(guess, score, len(remaining)))

    return Running(state.attempts + 1, remaining, guess, history)


def solve(
        answer: str,
        words: Sequence[str],
        *,
        N: Optional[int] = None,
        solver: Optional[BaseSolver] = None,
        report: Optional[Reporter] = None,
) -> Union[Solved, Exhausted]:
    """
    Guess until `answer` is found or the candidates run out.

    Args:
        answer:  the hidden word
        words:   the dictionary; its order decides every tie-break
        N:       word length (defaults to len(answer))
        solver:  a BaseSolver; defaults to the average-word solver
        report:  called with an Observation after each non-winning guess

    Returns:
        the terminal state, Solved or Exhausted
    """
    if N is None:
        N = len(answer)
    if solver is None:
        solver = create_solver()
    solver.reset(N=N)

    state: State = Running(1, tuple(words))
    while isinstance(state, Running):
        state = step(state, answer, solver, report)
    return state


def run_case(solver: BaseSolver, answer: str, *, words: Sequence[str], N: int) -> Dict:
    """
    Solve one answer and return a dict with keys:
        answer (str), success (bool), outcome ("solved" | "exhausted"),
        guesses (int), time_ms (float), history (list[(guess, pattern)])
    """
    t0 = time.perf_counter()
    final = solve(answer, words, N=N, solver=solver)
    dt = (time.perf_counter() - t0) * 1000.0

    success = isinstance(final, Solved)
    return {
        "answer": answer,
        "success": success,
        "outcome": "solved" if success else "exhausted",
        "guesses": final.attempts,
        "time_ms": dt,
        "history": [(g, pattern_string(s)) for g, s in final.history],
    }


def run_batch(
        solver: BaseSolver,
        answers: Sequence[str],
        *,
        words: Sequence[str],
        N: int,
        sample: Optional[int] = None,
        progress: Optional[Callable] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used to speed up quick experiments. `progress` may wrap the
    answer iterable (e.g. tqdm).
    """
    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    iterable = progress(pool) if progress is not None else pool
    out: List[Dict] = []
    for ans in iterable:
        r = run_case(solver, ans, words=words, N=N)
        r["solver_id"] = solver.id
        out.append(r)
    return out
