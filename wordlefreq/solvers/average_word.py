"""
Average-Word solver (positional frequency, nearest real word).

Idea:
  - Build per-position letter histograms over the CURRENT candidate set.
  - Assemble an imaginary "average word" from the top letter of each slot.
  - Score every candidate against the average word and value the result
    (exact = 1.0, present = 0.5, absent = 0.0). Guess the best one.

Ties go to the candidate seen first, so the same candidate order always
yields the same guess. Nothing here is random.

This is a greedy heuristic, not an information-theoretic one; it does not
try to minimise the number of guesses.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .base import BaseSolver, register
from ..engine.frequency import WORD_SIZE, build_frequencies, find_average_word
from ..engine.matching import score_word, value_of_score
from ..errors import EmptyCandidates

log = logging.getLogger(__name__)


def select(average: str, candidates: Sequence[str]) -> str:
    """
    Pick the real candidate nearest to `average`.

    Raises:
      EmptyCandidates if `candidates` is empty.

    Example:
      select("shger", ["tiger", "spoor", "sheer"]) -> "sheer"
    """
    best_word = None
    best_value = 0.0
    for w in candidates:
        value = value_of_score(score_word(w, average))
        if best_word is None or value > best_value:
            best_word, best_value = w, value

    if best_word is None:
        raise EmptyCandidates()
    return best_word


def guess_word(candidates: Sequence[str], N: int = WORD_SIZE) -> str:
    """Frequencies -> average word -> nearest candidate."""
    if not candidates:
        raise EmptyCandidates()
    average = find_average_word(build_frequencies(candidates, N))
    guess = select(average, candidates)
    log.debug("average word %r over %d candidates -> guess %r", average, len(candidates), guess)
    return guess


@register
class AverageWordSolver(BaseSolver):
    id = "average_word"
    name = "Average Word (positional frequency)"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        return guess_word(candidates, state.get("N", self.N))
