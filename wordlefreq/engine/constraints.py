"""
Candidate filtering given game history.

Given:
  - a pool of words (the current candidates)
  - a history of (guess, score) pairs

Return:
  - a NEW list holding the words consistent with ALL feedback seen so far.

A word stays a candidate only if guessing the same word against it would
reproduce the identical score. The input list is never mutated, so the
candidate set can only shrink from one turn to the next.
"""

from typing import Iterable, List, Tuple
from .matching import Score, still_possible

History = Iterable[Tuple[str, Score]]  # (guess, score)


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Args:
      words   : iterable of candidate words
      history : iterable of (guess, score) seen so far

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    history = list(history)
    out: List[str] = []

    for w in words:
        if all(still_possible(g, s, w) for g, s in history):
            out.append(w)

    return out
