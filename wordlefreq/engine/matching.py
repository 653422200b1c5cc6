"""
Word matching and scoring for a single (guess, answer) pair.

Conventions:
  - EXACT   : letter occupies the same position in the answer  (rendered ■ / 'G')
  - PRESENT : letter corresponds to another, unclaimed position (rendered ▪ / 'Y')
  - ABSENT  : no unclaimed position in the answer holds the letter (rendered □ / '-')

Algorithm (two-pass, order matters for duplicate letters):
  1) Exact pass: every position whose letters agree is connected to itself.
  2) Leftover pass: for each still-unconnected guess position (ascending),
     connect it to the first answer position (ascending) that is not the
     same position, is not already claimed, and holds the same letter.

The leftover pass is greedy: the first available position wins. This is the
intended behaviour and it is what every other module in the package assumes
when it compares two scores.

Words are sized by their own length, so comparing words of different
lengths never raises; the correspondence always has len(guess) entries.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Sequence, Set, Tuple


class Feedback(Enum):
    ABSENT = 0
    PRESENT = 1
    EXACT = 2


# A correspondence holds, per guess position, the 1-based answer position it
# is connected to, or 0 for no connection.
Correspondence = List[int]
Score = Tuple[Feedback, ...]

SCORE_VALUES: Dict[Feedback, float] = {
    Feedback.EXACT: 1.0,
    Feedback.PRESENT: 0.5,
    Feedback.ABSENT: 0.0,
}

GLYPHS: Dict[Feedback, str] = {
    Feedback.EXACT: "■",
    Feedback.PRESENT: "▪",
    Feedback.ABSENT: "□",
}

PATTERN_CHARS: Dict[Feedback, str] = {
    Feedback.EXACT: "G",
    Feedback.PRESENT: "Y",
    Feedback.ABSENT: "-",
}


def _connect_exact(guess: str, answer: str, match: Correspondence, claimed: Set[int]) -> None:
    for i, (g, a) in enumerate(zip(guess, answer), start=1):
        if g == a:
            match[i - 1] = i
            claimed.add(i)


def _connect_leftover(guess: str, i: int, answer: str, match: Correspondence,
                      claimed: Set[int]) -> None:
    letter = guess[i - 1]
    for j, a in enumerate(answer, start=1):
        if j == i or j in claimed:
            continue
        if letter == a:
            match[i - 1] = j
            claimed.add(j)
            return


def align(guess: str, answer: str) -> Correspondence:
    """
    Connect guess positions to answer positions, exact matches first.

    Examples:
      align("count", "could") -> [1, 2, 3, 0, 0]
      align("duloc", "could") -> [5, 3, 4, 2, 1]
    """
    match: Correspondence = [0] * len(guess)
    claimed: Set[int] = set()

    _connect_exact(guess, answer, match, claimed)

    for i in range(1, len(guess) + 1):
        if match[i - 1] == 0:
            _connect_leftover(guess, i, answer, match, claimed)

    return match


def score_match(match: Sequence[int]) -> Score:
    """Translate a correspondence into per-position feedback."""
    out: List[Feedback] = []
    for i, j in enumerate(match, start=1):
        if j == i:
            out.append(Feedback.EXACT)
        elif j != 0:
            out.append(Feedback.PRESENT)
        else:
            out.append(Feedback.ABSENT)
    return tuple(out)


def score_word(guess: str, answer: str) -> Score:
    """
    Score `guess` against `answer`.

    Examples:
      score_word("sound", "could") -> (ABSENT, EXACT, EXACT, ABSENT, EXACT)
      score_word("occur", "could") -> (PRESENT, PRESENT, ABSENT, PRESENT, ABSENT)
    """
    return score_match(align(guess, answer))


def still_possible(guess: str, score: Score, candidate: str) -> bool:
    """True if `candidate` as the answer would have produced `score` for `guess`."""
    return score_word(guess, candidate) == tuple(score)


def is_finished(score: Score, n: Optional[int] = None) -> bool:
    """
    Every position exact. When `n` is given the score must also cover exactly
    n positions, so a short guess that happens to be a prefix does not count.
    """
    if n is not None and len(score) != n:
        return False
    return all(s is Feedback.EXACT for s in score)


def value_of_score(score: Score) -> float:
    return sum(SCORE_VALUES[s] for s in score)


def graphic_score(score: Score) -> str:
    return "".join(GLYPHS[s] for s in score)


def pattern_string(score: Score) -> str:
    """Compact ASCII form, e.g. "-GG-G". Used for CSV columns and log lines."""
    return "".join(PATTERN_CHARS[s] for s in score)
