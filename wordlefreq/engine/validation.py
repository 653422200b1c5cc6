"""
Word shape checks used at the dictionary boundary.

A word is well-formed iff:
  - it is a string
  - it is lowercase a–z only
  - it has exact length N

The matching engine itself never calls these: it accepts any strings and
sizes them by their own length. Loading rejects malformed entries instead,
so a dictionary that reaches the solver is uniform.
"""

from __future__ import annotations

from ..errors import MalformedWord


def is_valid_word(word: object, N: int) -> bool:
    if not isinstance(word, str):
        return False
    return len(word) == N and word.isascii() and word.isalpha() and word.islower()


def check_word(word: str, N: int) -> str:
    """Return `word` normalized (stripped, lowercased) or raise MalformedWord."""
    w = word.strip().lower() if isinstance(word, str) else word
    if not is_valid_word(w, N):
        raise MalformedWord(str(word), N)
    return w
