"""
Positional letter frequencies and the synthetic "average word".

Idea:
  Build one histogram per position from the CURRENT candidate set, then
  assemble an imaginary word from the most frequent letter in each slot.
  The average word need not be in the dictionary; the solver only uses it
  as a target to score real candidates against.

Tables are plain dicts so iteration follows insertion order, which makes
the tie-break "first letter seen wins" deterministic for a fixed input order.
The tables are rebuilt from scratch every turn.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

WORD_SIZE = 5

# Per position: letter -> occurrence count.
FrequencyTable = List[Dict[str, int]]

# Filler for a slot nobody tallied (only possible with short words).
BLANK = " "


def build_frequencies(words: Iterable[str], N: int = WORD_SIZE) -> FrequencyTable:
    """
    Count the letter at each of the first N positions of every word.

    Example:
      build_frequencies(["tiger", "spoor", "sheer"])[0] -> {"t": 1, "s": 2}
    """
    table: FrequencyTable = [{} for _ in range(N)]
    for w in words:
        for i, ch in enumerate(w[:N]):
            table[i][ch] = table[i].get(ch, 0) + 1
    return table


def most_frequent(counts: Dict[str, int]) -> str:
    """Letter with the strictly-highest count; the earliest one wins ties."""
    best_ch, best_count = BLANK, 0
    for ch, c in counts.items():
        if c > best_count:
            best_ch, best_count = ch, c
    return best_ch


def find_average_word(table: FrequencyTable) -> str:
    """
    Example:
      find_average_word(build_frequencies(["tiger", "spoor", "sheer"])) -> "shger"
    """
    return "".join(most_frequent(counts) for counts in table)
