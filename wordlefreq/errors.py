"""
Exception types shared across the engine, solvers and harness.

The solver loop treats EmptyCandidates as a normal outcome (Exhausted), so
nothing in here is expected to reach the top of a run except bad input at
the dictionary boundary.
"""

from __future__ import annotations


class WordleFreqError(Exception):
    """Base class for all wordlefreq errors."""


class EmptyCandidates(WordleFreqError, ValueError):
    """Raised when a guess is requested from an empty candidate list."""

    def __init__(self, message: str = "no candidates left to choose a guess from"):
        super().__init__(message)


class MalformedWord(WordleFreqError, ValueError):
    """A dictionary entry or answer that is not a clean N-letter a–z token."""

    def __init__(self, word: str, N: int):
        self.word = word
        self.N = N
        super().__init__(f"malformed word {word!r}: expected {N} lowercase letters a-z")
