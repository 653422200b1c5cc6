"""
wordlefreq: a positional-frequency Wordle solver.

Guesses the dictionary word nearest to the "average word" of the remaining
candidates, scores it against the hidden answer, and filters until solved.
"""

__version__ = "1.0.0"

from .errors import WordleFreqError, EmptyCandidates, MalformedWord

__all__ = ["WordleFreqError", "EmptyCandidates", "MalformedWord", "__version__"]
