from .validator import validate_wordlist, pretty_summary
from .io import DEFAULT_WORDS, LoadResult, load_words, read_lines, write_lines

__all__ = [
    "validate_wordlist", "pretty_summary",
    "DEFAULT_WORDS", "LoadResult", "load_words", "read_lines", "write_lines",
]
