from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, NamedTuple

from ..engine.validation import is_valid_word

log = logging.getLogger(__name__)

# Bundled sample dictionary of 5-letter words.
DEFAULT_WORDS = Path(__file__).resolve().parent / "data" / "words_5.txt"


class LoadResult(NamedTuple):
    words: List[str]
    skipped: int     # malformed entries rejected at load time


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_words(p: Path | str, N: int) -> LoadResult:
    """
    Load a newline-delimited dictionary of N-letter words.

    Lines are stripped and lowercased; blank lines are ignored. Anything that
    is not N letters a–z is skipped and counted. Repeated words keep their
    first position only. File order is preserved since it drives tie-breaks.
    """
    words: List[str] = []
    seen = set()
    skipped = 0
    for raw in read_lines(p):
        w = raw.strip().lower()
        if not w:
            continue
        if not is_valid_word(w, N):
            log.debug("skipping malformed entry %r", raw)
            skipped += 1
            continue
        if w not in seen:
            seen.add(w)
            words.append(w)

    if skipped:
        log.warning("skipped %d malformed entr%s in %s", skipped, "y" if skipped == 1 else "ies", p)
    log.info("loaded %d words from %s", len(words), p)
    return LoadResult(words, skipped)
