from __future__ import annotations

from typing import Dict, List

import numpy as np


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch of run_case results.

    Guess statistics cover solved games only; exhausted games are counted
    separately. The histogram maps guess count -> number of solved games.
    All values are plain Python types so the dict is JSON-serializable.
    """
    solved = np.array([r["guesses"] for r in results if r["success"]], dtype=np.int64)
    out: Dict = {
        "games": len(results),
        "solved": int(solved.size),
        "exhausted": len(results) - int(solved.size),
        "mean_guesses": None,
        "median_guesses": None,
        "max_guesses": None,
        "histogram": {},
    }
    if solved.size == 0:
        return out

    counts = np.bincount(solved)
    out["mean_guesses"] = round(float(solved.mean()), 4)
    out["median_guesses"] = float(np.median(solved))
    out["max_guesses"] = int(solved.max())
    out["histogram"] = {int(k): int(c) for k, c in enumerate(counts) if c}
    return out


def pretty_stats(summary: Dict) -> str:
    """
    One-liner for the console, e.g.
        games=40 | solved=40 | exhausted=0 | mean=3.275 | median=3.0 | max=6 | 1:1 2:7 3:15 ...
    """
    hist = " ".join(f"{k}:{v}" for k, v in summary["histogram"].items())
    mean = summary["mean_guesses"]
    return (
        f"games={summary['games']} | solved={summary['solved']} "
        f"| exhausted={summary['exhausted']} "
        f"| mean={'-' if mean is None else f'{mean:.3f}'} "
        f"| median={summary['median_guesses'] if summary['median_guesses'] is not None else '-'} "
        f"| max={summary['max_guesses'] if summary['max_guesses'] is not None else '-'} "
        f"| {hist}"
    ).rstrip(" |")
