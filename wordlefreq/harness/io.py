"""
Writing batch-run outputs to disk.

A batch run leaves two files next to each other in the output directory:
the per-game CSV (one row per solved or exhausted answer, followed by
that game's guesses) and a JSON manifest describing how the run was made.
The solver has no turn limit, so the CSV is as wide as the longest game.

Score patterns are written with a leading apostrophe; spreadsheet apps
would otherwise parse "-GG-G" as a formula.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

BASE_COLUMNS = ["solver", "N", "answer", "success", "outcome", "guesses", "time_ms"]


def _as_text_cell(patt: str) -> str:
    return "'" + patt if patt else patt


def _turn_columns(width: int) -> List[str]:
    cols: List[str] = []
    for i in range(1, width + 1):
        cols += [f"guess_{i}", f"patt_{i}"]
    return cols


def _flatten_result(r: Dict, N: int, width: int) -> Dict:
    """One run_case result -> one CSV row; short games get empty trailing cells."""
    row = {
        "solver": r.get("solver_id", "?"),
        "N": N,
        "answer": r["answer"],
        "success": r["success"],
        "outcome": r["outcome"],
        "guesses": r["guesses"],
        "time_ms": round(float(r["time_ms"]), 3),
    }
    hist = r.get("history", [])
    for i in range(1, width + 1):
        g, patt = hist[i - 1] if i <= len(hist) else ("", "")
        row[f"guess_{i}"] = g
        row[f"patt_{i}"] = _as_text_cell(patt)
    return row


def write_csv(results: List[Dict], path: str, N: int) -> str:
    """
    Write the results of run_batch to `path`, creating parent directories.

    Columns are BASE_COLUMNS followed by guess_i/patt_i pairs, one pair per
    turn of the longest game in `results`. Returns the path as a string.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    width = max((len(r.get("history", [])) for r in results), default=0)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=BASE_COLUMNS + _turn_columns(width))
        w.writeheader()
        w.writerows(_flatten_result(r, N, width) for r in results)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Dump the run description (run id, commit, CLI config, dictionary
    validation report, summary statistics) as indented JSON.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """UTC run id used in output file names, e.g. 20261018T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short hash of HEAD, or 'unknown' outside a git checkout."""
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip()
