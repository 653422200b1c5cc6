import csv
import json
from pathlib import Path

from wordlefreq.harness import pretty_stats, summarize, write_csv, write_manifest
from wordlefreq.harness.io import timestamp_id


def _result(answer, success, guesses, history=()):
    return {
        "answer": answer, "success": success,
        "outcome": "solved" if success else "exhausted",
        "guesses": guesses, "time_ms": 1.23456, "history": list(history),
        "solver_id": "average_word",
    }


def test_summarize_counts_and_histogram():
    results = [_result("a", True, 2), _result("b", True, 4), _result("c", False, 3)]
    s = summarize(results)
    assert s["games"] == 3 and s["solved"] == 2 and s["exhausted"] == 1
    assert s["mean_guesses"] == 3.0
    assert s["median_guesses"] == 3.0
    assert s["max_guesses"] == 4
    assert s["histogram"] == {2: 1, 4: 1}
    line = pretty_stats(s)
    assert "solved=2" in line and "2:1 4:1" in line
    json.dumps(s)


def test_summarize_empty():
    s = summarize([])
    assert s["games"] == 0 and s["mean_guesses"] is None and s["histogram"] == {}
    assert "games=0" in pretty_stats(s)


def test_write_csv_columns_follow_longest_game(tmp_path: Path):
    results = [
        _result("could", True, 2, [("sound", "-GG-G"), ("could", "GGGGG")]),
        _result("crane", True, 1, [("crane", "GGGGG")]),
    ]
    path = write_csv(results, str(tmp_path / "out" / "run.csv"), N=5)
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))

    assert len(rows) == 2
    assert rows[0]["guess_2"] == "could"
    assert rows[0]["patt_1"] == "'-GG-G"
    assert rows[1]["guess_2"] == ""
    assert rows[0]["time_ms"] == "1.235"
    assert "guess_3" not in rows[0]


def test_write_manifest(tmp_path: Path):
    path = write_manifest({"run_id": timestamp_id(), "num_cases": 2}, str(tmp_path / "m.json"))
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    assert data["num_cases"] == 2
    assert data["run_id"].endswith("Z")
