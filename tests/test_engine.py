from collections import Counter

import pytest
from wordlefreq.engine import (
    Feedback, align, score_match, score_word, still_possible, is_finished,
    value_of_score, graphic_score, pattern_string, filter_candidates,
    is_valid_word, check_word,
)
from wordlefreq.errors import MalformedWord

A, P, E = Feedback.ABSENT, Feedback.PRESENT, Feedback.EXACT


# --- golden correspondences (exact first, then leftovers) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("count", "could", [1, 2, 3, 0, 0]),
    ("mount", "could", [0, 2, 3, 0, 0]),
    ("coult", "could", [1, 2, 3, 4, 0]),
    ("topic", "could", [0, 2, 0, 0, 1]),
    ("xxxxx", "could", [0, 0, 0, 0, 0]),
    ("duloc", "could", [5, 3, 4, 2, 1]),
    ("occur", "could", [2, 1, 0, 3, 0]),
])
def test_align_golden(guess, answer, expected):
    assert align(guess, answer) == expected


@pytest.mark.parametrize("guess,answer,expected", [
    ("sound", "could", (A, E, E, A, E)),
    ("occur", "could", (P, P, A, P, A)),
    ("count", "could", (E, E, E, A, A)),
])
def test_score_word_golden(guess, answer, expected):
    assert score_word(guess, answer) == expected


def test_exact_letter_is_not_reused_for_leftovers():
    # the second 'c' in occur cannot claim could's 'c', already taken by the first
    assert align("occur", "could")[2] == 0
    # 'l' at position 2 would match answer position 3, but that one is exact
    assert align("ll", "xl") == [0, 2]


@pytest.mark.parametrize("w", ["could", "abbey", "aalii", "cocco", "xxxxx"])
def test_align_self_is_all_exact(w):
    assert align(w, w) == list(range(1, len(w) + 1))
    assert is_finished(score_word(w, w), len(w))


@pytest.mark.parametrize("guess,answer", [
    ("cocco", "could"), ("apiin", "aalii"), ("seave", "ultra"),
    ("abbey", "babes"), ("eerie", "there"), ("llama", "hello"),
])
def test_connections_bounded_by_shared_letters(guess, answer):
    match = align(guess, answer)
    shared = sum((Counter(guess) & Counter(answer)).values())
    nonzero = [j for j in match if j]
    assert len(nonzero) <= shared
    assert len(nonzero) == len(set(nonzero))  # no answer position claimed twice


@pytest.mark.parametrize("guess,answer", [("could", "count"), ("abbey", "abbes")])
def test_all_exact_only_for_identical_words(guess, answer):
    assert not is_finished(score_word(guess, answer))


@pytest.mark.parametrize("guess,candidate,expected", [
    ("occur", "bound", False),
    ("occur", "count", True),
    ("occur", "occam", False),
    ("occur", "could", True),
    ("could", "could", False),
    ("count", "could", False),
])
def test_still_possible_against_could(guess, candidate, expected):
    s = score_word("occur", "could")
    assert still_possible(guess, s, candidate) is expected


@pytest.mark.parametrize("guess,answer", [
    ("apiin", "aalii"), ("cocco", "could"), ("occur", "could"),
])
def test_still_possible_is_reflexive(guess, answer):
    assert still_possible(guess, score_word(guess, answer), answer) is True


def test_still_possible_seave_alara():
    assert still_possible("seave", score_word("seave", "ultra"), "alara") is False


def test_score_match_and_value():
    s = score_match([1, 0, 2, 0, 5])
    assert s == (E, A, P, A, E)
    assert value_of_score(s) == 2.5
    assert value_of_score(score_word("could", "could")) == 5.0


def test_renderings():
    s = score_word("sound", "could")
    assert graphic_score(s) == "□■■□■"
    assert graphic_score(score_word("occur", "could")) == "▪▪□▪□"
    assert pattern_string(s) == "-GG-G"


# --- words of unequal length are tolerated ---
def test_unequal_lengths_do_not_raise():
    assert align("could", "cou") == [1, 2, 3, 0, 0]
    assert score_word("co", "could") == (E, E)
    assert not is_finished(score_word("co", "could"), 5)
    assert score_word("", "could") == ()


def test_filter_candidates_preserves_order_and_input():
    words = ["could", "count", "bound", "occam", "sound"]
    history = [("occur", score_word("occur", "could"))]
    cand = filter_candidates(words, history)
    assert cand == ["could", "count"]
    assert words == ["could", "count", "bound", "occam", "sound"]


def test_filter_candidates_multiple_history_entries():
    words = ["could", "count", "mount", "sound"]
    history = [
        ("occur", score_word("occur", "could")),
        ("count", score_word("count", "could")),
    ]
    assert filter_candidates(words, history) == ["could"]


def test_word_validation():
    assert is_valid_word("crane", 5) is True
    assert is_valid_word("Crane", 5) is False
    assert is_valid_word("cranes", 5) is False
    assert is_valid_word("cr4ne", 5) is False
    assert is_valid_word(None, 5) is False
    assert check_word(" CRANE ", 5) == "crane"
    with pytest.raises(MalformedWord) as exc:
        check_word("???", 5)
    assert exc.value.word == "???"
