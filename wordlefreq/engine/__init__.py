from .matching import (
    Feedback, align, score_match, score_word, still_possible, is_finished,
    value_of_score, graphic_score, pattern_string,
)
from .frequency import WORD_SIZE, build_frequencies, find_average_word
from .constraints import filter_candidates
from .validation import is_valid_word, check_word

__all__ = [
    "Feedback", "align", "score_match", "score_word", "still_possible", "is_finished",
    "value_of_score", "graphic_score", "pattern_string",
    "WORD_SIZE", "build_frequencies", "find_average_word",
    "filter_candidates", "is_valid_word", "check_word",
]
