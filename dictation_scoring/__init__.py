from dictation_scoring.scoring.dictation import calculate_score, is_similar, score
from dictation_scoring.text.diff import DiffEntry, compare, compare_strings
from dictation_scoring.text.distance import edit_distance, levenshtein_distance
from dictation_scoring.text.normalize import normalize, normalize_japanese

__all__ = [
    "DiffEntry",
    "calculate_score",
    "compare",
    "compare_strings",
    "edit_distance",
    "is_similar",
    "levenshtein_distance",
    "normalize",
    "normalize_japanese",
    "score",
]
