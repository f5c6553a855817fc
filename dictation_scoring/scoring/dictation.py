from __future__ import annotations

from collections.abc import Mapping

from dictation_scoring.api.schemas import DictationProgress, DiffEntryModel, SegmentGrade
from dictation_scoring.config import (
    DEFAULT_LENGTH_PENALTY,
    DEFAULT_SIMILARITY_THRESHOLD,
    ScoringSettings,
    load_settings,
)
from dictation_scoring.scoring.rounding import round_half_up
from dictation_scoring.text.diff import compare_strings
from dictation_scoring.text.distance import levenshtein_distance
from dictation_scoring.text.normalize import normalize_japanese, require_text


def calculate_score(
    user_input: str,
    correct_answer: str,
    *,
    length_penalty: float = DEFAULT_LENGTH_PENALTY,
) -> int:
    """Percentage of reference characters typed at the right position.

    Each character of length mismatch costs ``length_penalty`` of a match.
    An empty reference always scores 0.
    """
    user = normalize_japanese(user_input)
    correct = normalize_japanese(correct_answer)
    if not correct:
        return 0

    correct_count = sum(1 for u, c in zip(user, correct) if u == c)
    adjusted = correct_count - abs(len(user) - len(correct)) * length_penalty
    percent = round_half_up(adjusted / len(correct) * 100)
    return min(100, max(0, percent))


def is_similar(
    user_input: str,
    correct_answer: str,
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> bool:
    user = normalize_japanese(user_input)
    correct = normalize_japanese(correct_answer)

    distance = levenshtein_distance(user, correct)
    max_length = max(len(user), len(correct))
    if max_length == 0:
        return True

    similarity = 1 - distance / max_length
    return similarity >= threshold


def grade_segment(
    user_input: str,
    correct_answer: str,
    *,
    settings: ScoringSettings | None = None,
) -> SegmentGrade:
    if not require_text(user_input, "user_input").strip():
        raise ValueError("user input is empty")
    settings = settings or load_settings()

    diff = compare_strings(user_input, correct_answer)
    segment_score = calculate_score(user_input, correct_answer, length_penalty=settings.length_penalty)
    mastered = segment_score >= settings.mastery_score

    return SegmentGrade(
        user_input=user_input,
        correct_answer=correct_answer,
        diff=[
            DiffEntryModel(
                character=entry.character,
                is_correct=entry.is_correct,
                expected_character=entry.expected_character,
            )
            for entry in diff
        ],
        score=segment_score,
        similar=is_similar(user_input, correct_answer, settings.similarity_threshold),
        mastered=mastered,
        status="mastered" if mastered else "learning",
    )


def session_progress(grades: Mapping[int, SegmentGrade], total_segments: int) -> DictationProgress:
    """Share of segments mastered so far, keyed by segment index."""
    if total_segments < 0:
        raise ValueError("total_segments must be non-negative")
    for index in grades:
        if not 0 <= index < total_segments:
            raise ValueError(f"segment index out of range: {index}")

    mastered = sorted(index for index, grade in grades.items() if grade.mastered)
    percent = len(mastered) / total_segments * 100 if total_segments else 0.0
    return DictationProgress(total_segments=total_segments, mastered_segments=mastered, percent=percent)


score = calculate_score
