from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_SIMILARITY_THRESHOLD = 0.8
DEFAULT_LENGTH_PENALTY = 0.5
DEFAULT_MASTERY_SCORE = 90


@dataclass(frozen=True)
class ScoringSettings:
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    length_penalty: float = DEFAULT_LENGTH_PENALTY
    mastery_score: int = DEFAULT_MASTERY_SCORE


def load_settings() -> ScoringSettings:
    return ScoringSettings(
        similarity_threshold=_env_float("DICTATION_SCORING_SIMILARITY_THRESHOLD", DEFAULT_SIMILARITY_THRESHOLD),
        length_penalty=_env_float("DICTATION_SCORING_LENGTH_PENALTY", DEFAULT_LENGTH_PENALTY),
        mastery_score=_env_int("DICTATION_SCORING_MASTERY_SCORE", DEFAULT_MASTERY_SCORE),
    )


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
