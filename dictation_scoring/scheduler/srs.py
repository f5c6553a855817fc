from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from dictation_scoring.scoring.rounding import round_half_up

UTC = timezone.utc

MIN_EASE = 1.3
MASTERED_REPETITIONS = 10

ACTION_QUALITY = {
    "again": 0,
    "hard": 3,
    "good": 4,
    "easy": 5,
}


@dataclass
class SRSData:
    ease_factor: float
    interval: int
    repetitions: int
    next_review_at: datetime


def next_review(
    quality: int,
    ease_factor: float = 2.5,
    interval: int = 0,
    repetitions: int = 0,
    now: datetime | None = None,
) -> SRSData:
    """SM-2 update. ``quality`` is 0 (blackout) to 5 (perfect recall)."""
    if quality not in range(6):
        raise ValueError(f"quality must be 0-5, got {quality}")
    now = now or datetime.now(UTC)

    ease = ease_factor
    if quality >= 3:
        if repetitions == 0:
            interval = 1
        elif repetitions == 1:
            interval = 6
        else:
            interval = round_half_up(interval * ease_factor)
        repetitions += 1
        miss = 5 - quality
        ease = ease_factor + (0.1 - miss * (0.08 + miss * 0.02))
    else:
        repetitions = 0
        interval = 1

    ease = max(MIN_EASE, ease)

    return SRSData(
        ease_factor=ease,
        interval=interval,
        repetitions=repetitions,
        next_review_at=now + timedelta(days=interval),
    )


def quality_from_action(action: str) -> int:
    try:
        return ACTION_QUALITY[action]
    except KeyError:
        raise ValueError(f"unsupported review action: {action}") from None


def interval_text(interval: int) -> str:
    if interval == 0:
        return "New"
    if interval == 1:
        return "1 day"
    if interval < 30:
        return f"{interval} days"
    if interval < 365:
        return f"{round_half_up(interval / 30)} months"
    return f"{round_half_up(interval / 365)} years"


def is_due(next_review_at: datetime | str, now: datetime | None = None) -> bool:
    if isinstance(next_review_at, str):
        next_review_at = parse_timestamp(next_review_at)
    return _as_utc(next_review_at) <= _as_utc(now or datetime.now(UTC))


def parse_timestamp(value: str) -> datetime:
    """Parse ISO timestamps, including the trailing ``Z`` written by JavaScript."""
    value = value.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def mastery_percentage(repetitions: int) -> float:
    return min(100.0, repetitions / MASTERED_REPETITIONS * 100)


def mastery_level(repetitions: int) -> str:
    percentage = mastery_percentage(repetitions)
    if percentage >= 80:
        return "excellent"
    if percentage >= 60:
        return "good"
    if percentage >= 40:
        return "fair"
    if percentage >= 20:
        return "weak"
    return "new"
