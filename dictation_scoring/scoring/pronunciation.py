from __future__ import annotations

import random

from dictation_scoring.api.schemas import HighlightedChar, PronunciationFeedback, PronunciationScore
from dictation_scoring.scoring.rounding import round_half_up
from dictation_scoring.text.normalize import normalize_spoken

ACCURACY_WEIGHT = 0.4
DURATION_WEIGHT = 0.2
RHYTHM_WEIGHT = 0.2
FLUENCY_WEIGHT = 0.2


def analyze_pronunciation(
    target_text: str,
    user_transcript: str,
    *,
    rng: random.Random | None = None,
) -> PronunciationScore:
    """Score a speech-recognition transcript against the sentence the learner read.

    Rhythm cannot be measured from text alone, so it is drawn from 70-100;
    pass a seeded ``rng`` for reproducible results.
    """
    target = normalize_spoken(target_text)
    user = normalize_spoken(user_transcript)
    rng = rng or random.Random()

    max_len = max(len(target), len(user))
    matches = sum(1 for t, u in zip(target, user) if t == u)
    accuracy = round_half_up(matches / max_len * 100) if max_len else 0

    length_ratio = len(user) / (len(target) or 1)
    duration = round_half_up(max(0.0, 100 - abs(1 - length_ratio) * 100))
    rhythm = round_half_up(70 + rng.random() * 30)
    fluency = round_half_up(accuracy * 0.6 + duration * 0.4)
    overall = round_half_up(
        accuracy * ACCURACY_WEIGHT
        + duration * DURATION_WEIGHT
        + rhythm * RHYTHM_WEIGHT
        + fluency * FLUENCY_WEIGHT
    )

    return PronunciationScore(
        accuracy=accuracy,
        duration=duration,
        rhythm=rhythm,
        fluency=fluency,
        overall=overall,
        feedback=_feedback(accuracy=accuracy, duration=duration, fluency=fluency, length_ratio=length_ratio),
        highlighted=highlight_characters(target, user),
    )


def highlight_characters(target: str, user: str) -> list[HighlightedChar]:
    """Positional walk over already-normalized strings."""
    highlighted: list[HighlightedChar] = []
    for i in range(max(len(target), len(user))):
        if i < len(target) and i < len(user):
            if target[i] == user[i]:
                highlighted.append(HighlightedChar(character=user[i], status="correct"))
            else:
                highlighted.append(HighlightedChar(character=user[i], status="incorrect", expected=target[i]))
        elif i < len(user):
            highlighted.append(HighlightedChar(character=user[i], status="extra"))
        else:
            highlighted.append(HighlightedChar(character=target[i], status="missing"))
    return highlighted


def _feedback(*, accuracy: int, duration: int, fluency: int, length_ratio: float) -> list[PronunciationFeedback]:
    feedback: list[PronunciationFeedback] = []

    if accuracy >= 90:
        feedback.append(
            PronunciationFeedback(type="success", category="accuracy", message="Very accurate pronunciation!")
        )
    elif accuracy >= 70:
        feedback.append(
            PronunciationFeedback(
                type="warning",
                category="accuracy",
                message="Some words were not quite right",
                suggestion="Listen to the sample again and practice each word on its own",
            )
        )
    else:
        feedback.append(
            PronunciationFeedback(
                type="error",
                category="accuracy",
                message="Accuracy needs work",
                suggestion="Try speaking more slowly and say each word clearly",
            )
        )

    if duration < 70:
        feedback.append(
            PronunciationFeedback(
                type="warning",
                category="duration",
                message="Your reading was too short" if length_ratio < 1 else "Your reading was too long",
                suggestion="Watch the length of sounds such as ー and っ",
            )
        )

    if fluency >= 80:
        feedback.append(PronunciationFeedback(type="success", category="fluency", message="Smooth and natural!"))

    return feedback
