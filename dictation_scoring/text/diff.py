from __future__ import annotations

from dataclasses import dataclass

from dictation_scoring.text.normalize import normalize_japanese


@dataclass(frozen=True)
class DiffEntry:
    character: str
    is_correct: bool
    expected_character: str | None = None


def compare_strings(user_input: str, correct_answer: str) -> list[DiffEntry]:
    """Position-aligned diff of the learner's answer against the reference.

    A mismatch reports the learner's character with the expected one. Past
    the end of the learner's input the entry carries the missing reference
    character in both fields; past the end of the reference the expected
    character is ``""``.
    """
    user = normalize_japanese(user_input)
    correct = normalize_japanese(correct_answer)

    results: list[DiffEntry] = []
    for i in range(max(len(user), len(correct))):
        user_char = user[i] if i < len(user) else ""
        correct_char = correct[i] if i < len(correct) else ""

        if user_char == correct_char:
            results.append(DiffEntry(character=user_char, is_correct=True))
        elif user_char:
            results.append(DiffEntry(character=user_char, is_correct=False, expected_character=correct_char))
        else:
            results.append(DiffEntry(character=correct_char, is_correct=False, expected_character=correct_char))
    return results


compare = compare_strings
