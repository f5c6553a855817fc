from __future__ import annotations

from dictation_scoring.text.normalize import require_text


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum single-character edits turning ``a`` into ``b``.

    The strings are compared as given; callers normalize first. Time and
    memory are quadratic in the input lengths.
    """
    require_text(a, "a")
    require_text(b, "b")

    # rows follow b, columns follow a
    matrix = [[i] + [0] * len(a) for i in range(len(b) + 1)]
    matrix[0] = list(range(len(a) + 1))

    for i in range(1, len(b) + 1):
        char_b = b[i - 1]
        row = matrix[i]
        above = matrix[i - 1]
        for j in range(1, len(a) + 1):
            if char_b == a[j - 1]:
                row[j] = above[j - 1]
            else:
                row[j] = 1 + min(above[j - 1], row[j - 1], above[j])

    return matrix[len(b)][len(a)]


edit_distance = levenshtein_distance
