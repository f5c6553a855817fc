from __future__ import annotations

import re

# JavaScript treats the BOM as whitespace
WHITESPACE_RE = re.compile(r"[\s\ufeff]+")
SPOKEN_PUNCTUATION_RE = re.compile(r"[。、！？]")

FULLWIDTH_START = 0xFF01  # ！
FULLWIDTH_END = 0xFF5E  # ～
FULLWIDTH_OFFSET = 0xFEE0

FULLWIDTH_TO_HALFWIDTH = {
    code: code - FULLWIDTH_OFFSET for code in range(FULLWIDTH_START, FULLWIDTH_END + 1)
}


def require_text(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")
    return value


def normalize_japanese(text: str) -> str:
    """Canonical form for dictation comparison.

    Strips every whitespace character, folds full-width ASCII (！ through ～)
    to half-width and lowercases. Kana, kanji and other symbols pass through.
    """
    require_text(text, "text")
    collapsed = WHITESPACE_RE.sub("", text.strip())
    return collapsed.translate(FULLWIDTH_TO_HALFWIDTH).lower()


def normalize_spoken(text: str) -> str:
    """Normalize a speech transcript: drop spacing and sentence punctuation."""
    require_text(text, "text")
    lowered = WHITESPACE_RE.sub("", text.strip().lower())
    return SPOKEN_PUNCTUATION_RE.sub("", lowered)


normalize = normalize_japanese
