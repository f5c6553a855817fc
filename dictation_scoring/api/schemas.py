from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class DiffEntryModel(BaseModel):
    character: str
    is_correct: bool
    expected_character: str | None = None


class SegmentGrade(BaseModel):
    user_input: str
    correct_answer: str
    diff: list[DiffEntryModel] = Field(default_factory=list)
    score: int = Field(ge=0, le=100)
    similar: bool
    mastered: bool
    status: Literal["mastered", "learning"]


class DictationProgress(BaseModel):
    total_segments: int = Field(ge=0)
    mastered_segments: list[int] = Field(default_factory=list)
    percent: float = Field(ge=0, le=100)


class PronunciationFeedback(BaseModel):
    type: Literal["success", "warning", "error"]
    category: Literal["accuracy", "duration", "rhythm", "fluency"]
    message: str
    suggestion: str | None = None


class HighlightedChar(BaseModel):
    character: str
    status: Literal["correct", "incorrect", "extra", "missing"]
    expected: str | None = None


class PronunciationScore(BaseModel):
    accuracy: int = Field(ge=0, le=100)
    duration: int = Field(ge=0, le=100)
    rhythm: int = Field(ge=0, le=100)
    fluency: int = Field(ge=0, le=100)
    overall: int = Field(ge=0, le=100)
    feedback: list[PronunciationFeedback] = Field(default_factory=list)
    highlighted: list[HighlightedChar] = Field(default_factory=list)
