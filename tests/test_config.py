from __future__ import annotations

import pytest

from dictation_scoring.config import ScoringSettings, load_settings

ENV_VARS = (
    "DICTATION_SCORING_SIMILARITY_THRESHOLD",
    "DICTATION_SCORING_LENGTH_PENALTY",
    "DICTATION_SCORING_MASTERY_SCORE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment():
    assert load_settings() == ScoringSettings(similarity_threshold=0.8, length_penalty=0.5, mastery_score=90)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DICTATION_SCORING_SIMILARITY_THRESHOLD", "0.6")
    monkeypatch.setenv("DICTATION_SCORING_MASTERY_SCORE", " 85 ")

    settings = load_settings()

    assert settings.similarity_threshold == 0.6
    assert settings.mastery_score == 85
    assert settings.length_penalty == 0.5


def test_invalid_value_names_the_variable(monkeypatch):
    monkeypatch.setenv("DICTATION_SCORING_LENGTH_PENALTY", "half")
    with pytest.raises(ValueError, match="DICTATION_SCORING_LENGTH_PENALTY"):
        load_settings()
