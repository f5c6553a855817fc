from __future__ import annotations

import pytest

from dictation_scoring.text.normalize import normalize_japanese, normalize_spoken

SAMPLES = [
    "",
    "   ",
    "こんにちは",
    "ＡＢＣ １２３ ",
    "  今日は　いい天気ですね。 ",
    "ＨｅｌｌｏＷｏｒｌｄ！",
    "Ｔｏｋｙｏ　２０２４年",
    "～！？＃",
]


def test_fullwidth_alphanumerics_fold_and_whitespace_is_removed():
    assert normalize_japanese("ＡＢＣ １２３ ") == "abc123"


def test_internal_whitespace_is_deleted_not_collapsed():
    assert normalize_japanese("  こんにちは  世界 ") == "こんにちは世界"
    assert normalize_japanese("こんにちは　世界\t\n") == "こんにちは世界"


def test_fullwidth_range_boundaries():
    assert normalize_japanese("！") == "!"
    assert normalize_japanese("～") == "~"
    assert normalize_japanese("ＨｅｌｌｏＷｏｒｌｄ！") == "helloworld!"
    # outside ！..～
    assert normalize_japanese("｟。、ー") == "｟。、ー"


def test_kana_and_kanji_pass_through():
    assert normalize_japanese("東京タワーへ行きます") == "東京タワーへ行きます"


def test_empty_string():
    assert normalize_japanese("") == ""


@pytest.mark.parametrize("text", SAMPLES)
def test_normalize_is_idempotent(text):
    once = normalize_japanese(text)
    assert normalize_japanese(once) == once


def test_non_string_input_fails_fast():
    with pytest.raises(TypeError):
        normalize_japanese(None)


def test_spoken_normalizer_drops_sentence_punctuation():
    assert normalize_spoken("こんにちは。 元気ですか？") == "こんにちは元気ですか"
    assert normalize_spoken("はい、ＯＫ！") == "はいｏｋ"


def test_byte_order_mark_counts_as_whitespace():
    assert normalize_japanese("\ufeffabc") == "abc"
    assert normalize_japanese("ね\ufeffこ\ufeff") == "ねこ"
