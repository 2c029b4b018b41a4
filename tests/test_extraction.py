"""Tests for word extraction over analyzer tokens."""

import pytest

from yomimono.text import (
    EXCLUSION_SET,
    ExtractionResult,
    InvalidInput,
    RawToken,
    Word,
    build_exclusion_set,
    extract_words,
    extract_words_from_text,
)
from yomimono.text.exclusions import COMPOUND_FRAGMENTS, HIRAGANA, KATAKANA, PUNCTUATION

from .conftest import FakeTokenizer, make_tokens


class TestExclusionSet:
    """Test the built-in exclusion lists."""

    def test_contains_every_group(self) -> None:
        for group in (HIRAGANA, KATAKANA, PUNCTUATION, COMPOUND_FRAGMENTS):
            assert set(group) <= EXCLUSION_SET

    def test_is_immutable(self) -> None:
        assert isinstance(EXCLUSION_SET, frozenset)

    def test_membership_is_exact(self) -> None:
        assert "は" in EXCLUSION_SET
        assert "はな" not in EXCLUSION_SET
        assert "する" in EXCLUSION_SET
        assert "するな" not in EXCLUSION_SET

    def test_build_with_extra_words(self) -> None:
        extended = build_exclusion_set(["こと"])
        assert "こと" in extended
        assert EXCLUSION_SET < extended
        assert "こと" not in EXCLUSION_SET

    def test_build_without_extra_returns_default(self) -> None:
        assert build_exclusion_set() is EXCLUSION_SET


class TestExtractWords:
    """Test filtering, dedup and counting."""

    def test_empty_input(self) -> None:
        result = extract_words([])
        assert result == ExtractionResult(words=(), word_count=0)

    def test_cat_scenario(self) -> None:
        tokens = make_tokens(("猫", "ネコ"), ("は", ""), ("猫", "ネコ"), ("可愛い", "カワイイ"))

        result = extract_words(tokens)

        assert result.words == (Word("猫", "ネコ"), Word("可愛い", "カワイイ"))
        assert result.word_count == 2

    def test_different_readings_are_distinct(self) -> None:
        tokens = make_tokens(("行く", "イク"), ("行く", "ユク"))

        result = extract_words(tokens)

        assert result.words == (Word("行く", "イク"), Word("行く", "ユク"))
        assert result.word_count == 2

    def test_missing_reading_is_empty_string(self) -> None:
        tokens = make_tokens(("東京", None), ("東京", ""))

        result = extract_words(tokens)

        assert result.words == (Word("東京", ""),)

    def test_missing_and_present_reading_are_distinct(self) -> None:
        result = extract_words(make_tokens(("今日", ""), ("今日", "キョウ")))
        assert result.word_count == 2

    def test_excluded_surface_dropped_regardless_of_reading(self) -> None:
        tokens = make_tokens(("ます", "マス"), ("。", ""), ("ア", "ア"), ("本", "ホン"), (" ", ""))

        result = extract_words(tokens)

        assert [w.original for w in result.words] == ["本"]

    def test_exclusion_checks_surface_not_reading(self) -> None:
        # Reading "ハ" is an excluded katakana, but the surface is not
        result = extract_words(make_tokens(("葉", "ハ")))
        assert result.words == (Word("葉", "ハ"),)

    def test_first_occurrence_wins_and_order_is_kept(self) -> None:
        tokens = make_tokens(
            ("雨", "アメ"),
            ("が", ""),
            ("降る", "フル"),
            ("雨", "アメ"),
            ("空", "ソラ"),
            ("降る", "フル"),
        )

        result = extract_words(tokens)

        assert [w.original for w in result.words] == ["雨", "降る", "空"]

    def test_count_matches_length(self) -> None:
        tokens = make_tokens(*[(f"語{i % 7}", "ゴ") for i in range(50)])
        result = extract_words(tokens)
        assert result.word_count == len(result.words) == 7

    def test_re_extraction_is_stable(self) -> None:
        tokens = make_tokens(("猫", "ネコ"), ("の", ""), ("猫", "ネコ"), ("目", "メ"), ("行く", "イク"))
        first = extract_words(tokens)

        rebuilt = [RawToken(surface=w.original, reading=w.reading) for w in first.words]

        assert extract_words(rebuilt) == first

    def test_accepts_generator(self) -> None:
        result = extract_words(t for t in make_tokens(("山", "ヤマ"), ("山", "ヤマ")))
        assert result.word_count == 1

    def test_custom_exclusion_set(self) -> None:
        result = extract_words(make_tokens(("は", ""), ("山", "ヤマ")), exclude=frozenset({"山"}))
        assert result.words == (Word("は", ""),)

    def test_is_deterministic(self) -> None:
        tokens = make_tokens(("朝", "アサ"), ("夜", "ヨル"), ("朝", "アサ"))
        assert extract_words(tokens) == extract_words(tokens)

    @pytest.mark.parametrize("bad", [None, 42, "猫は", b"bytes", {"surface": "猫"}])
    def test_rejects_non_sequence(self, bad) -> None:
        with pytest.raises(InvalidInput):
            extract_words(bad)

    def test_rejects_malformed_token(self) -> None:
        with pytest.raises(InvalidInput):
            extract_words([RawToken("猫", "ネコ"), None])

    def test_invalid_input_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            extract_words(None)


class TestSerialization:
    """Test dict output used for storage and responses."""

    def test_result_to_dict(self) -> None:
        result = extract_words(make_tokens(("猫", "ネコ")))
        assert result.to_dict() == {
            "words": [{"original": "猫", "reading": "ネコ"}],
            "wordCount": 1,
        }

    def test_word_equality_and_hash(self) -> None:
        assert Word("猫", "ネコ") == Word("猫", "ネコ")
        assert len({Word("猫", "ネコ"), Word("猫", "ネコ")}) == 1


class TestExtractFromText:
    """Test the tokenize-then-extract helper."""

    def test_uses_tokenizer(self) -> None:
        tokenizer = FakeTokenizer()

        result = extract_words_from_text("猫:ネコ は 猫:ネコ", tokenizer)

        assert tokenizer.calls == ["猫:ネコ は 猫:ネコ"]
        assert result.words == (Word("猫", "ネコ"),)
