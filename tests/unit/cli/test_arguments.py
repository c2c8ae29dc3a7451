"""Unit tests for argument splitting and validation."""

import pytest

from moodlog.cli.arguments import parse_arguments, split_arguments, validate_arguments
from moodlog.core.exceptions import ArgumentValidationError


class TestSplitArguments:
    """Tests for whitespace splitting."""

    @pytest.mark.parametrize("text", ["A B", "A\u3000B", "A \u3000 B", "A\tB", "A B  "])
    def test_half_and_full_width_separators(self, text):
        assert split_arguments(text) == ["A", "B"]

    def test_multiple_words(self):
        assert split_arguments("今日のタスク とても 疲れた 一日 だった") == [
            "今日のタスク", "とても", "疲れた", "一日", "だった",
        ]

    def test_mixed_spaces(self):
        assert split_arguments("プロジェクト\u3000完了 とても\u3000疲れた") == ["プロジェクト", "完了", "とても", "疲れた"]

    @pytest.mark.parametrize("text", ["", "   ", "\u3000"])
    def test_blank_input_yields_no_tokens(self, text):
        assert split_arguments(text) == []

    def test_leading_separator_yields_empty_title(self):
        assert split_arguments(" 楽しい") == ["", "楽しい"]

    def test_non_breaking_space_is_not_a_separator(self):
        assert split_arguments("A\u00a0B") == ["A\u00a0B"]


class TestParseArguments:
    """Tests for argv joining."""

    def test_joins_then_splits(self):
        assert parse_arguments(["会議\u3000終了", "とても", "長くて"]) == ["会議", "終了", "とても", "長くて"]

    def test_empty_argv(self):
        assert parse_arguments([]) == []


class TestValidateArguments:
    """Tests for title/mood validation."""

    def test_two_arguments(self):
        assert validate_arguments(["タスク完了", "満足"]) == ("タスク完了", "満足")

    def test_mood_tokens_are_concatenated(self):
        assert validate_arguments(["今日のタスク", "とても", "疲れた"]) == ("今日のタスク", "とても疲れた")

    def test_punctuation_is_preserved(self):
        tokens = ["今日のタスク", "とても疲れた一日だった。", "明日はペースを落としてやるぞ。"]
        assert validate_arguments(tokens) == (
            "今日のタスク",
            "とても疲れた一日だった。明日はペースを落としてやるぞ。",
        )

    def test_empty_tokens(self):
        with pytest.raises(ArgumentValidationError) as exc_info:
            validate_arguments([])
        assert exc_info.value.message == "Title and Mood is required"

    def test_empty_title(self):
        with pytest.raises(ArgumentValidationError) as exc_info:
            validate_arguments(["", "気持ち"])
        assert exc_info.value.message == "Title is required"

    def test_missing_mood(self):
        with pytest.raises(ArgumentValidationError) as exc_info:
            validate_arguments(["タイトル"])
        assert exc_info.value.message == "Mood is required"

    def test_empty_mood_part(self):
        with pytest.raises(ArgumentValidationError) as exc_info:
            validate_arguments(["タイトル", "", "気持ち"])
        assert exc_info.value.message == "Mood is required"
