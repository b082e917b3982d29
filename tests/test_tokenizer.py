"""Tests for the default tokenizer and the frequency table builder."""

from __future__ import annotations

from incremental_bayes.tokenizer import default_tokenizer, frequency_table


class TestDefaultTokenizer:
    """Tests for default_tokenizer."""

    def test_splits_on_whitespace(self) -> None:
        assert default_tokenizer("amazing awesome movie") == ["amazing", "awesome", "movie"]

    def test_whitespace_runs_collapse(self) -> None:
        assert default_tokenizer("tab\tnew\n\nline   end") == ["tab", "new", "line", "end"]

    def test_punctuation_becomes_separator(self) -> None:
        assert default_tokenizer("well-known,fact") == ["well", "known", "fact"]

    def test_trailing_punctuation_yields_empty_token(self) -> None:
        assert default_tokenizer("Hello, world!") == ["Hello", "world", ""]

    def test_leading_punctuation_yields_empty_token(self) -> None:
        assert default_tokenizer("!hi") == ["", "hi"]

    def test_empty_text(self) -> None:
        assert default_tokenizer("") == [""]

    def test_case_is_preserved(self) -> None:
        assert default_tokenizer("Movie MOVIE movie") == ["Movie", "MOVIE", "movie"]

    def test_digits_and_underscore_kept(self) -> None:
        assert default_tokenizer("snake_case 2024") == ["snake_case", "2024"]

    def test_accented_latin_kept(self) -> None:
        assert default_tokenizer("café naïve Ökonomie") == ["café", "naïve", "Ökonomie"]

    def test_cyrillic_kept(self) -> None:
        assert default_tokenizer("Привет мир") == ["Привет", "мир"]

    def test_parentheses_and_plus_kept(self) -> None:
        assert default_tokenizer("c++ (beta)") == ["c++", "(beta)"]

    def test_characters_outside_range_replaced(self) -> None:
        # CJK code points sit above the kept range
        assert default_tokenizer("a中b") == ["a", "b"]


class TestFrequencyTable:
    """Tests for frequency_table."""

    def test_counts_duplicates(self) -> None:
        assert frequency_table(["a", "b", "a", "a"]) == {"a": 3, "b": 1}

    def test_empty(self) -> None:
        assert frequency_table([]) == {}

    def test_empty_string_token_counted(self) -> None:
        assert frequency_table(default_tokenizer("hi!")) == {"hi": 1, "": 1}

    def test_accepts_generator(self) -> None:
        assert frequency_table(t for t in "xyx") == {"x": 2, "y": 1}
