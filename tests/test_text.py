"""Tests for narration text preparation."""

import pytest

from reelsync.subtitles.text import (
    escape_drawtext,
    max_line_length_for,
    max_lines_for,
    parse_duration_to_seconds,
    wrap_narration_text,
)


class TestParseDuration:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("5 seconds", 5.0),
            ("2.5 seconds", 2.5),
            ("1 minute", 60.0),
            ("1.5 minutes", 90.0),
            ("7", 7.0),
            ("  3.25 ", 3.25),
            ("Seconds: 4", 4.0),
        ],
    )
    def test_parses(self, text, expected):
        assert parse_duration_to_seconds(text) == expected

    @pytest.mark.parametrize("text", ["", "soon", "a few seconds", "inf"])
    def test_falls_back_to_five_seconds(self, text):
        assert parse_duration_to_seconds(text) == 5.0


class TestLineLimits:
    def test_reference_font(self):
        assert max_line_length_for(60, 32) == 60

    def test_large_font_shortens_lines(self):
        assert max_line_length_for(60, 64) == 27  # 60 / (2 * 1.1)

    def test_portrait_shortens_lines(self):
        assert max_line_length_for(60, 32, portrait=True) == 42

    def test_clamped(self):
        assert max_line_length_for(200, 12) == 80
        assert max_line_length_for(10, 72, portrait=True) == 15

    @pytest.mark.parametrize(
        "font_size, portrait, expected",
        [(24, False, 2), (32, True, 3), (48, False, 3), (48, True, 4), (64, False, 4), (72, True, 5)],
    )
    def test_max_lines(self, font_size, portrait, expected):
        assert max_lines_for(font_size, portrait) == expected


class TestWrapNarration:
    def test_short_text_unchanged(self):
        assert wrap_narration_text("  Hello world  ") == "Hello world"

    def test_wraps_at_line_limit(self):
        text = "word " * 20
        wrapped = wrap_narration_text(text.strip(), max_line_length=30)
        lines = wrapped.split("\n")
        assert len(lines) == 2
        assert len(lines[0]) <= 30

    def test_words_preserved_when_they_fit(self):
        text = "The moon pulls on the oceans and the water bulges toward it every day."
        wrapped = wrap_narration_text(text)
        assert wrapped.replace("\n", " ") == text

    def test_overflow_folded_into_last_line(self):
        # 20-character limit in this setup, two lines allowed, last may reach 24
        text = "aaaa bbbb cccc dddd eeee ffff gggg hhhh iiii"
        wrapped = wrap_narration_text(text, max_line_length=20)
        assert wrapped.split("\n") == ["aaaa bbbb cccc dddd", "eeee ffff gggg hhhh iiii"]

    def test_overflow_beyond_allowance_dropped(self):
        text = "aaaa bbbb cccc dddd eeee ffff gggg hhhh iiii jjjj kkkk llll"
        wrapped = wrap_narration_text(text, max_line_length=20)
        assert wrapped.split("\n") == ["aaaa bbbb cccc dddd", "eeee ffff gggg hhhh"]

    def test_long_single_word_kept(self):
        word = "x" * 100
        assert word in wrap_narration_text(f"{word} tail")

    def test_portrait_allows_more_lines(self):
        text = " ".join(["narration"] * 30)
        landscape = wrap_narration_text(text, width=1920, height=1080)
        portrait = wrap_narration_text(text, width=1080, height=1920)
        assert len(portrait.split("\n")) > len(landscape.split("\n"))


class TestEscapeDrawtext:
    def test_quotes_replaced(self):
        result = escape_drawtext("It's a \"test\"")
        assert "'" not in result
        assert '"' not in result
        assert "It’s" in result

    @pytest.mark.parametrize("char", list(":[],;=%"))
    def test_filter_specials_escaped(self, char):
        assert escape_drawtext(f"a{char}b") == f"a\\{char}b"

    def test_backslash_escaped_first(self):
        assert escape_drawtext("a\\b") == "a\\\\b"

    def test_symbols(self):
        assert escape_drawtext("Acme™ © 2024…") == "Acme(TM) (c) 2024..."

    def test_whitespace_collapsed_lines_kept(self):
        assert escape_drawtext("one   two\r\nthree\tfour") == "one two\nthree four"
