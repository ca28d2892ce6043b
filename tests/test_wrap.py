from __future__ import annotations

from fanatitra.wrap import wrap_text


def measure(text: str) -> float:
    return float(len(text))


def test_short_text_is_a_single_trimmed_line():
    assert wrap_text("  Lot II M 45  ", 40, measure) == ["Lot II M 45"]


def test_empty_text_has_no_lines():
    assert wrap_text("", 10, measure) == []
    assert wrap_text(" \t\n ", 10, measure) == []


def test_greedy_fill():
    lines = wrap_text("aa bb cc dd ee", 5, measure)
    assert lines == ["aa bb", "cc dd", "ee"]


def test_exact_fit_stays_on_the_line():
    assert wrap_text("abc de", 6, measure) == ["abc de"]


def test_whitespace_runs_collapse():
    assert wrap_text("a\t\tb\nc", 20, measure) == ["a b c"]


def test_long_word_is_hard_split():
    assert wrap_text("abcdefghij", 4, measure) == ["abcd", "efgh", "ij"]


def test_long_word_after_text_is_split_on_its_own_lines():
    lines = wrap_text("hi abcdefghij ok", 4, measure)
    assert lines == ["hi", "abcd", "efgh", "ij", "ok"]


def test_character_wider_than_line_is_kept_whole():
    assert wrap_text("abc", 0.5, measure) == ["abc"]


def test_wide_character_forces_the_break():
    def wide_w(text: str) -> float:
        return sum(3.0 if char == "W" else 1.0 for char in text)

    lines = wrap_text("aaWaa", 4, wide_w)
    assert lines == ["aa", "Wa", "a"]
    assert all(wide_w(line) <= 4 for line in lines)


def test_no_characters_lost_or_reordered():
    text = "Lot IVX 123 Ambohijatovo-Atsimo Antananarivo 101 Madagasikara"
    for width in (1, 3, 7, 12, 30, 100):
        lines = wrap_text(text, width, measure)
        assert "".join(line.replace(" ", "") for line in lines) == "".join(text.split())
        for line in lines:
            assert measure(line) <= width or " " not in line
