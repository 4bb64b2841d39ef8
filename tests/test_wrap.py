"""Tests for word wrapping."""

from bubble_say.render.wrap import hard_break, measure_for, wrap


class TestWrap:
    """Tests for wrap()."""

    def test_short_message_is_unchanged(self) -> None:
        assert wrap("I am a cow!", 40) == ["I am a cow!"]

    def test_exact_fit(self) -> None:
        assert wrap("abcd", 4) == ["abcd"]

    def test_empty_message(self) -> None:
        assert wrap("", 40) == [""]

    def test_whitespace_only(self) -> None:
        assert wrap(" \t\n ", 40) == [""]

    def test_collapses_whitespace(self) -> None:
        assert wrap("  a\tb\n c  ", 40) == ["a b c"]

    def test_greedy_packing(self) -> None:
        assert wrap("the quick brown fox", 10) == ["the quick", "brown fox"]

    def test_lines_never_exceed_width(self) -> None:
        text = "lorem ipsum dolor sit amet consectetur adipiscing elit sed do"
        for width in (4, 7, 12, 20):
            assert all(len(line) <= width for line in wrap(text, width))

    def test_long_word_is_hard_broken(self) -> None:
        assert wrap("abcdefghij", 4) == ["abcd", "efgh", "ij"]

    def test_long_word_gets_its_own_lines(self) -> None:
        assert wrap("hi abcdefghij yo", 4) == ["hi", "abcd", "efgh", "ij", "yo"]

    def test_east_asian_measure(self) -> None:
        measure = measure_for(True)
        assert wrap("呼んだ? 呼んだ?", 9, measure) == ["呼んだ?", "呼んだ?"]
        assert wrap("呼んだ? 呼んだ?", 9) == ["呼んだ? 呼んだ?"]


class TestHardBreak:
    """Tests for hard_break()."""

    def test_chunks(self) -> None:
        assert hard_break("abcdefghij", 3) == ["abc", "def", "ghi", "j"]

    def test_short_word(self) -> None:
        assert hard_break("ab", 4) == ["ab"]

    def test_wide_chars(self) -> None:
        assert hard_break("呼んだ", 4, measure_for(True)) == ["呼ん", "だ"]

    def test_char_wider_than_limit_gets_own_chunk(self) -> None:
        assert hard_break("呼ん", 1, measure_for(True)) == ["呼", "ん"]
