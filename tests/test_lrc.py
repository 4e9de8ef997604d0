"""Tests for LRC parsing and active line lookup."""

import pytest

from lrcplayer.core.lrc import LyricLine, active_index, format_lrc, is_synchronized, parse_lrc


class TestParseLrc:
    """Tests for parse_lrc."""

    def test_parse_synced_lines(self) -> None:
        result = parse_lrc("[00:01.00]Hello\n[00:05.00]World")

        assert result == [LyricLine(1.0, "Hello"), LyricLine(5.0, "World")]

    def test_fraction_is_right_padded(self) -> None:
        """[01:02.5] means 62.5 seconds, not 62.005."""
        result = parse_lrc("[01:02.5]x")

        assert result == [LyricLine(62.5, "x")]

    def test_three_digit_fraction(self) -> None:
        result = parse_lrc("[00:12.345]x")

        assert result[0].time == pytest.approx(12.345)

    def test_tag_without_fraction_and_single_digit_minutes(self) -> None:
        result = parse_lrc("[1:05]x")

        assert result == [LyricLine(65.0, "x")]

    def test_multiple_tags_on_one_line(self) -> None:
        result = parse_lrc("[00:10.00][00:30.00]Chorus\n[00:20.00]Verse")

        assert result == [
            LyricLine(10.0, "Chorus"),
            LyricLine(20.0, "Verse"),
            LyricLine(30.0, "Chorus"),
        ]

    def test_metadata_and_untagged_lines_dropped(self) -> None:
        text = "[ar:Someone]\n[ti:Song]\nnot a lyric\n[00:02.00]  Sung line  \n"

        result = parse_lrc(text)

        assert result == [LyricLine(2.0, "Sung line")]

    def test_tag_with_empty_text_dropped(self) -> None:
        result = parse_lrc("[00:01.00]\n[00:02.00]   \n[00:03.00]x")

        assert result == [LyricLine(3.0, "x")]

    def test_sorted_stable_for_equal_times(self) -> None:
        result = parse_lrc("[00:05.00]B\n[00:01.00]A\n[00:05.00]C")

        assert [line.text for line in result] == ["A", "B", "C"]

    def test_plain_text_is_unsynchronized(self) -> None:
        result = parse_lrc("line one\nline two")

        assert result == [LyricLine(0.0, "line one"), LyricLine(0.0, "line two")]

    def test_plain_text_skips_blank_lines_and_trims(self) -> None:
        result = parse_lrc("\n  first  \n\n\t\nsecond\r\n")

        assert [line.text for line in result] == ["first", "second"]

    def test_plain_text_keeps_bracketed_metadata(self) -> None:
        """Without any timestamp tag, every non-blank line is lyrics."""
        result = parse_lrc("[ar:Someone]\nhello")

        assert [line.text for line in result] == ["[ar:Someone]", "hello"]

    def test_non_ascii_digits_are_not_timestamps(self) -> None:
        result = parse_lrc("[٠٠:١٠]word")

        assert result == [LyricLine(0.0, "[٠٠:١٠]word")]

    def test_only_newline_separates_lines(self) -> None:
        """Unicode line separators stay inside the lyric text."""
        result = parse_lrc("[00:01.00]Hello\u2028World\n[00:05.00]Next\x0cpage")

        assert result == [LyricLine(1.0, "Hello\u2028World"), LyricLine(5.0, "Next\x0cpage")]

    def test_plain_text_only_split_on_newline(self) -> None:
        result = parse_lrc("one\u0085two\r\nthree")

        assert [line.text for line in result] == ["one\u0085two", "three"]

    @pytest.mark.parametrize("text", ["", None, "\n\n   \n"])
    def test_empty_input(self, text) -> None:
        assert parse_lrc(text) == []

    def test_malformed_tags_do_not_raise(self) -> None:
        result = parse_lrc("[xx:yy.zz]foo\n[00:1.00]bar\n[123:00.00]baz")

        assert all(isinstance(line, LyricLine) for line in result)


class TestFormatLrc:
    """Tests for format_lrc."""

    def test_format_lines(self) -> None:
        text = format_lrc([LyricLine(1.25, "a"), LyricLine(62.5, "b")])

        assert text == "[00:01.25] a\n[01:02.50] b"

    def test_round_trip_keeps_time_order(self) -> None:
        lines = [LyricLine(3.5, "c"), LyricLine(1.25, "a"), LyricLine(1.25, "b")]

        result = parse_lrc(format_lrc(lines))

        assert result == [LyricLine(1.25, "a"), LyricLine(1.25, "b"), LyricLine(3.5, "c")]


class TestIsSynchronized:
    """Tests for is_synchronized."""

    def test_all_zero_is_unsynchronized(self) -> None:
        assert is_synchronized([LyricLine(0.0, "a"), LyricLine(0.0, "b")]) is False

    def test_one_positive_time_is_synchronized(self) -> None:
        assert is_synchronized([LyricLine(0.0, "a"), LyricLine(4.0, "b")]) is True

    def test_empty_is_unsynchronized(self) -> None:
        assert is_synchronized([]) is False


class TestActiveIndex:
    """Tests for active_index."""

    LINES = [LyricLine(1.0, "a"), LyricLine(5.0, "b"), LyricLine(9.0, "c")]

    def test_empty_lines(self) -> None:
        assert active_index([], 3.0) == -1

    def test_before_first_line(self) -> None:
        assert active_index(self.LINES, 0.5) == -1

    @pytest.mark.parametrize("i", [0, 1, 2])
    def test_exact_timestamp_selects_that_line(self, i: int) -> None:
        assert active_index(self.LINES, self.LINES[i].time) == i

    def test_between_lines(self) -> None:
        assert active_index(self.LINES, 4.99) == 0
        assert active_index(self.LINES, 100.0) == 2

    def test_non_decreasing_in_time(self) -> None:
        indexes = [active_index(self.LINES, t / 10) for t in range(0, 120)]

        assert indexes == sorted(indexes)

    def test_equal_times_pick_last(self) -> None:
        lines = [LyricLine(2.0, "a"), LyricLine(2.0, "b")]

        assert active_index(lines, 2.0) == 1
