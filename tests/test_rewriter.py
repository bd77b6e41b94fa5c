"""
Unit tests for the line rewriter.
"""

import pytest

from srtshift.document import SubtitleDocument
from srtshift.rewriter import LineRewriter, shift_subtitles
from srtshift.timecode import parse_timecode
from srtshift.utils import MalformedTimecodeError, NegativeTimestampError


def time_ranges(text):
    """Extract (start_ms, end_ms) pairs from SRT text."""
    pairs = []
    for line in text.splitlines():
        if " --> " in line:
            start, end = line.split(" --> ")
            pairs.append((parse_timecode(start), parse_timecode(end)))
    return pairs


class TestLineRewriter:
    """Tests for LineRewriter class."""

    @pytest.fixture
    def document(self, sample_srt):
        return SubtitleDocument.from_text(sample_srt)

    def test_init(self):
        """Test rewriter initialization."""
        rewriter = LineRewriter(offset=-500, fps=30)
        assert rewriter.offset == -500
        assert rewriter.parser.fps == 30

    def test_shift_all_from_first(self, document):
        """Test every caption moves when anchored on caption 1."""
        rewriter = LineRewriter(offset=-30000)
        output = rewriter.rewrite_to_string(document)

        assert output == (
            "1\r\n"
            "00:00:49,111 --> 00:00:50,646\r\n"
            "That's the cleanup crew\r\n"
            "\r\n"
            "2\r\n"
            "00:00:50,679 --> 00:00:52,647\r\n"
            "up on the track,\r\n"
            "and that's a lot of racers\r\n"
            "\r\n"
            "3\r\n"
            "00:00:52,681 --> 00:00:55,450\r\n"
            "involved there, folks.\r\n"
        )

    def test_shift_from_second(self, document, sample_srt):
        """Test caption 1 is left alone when anchored on caption 2."""
        rewriter = LineRewriter(offset=-31568)
        output = rewriter.rewrite(document, reference_index=2)

        assert output[1] == "00:01:19,111 --> 00:01:20,646\r\n"
        assert output[5] == "00:00:49,111 --> 00:00:51,079\r\n"
        assert output[10] == "00:00:51,113 --> 00:00:53,882\r\n"

    def test_untouched_prefix(self, document, sample_srt):
        """Test lines before the reference are byte-identical."""
        rewriter = LineRewriter(offset=5000)
        output = rewriter.rewrite(document, reference_index=3)
        original = [line.raw for line in document.lines]

        assert output[:9] == original[:9]
        assert output[9:] != original[9:]

    def test_durations_preserved(self, document, sample_srt):
        """Test every shifted caption keeps its duration."""
        rewriter = LineRewriter(offset=-12345)
        before = time_ranges(sample_srt)
        after = time_ranges(rewriter.rewrite_to_string(document))

        for (old_start, old_end), (new_start, new_end) in zip(before, after):
            assert new_end - new_start == old_end - old_start

    def test_offset_linearity(self, document, sample_srt):
        """Test spacing between shifted captions is unchanged."""
        rewriter = LineRewriter(offset=777)
        before = time_ranges(sample_srt)
        after = time_ranges(rewriter.rewrite_to_string(document, reference_index=2))

        assert after[2][0] - after[1][0] == before[2][0] - before[1][0]
        assert after[1][0] - before[1][0] == 777

    def test_renumbering(self):
        """Test indices become 1, 2, 3 regardless of input numbering."""
        text = (
            "10\n00:00:01,000 --> 00:00:02,000\nA\n\n"
            "10\n00:00:03,000 --> 00:00:04,000\nB\n\n"
            "42\n00:00:05,000 --> 00:00:06,000\nC\n"
        )
        rewriter = LineRewriter(offset=1000)
        output = rewriter.rewrite(SubtitleDocument.from_text(text))

        indices = [output[i] for i in (0, 4, 8)]
        assert indices == ["1\n", "2\n", "3\n"]
        assert rewriter.stats["renumbered"] == 3

    def test_line_endings_preserved(self):
        """Test LF input stays LF and the final line stays unterminated."""
        text = "1\n00:00:01,000 --> 00:00:02,000\nHi"
        rewriter = LineRewriter(offset=1000)
        output = rewriter.rewrite_to_string(SubtitleDocument.from_text(text))

        assert output == "1\n00:00:02,000 --> 00:00:03,000\nHi"

    def test_frame_form_input_written_as_clock(self):
        """Test frame-form time ranges are emitted in clock form."""
        text = "1\r\n00:00:41:17 --> 00:00:42:12\r\nHi\r\n"
        rewriter = LineRewriter(offset=1000)
        output = rewriter.rewrite(SubtitleDocument.from_text(text))

        assert output[1] == "00:00:42,708 --> 00:00:43,500\r\n"

    def test_numeric_dialogue_not_renumbered(self):
        """Test numeric dialogue lines are copied verbatim."""
        text = "5\n00:00:01,000 --> 00:00:02,000\n2001\n\n"
        rewriter = LineRewriter(offset=1000)
        output = rewriter.rewrite(SubtitleDocument.from_text(text))

        assert output[0] == "1\n"
        assert output[2] == "2001\n"

    def test_dialogue_with_decimal_number(self):
        """Test a decimal number in dialogue is copied verbatim."""
        text = "1\n00:00:01,000 --> 00:00:02,000\n3.\n\n"
        rewriter = LineRewriter(offset=1000)
        output = rewriter.rewrite(SubtitleDocument.from_text(text))

        assert output[2] == "3.\n"

    def test_malformed_time_after_reference(self):
        """Test a malformed timestamp in a shifted caption aborts."""
        text = (
            "1\n00:00:01,000 --> 00:00:02,000\nA\n\n"
            "2\n00:00:03,000 --> garbage\nB\n"
        )
        rewriter = LineRewriter(offset=1000)
        with pytest.raises(MalformedTimecodeError, match="Line 6"):
            rewriter.rewrite(SubtitleDocument.from_text(text))

    def test_malformed_time_before_reference_ignored(self):
        """Test malformed timestamps before the reference are copied."""
        text = (
            "1\n00:00:01 --> ???\nA\n\n"
            "2\n00:00:03,000 --> 00:00:04,000\nB\n"
        )
        rewriter = LineRewriter(offset=1000)
        output = rewriter.rewrite(SubtitleDocument.from_text(text), reference_index=2)

        assert output[1] == "00:00:01 --> ???\n"
        assert output[5] == "00:00:04,000 --> 00:00:05,000\n"

    def test_negative_result(self):
        """Test shifting before zero aborts."""
        text = "1\n00:00:01,000 --> 00:00:02,000\nA\n"
        rewriter = LineRewriter(offset=-1500)
        with pytest.raises(NegativeTimestampError, match="Line 2"):
            rewriter.rewrite(SubtitleDocument.from_text(text))

    def test_stats(self, document):
        """Test rewrite statistics."""
        rewriter = LineRewriter(offset=1000)
        rewriter.rewrite(document, reference_index=2)

        assert rewriter.stats["renumbered"] == 3
        assert rewriter.stats["shifted"] == 2
        assert rewriter.stats["copied"] == len(document.lines) - 5


class TestShiftSubtitles:
    """Tests for shift_subtitles convenience function."""

    def test_shift_subtitles(self, sample_srt):
        """Test convenience function returns text and statistics."""
        document = SubtitleDocument.from_text(sample_srt)
        result = shift_subtitles(document, offset=-30000)

        assert result["offset"] == -30000
        assert result["renumbered"] == 3
        assert result["shifted"] == 3
        assert result["text"].startswith("1\r\n00:00:49,111 --> 00:00:50,646\r\n")


class TestCorruptedInput:
    """Tests for renumbering and shifting damaged documents."""

    def test_orphan_index_renumbered(self):
        """Test an index separated from its time range is still renumbered."""
        text = (
            "5\n00:00:01,000 --> 00:00:02,000\nA\n\n"
            "9\n\n00:00:03,000 --> 00:00:04,000\nB\n"
        )
        rewriter = LineRewriter(offset=1000)
        output = rewriter.rewrite_to_string(SubtitleDocument.from_text(text))

        assert output == (
            "1\n00:00:02,000 --> 00:00:03,000\nA\n\n"
            "2\n\n00:00:04,000 --> 00:00:05,000\nB\n"
        )

    def test_orphan_index_does_not_start_shifting(self):
        """Test shifting starts at the reference caption, not at an orphan index."""
        text = (
            "1\n00:00:01,000 --> 00:00:02,000\nA\n\n"
            "3\n\n00:00:03,000 --> 00:00:04,000\nB\n\n"
            "4\n00:00:05,000 --> 00:00:06,000\nC\n"
        )
        rewriter = LineRewriter(offset=1000)
        output = rewriter.rewrite(SubtitleDocument.from_text(text), reference_index=3)

        assert output[4] == "2\n"
        assert output[6] == "00:00:03,000 --> 00:00:04,000\n"
        assert output[9] == "3\n"
        assert output[10] == "00:00:06,000 --> 00:00:07,000\n"
