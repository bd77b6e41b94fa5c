"""
Timecode parsing and formatting for srtshift.

Two input notations are understood:

- clock form ``HH:MM:SS,mmm`` (millisecond precision, as written in SRT)
- frame form ``HH:MM:SS:FF`` (frame count at a fixed frame rate, as shown
  by video editors)

Fields are validated by digit count only. An hour field of ``99`` or a
frame field of ``30`` at 24 fps is accepted and converted arithmetically.
Output is always clock form.
"""

import re
from typing import List

from .utils import MalformedTimecodeError, NegativeTimestampError, get_logger

logger = get_logger(__name__)

DEFAULT_FPS = 24

MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1000

_TWO_DIGITS = re.compile(r"[0-9]{2}")
_THREE_DIGITS = re.compile(r"[0-9]{3}")


def _is_two_digits(field: str) -> bool:
    return _TWO_DIGITS.fullmatch(field) is not None


def _is_three_digits(field: str) -> bool:
    return _THREE_DIGITS.fullmatch(field) is not None


class TimecodeParser:
    """
    Converts clock-form and frame-form timecodes to milliseconds.

    The frame rate only affects frame-form input.
    """

    def __init__(self, fps: int = DEFAULT_FPS):
        """
        Initialize the parser.

        Args:
            fps: Frames per second used to interpret frame-form timecodes
        """
        if fps < 1:
            raise ValueError(f"Frame rate must be a positive integer, got {fps}")
        self.fps = fps

    def is_clock_form(self, text: str) -> bool:
        """Check whether text looks like ``HH:MM:SS,mmm``."""
        fields = text.strip().split(":")
        if len(fields) != 3:
            return False
        if not (_is_two_digits(fields[0]) and _is_two_digits(fields[1])):
            return False

        seconds_fields = fields[2].split(",")
        if len(seconds_fields) != 2:
            return False
        return _is_two_digits(seconds_fields[0]) and _is_three_digits(seconds_fields[1])

    def is_frame_form(self, text: str) -> bool:
        """Check whether text looks like ``HH:MM:SS:FF``."""
        fields = text.strip().split(":")
        if len(fields) != 4:
            return False
        return all(_is_two_digits(field) for field in fields)

    def frames_to_millis(self, frames: int) -> int:
        """
        Convert a frame count to milliseconds, rounding halves up.

        Args:
            frames: Frame number within the second

        Returns:
            Milliseconds
        """
        # Integer arithmetic: floor((frames * 1000 + fps / 2) / fps)
        return (frames * 2000 + self.fps) // (2 * self.fps)

    def parse(self, text: str) -> int:
        """
        Parse a timecode in either notation.

        Args:
            text: Timecode string

        Returns:
            Milliseconds since 00:00:00.000

        Raises:
            MalformedTimecodeError: If text matches neither notation
        """
        stripped = text.strip()

        if self.is_clock_form(stripped):
            return self._parse_clock(stripped.split(":"))

        if self.is_frame_form(stripped):
            return self._parse_frames(stripped.split(":"))

        raise MalformedTimecodeError(
            f"Timecode {text!r} is neither HH:MM:SS,mmm nor HH:MM:SS:FF"
        )

    def _parse_clock(self, fields: List[str]) -> int:
        seconds, millis = fields[2].split(",")
        return (
            int(fields[0]) * MS_PER_HOUR
            + int(fields[1]) * MS_PER_MINUTE
            + int(seconds) * MS_PER_SECOND
            + int(millis)
        )

    def _parse_frames(self, fields: List[str]) -> int:
        return (
            int(fields[0]) * MS_PER_HOUR
            + int(fields[1]) * MS_PER_MINUTE
            + int(fields[2]) * MS_PER_SECOND
            + self.frames_to_millis(int(fields[3]))
        )


def parse_timecode(text: str, fps: int = DEFAULT_FPS) -> int:
    """
    Convenience function to parse a timecode in either notation.

    Args:
        text: Timecode string
        fps: Frame rate for frame-form input

    Returns:
        Milliseconds

    Example:
        >>> parse_timecode("00:01:19,111")
        79111
        >>> parse_timecode("00:00:41:17")
        41708
    """
    return TimecodeParser(fps=fps).parse(text)


def format_timecode(millis: int) -> str:
    """
    Format milliseconds as a clock-form SRT timecode (HH:MM:SS,mmm).

    Hours are padded to at least two digits but never truncated.

    Args:
        millis: Non-negative milliseconds

    Returns:
        Formatted timecode

    Raises:
        NegativeTimestampError: If millis is negative

    Example:
        >>> format_timecode(49111)
        '00:00:49,111'
        >>> format_timecode(360_000_000)
        '100:00:00,000'
    """
    if millis < 0:
        raise NegativeTimestampError(
            f"Cannot format negative timestamp ({millis} ms)"
        )

    hours, remainder = divmod(millis, MS_PER_HOUR)
    minutes, remainder = divmod(remainder, MS_PER_MINUTE)
    seconds, ms = divmod(remainder, MS_PER_SECOND)

    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{ms:03d}"
