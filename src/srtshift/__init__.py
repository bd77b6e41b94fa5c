"""
srtshift: SRT subtitle timestamp shifter

Shifts every timestamp in an SRT file from a reference caption onward by
the offset between that caption's start and a new start time given in
clock (HH:MM:SS,mmm) or frame (HH:MM:SS:FF) notation.
"""

__version__ = "0.1.0"
__author__ = "srtshift Contributors"
__license__ = "MIT"

from .cli import main as cli_main
from .config import ShiftConfig
from .document import Caption, LineKind, SubtitleDocument, SubtitleLine
from .offset import OffsetCalculator, calculate_offset
from .rewriter import LineRewriter, shift_subtitles
from .srt_file import load_srt, read_text, write_srt
from .timecode import TimecodeParser, format_timecode, parse_timecode
from .utils import (
    InputAccessError,
    MalformedTimecodeError,
    NegativeTimestampError,
    OutputAccessError,
    ReferenceCaptionError,
    SrtShiftError,
    ZeroOffsetError,
)

__all__ = [
    "__version__",
    "SrtShiftError",
    "InputAccessError",
    "OutputAccessError",
    "MalformedTimecodeError",
    "NegativeTimestampError",
    "ZeroOffsetError",
    "ReferenceCaptionError",
    "ShiftConfig",
    "TimecodeParser",
    "parse_timecode",
    "format_timecode",
    "SubtitleDocument",
    "SubtitleLine",
    "Caption",
    "LineKind",
    "OffsetCalculator",
    "calculate_offset",
    "LineRewriter",
    "shift_subtitles",
    "load_srt",
    "read_text",
    "write_srt",
    "cli_main",
]
