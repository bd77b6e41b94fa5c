"""
Line rewriting module for srtshift.

Renumbers caption indices sequentially and shifts every time range from
the reference caption onward by a fixed offset.
"""

from typing import Dict, List

from .document import ARROW, LineKind, SubtitleDocument, SubtitleLine
from .timecode import DEFAULT_FPS, TimecodeParser, format_timecode
from .utils import MalformedTimecodeError, NegativeTimestampError, get_logger

logger = get_logger(__name__)


class LineRewriter:
    """
    Rewrites a parsed document line by line.

    Index lines become a running counter starting at 1. Time-range lines
    are shifted once the reference caption has been reached and stay
    shifted until the end of the document. Everything else is copied.
    """

    def __init__(self, offset: int, fps: int = DEFAULT_FPS):
        """
        Initialize the rewriter.

        Args:
            offset: Signed offset in milliseconds
            fps: Frame rate for frame-form timecodes in the input
        """
        self.offset = offset
        self.parser = TimecodeParser(fps=fps)
        self.stats = {"renumbered": 0, "shifted": 0, "copied": 0}

    def shift_time_range(self, line: SubtitleLine) -> str:
        """
        Shift both timestamps of a time-range line.

        Args:
            line: Line of kind TIME_RANGE

        Returns:
            ``start --> end`` in clock form with the line's own terminator

        Raises:
            MalformedTimecodeError: If either timestamp cannot be parsed
            NegativeTimestampError: If a shifted timestamp falls below zero
        """
        start_text, end_text = line.split_time_range()

        try:
            start = self.parser.parse(start_text) + self.offset
            end = self.parser.parse(end_text) + self.offset
            new_start = format_timecode(start)
            new_end = format_timecode(end)
        except (MalformedTimecodeError, NegativeTimestampError) as e:
            raise type(e)(f"Line {line.number}: {e}") from e

        return f"{new_start}{ARROW}{new_end}{line.ending}"

    def rewrite(self, document: SubtitleDocument, reference_index: int = 1) -> List[str]:
        """
        Produce the output lines for a document.

        Args:
            document: Parsed subtitle document
            reference_index: 1-based index of the first caption to shift

        Returns:
            Output lines, each with its terminator
        """
        self.stats = {"renumbered": 0, "shifted": 0, "copied": 0}
        output = []
        counter = 1
        active = False
        anchor = document.find_caption(reference_index)
        anchor_line = anchor.index_line if anchor is not None else None

        for line in document.lines:
            if line.kind == LineKind.INDEX:
                if line.number == anchor_line:
                    active = True
                    logger.debug(
                        f"Offsetting starts at caption {line.index_value} "
                        f"(line {line.number})"
                    )
                output.append(f"{counter}{line.ending}")
                counter += 1
                self.stats["renumbered"] += 1
            elif line.kind == LineKind.TIME_RANGE and active:
                output.append(self.shift_time_range(line))
                self.stats["shifted"] += 1
            else:
                output.append(line.raw)
                self.stats["copied"] += 1

        logger.info(
            f"Rewrote {self.stats['renumbered']} captions, "
            f"shifted {self.stats['shifted']} time ranges by {self.offset} ms"
        )
        return output

    def rewrite_to_string(self, document: SubtitleDocument, reference_index: int = 1) -> str:
        """Rewrite a document and join the result into a single string."""
        return "".join(self.rewrite(document, reference_index))


def shift_subtitles(
    document: SubtitleDocument,
    offset: int,
    reference_index: int = 1,
    fps: int = DEFAULT_FPS,
) -> Dict[str, any]:
    """
    Convenience function to rewrite a document.

    Args:
        document: Parsed subtitle document
        offset: Signed offset in milliseconds
        reference_index: 1-based index of the first caption to shift
        fps: Frame rate for frame-form timecodes

    Returns:
        Dictionary with the rewritten text and rewrite statistics
    """
    rewriter = LineRewriter(offset=offset, fps=fps)
    text = rewriter.rewrite_to_string(document, reference_index)

    return {
        "text": text,
        "renumbered": rewriter.stats["renumbered"],
        "shifted": rewriter.stats["shifted"],
        "offset": offset,
    }
