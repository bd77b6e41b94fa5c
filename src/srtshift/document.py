"""
SRT document model for srtshift.

Splits raw subtitle text into classified lines and groups them into
caption records. Every line keeps its raw text and its own terminator so
that untouched lines are written back byte for byte.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .utils import get_logger

logger = get_logger(__name__)

ARROW = " --> "

_INDEX_PATTERN = re.compile(r"[0-9]+")
_LINE_PATTERN = re.compile(r"([^\r\n]*)(\r\n|\n|\r|$)")


class LineKind:
    """Tags for classified document lines."""

    INDEX = "index"
    TIME_RANGE = "time_range"
    TEXT = "text"
    BLANK = "blank"


@dataclass
class SubtitleLine:
    """
    One physical line of the document.

    ``content`` excludes the terminator; ``ending`` is ``"\\r\\n"``,
    ``"\\n"``, ``"\\r"`` or ``""`` for a last line without one.
    """

    number: int
    content: str
    ending: str
    kind: str = LineKind.TEXT

    @property
    def raw(self) -> str:
        return self.content + self.ending

    @property
    def index_value(self) -> Optional[int]:
        if self.kind != LineKind.INDEX:
            return None
        return int(self.content.strip())

    def split_time_range(self) -> Tuple[str, str]:
        """Return the start and end timecode strings of a time-range line."""
        start, _, end = self.content.partition(ARROW)
        return start.strip(), end.strip()


@dataclass
class Caption:
    """A subtitle entry materialized from its index, time-range and text lines."""

    index: int
    start: str
    end: str
    text: List[str] = field(default_factory=list)
    index_line: int = 0
    time_line: int = 0


def split_lines(text: str) -> List[Tuple[str, str]]:
    """
    Split text into (content, ending) pairs, preserving each terminator.

    Args:
        text: Raw document text

    Returns:
        List of (content, ending) tuples

    Example:
        >>> split_lines("1\\r\\nHi\\n")
        [('1', '\\r\\n'), ('Hi', '\\n')]
    """
    pairs = []
    position = 0
    while position < len(text):
        match = _LINE_PATTERN.match(text, position)
        content, ending = match.group(1), match.group(2)
        pairs.append((content, ending))
        position = match.end()
    return pairs


def is_index_candidate(content: str) -> bool:
    """Check whether a line, once trimmed, is a bare non-negative integer."""
    return _INDEX_PATTERN.fullmatch(content.strip()) is not None


def is_time_range(content: str) -> bool:
    """Check whether a line carries the SRT arrow separator."""
    return ARROW in content


def is_blank(content: str) -> bool:
    return not content.strip()


class SubtitleDocument:
    """
    A parsed SRT document.

    Lines are classified once on construction. A bare integer line is a
    caption index when the next line is a time range or when it opens a
    block (first line, or right after a blank line). Numeric dialogue such
    as ``1984`` under a time range therefore stays text, while an index
    whose time range is damaged or missing is still renumbered.
    """

    def __init__(self, lines: List[SubtitleLine]):
        self.lines = lines
        self.captions = self._build_captions()

        logger.debug(
            f"Parsed document: {len(self.lines)} lines, {len(self.captions)} captions"
        )

    @classmethod
    def from_text(cls, text: str) -> "SubtitleDocument":
        """
        Parse raw SRT text.

        Args:
            text: Raw document text

        Returns:
            SubtitleDocument instance
        """
        pairs = split_lines(text)
        lines = []

        for number, (content, ending) in enumerate(pairs, start=1):
            lines.append(SubtitleLine(number=number, content=content, ending=ending))

        for i, line in enumerate(lines):
            if is_time_range(line.content):
                line.kind = LineKind.TIME_RANGE
            elif is_blank(line.content):
                line.kind = LineKind.BLANK
            elif is_index_candidate(line.content):
                opens_block = i == 0 or is_blank(lines[i - 1].content)
                before_range = i + 1 < len(lines) and is_time_range(lines[i + 1].content)
                if opens_block or before_range:
                    line.kind = LineKind.INDEX

        return cls(lines)

    def _build_captions(self) -> List[Caption]:
        captions = []
        current = None

        for i, line in enumerate(self.lines):
            if line.kind == LineKind.INDEX:
                current = None
                if i + 1 < len(self.lines) and self.lines[i + 1].kind == LineKind.TIME_RANGE:
                    time_line = self.lines[i + 1]
                    start, end = time_line.split_time_range()
                    current = Caption(
                        index=line.index_value,
                        start=start,
                        end=end,
                        index_line=line.number,
                        time_line=time_line.number,
                    )
                    captions.append(current)
                else:
                    logger.warning(
                        f"Caption index {line.index_value} at line {line.number} "
                        f"has no time range"
                    )
            elif line.kind == LineKind.TEXT and current is not None:
                current.text.append(line.content)
            elif line.kind == LineKind.BLANK:
                current = None

        return captions

    def find_caption(self, min_index: int) -> Optional[Caption]:
        """
        Find the first caption, in file order, whose index is at least min_index.

        Args:
            min_index: Lowest acceptable caption index

        Returns:
            The caption, or None if there is none
        """
        for caption in self.captions:
            if caption.index >= min_index:
                return caption
        return None

    def __len__(self) -> int:
        return len(self.captions)
