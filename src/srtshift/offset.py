"""
Offset calculation module for srtshift.

Finds the reference caption and derives the millisecond delta between
its current start time and the requested new start time.
"""

from .document import Caption, SubtitleDocument
from .timecode import DEFAULT_FPS, TimecodeParser
from .utils import ReferenceCaptionError, ZeroOffsetError, format_offset, get_logger

logger = get_logger(__name__)


class OffsetCalculator:
    """
    Computes the offset applied to every caption from the reference on.

    The old and new times are parsed independently, so either may be
    given in clock or frame notation.
    """

    def __init__(self, fps: int = DEFAULT_FPS):
        """
        Initialize the offset calculator.

        Args:
            fps: Frame rate for frame-form timecodes
        """
        self.parser = TimecodeParser(fps=fps)

    def find_reference_caption(
        self, document: SubtitleDocument, reference_index: int = 1
    ) -> Caption:
        """
        Find the first caption whose index is at least reference_index.

        Args:
            document: Parsed subtitle document
            reference_index: 1-based caption index to anchor on

        Returns:
            The reference caption

        Raises:
            ReferenceCaptionError: If no caption qualifies
        """
        caption = document.find_caption(reference_index)
        if caption is not None:
            logger.debug(
                f"Reference caption {caption.index} found at line {caption.time_line}"
            )
            return caption

        raise ReferenceCaptionError(
            f"No caption with index {reference_index} or later "
            f"(document has {len(document.captions)} captions)"
        )

    def compute_offset(
        self,
        document: SubtitleDocument,
        new_time: str,
        reference_index: int = 1,
    ) -> int:
        """
        Compute the signed offset in milliseconds.

        Args:
            document: Parsed subtitle document
            new_time: New start time for the reference caption
            reference_index: 1-based caption index to anchor on

        Returns:
            new_time minus the reference caption's current start, in ms

        Raises:
            MalformedTimecodeError: If either time cannot be parsed
            ReferenceCaptionError: If no reference caption exists
            ZeroOffsetError: If the offset is zero
        """
        logger.info(f"New time: {new_time}")
        logger.info(f"Line number to start offset: {reference_index}")

        new_millis = self.parser.parse(new_time)

        caption = self.find_reference_caption(document, reference_index)
        logger.info(f"Old time at that line: {caption.start}")
        old_millis = self.parser.parse(caption.start)

        offset = new_millis - old_millis
        logger.info(f"Offset: {offset} ms ({format_offset(offset)})")

        if offset == 0:
            raise ZeroOffsetError(
                f"New time {new_time} matches caption {caption.index}; nothing to shift"
            )

        return offset


def calculate_offset(
    document: SubtitleDocument,
    new_time: str,
    reference_index: int = 1,
    fps: int = DEFAULT_FPS,
) -> int:
    """
    Convenience function to compute the shift offset.

    Args:
        document: Parsed subtitle document
        new_time: New start time for the reference caption
        reference_index: 1-based caption index to anchor on
        fps: Frame rate for frame-form timecodes

    Returns:
        Offset in milliseconds
    """
    calculator = OffsetCalculator(fps=fps)
    return calculator.compute_offset(document, new_time, reference_index)
