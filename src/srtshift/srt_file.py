"""
Subtitle file reading and writing for srtshift.

Input is decoded from raw bytes and output is written as encoded bytes,
so carriage returns survive the round trip. Output uses the encoding the
input was read with.
"""

import codecs
from pathlib import Path
from typing import Dict, Optional, Tuple

from .document import SubtitleDocument
from .utils import InputAccessError, OutputAccessError, get_logger, validate_file_exists

logger = get_logger(__name__)

# utf-8-sig first so a byte order mark never ends up glued to caption 1
ENCODINGS = ["utf-8-sig", "cp1252", "latin-1"]


def read_text(input_path: str, encoding: Optional[str] = None) -> Tuple[str, str]:
    """
    Read a subtitle file with automatic encoding detection.

    The reported encoding is ``utf-8-sig`` only when the file really starts
    with a byte order mark, so writing back with it reproduces the input.

    Args:
        input_path: Path to the SRT file
        encoding: Force a specific encoding instead of detecting one

    Returns:
        Tuple of (text, encoding used)

    Raises:
        InputAccessError: If the file is missing, unreadable or undecodable
    """
    if not validate_file_exists(input_path):
        raise InputAccessError(f"Subtitle file not found: {input_path}")

    try:
        with open(input_path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise InputAccessError(f"Error reading subtitle file: {e}")

    encodings = [encoding] if encoding else ENCODINGS

    for candidate in encodings:
        try:
            text = data.decode(candidate)
        except UnicodeDecodeError:
            continue
        except LookupError as e:
            raise InputAccessError(f"Unknown encoding {candidate!r}: {e}")

        if candidate == "utf-8-sig" and not data.startswith(codecs.BOM_UTF8):
            candidate = "utf-8"
        logger.debug(f"Successfully loaded subtitles with {candidate} encoding")
        return text, candidate

    raise InputAccessError(
        f"Could not decode subtitle file with any supported encoding: {encodings}"
    )


def load_srt(input_path: str, encoding: Optional[str] = None) -> Dict[str, any]:
    """
    Load and parse a subtitle file.

    Args:
        input_path: Path to the SRT file
        encoding: Optional forced encoding

    Returns:
        Dictionary with the parsed document, encoding and line counts
    """
    logger.info(f"Loading subtitles from {input_path}")

    text, used_encoding = read_text(input_path, encoding)
    document = SubtitleDocument.from_text(text)

    logger.info(
        f"Loaded {len(document)} captions ({len(document.lines)} lines)"
    )

    return {
        "document": document,
        "encoding": used_encoding,
        "total_lines": len(document.lines),
        "total_captions": len(document),
    }


def write_srt(output_path: str, text: str, encoding: str = "utf-8") -> Dict[str, any]:
    """
    Write rewritten subtitle text to disk.

    Args:
        output_path: Destination path
        text: Full document text, terminators included
        encoding: Encoding to write with

    Returns:
        Dictionary with the resolved output path and bytes written

    Raises:
        OutputAccessError: If the file cannot be written
    """
    output_file = Path(output_path)

    # Encode before opening so an unencodable character leaves no file behind
    try:
        data = text.encode(encoding)
    except (LookupError, UnicodeEncodeError) as e:
        raise OutputAccessError(f"Cannot encode subtitles as {encoding}: {e}")

    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "wb") as f:
            f.write(data)
    except OSError as e:
        raise OutputAccessError(f"Error writing subtitle file {output_path}: {e}")

    logger.info(f"Wrote subtitles to {output_path}")

    return {
        "output_file": str(output_file.resolve()),
        "bytes_written": output_file.stat().st_size,
    }
