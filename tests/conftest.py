"""
Shared fixtures for srtshift tests.
"""

import logging

import pytest

SAMPLE_SRT = (
    "1\r\n"
    "00:01:19,111 --> 00:01:20,646\r\n"
    "That's the cleanup crew\r\n"
    "\r\n"
    "2\r\n"
    "00:01:20,679 --> 00:01:22,647\r\n"
    "up on the track,\r\n"
    "and that's a lot of racers\r\n"
    "\r\n"
    "3\r\n"
    "00:01:22,681 --> 00:01:25,450\r\n"
    "involved there, folks.\r\n"
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging so they never outlive a test."""
    root_logger = logging.getLogger()
    before = list(root_logger.handlers)
    yield
    for handler in list(root_logger.handlers):
        if handler not in before:
            root_logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def sample_srt():
    """CRLF subtitle text with three captions."""
    return SAMPLE_SRT


@pytest.fixture
def sample_file(tmp_path):
    """Write the sample subtitles to a temporary input file."""
    path = tmp_path / "input.srt"
    path.write_bytes(SAMPLE_SRT.encode("utf-8"))
    return path
