"""Run configuration for srtshift."""

from dataclasses import dataclass
from typing import Optional

from .timecode import DEFAULT_FPS

DEFAULT_INPUT = "input.srt"
DEFAULT_OUTPUT = "output.srt"


@dataclass
class ShiftConfig:
    """Parameters for a single shift run, passed explicitly through the pipeline."""

    new_time: str
    reference_index: int = 1
    input_path: str = DEFAULT_INPUT
    output_path: str = DEFAULT_OUTPUT
    fps: int = DEFAULT_FPS
    encoding: Optional[str] = None

    def validate(self) -> "ShiftConfig":
        """Reject values the pipeline cannot work with."""
        if self.reference_index < 1:
            raise ValueError(
                f"Reference index must be a positive integer, got {self.reference_index}"
            )
        if self.fps < 1:
            raise ValueError(f"Frame rate must be a positive integer, got {self.fps}")
        return self
