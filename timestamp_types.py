"""
Types for the interleaving pipeline.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal, TypedDict


class ResultEntry(TypedDict):
    """
    A label and the offset, in seconds, at which its clip ends in the
    combined file.
    """

    label: str
    audio_stop: float


@dataclass(frozen=True)
class AudioSpec:
    """
    Header values every clip of one combine run has to share.
    """

    sample_rate: int
    channels: int
    bits_per_sample: int
    sample_format: Literal["int", "float"]


# Start and end of a span of a recording, in seconds.
Segment = tuple[float, float]

# A silence reported by ffmpeg. The end is None when it runs to the end
# of the file.
Silence = tuple[float, float | None]


class Screen(Enum):
    """
    Screens of the editor.
    """

    MAIN = "main"
    SETTINGS = "settings"
    FILE_MANAGER = "file_manager"
    TEXT_ANALYZER = "text_analyzer"


class TextStats(TypedDict):
    total_lines: int
    non_empty_lines: int
    empty_lines: int
    characters: int


class CombinedStats(TypedDict):
    total_lines: int
    characters: int
    average_line_length: float
