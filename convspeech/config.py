"""Default settings for the conversational speech timeline tool."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class Config:
    """Module-wide defaults, grouped by concern."""

    # Audio track reading
    AUDIO_CONFIG = {
        'reader_backend': 'soundfile',
    }

    # Timing file layout: "<speaker> <audiotrack> <offset_ms>" per line
    TIMING_FILE_CONFIG = {
        'delimiter': ' ',
        'encoding': 'utf-8',
    }

    REPORT_CONFIG = {
        'csv_file_name': 'speaking_turns.csv',
        'header': ['Speaker', 'Audio track', 'Begin (samples)', 'End (samples)'],
    }

    DEFAULT_LOG_LEVEL = 'INFO'


@dataclass(frozen=True)
class CallConfig:
    """Input/output locations for one conversational speech setup."""

    audiotracks_path: Path
    timing_filepath: Path
    output_path: Path

    @classmethod
    def from_strings(
        cls, audiotracks_path: str, timing_filepath: str, output_path: str
    ) -> CallConfig:
        return cls(
            audiotracks_path=Path(audiotracks_path),
            timing_filepath=Path(timing_filepath),
            output_path=Path(output_path),
        )
