"""
Timing File Persistence

A timing file lists one turn per line as ``<speaker> <audiotrack> <offset>``,
where ``offset`` is a signed integer number of milliseconds. Fields are
written through the ``csv`` module so names containing the delimiter or
quotes are quoted and read back unchanged.

Functions:
    - save_timing: Writes an ordered list of turns to a timing file.
    - load_timing: Parses a timing file into an ordered list of turns.
"""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Sequence
from pathlib import Path

from convspeech.config import Config
from convspeech.domain import Turn
from convspeech.utils import get_logger


logger: logging.Logger = get_logger(__name__)

_FIELD_COUNT = 3


class TimingFileError(ValueError):
    """Raised when a timing file record cannot be parsed."""

    def __init__(self, path: Path, line_number: int, reason: str) -> None:
        super().__init__(f"Invalid timing record in {path} at line {line_number}: {reason}")
        self.path = path
        self.line_number = line_number


def save_timing(path: str | Path, turns: Sequence[Turn]) -> None:
    """
    Saves turns to a timing file, one record per line.

    Arguments:
        path (str | Path): Destination file; parent folders are created.
        turns (Sequence[Turn]): Turns in timeline order.

    Raises:
        ValueError: If a turn has an empty speaker or audio track name.
        OSError: If the destination cannot be written.
    """
    path = Path(path)
    for index, turn in enumerate(turns):
        if not turn.speaker_name or not turn.audiotrack_name:
            raise ValueError(
                f"Turn #{index} needs non-empty speaker and audio track names: {turn!r}"
            )

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open(
        "w", newline="", encoding=Config.TIMING_FILE_CONFIG["encoding"]
    ) as handle:
        # The default "\r\n" terminator makes csv quote names holding "\r" or "\n".
        writer = csv.writer(handle, delimiter=Config.TIMING_FILE_CONFIG["delimiter"])
        for turn in turns:
            writer.writerow(
                [turn.speaker_name, turn.audiotrack_name, int(turn.offset)]
            )
    logger.debug(msg=f"Saved {len(turns)} turns to {path}")


def _parse_offset(raw: str) -> int:
    # int() alone would accept "1_000"
    text = raw.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits.isdigit():
        raise ValueError(f"offset {raw!r} is not an integer")
    return int(text)


def _read_text(path: Path) -> str:
    encoding = Config.TIMING_FILE_CONFIG["encoding"]
    data = path.read_bytes()
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as err:
        line_number = data.count(b"\n", 0, err.start) + 1
        raise TimingFileError(
            path, line_number, f"not valid {encoding} text: {err.reason}"
        ) from err


def load_timing(path: str | Path) -> list[Turn]:
    """
    Loads turns from a timing file.

    Blank lines are skipped and runs of delimiters between fields are
    tolerated.

    Arguments:
        path (str | Path): Timing file to read.

    Returns:
        list[Turn]: Turns in file order.

    Raises:
        TimingFileError: On bytes that do not decode, or a record with a
            wrong field count, an empty name or a non-integer offset.
        OSError: If the file cannot be opened.
    """
    path = Path(path)
    text = _read_text(path)
    turns: list[Turn] = []
    with io.StringIO(text, newline="") as handle:
        reader = csv.reader(
            handle,
            delimiter=Config.TIMING_FILE_CONFIG["delimiter"],
            skipinitialspace=True,
        )
        try:
            for fields in reader:
                line_number = reader.line_num
                # Trailing delimiters leave an empty last field.
                while fields and fields[-1] == "":
                    fields.pop()
                if not fields:
                    continue
                if len(fields) != _FIELD_COUNT:
                    raise TimingFileError(
                        path,
                        line_number,
                        f"expected {_FIELD_COUNT} fields, found {len(fields)}",
                    )
                speaker_name, audiotrack_name, raw_offset = fields
                if not speaker_name or not audiotrack_name:
                    raise TimingFileError(
                        path, line_number, "speaker and audio track names must be non-empty"
                    )
                try:
                    offset = _parse_offset(raw_offset)
                except ValueError as err:
                    raise TimingFileError(path, line_number, str(err)) from err
                turns.append(Turn(speaker_name, audiotrack_name, offset))
        except csv.Error as err:
            raise TimingFileError(path, reader.line_num, str(err)) from err

    logger.debug(msg=f"Loaded {len(turns)} turns from {path}")
    return turns
