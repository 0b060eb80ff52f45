"""
Reporting helpers for multi-end calls.

Functions:
    - save_multiend_call_to_csv: Saves the placed turns to a CSV file.
    - print_multiend_call: Prints the placed turns as a coloured table.
    - color_txt: Colorizes a string.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from colored import attr, bg, fg
from halo import Halo

from convspeech.config import Config
from convspeech.multiend_call import MultiEndCall
from convspeech.utils import get_logger


logger: logging.Logger = get_logger(__name__)


def save_multiend_call_to_csv(call: MultiEndCall, output_path: str | Path) -> Path:
    """
    Saves the speaking turns of a call to a CSV file.

    Arguments:
        call (MultiEndCall): The call to export.
        output_path (str | Path): Folder receiving the CSV file.

    Returns:
        Path: The path to the saved CSV file.
    """
    output_path = Path(output_path)
    output_path.mkdir(parents=True, exist_ok=True)
    file_path = output_path / Config.REPORT_CONFIG["csv_file_name"]

    with Halo(
        text=f"Saving speaking turns to {file_path}",
        spinner="dots",
        text_color="green",
    ):
        with file_path.open(mode="w", newline="", encoding="utf-8") as file:
            writer = csv.writer(file)
            writer.writerow(Config.REPORT_CONFIG["header"])
            for turn in call.speaking_turns():
                writer.writerow(
                    [turn.speaker_name, turn.audiotrack_name, turn.begin, turn.end]
                )

    logger.info(msg=f"Speaking turns saved to {file_path}")
    return file_path


def color_txt(
    string: str, fg_color: str, bg_color: str, padding: int = 0
) -> str:
    if padding:
        string = string.ljust(padding)

    return f"{fg(fg_color)}{bg(bg_color)}{string}{attr('reset')}"


def _seconds(samples: int, sample_rate: int) -> str:
    if not sample_rate:
        return "-"
    return f"{samples / sample_rate:.2f}s"


def print_multiend_call(call: MultiEndCall) -> None:
    """Prints one row per speaking turn followed by the verdict."""
    turns = call.speaking_turns()
    sample_rate = call.sample_rate()
    rows = [
        (
            turn.speaker_name,
            turn.audiotrack_name,
            _seconds(turn.begin, sample_rate),
            _seconds(turn.end, sample_rate),
        )
        for turn in turns
    ]
    headers = ("Speaker", "Track", "Begin", "End")
    widths = [
        max([len(header)] + [len(row[column]) for row in rows])
        for column, header in enumerate(headers)
    ]

    print(color_txt(headers[0], "black", "green", widths[0] + 1), end="")
    print(color_txt(headers[1], "black", "yellow", widths[1] + 1), end="")
    print(color_txt(headers[2], "black", "blue", widths[2] + 1), end="")
    print(color_txt(headers[3], "black", "blue", widths[3]))
    for row in rows:
        print(" ".join(value.ljust(width) for value, width in zip(row, widths)))

    if call.valid():
        print(
            color_txt(
                f"Valid: {len(call.speaker_names())} speakers, "
                f"{_seconds(call.total_duration_samples(), sample_rate)}",
                "white",
                "green",
            )
        )
    else:
        print(color_txt("Invalid conversational speech setup", "white", "red"))
