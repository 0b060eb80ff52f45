"""
Conversational Speech Timeline Tool

Command-line entry point. Loads a timing file, opens the audio tracks it
references and checks whether the resulting multi-end call is a plausible
conversation. Valid setups are exported as a CSV listing each speaking turn.

Exit codes:
    0: the setup is valid.
    1: the setup is invalid (overlaps, negative or regressing offsets).
    2: the timing file or an audio track could not be read.
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from convspeech.config import CallConfig, Config
from convspeech.multiend_call import build_multiend_call
from convspeech.timing import TimingFileError, load_timing
from convspeech.utils import configure_logging, get_logger
from convspeech.utils.report import print_multiend_call, save_multiend_call_to_csv


logger: logging.Logger = get_logger("convspeech")

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_FAILURE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="convspeech",
        description="Validate a conversational speech setup",
    )
    parser.add_argument(
        "-i",
        "--audiotracks",
        required=True,
        help="Directory containing the audio tracks",
    )
    parser.add_argument(
        "-t",
        "--timing",
        required=True,
        help="Timing file: one '<speaker> <audiotrack> <offset_ms>' per line",
    )
    parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="Directory receiving the speaking turns report",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help=f"Log level (default: LOG_LEVEL or {Config.DEFAULT_LOG_LEVEL})",
    )
    return parser


def run(config: CallConfig) -> int:
    """Validates one setup and returns the process exit code."""
    try:
        turns = load_timing(config.timing_filepath)
        call = build_multiend_call(turns, config.audiotracks_path)
    except (OSError, TimingFileError) as err:
        logger.error(msg=str(err))
        return EXIT_FAILURE

    print_multiend_call(call)
    if not call.valid():
        logger.error(msg=f"Invalid setup in {config.timing_filepath}")
        return EXIT_INVALID

    try:
        save_multiend_call_to_csv(call, config.output_path)
    except OSError as err:
        logger.error(msg=f"Cannot write report: {err}")
        return EXIT_FAILURE
    return EXIT_VALID


def main() -> None:
    """
    Main function to handle the command line interface logic.
    """
    load_dotenv()
    args = _build_parser().parse_args()
    configure_logging(args.log_level)

    config = CallConfig.from_strings(args.audiotracks, args.timing, args.output)
    logger.info(msg=f"Checking setup {config.timing_filepath}")
    sys.exit(run(config))


if __name__ == "__main__":
    main()
