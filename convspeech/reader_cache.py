"""Deduplicating resolution of audio track names to reader handles."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from convspeech.domain import Turn
from convspeech.readers.base import AudioTrackReader, AudioTrackReaderFactory
from convspeech.utils import get_logger


logger: logging.Logger = get_logger(__name__)


def resolve_audiotrack_readers(
    turns: Sequence[Turn],
    audiotracks_path: str | Path,
    reader_factory: AudioTrackReaderFactory,
) -> dict[str, AudioTrackReader]:
    """Opens one reader per distinct audio track name, in first-use order.

    Turns that reference the same track name share the same reader. Errors
    raised by ``reader_factory`` propagate as-is and no readers are returned.
    """
    audiotracks_path = Path(audiotracks_path)
    readers: dict[str, AudioTrackReader] = {}
    for turn in turns:
        if turn.audiotrack_name in readers:
            continue
        audiotrack_path = audiotracks_path / turn.audiotrack_name
        logger.debug(msg=f"Opening audio track {audiotrack_path}")
        readers[turn.audiotrack_name] = reader_factory.create(audiotrack_path)

    logger.info(
        msg=f"Resolved {len(readers)} unique audio tracks for {len(turns)} turns."
    )
    return readers
