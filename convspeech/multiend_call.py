"""
Multi-end Call Timeline

Places a sequence of speaking turns on an absolute sample timeline and checks
that the resulting conversation is physically plausible:

    - the first turn does not start before the origin,
    - no turn starts before the turn preceding it in the input,
    - a speaker never talks over themselves,
    - at most two speakers talk at the same time.

A layout that breaks any of these rules produces an invalid call; it is not
an error. Only failures to open audio tracks raise.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from types import MappingProxyType

from convspeech.config import Config
from convspeech.domain import SpeakingTurn, Turn
from convspeech.reader_cache import resolve_audiotrack_readers
from convspeech.readers import (
    AudioTrackReader,
    AudioTrackReaderFactory,
    resolve_reader_factory,
)
from convspeech.utils import find_cross_talk_violation, get_logger


logger: logging.Logger = get_logger(__name__)


def milliseconds_to_samples(milliseconds: int, sample_rate: int) -> int:
    """Converts a signed millisecond offset to samples, truncating toward zero."""
    samples = abs(milliseconds) * sample_rate // 1000
    return samples if milliseconds >= 0 else -samples


class MultiEndCall:
    """A conversation built from turns and the audio tracks they reference.

    The call is immutable once constructed. ``speaker_names()`` and
    ``audiotrack_readers()`` are always meaningful; placements and
    ``total_duration_samples()`` are meaningful only when ``valid()``.
    """

    def __init__(
        self,
        timing: Sequence[Turn],
        audiotracks_path: str | Path,
        reader_factory: AudioTrackReaderFactory,
    ) -> None:
        self._timing: tuple[Turn, ...] = tuple(timing)
        self._audiotracks_path = Path(audiotracks_path)
        self._speaker_names: frozenset[str] = frozenset(
            turn.speaker_name for turn in self._timing
        )
        self._audiotrack_readers: dict[str, AudioTrackReader] = (
            resolve_audiotrack_readers(
                self._timing, self._audiotracks_path, reader_factory
            )
        )
        self._sample_rate: int = self._resolve_sample_rate()
        self._speaking_turns: tuple[SpeakingTurn, ...] = self._place_turns()
        self._total_duration_samples: int = max(
            (turn.end for turn in self._speaking_turns), default=0
        )
        self._valid: bool = self._check_timing()

        logger.info(
            msg=(
                f"Multi-end call with {len(self._timing)} turns, "
                f"{len(self._speaker_names)} speakers: "
                f"{'valid' if self._valid else 'invalid'}."
            )
        )

    def timing(self) -> tuple[Turn, ...]:
        return self._timing

    def audiotracks_path(self) -> Path:
        return self._audiotracks_path

    def valid(self) -> bool:
        return self._valid

    def sample_rate(self) -> int:
        """Shared sample rate of the audio tracks; 0 without tracks or on mismatch."""
        return self._sample_rate

    def speaker_names(self) -> frozenset[str]:
        return self._speaker_names

    def audiotrack_readers(self) -> Mapping[str, AudioTrackReader]:
        return MappingProxyType(self._audiotrack_readers)

    def speaking_turns(self) -> tuple[SpeakingTurn, ...]:
        return self._speaking_turns

    def total_duration_samples(self) -> int:
        return self._total_duration_samples

    def _resolve_sample_rate(self) -> int:
        sample_rates = {
            reader.sample_rate() for reader in self._audiotrack_readers.values()
        }
        if len(sample_rates) == 1:
            return sample_rates.pop()
        if sample_rates:
            logger.error(
                msg=(
                    "All the audio tracks should have the same sample rate, "
                    f"found {sorted(sample_rates)}."
                )
            )
        return 0

    def _place_turns(self) -> tuple[SpeakingTurn, ...]:
        speaking_turns: list[SpeakingTurn] = []
        previous_end = 0
        for turn in self._timing:
            reader = self._audiotrack_readers[turn.audiotrack_name]
            # Each offset uses its own track's rate so placement stays defined
            # when rates differ; such calls are invalid anyway.
            begin = previous_end + milliseconds_to_samples(
                turn.offset, reader.sample_rate()
            )
            end = begin + reader.sample_count()
            speaking_turns.append(SpeakingTurn(turn, begin, end))
            previous_end = end
        return tuple(speaking_turns)

    def _check_timing(self) -> bool:
        if self._audiotrack_readers and not self._sample_rate:
            return False

        for index, turn in enumerate(self._speaking_turns):
            if index == 0:
                if turn.begin < 0:
                    logger.error(msg="The first speaker cannot have a negative offset.")
                    return False
                continue
            previous = self._speaking_turns[index - 1]
            if turn.begin < previous.begin:
                logger.error(
                    msg=f"Turn #{index} cannot start before turn #{index - 1}."
                )
                return False

        violation = find_cross_talk_violation(self._speaking_turns)
        if violation is not None:
            logger.error(msg=violation.describe())
            return False
        return True

    def __repr__(self) -> str:
        return (
            f"MultiEndCall(turns={len(self._timing)}, "
            f"speakers={len(self._speaker_names)}, "
            f"audiotracks={len(self._audiotrack_readers)}, valid={self._valid})"
        )


def build_multiend_call(
    turns: Sequence[Turn],
    audiotracks_path: str | Path,
    reader_factory: AudioTrackReaderFactory | None = None,
) -> MultiEndCall:
    """Builds a call, opening tracks with the configured backend by default."""
    if reader_factory is None:
        reader_factory = resolve_reader_factory(
            Config.AUDIO_CONFIG["reader_backend"]
        )
    return MultiEndCall(turns, audiotracks_path, reader_factory)
