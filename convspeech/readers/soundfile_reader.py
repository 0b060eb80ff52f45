"""
Audio track readers backed by soundfile, with a librosa fallback.

soundfile handles WAV/FLAC/OGG headers without decoding the whole file; when
libsndfile does not understand the container, librosa decodes it in full.
"""

from __future__ import annotations

import logging
import warnings
from pathlib import Path

import librosa
import numpy as np
import soundfile as sf

from convspeech.readers.base import AudioTrackError
from convspeech.utils import get_logger


logger: logging.Logger = get_logger(__name__)


def _check_format(path: Path, sample_rate: int, channels: int) -> None:
    if sample_rate <= 0:
        raise AudioTrackError(f"Invalid sample rate {sample_rate} in {path}")
    if channels <= 0:
        raise AudioTrackError(f"Invalid channel count {channels} in {path}")


class SoundFileReader:
    """Sequential reader over a file libsndfile can open."""

    def __init__(self, path: Path) -> None:
        try:
            info = sf.info(str(path))
        except RuntimeError as err:
            raise AudioTrackError(f"Cannot read audio header of {path}: {err}") from err
        _check_format(path, int(info.samplerate), int(info.channels))
        self._path = path
        self._sample_rate = int(info.samplerate)
        self._channels = int(info.channels)
        self._num_samples = int(info.frames)
        self._position = 0

    def sample_rate(self) -> int:
        return self._sample_rate

    def channel_count(self) -> int:
        return self._channels

    def sample_count(self) -> int:
        return self._num_samples

    def read(self, num_samples: int | None = None) -> np.ndarray:
        remaining = self._num_samples - self._position
        frames = remaining if num_samples is None else max(0, min(num_samples, remaining))
        with sf.SoundFile(str(self._path)) as sound_file:
            sound_file.seek(self._position)
            data = sound_file.read(frames=frames, dtype="float32")
        self._position += len(data)
        return data

    def __repr__(self) -> str:
        return (
            f"SoundFileReader(path={str(self._path)!r}, sample_rate={self._sample_rate}, "
            f"channels={self._channels}, num_samples={self._num_samples})"
        )


class DecodedAudioReader:
    """Reader over a buffer decoded up front by librosa."""

    def __init__(self, path: Path) -> None:
        try:
            with warnings.catch_warnings():
                warnings.filterwarnings("ignore")
                audio, sample_rate = librosa.load(str(path), sr=None, mono=False)
        except Exception as err:
            raise AudioTrackError(f"Cannot decode audio track {path}: {err}") from err
        audio = np.asarray(audio, dtype=np.float32)
        # librosa returns (channels, frames) for multichannel input
        samples = audio if audio.ndim == 1 else audio.T
        channels = 1 if samples.ndim == 1 else samples.shape[1]
        _check_format(path, int(sample_rate), channels)
        self._path = path
        self._sample_rate = int(sample_rate)
        self._channels = channels
        self._samples = samples
        self._position = 0

    def sample_rate(self) -> int:
        return self._sample_rate

    def channel_count(self) -> int:
        return self._channels

    def sample_count(self) -> int:
        return int(self._samples.shape[0])

    def read(self, num_samples: int | None = None) -> np.ndarray:
        end = self.sample_count() if num_samples is None else self._position + max(0, num_samples)
        data = self._samples[self._position:end]
        self._position += len(data)
        return data


class SoundFileReaderFactory:
    """Opens audio tracks from disk; the production reader factory."""

    def create(self, path: Path) -> SoundFileReader | DecodedAudioReader:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Audio track not found: {path}")
        try:
            reader = SoundFileReader(path)
        except AudioTrackError as err:
            logger.warning(msg=f"soundfile failed to open {path}: {err}")
            logger.warning(msg="Falling back to librosa...")
            return DecodedAudioReader(path)
        logger.debug(msg=f"Opened {reader!r}")
        return reader
