"""Reader contracts for audio tracks referenced by speaking turns."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import numpy as np


class AudioTrackError(OSError):
    """Raised when an audio track exists but cannot be decoded."""


class AudioTrackReader(Protocol):
    """Read access to one decoded audio track."""

    def sample_rate(self) -> int:
        """Returns the sample rate in Hz."""
        ...

    def channel_count(self) -> int:
        """Returns the number of interleaved channels."""
        ...

    def sample_count(self) -> int:
        """Returns the number of samples per channel, i.e. the track duration."""
        ...

    def read(self, num_samples: int | None = None) -> np.ndarray:
        """Reads up to ``num_samples`` frames from the current position."""
        ...


class AudioTrackReaderFactory(Protocol):
    """Creates one reader per audio track path."""

    def create(self, path: Path) -> AudioTrackReader:
        """Opens ``path``; raises ``OSError`` subclasses on failure."""
        ...
