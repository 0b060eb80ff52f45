import sys
from pathlib import Path
from typing import NamedTuple

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class TrackParams(NamedTuple):
    sample_rate: int
    num_channels: int
    num_samples: int


DEFAULT_SAMPLE_RATE = 48000
DEFAULT_TRACK_PARAMS = {
    "t300": TrackParams(DEFAULT_SAMPLE_RATE, 1, 14400),  # 0.3 seconds.
    "t500": TrackParams(DEFAULT_SAMPLE_RATE, 1, 24000),  # 0.5 seconds.
    "t1000": TrackParams(DEFAULT_SAMPLE_RATE, 1, 48000),  # 1.0 seconds.
}


class FakeAudioTrackReader:
    """Reader returning canned parameters and a silent buffer."""

    def __init__(self, path: Path, params: TrackParams) -> None:
        self.path = path
        self.params = params
        self._position = 0

    def sample_rate(self) -> int:
        return self.params.sample_rate

    def channel_count(self) -> int:
        return self.params.num_channels

    def sample_count(self) -> int:
        return self.params.num_samples

    def read(self, num_samples: int | None = None) -> np.ndarray:
        remaining = self.params.num_samples - self._position
        frames = remaining if num_samples is None else min(num_samples, remaining)
        self._position += frames
        return np.zeros(frames, dtype=np.float32)


class CountingReaderFactory:
    """Reader factory double; params are looked up by file name."""

    def __init__(
        self,
        params_by_name: dict[str, tuple[int, int, int]] | None = None,
        default_params: tuple[int, int, int] = DEFAULT_TRACK_PARAMS["t500"],
        failing_names: frozenset[str] = frozenset(),
    ) -> None:
        self.params_by_name = (
            DEFAULT_TRACK_PARAMS if params_by_name is None else params_by_name
        )
        self.default_params = default_params
        self.failing_names = failing_names
        self.created: list[Path] = []

    def create(self, path: Path) -> FakeAudioTrackReader:
        path = Path(path)
        self.created.append(path)
        if path.name in self.failing_names:
            raise FileNotFoundError(f"Audio track not found: {path}")
        params = self.params_by_name.get(path.name, self.default_params)
        return FakeAudioTrackReader(path, TrackParams(*params))


@pytest.fixture
def reader_factory() -> CountingReaderFactory:
    """Counting factory with 0.3, 0.5 and 1.0 second tracks at 48 kHz."""
    return CountingReaderFactory()


@pytest.fixture
def make_reader_factory():
    return CountingReaderFactory


@pytest.fixture
def write_sine_wav():
    """Writes a mono or multichannel 440 Hz tone with soundfile."""
    import soundfile as sf

    def _write(
        path: Path,
        sample_rate: int,
        num_samples: int,
        num_channels: int = 1,
        frequency: float = 440.0,
    ) -> Path:
        time_axis = np.arange(num_samples) / sample_rate
        tone = 0.5 * np.sin(2.0 * np.pi * frequency * time_axis)
        data = tone if num_channels == 1 else np.tile(tone[:, None], (1, num_channels))
        path.parent.mkdir(parents=True, exist_ok=True)
        sf.write(str(path), data, sample_rate, subtype="PCM_16")
        return path

    return _write


@pytest.fixture(autouse=True)
def _silence_halo(monkeypatch):
    """Replace Halo spinners with a no-op context manager for tests."""

    class _DummyHalo:
        def __init__(self, *args, **kwargs):
            self.text = kwargs.get("text")

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return False

    monkeypatch.setattr("convspeech.utils.report.Halo", _DummyHalo, raising=False)
