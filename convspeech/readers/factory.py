"""Factory for audio track reader backends."""

from __future__ import annotations

from convspeech.readers.base import AudioTrackReaderFactory


def _build_factory(backend_id: str) -> AudioTrackReaderFactory:
    if backend_id == "soundfile":
        from convspeech.readers.soundfile_reader import SoundFileReaderFactory

        return SoundFileReaderFactory()
    raise KeyError(backend_id)


def resolve_reader_factory(backend_id: str) -> AudioTrackReaderFactory:
    """Returns a new reader factory for the requested backend id."""
    try:
        return _build_factory(backend_id)
    except KeyError as err:
        raise RuntimeError(
            f"Unsupported audio track reader backend configured: {backend_id!r}."
        ) from err
