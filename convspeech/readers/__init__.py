from .base import AudioTrackError, AudioTrackReader, AudioTrackReaderFactory
from .factory import resolve_reader_factory
