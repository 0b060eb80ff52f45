"""Domain data structures for conversational speech turns."""

from typing import NamedTuple


class Turn(NamedTuple):
    """One scheduled utterance: who speaks, which track, and when.

    ``offset`` is in milliseconds, measured from the end of the previous turn
    (from the origin for the first turn). Negative values overlap the previous
    turn, positive values leave a pause.
    """

    speaker_name: str
    audiotrack_name: str
    offset: int


class SpeakingTurn(NamedTuple):
    """A turn placed on the absolute timeline, in samples."""

    turn: Turn
    begin: int
    end: int

    @property
    def speaker_name(self) -> str:
        return self.turn.speaker_name

    @property
    def audiotrack_name(self) -> str:
        return self.turn.audiotrack_name

    @property
    def duration(self) -> int:
        return self.end - self.begin
