"""Overlap checks for turns placed on a sample timeline.

Intervals are half-open, ``[begin, end)``: a turn that starts exactly when
another one ends does not overlap it, and a zero-length turn overlaps
nothing.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from convspeech.domain import SpeakingTurn

MAX_CONCURRENT_TURNS = 2

ViolationKind = Literal["self_cross_talk", "multi_party_cross_talk"]


@dataclass(frozen=True)
class CrossTalkViolation:
    """First overlap found that makes a layout implausible."""

    kind: ViolationKind
    turn_indices: tuple[int, ...]
    sample: int

    def describe(self) -> str:
        turns = ", ".join(f"#{index}" for index in self.turn_indices)
        if self.kind == "self_cross_talk":
            return f"Self cross-talk between turns {turns} at sample {self.sample}."
        return (
            f"Cross-talk with {len(self.turn_indices)} speakers (turns {turns}) "
            f"at sample {self.sample}; at most {MAX_CONCURRENT_TURNS} allowed."
        )


def find_cross_talk_violation(
    speaking_turns: Sequence[SpeakingTurn],
) -> CrossTalkViolation | None:
    """Sweeps begin/end events and returns the first violation, if any.

    At equal timestamps end events sort before begin events.
    """
    events: list[tuple[int, int, int]] = []
    for index, turn in enumerate(speaking_turns):
        if turn.end <= turn.begin:
            continue
        events.append((turn.begin, 1, index))
        events.append((turn.end, 0, index))
    events.sort()

    active: dict[int, SpeakingTurn] = {}
    for sample, is_begin, index in events:
        if not is_begin:
            del active[index]
            continue
        turn = speaking_turns[index]
        for active_index, active_turn in active.items():
            if active_turn.speaker_name == turn.speaker_name:
                return CrossTalkViolation(
                    "self_cross_talk", (active_index, index), sample
                )
        active[index] = turn
        if len(active) > MAX_CONCURRENT_TURNS:
            return CrossTalkViolation(
                "multi_party_cross_talk", tuple(sorted(active)), sample
            )
    return None

