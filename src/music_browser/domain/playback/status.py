"""
Playback status state machine.

The status is a sum type over four immutable variants. Timestamps are clock
readings in seconds; ``paused_total`` is the accumulated pause duration.

    Waiting  --resume-->  Playing(start, 0)
    Playing  --pause--->  Paused(start, now, acc)
    Paused   --resume-->  Playing(start, acc + (now - paused_at))
    Playing  --elapsed >= total-->  Complete
    Complete --resume-->  Playing(now, 0)
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Waiting:
    """No timing reference established."""


@dataclass(frozen=True)
class Playing:
    started_at: float
    paused_total: float = 0.0


@dataclass(frozen=True)
class Paused:
    started_at: float
    paused_at: float
    paused_total: float = 0.0


@dataclass(frozen=True)
class Complete:
    """Elapsed time reached the track duration."""


PlayStatus = Union[Waiting, Playing, Paused, Complete]


def resumed(status: PlayStatus, now: float) -> PlayStatus:
    """Transition for resume; Playing is left untouched."""
    match status:
        case Waiting() | Complete():
            return Playing(started_at=now)
        case Paused(started_at=start, paused_at=paused_at, paused_total=acc):
            return Playing(started_at=start, paused_total=acc + max(0.0, now - paused_at))
        case _:
            return status


def paused(status: PlayStatus, now: float) -> PlayStatus:
    """Transition for pause; only Playing moves."""
    match status:
        case Playing(started_at=start, paused_total=acc):
            return Paused(started_at=start, paused_at=now, paused_total=acc)
        case _:
            return status


def elapsed(status: PlayStatus, now: float) -> float:
    """Elapsed playback time for a timed status, 0.0 otherwise.

    While paused the value is frozen at the pause instant.
    """
    match status:
        case Playing(started_at=start, paused_total=acc):
            return max(0.0, now - start - acc)
        case Paused(started_at=start, paused_at=paused_at, paused_total=acc):
            return max(0.0, paused_at - start - acc)
        case _:
            return 0.0


def is_active(status: PlayStatus) -> bool:
    """True while a track is playing or paused."""
    return isinstance(status, (Playing, Paused))
