"""Play state of a single game, from a fresh board to the last matched pair."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from pairs.components.board import Board


class SessionPhase(Enum):
    """Lifecycle of a session. WON is terminal."""
    IDLE = auto()
    RUNNING = auto()
    WON = auto()


@dataclass(frozen=True, slots=True)
class WinSummary:
    total_flips: int
    elapsed_seconds: int


@dataclass
class GameSession:
    """Mutable play state for one board.

    ``flipped_tile_ids`` lists the face-up tiles that are not matched yet, in
    flip order, and never holds more than two ids. A new session (with a new
    ``generation``) replaces this one on reset.
    """
    board: Optional[Board] = None
    generation: int = 0
    phase: SessionPhase = SessionPhase.IDLE
    flipped_tile_ids: List[int] = field(default_factory=list)
    total_flips: int = 0
    elapsed_seconds: int = 0

    @property
    def started(self) -> bool:
        return self.phase is not SessionPhase.IDLE

    @property
    def finished(self) -> bool:
        return self.phase is SessionPhase.WON

    @property
    def win_summary(self) -> WinSummary | None:
        if not self.finished:
            return None
        return WinSummary(total_flips=self.total_flips, elapsed_seconds=self.elapsed_seconds)
