"""Components for the start and difficulty controls above the board."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class ControlAction(Enum):
    """Actions that a control button can trigger."""
    START = auto()
    DIFFICULTY = auto()


@dataclass
class ControlButton:
    """Clickable button drawn in the control bar. ``x``/``y`` is its centre."""
    label: str
    action: ControlAction
    x: float
    y: float
    width: float
    height: float
    dimension: Optional[int] = None

    def contains(self, x: float, y: float) -> bool:
        half_w = self.width / 2
        half_h = self.height / 2
        return (self.x - half_w) <= x <= (self.x + half_w) and (self.y - half_h) <= y <= (self.y + half_h)
