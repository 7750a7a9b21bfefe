from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple


class DeferredKind(Enum):
    """One-shot actions resolved after the settle delay."""
    SETTLE_MISMATCH = auto()
    DECLARE_WIN = auto()


@dataclass(slots=True)
class DeferredAction:
    """Pending action counting down on every tick.

    ``generation`` ties the action to the session that scheduled it so an action
    outliving a reset can be recognised and dropped.
    """
    kind: DeferredKind
    remaining: float
    generation: int
    tile_ids: Tuple[int, ...] = ()
