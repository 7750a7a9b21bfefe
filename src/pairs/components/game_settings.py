"""Settings resource holding the selected difficulty and timing constants."""
from dataclasses import dataclass

from pairs.constants import CLOCK_INTERVAL, DEFAULT_DIMENSION, SETTLE_DELAY


@dataclass
class GameSettings:
    """Singleton component read by the session and clock systems."""
    dimension: int = DEFAULT_DIMENSION
    settle_delay: float = SETTLE_DELAY
    clock_interval: float = CLOCK_INTERVAL
