from dataclasses import dataclass
from typing import Any

@dataclass(slots=True)
class Tile:
    """One grid cell. ``id`` is its ordinal position and never changes after generation."""
    id: int
    symbol: Any
    face_up: bool = False
    matched: bool = False
