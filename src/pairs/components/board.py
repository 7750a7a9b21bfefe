from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from pairs.components.tile import Tile
from pairs.errors import BoardGenerationError, InvalidDimension
from pairs.utils.difficulty import validate_dimension


@dataclass(slots=True)
class Board:
    """Square grid of paired tiles stored row by row.

    Only the ``face_up`` and ``matched`` flags of the tiles change after
    generation; the dimension and the symbol layout stay fixed.
    """
    dimension: int
    tiles: List[Tile] = field(default_factory=list)

    @classmethod
    def from_symbols(cls, symbols: Iterable[Any]) -> Board:
        """Build a board from an explicit layout, checking size and pairing."""
        layout = list(symbols)
        side = math.isqrt(len(layout))
        if side * side != len(layout):
            raise InvalidDimension(f"{len(layout)} symbols do not fill a square board")
        validate_dimension(side)
        for symbol, count in Counter(layout).items():
            if count != 2:
                raise BoardGenerationError(f"Symbol {symbol!r} appears {count} times, expected a pair")
        return cls(
            dimension=side,
            tiles=[Tile(id=index, symbol=symbol) for index, symbol in enumerate(layout)],
        )

    def __len__(self) -> int:
        return len(self.tiles)

    def tile(self, tile_id: int) -> Tile:
        if isinstance(tile_id, bool) or not isinstance(tile_id, int):
            raise IndexError(f"Tile id must be an integer, got {tile_id!r}")
        if not 0 <= tile_id < len(self.tiles):
            raise IndexError(f"Tile id {tile_id} is outside the {self.dimension}x{self.dimension} board")
        return self.tiles[tile_id]

    def all_matched(self) -> bool:
        return all(tile.matched for tile in self.tiles)

    def symbol_counts(self) -> Dict[Any, int]:
        return dict(Counter(tile.symbol for tile in self.tiles))

    def row_col(self, tile_id: int) -> tuple[int, int]:
        return divmod(tile_id, self.dimension)
