"""Read-only views of the board for render adapters."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from pairs.components.board import Board
from pairs.components.tile import Tile


@dataclass(frozen=True, slots=True)
class TileView:
    id: int
    face_up: bool
    matched: bool
    symbol: Any = None  # None while the tile is face-down


def visible_symbol(tile: Tile) -> Any:
    """The tile's symbol when it is face-up or matched, else None."""
    if tile.face_up or tile.matched:
        return tile.symbol
    return None


def project_tile(tile: Tile) -> TileView:
    return TileView(id=tile.id, face_up=tile.face_up, matched=tile.matched, symbol=visible_symbol(tile))


def project_board(board: Board | None) -> List[TileView]:
    if board is None:
        return []
    return [project_tile(tile) for tile in board.tiles]
