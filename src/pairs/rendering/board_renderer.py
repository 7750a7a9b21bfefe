from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from pairs.constants import TILE_BACK_COLOR, TILE_FACE_COLOR, TILE_MATCHED_COLOR
from pairs.ui.layout import tile_origin

if TYPE_CHECKING:
    from pairs.systems.render import RenderSystem
    from pairs.utils.projection import TileView


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, padding: int = 4):
        self._rs = render_system
        self._padding = padding

    def render(
        self,
        arcade,
        views: Sequence[TileView],
        dimension: int,
        geometry: tuple[int, float, float],
        headless: bool,
    ) -> None:
        rs = self._rs
        tile_size, start_x, start_y = geometry
        pad = self._padding
        inner = tile_size - 2 * pad
        rs._last_tile_layout = {}
        for view in views:
            left, bottom = tile_origin(view.id, dimension, tile_size, start_x, start_y)
            rs._last_tile_layout[view.id] = (left + pad, bottom + pad, inner)
            if headless:
                continue
            if view.matched:
                color = TILE_MATCHED_COLOR
            elif view.face_up:
                color = TILE_FACE_COLOR
            else:
                color = TILE_BACK_COLOR
            arcade.draw_lbwh_rectangle_filled(left + pad, bottom + pad, inner, inner, color)
            if view.symbol is not None:
                arcade.draw_text(
                    str(view.symbol),
                    left + tile_size / 2,
                    bottom + tile_size / 2,
                    arcade.color.BLACK,
                    max(10, int(inner * 0.5)),
                    anchor_x="center",
                    anchor_y="center",
                )
