from __future__ import annotations

from typing import TYPE_CHECKING

from pairs.components.controls import ControlAction, ControlButton
from pairs.components.game_session import WinSummary
from pairs.constants import HIGHLIGHT_COLOR, HUD_TEXT_COLOR, TILE_BACK_COLOR
from pairs.ui.layout import status_line_y

if TYPE_CHECKING:
    from pairs.components.game_session import GameSession
    from pairs.systems.render import RenderSystem


def moves_text(total_flips: int) -> str:
    return f"{total_flips} moves"


def time_text(elapsed_seconds: int) -> str:
    return f"time: {elapsed_seconds} sec"


def win_text(summary: WinSummary) -> str:
    return (
        "You won!\n"
        f"with {summary.total_flips} moves\n"
        f"under {summary.elapsed_seconds} seconds"
    )


class HudRenderer:
    """Draws the control bar, the counters and the win banner."""

    def __init__(self, render_system: RenderSystem):
        self._rs = render_system

    def render(self, arcade, session: GameSession, selected_dimension: int, headless: bool) -> None:
        rs = self._rs
        rs._last_hud_lines = [moves_text(session.total_flips), time_text(session.elapsed_seconds)]
        summary = session.win_summary
        rs._last_win_text = win_text(summary) if summary is not None else None
        if headless:
            return
        for _, button in rs.world.get_component(ControlButton):
            selected = button.action == ControlAction.DIFFICULTY and button.dimension == selected_dimension
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, TILE_BACK_COLOR)
            arcade.draw_lbwh_rectangle_outline(
                left,
                bottom,
                button.width,
                button.height,
                HIGHLIGHT_COLOR if selected else HUD_TEXT_COLOR,
                border_width=2,
            )
            arcade.draw_text(
                button.label,
                button.x,
                button.y,
                HUD_TEXT_COLOR,
                14,
                anchor_x="center",
                anchor_y="center",
                bold=selected,
            )
        y = status_line_y(rs.window.height)
        arcade.draw_text(rs._last_hud_lines[0], rs.window.width * 0.3, y, HUD_TEXT_COLOR, 18, anchor_x="center")
        arcade.draw_text(rs._last_hud_lines[1], rs.window.width * 0.7, y, HUD_TEXT_COLOR, 18, anchor_x="center")
        if rs._last_win_text is not None:
            arcade.draw_text(
                rs._last_win_text,
                rs.window.width / 2,
                rs.window.height / 2,
                HIGHLIGHT_COLOR,
                32,
                anchor_x="center",
                anchor_y="center",
                multiline=True,
                width=int(rs.window.width * 0.8),
                align="center",
                bold=True,
            )
