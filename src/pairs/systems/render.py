from typing import Any

from esper import World

from pairs.components.game_session import GameSession
from pairs.constants import TILE_PADDING
from pairs.events.bus import EventBus
from pairs.rendering.board_renderer import BoardRenderer
from pairs.rendering.hud import HudRenderer
from pairs.ui.layout import compute_board_geometry
from pairs.utils.projection import project_board
from pairs.world import get_settings


class RenderSystem:
    """Draws the current session. Reads engine state only; never mutates it."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self._last_tile_layout: dict[int, tuple[float, float, float]] = {}
        self._last_hud_lines: list[str] = []
        self._last_win_text: str | None = None
        self._board_renderer = BoardRenderer(self, padding=TILE_PADDING)
        self._hud_renderer = HudRenderer(self)

    @property
    def hud_lines(self) -> list[str]:
        return list(self._last_hud_lines)

    @property
    def win_text(self) -> str | None:
        return self._last_win_text

    def get_tile_layout(self, tile_id: int) -> Any:
        """(left, bottom, size) of a tile as last drawn, or None."""
        return self._last_tile_layout.get(tile_id)

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: without an active window only the layout caches are rebuilt.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        session = self._session()
        if session is None:
            return
        if session.board is not None:
            dimension = session.board.dimension
            geometry = compute_board_geometry(self.window.width, self.window.height, dimension)
            self._board_renderer.render(arcade, project_board(session.board), dimension, geometry, headless)
        else:
            self._last_tile_layout = {}
        self._hud_renderer.render(arcade, session, get_settings(self.world).dimension, headless)

    def _session(self) -> GameSession | None:
        for _, session in self.world.get_component(GameSession):
            return session
        return None
