from pairs.components.controls import ControlAction, ControlButton
from pairs.components.game_session import GameSession
from pairs.events.bus import (
    EventBus,
    EVENT_DIFFICULTY_SELECTED,
    EVENT_MOUSE_PRESS,
    EVENT_START_REQUEST,
    EVENT_TILE_CLICK,
)
from pairs.ui.layout import tile_at_point

# Arcade reports the left mouse button as 1.
LEFT_BUTTON = 1

class InputSystem:
    """Translates mouse presses into control requests or a single tile click."""

    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if button != LEFT_BUTTON:
            return
        control = self._control_at(x, y)
        if control is not None:
            if control.action == ControlAction.START:
                self.event_bus.emit(EVENT_START_REQUEST)
            elif control.action == ControlAction.DIFFICULTY and control.dimension is not None:
                self.event_bus.emit(EVENT_DIFFICULTY_SELECTED, dimension=control.dimension)
            return
        dimension = self._board_dimension()
        if dimension is None:
            return
        tile_id = tile_at_point(x, y, self.window.width, self.window.height, dimension)
        if tile_id is not None:
            self.event_bus.emit(EVENT_TILE_CLICK, tile_id=tile_id)

    def _control_at(self, x, y):
        for _, control in self.world.get_component(ControlButton):
            if control.contains(x, y):
                return control
        return None

    def _board_dimension(self):
        for _, session in self.world.get_component(GameSession):
            if session.board is not None:
                return session.board.dimension
        return None
