"""Entry point for the Memory Pairs game.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color

from pairs.constants import BACKGROUND_COLOR, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from pairs.events.bus import EVENT_MOUSE_PRESS, EVENT_TICK, EventBus
from pairs.factories.controls import spawn_controls
from pairs.systems.clock import ClockSystem
from pairs.systems.input import InputSystem
from pairs.systems.render import RenderSystem
from pairs.systems.scheduler import DeferredActionSystem
from pairs.systems.session import SessionSystem
from pairs.world import create_world

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


class MemoryPairsWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)

        # Timing systems
        self.deferred_action_system = DeferredActionSystem(self.world, self.event_bus)
        self.clock_system = ClockSystem(self.world, self.event_bus)

        # Game engine; deals the first board immediately
        self.session_system = SessionSystem(self.world, self.event_bus)

        # Interface systems
        spawn_controls(self.world, self.width, self.height)
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.render_system = RenderSystem(self.world, self.event_bus, self)

        set_background_color(BACKGROUND_COLOR)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)


def main():
    MemoryPairsWindow()
    logger.info("Window ready")
    run()

if __name__ == "__main__":
    main()
