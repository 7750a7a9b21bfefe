from typing import Any

from esper import World

from pairs.components.game_session import GameSession, SessionPhase
from pairs.components.session_clock import SessionClock
from pairs.events.bus import EVENT_ELAPSED_CHANGED, EVENT_TICK, EventBus
from pairs.world import get_settings


class ClockSystem:
    """Adds one elapsed second per clock interval to every running session."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender: Any, **kwargs: Any) -> None:
        dt = kwargs.get('dt', 1/60)
        interval = get_settings(self.world).clock_interval
        if interval <= 0:
            return
        for _, (session, clock) in self.world.get_components(GameSession, SessionClock):
            if session.phase is not SessionPhase.RUNNING:
                continue
            clock.accumulated += dt
            advanced = False
            while clock.accumulated >= interval:
                clock.accumulated -= interval
                session.elapsed_seconds += 1
                advanced = True
            if advanced:
                self.event_bus.emit(
                    EVENT_ELAPSED_CHANGED,
                    elapsed_seconds=session.elapsed_seconds,
                    generation=session.generation,
                )
