from __future__ import annotations

import logging
from typing import Any

from esper import World

from pairs.components.deferred_action import DeferredAction, DeferredKind
from pairs.events.bus import (
    EVENT_DEFERRED_ACTION_DUE,
    EVENT_DEFERRED_ACTION_REQUEST,
    EVENT_DEFERRED_ACTIONS_CANCEL,
    EVENT_TICK,
    EventBus,
)

logger = logging.getLogger(__name__)


class DeferredActionSystem:
    """Counts down DeferredAction entities on every tick and announces them when due.

    Each action is its own entity so several can be pending at once. Cancelled
    or fired actions are deleted immediately.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_DEFERRED_ACTION_REQUEST, self.on_request)
        event_bus.subscribe(EVENT_DEFERRED_ACTIONS_CANCEL, self.on_cancel)

    def schedule(self, kind: DeferredKind, delay: float, *, generation: int, tile_ids=()) -> int:
        action = DeferredAction(
            kind=kind,
            remaining=max(0.0, float(delay)),
            generation=generation,
            tile_ids=tuple(tile_ids),
        )
        return self.world.create_entity(action)

    def cancel(self, generation: int | None = None) -> int:
        """Drop pending actions of ``generation`` (all of them when None); returns how many."""
        doomed = [
            ent for ent, action in self.world.get_component(DeferredAction)
            if generation is None or action.generation == generation
        ]
        for ent in doomed:
            self.world.delete_entity(ent, immediate=True)
        if doomed:
            logger.debug("Cancelled %d deferred action(s)", len(doomed))
        return len(doomed)

    def pending(self) -> list[DeferredAction]:
        return [action for _, action in self.world.get_component(DeferredAction)]

    def on_request(self, sender: Any, **kwargs: Any) -> None:
        kind = kwargs.get('kind')
        generation = kwargs.get('generation')
        if not isinstance(kind, DeferredKind) or generation is None:
            return
        self.schedule(kind, kwargs.get('delay', 0.0), generation=generation, tile_ids=kwargs.get('tile_ids', ()))

    def on_cancel(self, sender: Any, **kwargs: Any) -> None:
        self.cancel(kwargs.get('generation'))

    def on_tick(self, sender: Any, **kwargs: Any) -> None:
        dt = kwargs.get('dt', 1/60)
        due: list[DeferredAction] = []
        for ent, action in list(self.world.get_component(DeferredAction)):
            action.remaining -= dt
            if action.remaining <= 0.0:
                due.append(action)
                self.world.delete_entity(ent, immediate=True)
        for action in due:
            self.event_bus.emit(
                EVENT_DEFERRED_ACTION_DUE,
                kind=action.kind,
                generation=action.generation,
                tile_ids=action.tile_ids,
            )
