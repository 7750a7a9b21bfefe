import random

from esper import World
from .events.bus import EventBus
from pairs.components.game_settings import GameSettings
from pairs.constants import CLOCK_INTERVAL, DEFAULT_DIMENSION, SETTLE_DELAY
from pairs.utils.difficulty import validate_dimension


def create_world(
    event_bus: EventBus,
    *,
    dimension: int = DEFAULT_DIMENSION,
    settle_delay: float = SETTLE_DELAY,
    clock_interval: float = CLOCK_INTERVAL,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Register the settings resource read by the session and clock systems.
    settings_entity = world.create_entity()
    world.add_component(
        settings_entity,
        GameSettings(
            dimension=validate_dimension(dimension),
            settle_delay=settle_delay,
            clock_interval=clock_interval,
        ),
    )
    return world


def get_settings(world: World) -> GameSettings:
    for _, settings in world.get_component(GameSettings):
        return settings
    settings = GameSettings()
    world.create_entity(settings)
    return settings
