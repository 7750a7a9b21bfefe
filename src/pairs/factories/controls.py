"""Factory helpers for creating the control bar entities."""
from typing import Iterable

from esper import World

from pairs.components.controls import ControlAction, ControlButton
from pairs.constants import (
    CONTROL_BUTTON_HEIGHT,
    CONTROL_GAP,
    DIFFICULTY_BUTTON_WIDTH,
    DIFFICULTY_LEVELS,
    START_BUTTON_WIDTH,
)
from pairs.ui.layout import control_bar_y


def spawn_controls(
    world: World,
    width: int,
    height: int,
    *,
    difficulties: Iterable[int] = DIFFICULTY_LEVELS,
) -> list[int]:
    """Create the Start / New Game button followed by one button per difficulty, centred in a row."""
    levels = list(difficulties)
    total_width = START_BUTTON_WIDTH + len(levels) * (DIFFICULTY_BUTTON_WIDTH + CONTROL_GAP)
    left = (width - total_width) / 2
    y = control_bar_y(height)

    button_specs = [("Start / New Game", ControlAction.START, START_BUTTON_WIDTH, None)]
    button_specs += [(f"{level}x{level}", ControlAction.DIFFICULTY, DIFFICULTY_BUTTON_WIDTH, level) for level in levels]

    entities: list[int] = []
    for label, action, button_width, dimension in button_specs:
        entities.append(
            world.create_entity(
                ControlButton(
                    label=label,
                    action=action,
                    x=left + button_width / 2,
                    y=y,
                    width=button_width,
                    height=CONTROL_BUTTON_HEIGHT,
                    dimension=dimension,
                )
            )
        )
        left += button_width + CONTROL_GAP
    return entities
