"""Randomized board generation."""
from __future__ import annotations

import logging
import random
from typing import Any, List, Sequence, TypeVar

from pairs.components.board import Board
from pairs.components.tile import Tile
from pairs.constants import SYMBOLS
from pairs.errors import AlphabetExhausted
from pairs.utils.difficulty import validate_dimension

logger = logging.getLogger(__name__)

T = TypeVar("T")


def pick_symbols(alphabet: Sequence[T], count: int, rng: random.Random) -> List[T]:
    """Pick ``count`` distinct symbols from ``alphabet`` without replacement."""
    distinct = list(dict.fromkeys(alphabet))
    if count > len(distinct):
        raise AlphabetExhausted(
            f"Board needs {count} distinct symbols but the alphabet only has {len(distinct)}"
        )
    return rng.sample(distinct, count)


def shuffle(items: Sequence[T], rng: random.Random) -> List[T]:
    """Return a uniformly permuted copy of ``items`` (Fisher-Yates, last index down to 1)."""
    shuffled = list(items)
    for index in range(len(shuffled) - 1, 0, -1):
        swap_index = rng.randint(0, index)
        shuffled[index], shuffled[swap_index] = shuffled[swap_index], shuffled[index]
    return shuffled


def generate_board(
    dimension: int,
    *,
    rng: random.Random | None = None,
    alphabet: Sequence[Any] = SYMBOLS,
) -> Board:
    """Create a ``dimension`` x ``dimension`` board where every symbol appears exactly twice.

    Raises InvalidDimension for odd or non-positive sides and AlphabetExhausted
    when ``alphabet`` cannot supply ``dimension**2 / 2`` distinct symbols. Nothing
    is created when either check fails.
    """
    validate_dimension(dimension)
    rng = rng or random.Random()
    picks = pick_symbols(alphabet, dimension * dimension // 2, rng)
    layout = shuffle(picks + picks, rng)
    logger.debug("Generated %dx%d board with %d pairs", dimension, dimension, len(picks))
    return Board(
        dimension=dimension,
        tiles=[Tile(id=index, symbol=symbol) for index, symbol in enumerate(layout)],
    )
