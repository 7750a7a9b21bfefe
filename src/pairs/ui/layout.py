from pairs.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    CONTROL_BUTTON_HEIGHT,
    HUD_HEIGHT,
    MIN_TILE_SIZE,
)

def compute_board_geometry(window_width: int, window_height: int, dimension: int):
    """Return (tile_size, start_x, start_y) for a ``dimension`` x ``dimension`` board.

    ``start_x``/``start_y`` is the bottom-left corner of the board. Shared by the
    renderer and the input mapping so clicks land on the tile that was drawn there.
    """
    dimension = max(1, dimension)
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - HUD_HEIGHT - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_board_w / dimension, max_board_h / dimension))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total = dimension * tile_size
    start_x = (window_width - total) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def tile_origin(tile_id: int, dimension: int, tile_size: int, start_x: float, start_y: float):
    """Bottom-left corner of a tile. Tile 0 sits in the top-left cell, ids run row by row."""
    row, col = divmod(tile_id, dimension)
    left = start_x + col * tile_size
    bottom = start_y + (dimension - 1 - row) * tile_size
    return left, bottom


def tile_at_point(x: float, y: float, window_width: int, window_height: int, dimension: int):
    """Tile id under the point, or None when the point misses the board."""
    if dimension <= 0:
        return None
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height, dimension)
    total = dimension * tile_size
    if x < start_x or x >= start_x + total:
        return None
    if y < start_y or y >= start_y + total:
        return None
    col = int((x - start_x) // tile_size)
    row_from_bottom = int((y - start_y) // tile_size)
    row = dimension - 1 - row_from_bottom
    return row * dimension + col


def control_bar_y(window_height: int) -> float:
    """Vertical centre of the control buttons."""
    return window_height - CONTROL_BUTTON_HEIGHT / 2 - 12


def status_line_y(window_height: int) -> float:
    """Baseline of the moves / time counters below the buttons."""
    return window_height - CONTROL_BUTTON_HEIGHT - 48
