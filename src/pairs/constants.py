# Symbols printed on tile faces. Board generation draws pairs from this pool.
SYMBOLS = (
    '😀', '😊', '😎', '🥳', '🤩', '😍', '🤪', '😜', '🤔', '🤓',
    '🙌', '👏', '👍', '🤙', '👌', '✌️', '🤞', '🤟', '🤘', '👊',
    '🖐️', '🙏', '🤝', '💪', '👈', '👉', '👆', '👇', '👋', '💃',
    '🕺', '🙈', '🙉', '🙊', '💥', '💦', '🔥', '💫', '⭐', '🌟',
    '✨', '🌈', '☀️', '🌤️', '⛅', '🌦️', '☁️', '🌧️', '⛈️', '🌩️',
    '🌨️', '❄️', '☃️', '⛄', '🌬️', '💨', '🌪️', '🌫️', '🌊', '🌍',
    '🌎', '🌏', '🌕', '🌖', '🌗', '🌘', '🌑', '🌒', '🌓', '🌔',
)

# Board sides offered by the difficulty selector (tiles per row and column).
DIFFICULTY_LEVELS = (2, 4, 6, 8)
DEFAULT_DIMENSION = 4

# Seconds a mismatched pair stays visible, also the pause before a cleared board counts as won.
SETTLE_DELAY = 1.0
# Seconds per elapsed-time increment.
CLOCK_INTERVAL = 1.0

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 700
WINDOW_TITLE = "Memory Pairs"

BOTTOM_MARGIN = 20
# Height of the control bar above the board (start button, difficulty buttons, counters).
HUD_HEIGHT = 110
# Board footprint relative to the space left below the control bar.
BOARD_MAX_WIDTH_PCT = 0.9
BOARD_MAX_HEIGHT_PCT = 0.95
MIN_TILE_SIZE = 20
TILE_PADDING = 4

CONTROL_BUTTON_HEIGHT = 40
START_BUTTON_WIDTH = 200
DIFFICULTY_BUTTON_WIDTH = 70
CONTROL_GAP = 12

BACKGROUND_COLOR = (26, 26, 46)
TILE_BACK_COLOR = (40, 44, 84)
TILE_FACE_COLOR = (235, 235, 245)
TILE_MATCHED_COLOR = (120, 200, 140)
HUD_TEXT_COLOR = (240, 240, 240)
HIGHLIGHT_COLOR = (255, 200, 70)
