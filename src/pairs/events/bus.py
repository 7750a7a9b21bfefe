from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references keep handlers alive for systems nobody stores in a variable.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                        # payload: dt=float
EVENT_ELAPSED_CHANGED = "elapsed_changed"                  # payload: elapsed_seconds=int, generation=int


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                          # payload: x, y, button
EVENT_TILE_CLICK = "tile_click"                            # payload: tile_id=int
EVENT_START_REQUEST = "start_request"                      # payload: None
EVENT_DIFFICULTY_SELECTED = "difficulty_selected"          # payload: dimension=int|str


# ============================================================================
# SESSION LIFECYCLE
# ============================================================================
EVENT_GAME_RESET = "game_reset"                            # payload: generation=int, dimension=int|None
EVENT_GAME_STARTED = "game_started"                        # payload: generation=int
EVENT_GAME_WON = "game_won"                                # payload: generation=int, total_flips=int, elapsed_seconds=int


# ============================================================================
# TILES & PAIRS
# ============================================================================
EVENT_TILE_FLIPPED = "tile_flipped"                        # payload: tile_id=int, total_flips=int
EVENT_PAIR_MATCHED = "pair_matched"                        # payload: tile_ids=(int,int), symbol=Any
EVENT_PAIR_MISMATCHED = "pair_mismatched"                  # payload: tile_ids=(int,int)
EVENT_PAIR_SETTLED = "pair_settled"                        # payload: tile_ids=(int,int)


# ============================================================================
# DEFERRED ACTIONS
# ============================================================================
EVENT_DEFERRED_ACTION_REQUEST = "deferred_action_request"  # payload: kind=DeferredKind, delay=float, generation=int, tile_ids=tuple
EVENT_DEFERRED_ACTION_DUE = "deferred_action_due"          # payload: kind=DeferredKind, generation=int, tile_ids=tuple
EVENT_DEFERRED_ACTIONS_CANCEL = "deferred_actions_cancel"  # payload: generation=int|None
