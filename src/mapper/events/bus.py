from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
# Coordinates on the bus are top-left origin with y growing downward.
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_MOUSE_RELEASE = "mouse_release"              # payload: x, y, button
EVENT_MOUSE_MOVE = "mouse_move"                    # payload: x, y
EVENT_KEY_RELEASE = "key_release"                  # payload: symbol=int, modifiers=int


# ============================================================================
# MENU
# ============================================================================
EVENT_MENU_PAGE_CHANGED = "menu_page_changed"                  # payload: page=int, previous=int
EVENT_MENU_TOGGLED = "menu_toggled"                            # payload: is_open=bool
EVENT_MENU_TILE_SELECTED = "menu_tile_selected"                # payload: collection=str, tile=str
EVENT_MENU_ORIENTATION_CHANGED = "menu_orientation_changed"    # payload: orientation=int
EVENT_MENU_COLLECTION_CHANGED = "menu_collection_changed"      # payload: collection=str, tile=str
EVENT_MENU_MOVED = "menu_moved"                                # payload: x=int, y=int


# ============================================================================
# DRAG & PLACEMENT
# ============================================================================
EVENT_DRAG_STARTED = "drag_started"        # payload: kind=DragTargetKind, origin=(x,y)
EVENT_DRAG_ENDED = "drag_ended"            # payload: kind=DragTargetKind, x=int, y=int
EVENT_TILE_PLACED = "tile_placed"          # payload: index=int, x=int, y=int
EVENT_TILE_MOVED = "tile_moved"            # payload: index=int, x=int, y=int
EVENT_TILE_DISCARDED = "tile_discarded"    # payload: x=int, y=int


# ============================================================================
# EXPORT
# ============================================================================
EVENT_EXPORT_REQUESTED = "export_requested"    # payload: none
EVENT_EXPORT_COMPLETED = "export_completed"    # payload: path=str
EVENT_EXPORT_FAILED = "export_failed"          # payload: path=str, error=str
