from mapper.events.bus import (
    EventBus,
    EVENT_KEY_RELEASE,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_TICK,
)
from mapper.utils.input_queue import InputKind, InputQueue


class InputSystem:
    """Bridges queued window input to bus events once per tick."""

    def __init__(self, event_bus: EventBus, queue: InputQueue):
        self.event_bus = event_bus
        self.queue = queue
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs):
        self.flush()

    def flush(self) -> int:
        """Emit every queued event in arrival order; returns how many were sent."""
        events = self.queue.drain()
        for event in events:
            if event.kind is InputKind.PRESS:
                self.event_bus.emit(EVENT_MOUSE_PRESS, x=event.x, y=event.y, button=event.button)
            elif event.kind is InputKind.RELEASE:
                self.event_bus.emit(EVENT_MOUSE_RELEASE, x=event.x, y=event.y, button=event.button)
            elif event.kind is InputKind.MOVE:
                self.event_bus.emit(EVENT_MOUSE_MOVE, x=event.x, y=event.y)
            elif event.kind is InputKind.KEY_RELEASE:
                self.event_bus.emit(EVENT_KEY_RELEASE, symbol=event.symbol, modifiers=event.modifiers)
        return len(events)
