"""Write the composed map to disk as a PNG."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from mapper.events.bus import EVENT_EXPORT_COMPLETED, EVENT_EXPORT_FAILED, EventBus

logger = logging.getLogger(__name__)


class MapExporter:
    """Saves captured frames to a fixed path.

    Failures are logged and announced on the bus; they never propagate, so a
    full disk or a read-only directory does not end the session.
    """

    def __init__(self, event_bus: EventBus, path: str | Path) -> None:
        self.event_bus = event_bus
        self.path = Path(path)

    def export(self, image: Any) -> bool:
        """Save a PIL image; returns True on success."""
        try:
            image.save(self.path, format="PNG")
        except (OSError, ValueError) as exc:
            logger.error("Could not export map to %s: %s", self.path, exc)
            self.event_bus.emit(EVENT_EXPORT_FAILED, path=str(self.path), error=str(exc))
            return False
        logger.info("Exported map to %s", self.path)
        self.event_bus.emit(EVENT_EXPORT_COMPLETED, path=str(self.path))
        return True

    def capture_and_export(self, capture: Callable[[], Any]) -> bool:
        """Grab a frame with capture() and save it."""
        try:
            image = capture()
        except (OSError, ValueError, RuntimeError) as exc:
            logger.error("Could not capture frame for export: %s", exc)
            self.event_bus.emit(EVENT_EXPORT_FAILED, path=str(self.path), error=str(exc))
            return False
        return self.export(image)
