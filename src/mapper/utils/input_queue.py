from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Deque, List


class InputKind(Enum):
	PRESS = auto()
	RELEASE = auto()
	MOVE = auto()
	KEY_RELEASE = auto()


@dataclass(frozen=True, slots=True)
class InputEvent:
	kind: InputKind
	x: int = 0
	y: int = 0
	button: int = 0
	symbol: int = 0
	modifiers: int = 0


@dataclass(slots=True)
class InputQueue:
	"""Edge-triggered input collected between two frame ticks.

	Window callbacks record each physical press or release exactly once; the
	input system drains the queue once per tick, in arrival order. Consecutive
	pointer moves collapse into the latest position.

	Coordinates are stored top-left origin. ``screen_height`` converts from
	arcade's bottom-left origin when recording.
	"""

	screen_height: int
	_events: Deque[InputEvent] = field(init=False, repr=False)

	def __post_init__(self) -> None:
		self._events = deque()

	def _flip(self, y: float) -> int:
		return int(self.screen_height - 1 - y)

	def press(self, x: float, y: float, button: int) -> None:
		self._events.append(InputEvent(InputKind.PRESS, int(x), self._flip(y), button=int(button)))

	def release(self, x: float, y: float, button: int) -> None:
		self._events.append(InputEvent(InputKind.RELEASE, int(x), self._flip(y), button=int(button)))

	def move(self, x: float, y: float) -> None:
		event = InputEvent(InputKind.MOVE, int(x), self._flip(y))
		if self._events and self._events[-1].kind is InputKind.MOVE:
			self._events[-1] = event
		else:
			self._events.append(event)

	def key_release(self, symbol: int, modifiers: int = 0) -> None:
		self._events.append(InputEvent(InputKind.KEY_RELEASE, symbol=int(symbol), modifiers=int(modifiers)))

	def resize(self, screen_height: int) -> None:
		self.screen_height = int(screen_height)

	def drain(self) -> List[InputEvent]:
		events = list(self._events)
		self._events.clear()
		return events

	def __len__(self) -> int:
		return len(self._events)
