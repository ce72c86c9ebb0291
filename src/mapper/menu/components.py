"""Components used by the tile picker menu."""
from dataclasses import dataclass
from typing import Any, Optional

from mapper.constants import MENU_START_X, MENU_START_Y, ORIENTATIONS, PAGE_SIZE

_DIRECTIONS = (-1, 1)


def _check_direction(direction: int) -> int:
    if direction not in _DIRECTIONS:
        raise ValueError(f"direction must be -1 or 1, got {direction!r}")
    return direction


@dataclass
class MenuState:
    """Position and selection state of the floating tile menu.

    The selected tile is always one of the selected collection's names.
    page is unbounded upward unless clamp_pages is set; paging past the last
    item simply shows an empty dropdown.
    """
    selected_collection: str
    selected_tile: str
    x: int = MENU_START_X
    y: int = MENU_START_Y
    page: int = 0
    is_open: bool = False
    selected_orientation: int = 0
    clamp_pages: bool = False

    def toggle_page(self, direction: int, total_items: Optional[int] = None) -> bool:
        """Move one page back (-1) or forward (1). Returns True if the page changed."""
        previous = self.page
        if _check_direction(direction) < 0:
            if self.page > 0:
                self.page -= 1
        else:
            self.page += 1
            if self.clamp_pages and total_items is not None:
                self.page = min(self.page, self.last_page(total_items))
        return self.page != previous

    @staticmethod
    def last_page(total_items: int) -> int:
        return max(0, (total_items - 1) // PAGE_SIZE)

    def visible_range(self, total_items: int) -> range:
        """Indices of the dropdown entries shown on the current page."""
        start = self.page * PAGE_SIZE
        return range(start, min(start + PAGE_SIZE, total_items))

    def toggle_dropdown(self) -> None:
        self.is_open = not self.is_open

    def select_tile(self, name: str) -> None:
        self.selected_tile = name
        self.is_open = False

    def select_collection(self, collection: str, first_tile: str) -> None:
        self.selected_collection = collection
        self.selected_tile = first_tile
        self.selected_orientation = ORIENTATIONS[0]
        self.page = 0
        self.is_open = False

    def cycle_orientation(self, direction: int) -> int:
        step = 90 * _check_direction(direction)
        self.selected_orientation = (self.selected_orientation + step) % 360
        return self.selected_orientation

    def move_to(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy
        self.clamp_to_screen_top_left()

    def clamp_to_screen_top_left(self) -> None:
        self.x = max(0, self.x)
        self.y = max(0, self.y)


@dataclass
class MenuAssets:
    """Sized image handles for the fixed menu widgets."""
    panel: Any
    header: Any
    dropdown_bar: Any
    dropdown_arrow: Any
    rotate_left: Any
    rotate_right: Any
    save_button: Any
