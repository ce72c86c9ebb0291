"""Keyboard handling for the tile menu."""
import logging

from esper import World

from mapper.components.tile_library import TileLibrary
from mapper.events.bus import (
    EVENT_KEY_RELEASE,
    EVENT_MENU_COLLECTION_CHANGED,
    EVENT_MENU_PAGE_CHANGED,
    EventBus,
)
from mapper.library.catalog import COLLECTIONS
from mapper.menu.components import MenuState
from mapper.utils.world_state import require_component

logger = logging.getLogger(__name__)

# arcade.key.PAGEUP / PAGEDOWN / TAB, kept numeric to avoid importing arcade here.
KEY_PAGE_UP = 65365
KEY_PAGE_DOWN = 65366
KEY_TAB = 65289


class MenuInputSystem:
    """Pages through the dropdown and switches collections on key release."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_KEY_RELEASE, self.on_key_release)

    def on_key_release(self, sender, **payload) -> None:
        symbol = payload.get("symbol")
        if symbol is None:
            return
        self.handle_key_release(int(symbol))

    def handle_key_release(self, symbol: int) -> None:
        if symbol == KEY_PAGE_UP:
            self.change_page(-1)
        elif symbol == KEY_PAGE_DOWN:
            self.change_page(1)
        elif symbol == KEY_TAB:
            self.next_collection()

    def change_page(self, direction: int) -> None:
        menu = require_component(self.world, MenuState)
        library = require_component(self.world, TileLibrary)
        previous = menu.page
        total = len(library.collection(menu.selected_collection).names)
        if menu.toggle_page(direction, total_items=total):
            logger.debug("Menu page %d -> %d", previous, menu.page)
            self.event_bus.emit(EVENT_MENU_PAGE_CHANGED, page=menu.page, previous=previous)

    def next_collection(self) -> None:
        """Select the next collection (in registry order) that has tiles."""
        menu = require_component(self.world, MenuState)
        library = require_component(self.world, TileLibrary)
        order = [title for title in COLLECTIONS.values() if title in library.collections]
        order += [title for title in library.collections if title not in order]
        if menu.selected_collection in order:
            start = order.index(menu.selected_collection)
        else:
            start = -1
        for step in range(1, len(order) + 1):
            candidate = order[(start + step) % len(order)]
            names = library.collections[candidate].names
            if names:
                if candidate != menu.selected_collection:
                    menu.select_collection(candidate, names[0])
                    self.event_bus.emit(EVENT_MENU_COLLECTION_CHANGED, collection=candidate, tile=names[0])
                return
