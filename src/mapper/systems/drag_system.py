"""Press/release handling for the editor: menu clicks and drag sessions."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from esper import World

from mapper.components.drag_session import DragSession, DragTargetKind
from mapper.components.editor_state import EditorState
from mapper.components.placement import PlacedTile, Placement
from mapper.components.tile_library import TileLibrary
from mapper.components.tile_variant import TileVariant
from mapper.events.bus import (
    EVENT_DRAG_ENDED,
    EVENT_DRAG_STARTED,
    EVENT_EXPORT_REQUESTED,
    EVENT_MENU_MOVED,
    EVENT_MENU_ORIENTATION_CHANGED,
    EVENT_MENU_TILE_SELECTED,
    EVENT_MENU_TOGGLED,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_TILE_DISCARDED,
    EVENT_TILE_MOVED,
    EVENT_TILE_PLACED,
    EventBus,
)
from mapper.library.errors import VariantNotFoundError
from mapper.menu.components import MenuAssets, MenuState
from mapper.ui.layout import (
    dropdown_bar_rect,
    dropdown_row_rect,
    header_rect,
    panel_rect,
    rotate_left_rect,
    rotate_right_rect,
    save_button_rect,
    thumbnail_rect,
)
from mapper.utils.grid_math import image_size, reveal_offset, snap_delta, snap_point
from mapper.utils.world_state import editor_entity, find_component, require_component

logger = logging.getLogger(__name__)

# arcade.MOUSE_BUTTON_LEFT == 1; kept numeric so the system stays headless.
LEFT_BUTTON = 1


@dataclass(frozen=True, slots=True)
class DragPreview:
    """What the renderer draws translucently while a drag is in progress."""
    kind: DragTargetKind
    image: Any
    x: int
    y: int
    dx: int
    dy: int


class DragSystem:
    """Turns left-button press/release pairs into menu actions and drags.

    A press is hit-tested against, in order: save control, rotate-left,
    rotate-right, dropdown bar, open dropdown rows, menu header, tile
    thumbnail, placed tiles. The first match wins. The last three start a
    DragSession; the release that ends it snaps the displacement to the grid,
    keeps the target partly on screen and commits or discards new tiles.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self._missing_variant: tuple[str, str, int] | None = None
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_RELEASE, self.on_mouse_release)
        self.event_bus.subscribe(EVENT_MOUSE_MOVE, self.on_mouse_move)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def on_mouse_press(self, sender, **payload) -> None:
        point = self._left_button_point(payload)
        if point is not None:
            self.handle_press(*point)

    def on_mouse_release(self, sender, **payload) -> None:
        point = self._left_button_point(payload)
        if point is not None:
            self.handle_release(*point)

    def on_mouse_move(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        if x is None or y is None:
            return
        state = require_component(self.world, EditorState)
        state.pointer_x = int(x)
        state.pointer_y = int(y)

    @staticmethod
    def _left_button_point(payload: dict) -> tuple[int, int] | None:
        x = payload.get("x")
        y = payload.get("y")
        if x is None or y is None:
            return None
        if payload.get("button", LEFT_BUTTON) != LEFT_BUTTON:
            return None
        try:
            return int(x), int(y)
        except (TypeError, ValueError):
            return None

    # ------------------------------------------------------------------
    # Press
    # ------------------------------------------------------------------
    @property
    def session(self) -> DragSession | None:
        return find_component(self.world, DragSession)

    def handle_press(self, x: int, y: int) -> None:
        if self.session is not None:
            # One session at a time; the release that ends it comes first.
            return
        menu = require_component(self.world, MenuState)
        assets = require_component(self.world, MenuAssets)

        if save_button_rect(menu, assets).contains(x, y):
            require_component(self.world, EditorState).export_requested = True
            self.event_bus.emit(EVENT_EXPORT_REQUESTED)
            return

        if rotate_left_rect(menu, assets).contains(x, y):
            self._rotate(menu, -1)
            return

        if rotate_right_rect(menu, assets).contains(x, y):
            self._rotate(menu, 1)
            return

        if dropdown_bar_rect(menu, assets).contains(x, y):
            menu.toggle_dropdown()
            self.event_bus.emit(EVENT_MENU_TOGGLED, is_open=menu.is_open)
            return

        if menu.is_open:
            selected = self._select_row(menu, assets, x, y)
            # Any click outside the bar closes the dropdown, hit or not.
            menu.is_open = False
            self.event_bus.emit(EVENT_MENU_TOGGLED, is_open=False)
            if selected:
                return

        if header_rect(menu, assets).contains(x, y):
            self._start(DragSession(origin_x=x, origin_y=y, kind=DragTargetKind.MENU))
            return

        variant = self._selected_variant(menu)
        if variant is not None and thumbnail_rect(menu, variant.image).contains(x, y):
            tile_x, tile_y = snap_point(x, y)
            pending = PlacedTile(x=tile_x, y=tile_y, image=variant.image)
            self._start(
                DragSession(origin_x=x, origin_y=y, kind=DragTargetKind.NEW_TILE, pending_tile=pending)
            )
            return

        index = require_component(self.world, Placement).hit_test(x, y)
        if index is not None:
            self._start(DragSession(origin_x=x, origin_y=y, kind=DragTargetKind.TILE, tile_index=index))

    def _rotate(self, menu: MenuState, direction: int) -> None:
        orientation = menu.cycle_orientation(direction)
        self.event_bus.emit(EVENT_MENU_ORIENTATION_CHANGED, orientation=orientation)

    def _select_row(self, menu: MenuState, assets: MenuAssets, x: int, y: int) -> bool:
        library = require_component(self.world, TileLibrary)
        try:
            names = library.names(menu.selected_collection)
        except VariantNotFoundError:
            logger.warning("Selected collection %s is not loaded", menu.selected_collection)
            return False
        for slot, index in enumerate(menu.visible_range(len(names))):
            if dropdown_row_rect(menu, assets, slot).contains(x, y):
                menu.select_tile(names[index])
                self.event_bus.emit(
                    EVENT_MENU_TILE_SELECTED,
                    collection=menu.selected_collection,
                    tile=menu.selected_tile,
                )
                return True
        return False

    def _selected_variant(self, menu: MenuState) -> TileVariant | None:
        library = require_component(self.world, TileLibrary)
        key = (menu.selected_collection, menu.selected_tile, menu.selected_orientation)
        try:
            variant = library.get(*key)
        except VariantNotFoundError as exc:
            # Every press on empty canvas gets here; warn once per combination.
            if self._missing_variant != key:
                logger.warning("Tile preview unavailable: %s", exc)
                self._missing_variant = key
            return None
        self._missing_variant = None
        return variant

    def _start(self, session: DragSession) -> None:
        self.world.add_component(editor_entity(self.world), session)
        logger.debug("Drag started: %s at (%d, %d)", session.kind.name, session.origin_x, session.origin_y)
        self.event_bus.emit(
            EVENT_DRAG_STARTED,
            kind=session.kind,
            origin=(session.origin_x, session.origin_y),
        )

    # ------------------------------------------------------------------
    # Release
    # ------------------------------------------------------------------
    def handle_release(self, x: int, y: int) -> None:
        session = self.session
        if session is None:
            return
        dx = snap_delta(x - session.origin_x)
        dy = snap_delta(y - session.origin_y)

        if session.kind is DragTargetKind.MENU:
            menu = require_component(self.world, MenuState)
            menu.move_to(dx, dy)
            final_x, final_y = menu.x, menu.y
            self.event_bus.emit(EVENT_MENU_MOVED, x=final_x, y=final_y)
        else:
            tile = self._target_tile(session)
            self._move_tile(tile, dx, dy)
            final_x, final_y = tile.x, tile.y
            if session.kind is DragTargetKind.NEW_TILE:
                self._commit_or_discard(tile, x, y)
            else:
                self.event_bus.emit(EVENT_TILE_MOVED, index=session.tile_index, x=tile.x, y=tile.y)

        self.world.remove_component(editor_entity(self.world), DragSession)
        logger.debug("Drag ended: %s at (%d, %d)", session.kind.name, final_x, final_y)
        self.event_bus.emit(EVENT_DRAG_ENDED, kind=session.kind, x=final_x, y=final_y)

    def _target_tile(self, session: DragSession) -> PlacedTile:
        if session.kind is DragTargetKind.NEW_TILE:
            return session.pending_tile
        return require_component(self.world, Placement).tiles[session.tile_index]

    @staticmethod
    def _move_tile(tile: PlacedTile, dx: int, dy: int) -> None:
        tile.x += dx
        tile.y += dy
        # Only the top and left edges are guarded; the canvas grows right and down.
        width, height = image_size(tile.image)
        tile.x += reveal_offset(tile.x, width)
        tile.y += reveal_offset(tile.y, height)

    def _commit_or_discard(self, tile: PlacedTile, release_x: int, release_y: int) -> None:
        menu = require_component(self.world, MenuState)
        assets = require_component(self.world, MenuAssets)
        if panel_rect(menu, assets).contains(release_x, release_y):
            self.event_bus.emit(EVENT_TILE_DISCARDED, x=tile.x, y=tile.y)
            return
        placement = require_component(self.world, Placement)
        placement.append_tile(tile.x, tile.y, tile.image)
        self.event_bus.emit(EVENT_TILE_PLACED, index=len(placement) - 1, x=tile.x, y=tile.y)

    # ------------------------------------------------------------------
    # Preview
    # ------------------------------------------------------------------
    def preview(self, pointer_x: int | None = None, pointer_y: int | None = None) -> DragPreview | None:
        """Where the dragged target would be drawn for the given pointer.

        Defaults to the last pointer position seen on EVENT_MOUSE_MOVE. Reads
        state only.
        """
        session = self.session
        if session is None:
            return None
        if pointer_x is None or pointer_y is None:
            state = require_component(self.world, EditorState)
            pointer_x, pointer_y = state.pointer_x, state.pointer_y
        dx = pointer_x - session.origin_x
        dy = pointer_y - session.origin_y
        if session.kind is DragTargetKind.MENU:
            menu = require_component(self.world, MenuState)
            image = require_component(self.world, MenuAssets).panel
            base_x, base_y = menu.x, menu.y
        else:
            tile = self._target_tile(session)
            image = tile.image
            base_x, base_y = tile.x, tile.y
        return DragPreview(kind=session.kind, image=image, x=base_x + dx, y=base_y + dy, dx=dx, dy=dy)
