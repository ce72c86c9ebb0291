from __future__ import annotations

from typing import Any

from esper import World

from mapper.components.editor_state import EditorState
from mapper.components.grid import Grid
from mapper.components.placement import Placement
from mapper.components.tile_library import TileLibrary
from mapper.constants import GRID_COLS, GRID_ROWS, MENU_START_X, MENU_START_Y
from mapper.library.catalog import COLLECTIONS, DEFAULT_COLLECTION
from mapper.menu.components import MenuAssets
from mapper.menu.factory import spawn_menu


def create_world(
    library: TileLibrary,
    assets: MenuAssets,
    grid_image: Any = None,
    *,
    grid_cols: int = GRID_COLS,
    grid_rows: int = GRID_ROWS,
    menu_position: tuple[int, int] = (MENU_START_X, MENU_START_Y),
    default_collection: str = DEFAULT_COLLECTION,
    clamp_pages: bool = False,
) -> World:
    """Create the editor world.

    One registry entity carries the TileLibrary; the editor entity carries the
    editor state, grid, placement and menu. Raises ValueError when the library
    has no selectable tile at all.
    """
    world = World()

    world.create_entity(library)

    editor = world.create_entity(
        EditorState(),
        Grid(cols=grid_cols, rows=grid_rows, image=grid_image),
        Placement(),
    )

    collection: str | None = default_collection
    entry = library.collections.get(default_collection)
    if entry is None or not entry.names:
        # Fall back to the first populated collection, in menu order.
        collection = library.first_populated(COLLECTIONS.values()) or library.first_populated()
    if collection is None:
        raise ValueError("Tile library has no tiles with a 0 degree variant")

    spawn_menu(
        world,
        editor,
        assets,
        collection=collection,
        first_tile=library.names(collection)[0],
        position=menu_position,
        clamp_pages=clamp_pages,
    )
    return world
