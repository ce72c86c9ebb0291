import pytest

from mapper.components.drag_session import DragSession
from mapper.components.editor_state import EditorState
from mapper.components.grid import Grid
from mapper.components.placement import Placement
from mapper.components.tile_library import TileLibrary
from mapper.library.catalog import build_library
from mapper.menu.components import MenuAssets, MenuState
from mapper.utils.world_state import editor_entity, find_component, require_component
from mapper.world import create_world
from tests.helpers import make_assets, tile_files


def test_default_world_layout():
    library = build_library(tile_files(["Bridge.b", "Altar.a"])).library
    world = create_world(library, make_assets())
    menu = require_component(world, MenuState)
    assert (menu.x, menu.y) == (512, 0)
    assert menu.selected_collection == "Dungeon Tiles"
    assert menu.selected_tile == "Altar.a"
    assert (menu.page, menu.is_open, menu.selected_orientation) == (0, False, 0)

    grid = require_component(world, Grid)
    assert (grid.cols, grid.rows) == (39, 22)
    assert len(require_component(world, Placement)) == 0
    assert not require_component(world, EditorState).export_requested
    assert require_component(world, TileLibrary) is library
    assert isinstance(require_component(world, MenuAssets), MenuAssets)
    assert find_component(world, DragSession) is None


def test_menu_lives_on_editor_entity():
    library = build_library(tile_files(["Altar.a"])).library
    world = create_world(library, make_assets())
    editor = editor_entity(world)
    assert world.has_component(editor, MenuState)
    assert world.has_component(editor, Placement)


def test_falls_back_to_first_populated_collection():
    library = build_library(tile_files(["Stone.a"], code="DT4")).library
    world = create_world(library, make_assets(), menu_position=(0, 64))
    menu = require_component(world, MenuState)
    assert menu.selected_collection == "Ruins of the Wild"
    assert menu.selected_tile == "Stone.a"
    assert (menu.x, menu.y) == (0, 64)


def test_library_without_selectable_tiles_is_rejected():
    library = build_library(["DT1_4x8_Orphan.a.90.jpg"]).library
    with pytest.raises(ValueError):
        create_world(library, make_assets())


def test_missing_component_raises():
    library = build_library(tile_files(["Altar.a"])).library
    world = create_world(library, make_assets())
    with pytest.raises(RuntimeError):
        require_component(world, DragSession)
