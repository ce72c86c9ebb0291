"""Load textures for the tile library and the menu from disk."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, List

from mapper.constants import GRID_ASSET_FILE, MENU_ASSET_FILES
from mapper.menu.components import MenuAssets


def list_tile_files(tile_dir: Path) -> List[str]:
    """File names in the tile directory, sorted. Raises FileNotFoundError if it is missing."""
    tile_dir = Path(tile_dir)
    if not tile_dir.is_dir():
        raise FileNotFoundError(f"Tile directory not found: {tile_dir}")
    return sorted(entry.name for entry in tile_dir.iterdir() if entry.is_file())


def texture_loader(arcade_module, directory: Path) -> Callable[[str], Any]:
    """Return a loader mapping a file name in directory to an arcade texture."""
    directory = Path(directory)

    def load(file_name: str):
        return arcade_module.load_texture(str(directory / file_name))

    return load


def load_menu_assets(arcade_module, asset_dir: Path) -> MenuAssets:
    load = texture_loader(arcade_module, asset_dir)
    return MenuAssets(**{field: load(file_name) for field, file_name in MENU_ASSET_FILES.items()})


def load_grid_texture(arcade_module, asset_dir: Path):
    return texture_loader(arcade_module, asset_dir)(GRID_ASSET_FILE)
