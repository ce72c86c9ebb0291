"""Entry point for the Dungeon Tiles Mapper.

Loads the tile library, sets up the ECS world, event bus, systems, and Arcade window.
"""
import argparse
import logging
import sys
from pathlib import Path

import arcade
from arcade import Window, run, set_background_color, color

from mapper.constants import ASSET_DIR, EXPORT_PATH, SCREEN_HEIGHT, SCREEN_WIDTH, TILE_DIR, WINDOW_TITLE
from mapper.events.bus import EVENT_TICK, EventBus
from mapper.library.catalog import build_library
from mapper.menu.input_system import MenuInputSystem
from mapper.menu.render_system import MenuRenderSystem
from mapper.rendering.assets import list_tile_files, load_grid_texture, load_menu_assets, texture_loader
from mapper.rendering.exporter import MapExporter
from mapper.systems.drag_system import DragSystem
from mapper.systems.input import InputSystem
from mapper.systems.render import RenderSystem
from mapper.utils.input_queue import InputQueue
from mapper.world import create_world

logger = logging.getLogger("mapper")


class MapperWindow(Window):
    def __init__(self, tile_dir: Path, asset_dir: Path, output_path: Path, *, clamp_pages: bool = False):
        super().__init__(SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()

        report = build_library(list_tile_files(tile_dir), texture_loader(arcade, tile_dir))
        if report.rejected:
            logger.warning("%d tile files were skipped", len(report.rejected))
        self.world = create_world(
            report.library,
            load_menu_assets(arcade, asset_dir),
            load_grid_texture(arcade, asset_dir),
            clamp_pages=clamp_pages,
        )

        # Input systems
        self.input_queue = InputQueue(screen_height=self.height)
        self.input_system = InputSystem(self.event_bus, self.input_queue)
        self.drag_system = DragSystem(self.world, self.event_bus)
        self.menu_input_system = MenuInputSystem(self.world, self.event_bus)

        # Rendering systems
        self.exporter = MapExporter(self.event_bus, output_path)
        self.render_system = RenderSystem(self.world, self, self.drag_system, self.exporter)
        self.menu_render_system = MenuRenderSystem(self.world, self)

        set_background_color(color.WHITE)

    def on_resize(self, width: int, height: int):
        self.input_queue.resize(height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()
        self.menu_render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.input_queue.press(x, y, button)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.input_queue.release(x, y, button)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.input_queue.move(x, y)

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int):
        self.input_queue.move(x, y)

    def on_key_release(self, symbol: int, modifiers: int):
        self.input_queue.key_release(symbol, modifiers)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compose dungeon maps from tile images")
    parser.add_argument("--tiles", type=Path, default=Path(TILE_DIR), help="Directory holding the tile images")
    parser.add_argument("--assets", type=Path, default=Path(ASSET_DIR), help="Directory holding the menu and grid images")
    parser.add_argument("--output", type=Path, default=Path(EXPORT_PATH), help="Where the save button writes the map")
    parser.add_argument(
        "--clamp-pages",
        action="store_true",
        help="Stop paging at the last page of the dropdown",
    )
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        MapperWindow(args.tiles, args.assets, args.output, clamp_pages=args.clamp_pages)
    except (OSError, ValueError) as exc:
        logger.error("Could not start the mapper: %s", exc)
        return 1
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
