from esper import World

from mapper.components.drag_session import DragTargetKind
from mapper.components.editor_state import EditorState
from mapper.components.grid import Grid
from mapper.components.placement import Placement
from mapper.constants import CELL_SIZE
from mapper.rendering.draw import draw_image
from mapper.rendering.exporter import MapExporter
from mapper.systems.drag_system import DragSystem
from mapper.utils.world_state import find_component

PREVIEW_ALPHA = 128


class RenderSystem:
    """Draws the grid, the placed tiles and the drag preview.

    A pending export is written right after the placed tiles are drawn, so the
    saved image holds the map without the menu or the drag preview.
    """

    def __init__(self, world: World, window, drag_system: DragSystem, exporter: MapExporter):
        self.world = world
        self.window = window
        self.drag_system = drag_system
        self.exporter = exporter

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        height = self.window.height

        grid = find_component(self.world, Grid)
        if grid is not None and grid.image is not None:
            for col in range(grid.cols):
                for row in range(grid.rows):
                    draw_image(arcade, grid.image, col * CELL_SIZE, row * CELL_SIZE, height)

        session = self.drag_system.session
        dragged_index = session.tile_index if session and session.kind is DragTargetKind.TILE else None
        placement = find_component(self.world, Placement)
        if placement is not None:
            for index, tile in enumerate(placement.tiles):
                # The dragged tile is only drawn as the preview.
                if index != dragged_index:
                    draw_image(arcade, tile.image, tile.x, tile.y, height)

        self.export_if_requested(lambda: arcade.get_image(0, 0, self.window.width, self.window.height))

        preview = self.drag_system.preview()
        if preview is not None:
            draw_image(arcade, preview.image, preview.x, preview.y, height, alpha=PREVIEW_ALPHA)

    def export_if_requested(self, capture) -> bool:
        """Consume the one-shot export flag and write a frame if it was set."""
        state = find_component(self.world, EditorState)
        if state is None or not state.export_requested:
            return False
        state.export_requested = False
        return self.exporter.capture_and_export(capture)
