"""Rendering system responsible for drawing the tile menu."""
import logging

from esper import World

from mapper.components.tile_library import TileLibrary
from mapper.constants import (
    DROPDOWN_BAR_OFFSET_X,
    DROPDOWN_OFFSET_Y,
    FONT_SIZE,
    MENU_TITLE_OFFSET_X,
    MENU_TITLE_OFFSET_Y,
    ROW_SPACING,
)
from mapper.library.errors import VariantNotFoundError
from mapper.menu.components import MenuAssets, MenuState
from mapper.rendering.draw import draw_image, draw_label
from mapper.ui.layout import (
    dropdown_arrow_rect,
    dropdown_bar_rect,
    dropdown_row_rect,
    rotate_left_rect,
    rotate_right_rect,
    save_button_rect,
    thumbnail_rect,
)
from mapper.utils.world_state import find_component

logger = logging.getLogger(__name__)


class MenuRenderSystem:
    """Draws the menu panel, its controls and the open dropdown."""

    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window
        self._missing_preview: tuple[str, str, int] | None = None

    def process(self) -> None:
        import arcade

        menu = find_component(self.world, MenuState)
        assets = find_component(self.world, MenuAssets)
        library = find_component(self.world, TileLibrary)
        if menu is None or assets is None or library is None:
            return
        height = self.window.height

        draw_image(arcade, assets.panel, menu.x, menu.y, height)
        draw_image(arcade, assets.header, menu.x, menu.y, height)

        variant = self._selected_variant(menu, library)
        if variant is not None:
            rect = thumbnail_rect(menu, variant.image)
            draw_image(arcade, variant.image, rect.left, rect.top, height)

        for image, rect in (
            (assets.save_button, save_button_rect(menu, assets)),
            (assets.dropdown_bar, dropdown_bar_rect(menu, assets)),
            (assets.dropdown_arrow, dropdown_arrow_rect(menu, assets)),
            (assets.rotate_left, rotate_left_rect(menu, assets)),
            (assets.rotate_right, rotate_right_rect(menu, assets)),
        ):
            draw_image(arcade, image, rect.left, rect.top, height)

        if menu.is_open:
            names = library.collection(menu.selected_collection).names
            for slot, index in enumerate(menu.visible_range(len(names))):
                rect = dropdown_row_rect(menu, assets, slot)
                draw_image(arcade, assets.dropdown_bar, rect.left, rect.top, height)
                # Baseline at the bottom of the row.
                draw_label(arcade, names[index], rect.left, rect.top + ROW_SPACING, height, font_size=FONT_SIZE)

        draw_label(
            arcade,
            "Menu",
            menu.x + MENU_TITLE_OFFSET_X,
            menu.y + MENU_TITLE_OFFSET_Y,
            height,
            font_size=FONT_SIZE,
        )
        draw_label(
            arcade,
            menu.selected_tile,
            menu.x + DROPDOWN_BAR_OFFSET_X,
            menu.y + DROPDOWN_OFFSET_Y + ROW_SPACING,
            height,
            font_size=FONT_SIZE,
        )

    def _selected_variant(self, menu: MenuState, library: TileLibrary):
        key = (menu.selected_collection, menu.selected_tile, menu.selected_orientation)
        try:
            variant = library.get(*key)
        except VariantNotFoundError as exc:
            # Warn once per missing combination rather than every frame.
            if self._missing_preview != key:
                logger.warning("Tile preview unavailable: %s", exc)
                self._missing_preview = key
            return None
        self._missing_preview = None
        return variant
