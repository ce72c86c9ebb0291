"""Screen rectangles of the menu widgets, shared by hit-testing and rendering.

All rectangles are anchored at the menu position and sized from the widget's
image so a companion asset pack with different art still lines up.
"""
from typing import Any

from mapper.constants import (
    DROPDOWN_ARROW_OFFSET_X,
    DROPDOWN_BAR_OFFSET_X,
    DROPDOWN_OFFSET_Y,
    ROTATE_LEFT_OFFSET_X,
    ROTATE_RIGHT_OFFSET_X,
    ROW_SPACING,
    SAVE_OFFSET_X,
    SAVE_OFFSET_Y,
    SELECTED_TILE_OFFSET_X,
    SELECTED_TILE_OFFSET_Y,
)
from mapper.menu.components import MenuAssets, MenuState
from mapper.utils.grid_math import Rect, image_size


def _widget_rect(menu: MenuState, offset_x: int, offset_y: int, image: Any) -> Rect:
    return Rect.at(menu.x + offset_x, menu.y + offset_y, image_size(image))


def panel_rect(menu: MenuState, assets: MenuAssets) -> Rect:
    return _widget_rect(menu, 0, 0, assets.panel)


def header_rect(menu: MenuState, assets: MenuAssets) -> Rect:
    return _widget_rect(menu, 0, 0, assets.header)


def save_button_rect(menu: MenuState, assets: MenuAssets) -> Rect:
    return _widget_rect(menu, SAVE_OFFSET_X, SAVE_OFFSET_Y, assets.save_button)


def rotate_left_rect(menu: MenuState, assets: MenuAssets) -> Rect:
    return _widget_rect(menu, ROTATE_LEFT_OFFSET_X, DROPDOWN_OFFSET_Y, assets.rotate_left)


def rotate_right_rect(menu: MenuState, assets: MenuAssets) -> Rect:
    return _widget_rect(menu, ROTATE_RIGHT_OFFSET_X, DROPDOWN_OFFSET_Y, assets.rotate_right)


def dropdown_bar_rect(menu: MenuState, assets: MenuAssets) -> Rect:
    return _widget_rect(menu, DROPDOWN_BAR_OFFSET_X, DROPDOWN_OFFSET_Y, assets.dropdown_bar)


def dropdown_arrow_rect(menu: MenuState, assets: MenuAssets) -> Rect:
    return _widget_rect(menu, DROPDOWN_ARROW_OFFSET_X, DROPDOWN_OFFSET_Y, assets.dropdown_arrow)


def dropdown_row_rect(menu: MenuState, assets: MenuAssets, slot: int) -> Rect:
    """Rectangle of the slot-th visible dropdown row (0-based within the page).

    Rows hang below the dropdown bar, one ROW_SPACING apart, and use the bar's size.
    """
    offset_y = DROPDOWN_OFFSET_Y + ROW_SPACING * (slot + 1)
    return _widget_rect(menu, DROPDOWN_BAR_OFFSET_X, offset_y, assets.dropdown_bar)


def thumbnail_rect(menu: MenuState, image: Any) -> Rect:
    """Rectangle of the selected tile preview; sized by the selected variant."""
    return _widget_rect(menu, SELECTED_TILE_OFFSET_X, SELECTED_TILE_OFFSET_Y, image)
