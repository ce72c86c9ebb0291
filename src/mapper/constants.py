SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
WINDOW_TITLE = "Dungeon Tiles Mapper"

# Every snap, clamp and grid computation works in whole cells.
CELL_SIZE = 32
GRID_COLS = 39
GRID_ROWS = 22

# Dropdown pagination
PAGE_SIZE = 8
ROW_SPACING = 32

# Menu anchor at startup (top-left origin, y grows downward).
MENU_START_X = 512
MENU_START_Y = 0

# Offsets of the menu widgets relative to the menu anchor. These match the
# companion asset pack and must not drift.
DROPDOWN_BAR_OFFSET_X = 32
DROPDOWN_ARROW_OFFSET_X = 192
DROPDOWN_OFFSET_Y = 64
ROTATE_LEFT_OFFSET_X = 224
ROTATE_RIGHT_OFFSET_X = 256
SELECTED_TILE_OFFSET_X = 32
SELECTED_TILE_OFFSET_Y = 128
SAVE_OFFSET_X = 32
SAVE_OFFSET_Y = 448

# Text baselines inside the menu
MENU_TITLE_OFFSET_X = 8
MENU_TITLE_OFFSET_Y = 23
FONT_SIZE = 20

ORIENTATIONS = (0, 90, 180, 270)

# Default asset locations, relative to the working directory.
TILE_DIR = "tiles"
ASSET_DIR = "."
EXPORT_PATH = "screen.png"

MENU_ASSET_FILES = {
    "panel": "menu.png",
    "header": "menu_header.png",
    "dropdown_bar": "dropdown_bar.png",
    "dropdown_arrow": "dropdown_arrow.png",
    "rotate_left": "rotate_left.png",
    "rotate_right": "rotate_right.png",
    "save_button": "save_icon.png",
}
GRID_ASSET_FILE = "grid.png"
