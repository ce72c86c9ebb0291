from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from mapper.events.bus import EventBus
from mapper.library.catalog import build_library
from mapper.menu.components import MenuAssets
from mapper.systems.drag_system import DragSystem
from mapper.menu.input_system import MenuInputSystem
from mapper.world import create_world


@dataclass(frozen=True)
class FakeImage:
    """Stand-in for an arcade texture; the core only reads the size."""
    width: int
    height: int
    label: str = ""


# Sizes chosen so the widgets do not overlap, mirroring the shipped art.
PANEL = FakeImage(300, 480, "panel")
HEADER = FakeImage(300, 32, "header")
DROPDOWN_BAR = FakeImage(160, 32, "dropdown_bar")
DROPDOWN_ARROW = FakeImage(32, 32, "dropdown_arrow")
ROTATE_LEFT = FakeImage(32, 32, "rotate_left")
ROTATE_RIGHT = FakeImage(32, 32, "rotate_right")
SAVE_BUTTON = FakeImage(64, 32, "save")
TILE_IMAGE = FakeImage(128, 256, "tile")


def make_assets() -> MenuAssets:
    return MenuAssets(
        panel=PANEL,
        header=HEADER,
        dropdown_bar=DROPDOWN_BAR,
        dropdown_arrow=DROPDOWN_ARROW,
        rotate_left=ROTATE_LEFT,
        rotate_right=ROTATE_RIGHT,
        save_button=SAVE_BUTTON,
    )


def tile_files(names: Iterable[str], code: str = "DT1", size: str = "4x8", ext: str = "jpg") -> list[str]:
    """All four orientation file names for each tile name."""
    return [
        f"{code}_{size}_{name}.{degrees}.{ext}"
        for name in names
        for degrees in (0, 90, 180, 270)
    ]


def image_loader(file_name: str) -> FakeImage:
    return FakeImage(TILE_IMAGE.width, TILE_IMAGE.height, file_name)


@dataclass
class Editor:
    bus: EventBus
    world: object
    drag: DragSystem
    menu_input: MenuInputSystem


def build_editor(
    file_names: Sequence[str] | None = None,
    *,
    clamp_pages: bool = False,
    menu_position: tuple[int, int] = (512, 0),
) -> Editor:
    """World plus the input-facing systems, wired to a fresh bus."""
    if file_names is None:
        file_names = tile_files(["Altar.a", "Bridge.b", "Corridor.a"])
    report = build_library(file_names, image_loader)
    bus = EventBus()
    world = create_world(
        report.library,
        make_assets(),
        FakeImage(32, 32, "grid"),
        menu_position=menu_position,
        clamp_pages=clamp_pages,
    )
    return Editor(bus=bus, world=world, drag=DragSystem(world, bus), menu_input=MenuInputSystem(world, bus))
