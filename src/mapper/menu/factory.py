"""Factory helpers for attaching the tile menu to the editor entity."""
from esper import World

from mapper.menu.components import MenuAssets, MenuState


def spawn_menu(
    world: World,
    editor_entity: int,
    assets: MenuAssets,
    *,
    collection: str,
    first_tile: str,
    position: tuple[int, int],
    clamp_pages: bool = False,
) -> MenuState:
    """Add a closed menu at position with the given collection's first tile selected."""
    x, y = position
    menu = MenuState(
        selected_collection=collection,
        selected_tile=first_tile,
        x=int(x),
        y=int(y),
        clamp_pages=clamp_pages,
    )
    menu.clamp_to_screen_top_left()
    world.add_component(editor_entity, menu)
    world.add_component(editor_entity, assets)
    return menu
