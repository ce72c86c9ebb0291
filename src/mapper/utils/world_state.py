from __future__ import annotations

from typing import Type, TypeVar

from esper import World

from mapper.components.editor_state import EditorState

T = TypeVar("T")


def find_component(world: World, component_type: Type[T]) -> T | None:
    """Return the first instance of a singleton component, or None."""
    for _, component in world.get_component(component_type):
        return component
    return None


def require_component(world: World, component_type: Type[T]) -> T:
    component = find_component(world, component_type)
    if component is None:
        raise RuntimeError(f"{component_type.__name__} not found")
    return component


def editor_entity(world: World) -> int:
    """Entity carrying EditorState and the other editor-wide components."""
    for entity, _ in world.get_component(EditorState):
        return entity
    raise RuntimeError("EditorState not found")
