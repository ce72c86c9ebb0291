from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from mapper.components.placement import PlacedTile


class DragTargetKind(Enum):
    """What a drag session moves."""
    MENU = auto()
    TILE = auto()
    NEW_TILE = auto()


@dataclass(slots=True)
class DragSession:
    """Marks an active press-to-release drag on the editor entity.

    Fields:
      origin_x/origin_y: pointer position at press time.
      kind: the tagged target.
      tile_index: index into Placement.tiles for TILE drags.
      pending_tile: the uncommitted tile for NEW_TILE drags.
    """
    origin_x: int
    origin_y: int
    kind: DragTargetKind
    tile_index: Optional[int] = None
    pending_tile: Optional[PlacedTile] = None

    @property
    def is_new_tile(self) -> bool:
        return self.kind is DragTargetKind.NEW_TILE
