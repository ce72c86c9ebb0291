from dataclasses import dataclass, field
from typing import Any, List, Optional

from mapper.utils.grid_math import Rect, image_size


@dataclass(slots=True)
class PlacedTile:
    """A tile dropped on the canvas.

    image is borrowed from the TileVariant it was created from; only the
    position ever changes after placement.
    """
    x: int
    y: int
    image: Any

    def rect(self) -> Rect:
        width, height = image_size(self.image)
        return Rect(self.x, self.y, self.x + width, self.y + height)


@dataclass(slots=True)
class Placement:
    """Ordered collection of placed tiles (insertion order is draw order)."""
    tiles: List[PlacedTile] = field(default_factory=list)

    def append_tile(self, x: int, y: int, image: Any) -> PlacedTile:
        tile = PlacedTile(x=int(x), y=int(y), image=image)
        self.tiles.append(tile)
        return tile

    def hit_test(self, x: int, y: int) -> Optional[int]:
        """Index of the first-inserted tile strictly containing the point.

        Earlier tiles win even where a later tile is drawn on top of them.
        """
        for index, tile in enumerate(self.tiles):
            if tile.rect().contains(x, y):
                return index
        return None

    def __len__(self) -> int:
        return len(self.tiles)
