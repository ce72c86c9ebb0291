from dataclasses import dataclass
from typing import Any

@dataclass(frozen=True, slots=True)
class TileVariant:
    """One orientation of a named tile.

    size is the cell descriptor from the file name ("4x8") or "" when the
    name carries none. image is the decoded handle supplied by the asset
    loader; the core only reads its width and height.
    """
    collection: str
    name: str
    size: str
    orientation: int
    file_name: str
    image: Any = None
