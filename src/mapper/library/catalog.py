"""Build the tile library from the asset pack's file naming convention.

Tile files are named ``<code>_<rows>x<cols>_<name>.<variant>.<degrees>.<ext>``,
for example ``DT1_4x8_Ruins.b.90.jpg``. The size part is optional
(``DT2_Door.a.0.png``). Entries that cannot be used are reported individually
and skipped; the rest of the catalog still loads.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Mapping, Tuple

from mapper.components.tile_library import TileCollection, TileLibrary
from mapper.components.tile_variant import TileVariant
from mapper.library.errors import (
    DuplicateVariantError,
    MalformedTileNameError,
    UnknownCollectionError,
)

logger = logging.getLogger(__name__)

TILE_NAME_RE = re.compile(
    r"^([A-Z]+\d)_(\d{1,2}x\d{1,2})?_?(\w?\.?\w+\.[ab])\.(0|90|180|270)\.(?:png|jpg|gif)$"
)

# Collection codes shipped by the asset pack, in menu order.
COLLECTIONS: Mapping[str, str] = {
    "DT1": "Dungeon Tiles",
    "DT2": "Arcane Corridors",
    "DT3": "Hidden Crypts",
    "DT4": "Ruins of the Wild",
}

DEFAULT_COLLECTION = COLLECTIONS["DT1"]


@dataclass(frozen=True, slots=True)
class TileName:
    code: str
    size: str
    name: str
    orientation: int


@dataclass(slots=True)
class CatalogReport:
    """Result of a catalog build: the library plus every rejected entry."""
    library: TileLibrary
    rejected: List[Tuple[str, Exception]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.rejected


def parse_tile_name(file_name: str) -> TileName:
    """Split a tile file name into its parts or raise MalformedTileNameError."""
    match = TILE_NAME_RE.match(file_name)
    if match is None:
        raise MalformedTileNameError(file_name)
    code, size, name, degrees = match.groups()
    return TileName(code=code, size=size or "", name=name, orientation=int(degrees))


def build_library(
    file_names: Iterable[str],
    load_image: Callable[[str], Any] | None = None,
    *,
    collections: Mapping[str, str] = COLLECTIONS,
) -> CatalogReport:
    """Parse file names into a TileLibrary.

    load_image is called with the file name of each well-formed entry and
    must return a sized image handle. Loader failures (OSError, ValueError)
    reject only that entry.
    """
    library = TileLibrary(collections={title: TileCollection() for title in collections.values()})
    report = CatalogReport(library=library)

    for file_name in file_names:
        try:
            _add_entry(library, file_name, load_image, collections)
        except (OSError, ValueError) as exc:  # CatalogError is a ValueError
            logger.warning("Skipping tile %s: %s", file_name, exc)
            report.rejected.append((file_name, exc))

    for entry in library.collections.values():
        entry.names.sort()

    logger.info(
        "Loaded %d tile variants across %d collections (%d rejected)",
        library.variant_count(),
        len(library.collections),
        len(report.rejected),
    )
    return report


def _add_entry(
    library: TileLibrary,
    file_name: str,
    load_image: Callable[[str], Any] | None,
    collections: Mapping[str, str],
) -> None:
    parsed = parse_tile_name(file_name)
    title = collections.get(parsed.code)
    if title is None:
        raise UnknownCollectionError(file_name, parsed.code)

    entry = library.collections[title]
    by_orientation = entry.variants.get(parsed.name)
    if by_orientation is not None and parsed.orientation in by_orientation:
        raise DuplicateVariantError(file_name, by_orientation[parsed.orientation].file_name)

    # Load only after the name is known to be usable.
    image = load_image(file_name) if load_image is not None else None

    if by_orientation is None:
        by_orientation = entry.variants.setdefault(parsed.name, {})
    by_orientation[parsed.orientation] = TileVariant(
        collection=title,
        name=parsed.name,
        size=parsed.size,
        orientation=parsed.orientation,
        file_name=file_name,
        image=image,
    )
    if parsed.orientation == 0:
        entry.names.append(parsed.name)
