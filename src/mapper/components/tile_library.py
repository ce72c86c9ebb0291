from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from mapper.components.tile_variant import TileVariant
from mapper.library.errors import VariantNotFoundError


@dataclass(slots=True)
class TileCollection:
    """Tiles of one collection.

    names holds only tiles that have an orientation-0 variant, sorted once the
    catalog is built. variants maps tile name -> orientation -> TileVariant.
    """
    names: List[str] = field(default_factory=list)
    variants: Dict[str, Dict[int, TileVariant]] = field(default_factory=dict)


@dataclass(slots=True)
class TileLibrary:
    """Catalog of every loaded tile variant, stored on the registry entity.

    Built once by mapper.library.catalog.build_library and read-only afterward.
    """
    collections: Dict[str, TileCollection] = field(default_factory=dict)

    def collection(self, collection: str) -> TileCollection:
        try:
            return self.collections[collection]
        except KeyError as exc:
            raise VariantNotFoundError(collection) from exc

    def names(self, collection: str) -> List[str]:
        return list(self.collection(collection).names)

    def orientations(self, collection: str, name: str) -> List[int]:
        variants = self.collection(collection).variants.get(name)
        if variants is None:
            raise VariantNotFoundError(collection, name)
        return sorted(variants.keys())

    def get(self, collection: str, name: str, orientation: int) -> TileVariant:
        variants = self.collection(collection).variants.get(name)
        if variants is None:
            raise VariantNotFoundError(collection, name)
        try:
            return variants[orientation]
        except KeyError as exc:
            raise VariantNotFoundError(collection, name, orientation) from exc

    def has(self, collection: str, name: str, orientation: int | None = None) -> bool:
        entry = self.collections.get(collection)
        if entry is None or name not in entry.variants:
            return False
        return orientation is None or orientation in entry.variants[name]

    def first_populated(self, order: Iterable[str] | None = None) -> Optional[str]:
        """Return the first collection that has at least one selectable tile."""
        for name in order if order is not None else self.collections.keys():
            entry = self.collections.get(name)
            if entry is not None and entry.names:
                return name
        return None

    def variant_count(self) -> int:
        return sum(
            len(by_orientation)
            for entry in self.collections.values()
            for by_orientation in entry.variants.values()
        )
