"""Errors raised while building or querying the tile library."""
from __future__ import annotations


class CatalogError(ValueError):
    """A single catalog entry could not be added to the library."""

    def __init__(self, file_name: str, message: str) -> None:
        super().__init__(f"{file_name}: {message}")
        self.file_name = file_name


class MalformedTileNameError(CatalogError):
    def __init__(self, file_name: str) -> None:
        super().__init__(file_name, "does not match the tile naming convention")


class UnknownCollectionError(CatalogError):
    def __init__(self, file_name: str, code: str) -> None:
        super().__init__(file_name, f"unknown collection code '{code}'")
        self.code = code


class DuplicateVariantError(CatalogError):
    def __init__(self, file_name: str, previous: str) -> None:
        super().__init__(file_name, f"variant already provided by '{previous}'")
        self.previous = previous


class VariantNotFoundError(KeyError):
    """Lookup for a collection/tile/orientation combination that is not loaded."""

    def __init__(self, collection: str, name: str | None = None, orientation: int | None = None) -> None:
        if name is None:
            message = f"Collection '{collection}' is not registered"
        elif orientation is None:
            message = f"Tile '{name}' is not in collection '{collection}'"
        else:
            message = f"Tile '{name}' in '{collection}' has no {orientation} degree variant"
        super().__init__(message)
        self.collection = collection
        self.name = name
        self.orientation = orientation

    def __str__(self) -> str:
        return str(self.args[0])
