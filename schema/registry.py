"""
Case-insensitive, namespace-aware container for one kind of schema object.
"""

import logging
from typing import Callable, Generic, Iterator, TypeVar

from schema.asset import AbstractAsset, Identifier
from schema.errors import DuplicateObject, InvalidObjectName, ObjectNotFound

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=AbstractAsset)


def qualified_key(asset: AbstractAsset) -> str:
    """Canonical key of an asset: its lowercase qualified name."""
    return asset.get_name().lower()


class ObjectRegistry(Generic[T]):
    """
    Objects of a single kind keyed by canonical name.

    The key function maps an asset to its canonical key; raw names passed to
    get/has/rename/remove are parsed into an Identifier and run through the
    same function, so lookups and stored keys always agree. Listing follows
    insertion order.
    """

    def __init__(self, kind: str, key_func: Callable[[AbstractAsset], str] = qualified_key) -> None:
        self.kind = kind
        self._key_func = key_func
        self._objects: dict[str, T] = {}

    def key_for(self, name: str) -> str:
        """
        Canonical key of a raw name.

        Raises:
            InvalidObjectName: if the name cannot be parsed
        """
        return self._key_func(Identifier(name))

    def add(self, asset: T) -> None:
        key = self._key_func(asset)
        if key in self._objects:
            raise DuplicateObject(self.kind, key)

        self._objects[key] = asset
        logger.debug(f"Added {self.kind} '{key}'")

    def get(self, name: str) -> T:
        key = self.key_for(name)
        if key not in self._objects:
            raise ObjectNotFound(self.kind, name)
        return self._objects[key]

    def has(self, name: str) -> bool:
        """Whether an object is stored under the name. Unparsable names are never stored."""
        try:
            key = self.key_for(name)
        except InvalidObjectName:
            return False
        return key in self._objects

    def has_key(self, key: str) -> bool:
        return key in self._objects

    def rename(self, old_name: str, new_name: str) -> T:
        """Move an object to the key of new_name, keeping the same instance."""
        old_key = self.key_for(old_name)
        new_key = self.key_for(new_name)

        if old_key not in self._objects:
            raise ObjectNotFound(self.kind, old_name)
        if new_key != old_key and new_key in self._objects:
            raise DuplicateObject(self.kind, new_key)

        asset = self._objects.pop(old_key)
        self._objects[new_key] = asset
        logger.debug(f"Renamed {self.kind} '{old_key}' to '{new_key}'")
        return asset

    def remove(self, name: str) -> None:
        key = self.key_for(name)
        if key not in self._objects:
            raise ObjectNotFound(self.kind, name)

        del self._objects[key]
        logger.debug(f"Removed {self.kind} '{key}'")

    def list(self) -> list[T]:
        return list(self._objects.values())

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[T]:
        return iter(self.list())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)
