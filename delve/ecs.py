"""A minimal entity store: numbered entities, typed components and shared resources."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar

T = TypeVar("T")


class World:
    """Holds entities with their components, plus one resource per type.

    Components and resources are keyed by their class, so an entity
    carries at most one component of each kind.
    """

    def __init__(self) -> None:
        self._next_id = 0
        self._alive: list[int] = []
        self._storages: dict[type, dict[int, Any]] = {}
        self._resources: dict[type, Any] = {}

    def spawn(self, *components: Any) -> int:
        """Create an entity carrying ``components`` and return its id."""
        entity = self._next_id
        self._next_id += 1
        self._alive.append(entity)
        for component in components:
            self._storages.setdefault(type(component), {})[entity] = component
        return entity

    def component(self, entity: int, kind: type[T]) -> T | None:
        """The entity's component of type ``kind``, or None if it has none."""
        return self._storages.get(kind, {}).get(entity)

    def has(self, entity: int, kind: type) -> bool:
        return entity in self._storages.get(kind, {})

    def query(self, *kinds: type) -> Iterator[tuple[Any, ...]]:
        """Yield ``(entity, component, ...)`` for entities holding every kind.

        Entities come in the order they were spawned.
        """
        if not kinds:
            raise TypeError("query needs at least one component type")
        storages = [self._storages.get(kind, {}) for kind in kinds]
        for entity in list(self._alive):
            if all(entity in storage for storage in storages):
                yield (entity, *(storage[entity] for storage in storages))

    def entities(self) -> list[int]:
        """Ids of all entities, oldest first."""
        return list(self._alive)

    def insert(self, resource: Any) -> None:
        """Store ``resource``, replacing any earlier one of the same type."""
        self._resources[type(resource)] = resource

    def fetch(self, kind: type[T]) -> T:
        """The resource of type ``kind``; raises KeyError when there is none."""
        try:
            return self._resources[kind]
        except KeyError:
            raise KeyError(f"no {kind.__name__} resource in the world") from None