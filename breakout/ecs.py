"""
Entity-Component-System Core
=============================
Data-driven ECS using integer entity IDs and component dictionaries.
"""

from typing import Dict, Type, TypeVar, Optional, Iterator, Tuple, Any


# Type variable for component types
C = TypeVar('C')


class World:
    """
    The ECS World manages all entities and their components.

    Entities are integer IDs handed out in increasing order. Components
    are stored in dictionaries keyed by entity ID, with one dict per
    component type. Queries yield entities in creation order.
    """

    def __init__(self):
        self._next_entity_id: int = 0
        self._entities: Dict[int, None] = {}  # insertion-ordered set
        self._components: Dict[Type, Dict[int, Any]] = {}

    def create_entity(self) -> int:
        """Create a new entity and return its ID."""
        entity_id = self._next_entity_id
        self._next_entity_id += 1
        self._entities[entity_id] = None
        return entity_id

    def destroy_entity(self, entity_id: int) -> None:
        """Remove an entity and all of its components. Unknown IDs are ignored."""
        if entity_id not in self._entities:
            return
        del self._entities[entity_id]
        for component_store in self._components.values():
            component_store.pop(entity_id, None)

    def add_component(self, entity_id: int, component: Any) -> None:
        """Add a component to an entity."""
        component_type = type(component)
        if component_type not in self._components:
            self._components[component_type] = {}
        self._components[component_type][entity_id] = component

    def remove_component(self, entity_id: int, component_type: Type[C]) -> None:
        """Remove a component from an entity."""
        if component_type in self._components:
            self._components[component_type].pop(entity_id, None)

    def get_component(self, entity_id: int, component_type: Type[C]) -> Optional[C]:
        """Get a component for an entity, or None if not found."""
        if component_type in self._components:
            return self._components[component_type].get(entity_id)
        return None

    def has_component(self, entity_id: int, component_type: Type) -> bool:
        """Check if an entity has a specific component."""
        if component_type in self._components:
            return entity_id in self._components[component_type]
        return False

    def has_components(self, entity_id: int, *component_types: Type) -> bool:
        """Check if an entity has all specified components."""
        return all(self.has_component(entity_id, ct) for ct in component_types)

    def query(self, *component_types: Type) -> Iterator[Tuple[Any, ...]]:
        """
        Query for all entities that have ALL specified component types.

        Yields tuples of (entity_id, component1, component2, ...) in
        entity creation order. The matching set is fixed when iteration
        starts; entities destroyed mid-iteration are skipped.
        """
        if not component_types:
            return

        stores = []
        for component_type in component_types:
            if component_type not in self._components:
                return
            stores.append(self._components[component_type])

        # Smallest store drives the scan, IDs sorted for a stable order
        driver = min(stores, key=len)
        candidates = sorted(
            entity_id for entity_id in driver
            if all(entity_id in store for store in stores)
        )

        for entity_id in candidates:
            if entity_id not in self._entities:
                continue
            yield (entity_id,) + tuple(store[entity_id] for store in stores)

    def get_entities_with(self, *component_types: Type) -> Iterator[int]:
        """Get all entity IDs that have all specified components."""
        for result in self.query(*component_types):
            yield result[0]

    def entity_count(self) -> int:
        """Return the number of live entities."""
        return len(self._entities)

    def is_alive(self, entity_id: int) -> bool:
        """Check if an entity exists."""
        return entity_id in self._entities
