"""Creates, parents, ticks and removes the entities of a scene."""

from __future__ import annotations

import weakref
from collections import deque
from typing import Any, Callable, Deque, List, Optional, Tuple

from .entity import Entity
from .transform import TransformComponent


class EntitiesModule:
    """Owns every entity and keeps the list of root entities of the hierarchy."""

    def __init__(self) -> None:
        self._app_ref: Optional[weakref.ref] = None
        self._entities: List[Entity] = []
        self._root_entities: List[Entity] = []
        self._entities_to_remove: List[Entity] = []
        self._next_entity_id = 1

    @property
    def app(self) -> Optional[Any]:
        if self._app_ref is None:
            return None
        return self._app_ref()

    def _components_module(self) -> Optional[Any]:
        app = self.app
        if app is None:
            return None
        return getattr(app, "components", None)

    def init(self, app: Any) -> None:
        self._app_ref = weakref.ref(app) if app is not None else None

    def tick(self) -> None:
        self.tick_entities()
        self._actually_remove_entities()

    def dispose(self) -> None:
        self.remove_all_entities()

    @property
    def all_entities(self) -> Tuple[Entity, ...]:
        return tuple(self._entities)

    @property
    def root_entities(self) -> Tuple[Entity, ...]:
        return tuple(self._root_entities)

    def add_entity(self) -> Optional[Entity]:
        """Create an active root entity with a transform; None before ``init``."""
        app = self.app
        if app is None:
            return None
        components = self._components_module()
        if components is None:
            return None

        entity_id = self._next_entity_id
        entity = Entity(app, entity_id)
        entity.name = f"Entity: {entity_id}"
        entity.set_active(True)
        entity._bind_transform(components.add_entity_component(entity, TransformComponent))

        self._next_entity_id += 1
        self._entities.append(entity)
        self._root_entities.append(entity)
        return entity

    def remove_entity(self, entity: Optional[Entity]) -> bool:
        """Mark an entity and its descendants for removal at the end of the tick."""
        if entity is None or not entity._alive:
            return False

        def mark(child: Entity) -> bool:
            child._mark_dead()
            return True

        entity.for_each_entity_in_child_hierarchy(True, mark)
        self._entities_to_remove.append(entity)
        return True

    def remove_entity_now(self, entity: Optional[Entity]) -> bool:
        """Detach, strip and dispose an entity and all its descendants immediately."""
        components = self._components_module()
        if components is None or entity is None:
            return False

        entity.remove_parent()

        removed: List[Entity] = []
        pending: Deque[Entity] = deque([entity])
        while pending:
            checking = pending.popleft()
            pending.extend(checking.children)
            components.remove_all_components_from_entity(checking)
            checking.dispose()
            removed.append(checking)

        self._entities = [e for e in self._entities if not any(e is r for r in removed)]
        self._root_entities = [
            e for e in self._root_entities if not any(e is r for r in removed)
        ]
        return True

    def remove_all_entities(self) -> None:
        while self._root_entities:
            before = len(self._root_entities)
            self.remove_entity_now(self._root_entities[0])
            if len(self._root_entities) >= before:
                break

    def set_entity_parent(
        self, target: Optional[Entity], parent: Optional[Entity], world_position_stays: bool = True
    ) -> None:
        """Make ``parent`` the parent of ``target``, unless that would form a cycle."""
        if self.app is None or target is None or parent is None:
            return
        if parent.is_inside_child_hierarchy(target):
            return

        if target.parent is not None:
            self.remove_entity_parent(target)

        target._attach_to(parent)
        self._root_entities = [e for e in self._root_entities if e is not target]

        self._refresh_transform(target, world_position_stays)
        target.refresh_active_state()

    def remove_entity_parent(self, target: Optional[Entity], world_position_stays: bool = True) -> None:
        """Detach ``target`` from its parent and make it a root entity."""
        if self.app is None or target is None:
            return
        if target.parent is None:
            return

        target._detach_from_parent()
        self._root_entities.append(target)

        self._refresh_transform(target, world_position_stays)
        target.refresh_active_state()

    @staticmethod
    def _refresh_transform(target: Entity, world_position_stays: bool) -> None:
        transform = target.transform
        if transform is None:
            return
        if world_position_stays:
            transform.set_local_position_as_world_position()
        transform.recalculate_world_matrix()

    def for_each_entity_in_hierarchy(self, callback: Callable[[Entity], Any]) -> None:
        """Visit every entity reachable from the roots, breadth first."""
        to_check: Deque[Entity] = deque(self._root_entities)
        while to_check:
            checking = to_check.popleft()
            to_check.extend(checking.children)
            callback(checking)

    def tick_entities(self) -> None:
        components = self._components_module()
        if components is None:
            return

        def tick(entity: Entity) -> None:
            if entity.active_in_hierarchy:
                components.tick_entity_components(entity)

        self.for_each_entity_in_hierarchy(tick)

    def _actually_remove_entities(self) -> None:
        pending, self._entities_to_remove = self._entities_to_remove, []
        for entity in pending:
            self.remove_entity_now(entity)