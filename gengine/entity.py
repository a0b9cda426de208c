"""Entities: named, nestable holders of components."""

from __future__ import annotations

import weakref
from collections import deque
from typing import Any, Callable, Deque, List, Optional, Tuple, Type, Union

from .component import Component, ComponentType
from .objects import EngineObject, EngineObjectType

ComponentKey = Union[ComponentType, Type[Component]]


def _component_type_of(key: ComponentKey) -> ComponentType:
    if isinstance(key, type) and issubclass(key, Component):
        return key.component_type
    return ComponentType(key)


class Entity(EngineObject):
    """A node in the scene hierarchy that owns components.

    The entity refers to its application and parent weakly, and to its
    children weakly; the entities module owns the entities themselves.
    """

    def __init__(self, app: Any, entity_id: int) -> None:
        self._app_ref = weakref.ref(app) if app is not None else None
        self._id = entity_id
        self._name = ""
        self._alive = True
        self._active_self = False
        self._active_in_hierarchy = False
        self._parent_ref: Optional[weakref.ref] = None
        self._children: List[weakref.ref] = []
        self._components: List[Component] = []
        self._transform: Optional[Component] = None

    def __repr__(self) -> str:
        return f"Entity(id={self._id}, name={self._name!r})"

    @property
    def object_type(self) -> EngineObjectType:
        return EngineObjectType.ENTITY

    @property
    def app(self) -> Optional[Any]:
        if self._app_ref is None:
            return None
        return self._app_ref()

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if not value:
            return
        self._name = value

    @property
    def active_self(self) -> bool:
        return self._active_self

    @property
    def active_in_hierarchy(self) -> bool:
        return self._active_in_hierarchy

    def set_active(self, active: bool) -> None:
        self._active_self = active
        self.refresh_children_hierarchy_active_state()

    def is_inside_child_hierarchy(self, other: Optional["Entity"]) -> bool:
        """Return whether ``other`` is this entity or one of its descendants."""
        checking = other
        while checking is not None:
            if checking is self:
                return True
            checking = checking.parent
        return False

    def set_parent(self, parent: "Entity", world_position_stays: bool = True) -> None:
        app = self.app
        if app is None:
            return
        entities = getattr(app, "entities", None)
        if entities is None:
            return
        entities.set_entity_parent(self, parent, world_position_stays)

    def remove_parent(self, world_position_stays: bool = True) -> None:
        app = self.app
        if app is None:
            return
        entities = getattr(app, "entities", None)
        if entities is None:
            return
        entities.remove_entity_parent(self, world_position_stays)

    def for_each_entity_in_child_hierarchy(
        self, include_current: bool, callback: Callable[["Entity"], bool]
    ) -> None:
        """Visit the subtree breadth first; a falsy callback result skips that node's children."""
        to_check: Deque[Entity] = deque([self])
        first = True
        while to_check:
            checking = to_check.popleft()
            add_children = True
            if include_current or not first:
                add_children = bool(callback(checking))
            if add_children:
                to_check.extend(checking.children)
            first = False

    @property
    def parent(self) -> Optional["Entity"]:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def children(self) -> List["Entity"]:
        return [child for child in (ref() for ref in self._children) if child is not None]

    @property
    def components(self) -> Tuple[Component, ...]:
        return tuple(self._components)

    def get_component(self, component_type: ComponentKey) -> Optional[Component]:
        wanted = _component_type_of(component_type)
        return next((c for c in self._components if c.component_type == wanted), None)

    def add_component(self, component_type: ComponentKey) -> Optional[Component]:
        app = self.app
        if app is None:
            return None
        components = getattr(app, "components", None)
        if components is None:
            return None
        return components.add_entity_component(self, _component_type_of(component_type))

    @property
    def transform(self) -> Optional[Component]:
        return self._transform

    def dispose(self) -> None:
        self._id = 0
        self._parent_ref = None
        self._children.clear()
        self._components.clear()
        self._transform = None

    def refresh_children_hierarchy_active_state(self) -> None:
        self.for_each_entity_in_child_hierarchy(True, lambda e: e.refresh_active_state())

    def refresh_active_state(self) -> bool:
        """Recompute the effective active state; return whether it changed."""
        parent = self.parent
        parent_active = parent.active_in_hierarchy if parent is not None else True
        should_be_active = parent_active and self._active_self

        if should_be_active == self._active_in_hierarchy:
            return False

        self._active_in_hierarchy = should_be_active
        for component in list(self._components):
            component.refresh_enabled_state()
        return True

    def _attach_to(self, parent: "Entity") -> None:
        self._parent_ref = weakref.ref(parent)
        parent._children.append(weakref.ref(self))

    def _detach_from_parent(self) -> None:
        parent = self.parent
        if parent is not None:
            parent._children = [ref for ref in parent._children if ref() is not self]
        self._parent_ref = None

    def _attach_component(self, component: Component) -> None:
        self._components.append(component)

    def _detach_component(self, component: Component) -> bool:
        for index, existing in enumerate(self._components):
            if existing is component:
                del self._components[index]
                return True
        return False

    def _clear_components(self) -> None:
        self._components.clear()

    def _bind_transform(self, transform: Optional[Component]) -> None:
        self._transform = transform

    def _mark_dead(self) -> None:
        self._alive = False