"""Component base class, component kinds and the factory that builds them."""

from __future__ import annotations

import enum
import weakref
from typing import Any, ClassVar, Optional, Type


class ComponentType(enum.IntEnum):
    TRANSFORM = 0
    CAMERA = 1
    SHAPE_2D_RENDERER = 2
    TEXTURE_2D_RENDERER = 3
    TILED_MAP_2D_RENDERER = 4


class Component:
    """A piece of behaviour attached to an entity.

    Subclasses set ``component_type`` and ``type_name`` and override the hooks.
    The component holds its entity weakly.
    """

    component_type: ClassVar[ComponentType]
    type_name: ClassVar[str] = "Component"

    def __init__(self, entity: Any) -> None:
        self._entity_ref = weakref.ref(entity) if entity is not None else None
        self._enabled_self = False
        self._enabled_in_hierarchy = False

    @property
    def entity(self) -> Optional[Any]:
        if self._entity_ref is None:
            return None
        return self._entity_ref()

    @property
    def app(self) -> Optional[Any]:
        entity = self.entity
        if entity is None:
            return None
        return entity.app

    @property
    def enabled(self) -> bool:
        return self._enabled_self

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled_self = value
        self.refresh_enabled_state()

    @property
    def enabled_in_hierarchy(self) -> bool:
        return self._enabled_in_hierarchy

    def refresh_enabled_state(self) -> None:
        """Fire on_enable/on_disable when the effective enabled state changes."""
        entity = self.entity
        if entity is None:
            return

        should_be_enabled = bool(entity.active_in_hierarchy) and self._enabled_self
        if should_be_enabled == self._enabled_in_hierarchy:
            return

        self._enabled_in_hierarchy = should_be_enabled
        if should_be_enabled:
            self.on_enable()
        else:
            self.on_disable()

    def on_awake(self) -> None:
        pass

    def on_enable(self) -> None:
        pass

    def on_tick(self) -> None:
        pass

    def on_disable(self) -> None:
        pass

    def on_destroy(self) -> None:
        pass


class ComponentFactory:
    """Builds components of one class for entities."""

    def __init__(self, component_class: Type[Component], allow_multiple: bool) -> None:
        self.component_class = component_class
        self.allow_multiple = allow_multiple

    @property
    def component_type(self) -> ComponentType:
        return self.component_class.component_type

    def create(self, entity: Any) -> Component:
        return self.component_class(entity)