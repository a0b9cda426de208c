"""Registry of component kinds and the operations that attach them to entities."""

from __future__ import annotations

from typing import Any, Dict, Optional, Type, Union

from .camera_component import CameraComponent
from .component import Component, ComponentFactory, ComponentType
from .shape_renderer import Shape2dRendererComponent
from .texture_renderer import Texture2dRendererComponent
from .tiled_map_renderer import TiledMap2dRendererComponent
from .transform import TransformComponent

ComponentKey = Union[ComponentType, Type[Component]]


def _component_type_of(key: ComponentKey) -> ComponentType:
    if isinstance(key, type) and issubclass(key, Component):
        return key.component_type
    return ComponentType(key)


class ComponentsModule:
    """Creates components through registered factories and manages their lifecycle."""

    def __init__(self) -> None:
        self._factories: Dict[ComponentType, ComponentFactory] = {}
        self.register_component(TransformComponent, False)
        self.register_component(CameraComponent, False)
        self.register_component(Shape2dRendererComponent, False)
        self.register_component(Texture2dRendererComponent, False)
        self.register_component(TiledMap2dRendererComponent, False)

    def register_component(self, component_class: Type[Component], allow_multiple: bool = False) -> None:
        """Register (or replace) the factory for ``component_class``'s kind."""
        self._factories[component_class.component_type] = ComponentFactory(
            component_class, allow_multiple
        )

    def component_factory(self, component_type: ComponentKey) -> Optional[ComponentFactory]:
        return self._factories.get(_component_type_of(component_type))

    def add_entity_component(self, entity: Any, component_type: ComponentKey) -> Optional[Component]:
        """Create, enable and attach a component; None if not allowed or not registered."""
        if entity is None:
            return None
        kind = _component_type_of(component_type)
        factory = self._factories.get(kind)
        if factory is None:
            return None
        if not factory.allow_multiple and entity.get_component(kind) is not None:
            return None

        component = factory.create(entity)
        if component is None:
            return None
        component.enabled = True
        entity._attach_component(component)
        return component

    def remove_component_from_entity(
        self, entity: Any, component: Union[Component, ComponentKey]
    ) -> bool:
        """Destroy and detach one component, given itself or its kind."""
        if entity is None or component is None:
            return False

        if isinstance(component, Component):
            target = next((c for c in entity.components if c is component), None)
        else:
            wanted = _component_type_of(component)
            target = next((c for c in entity.components if c.component_type == wanted), None)

        if target is None:
            return False
        target.on_destroy()
        return entity._detach_component(target)

    def remove_all_components_from_entity(self, entity: Any) -> None:
        if entity is None:
            return
        for component in entity.components:
            component.enabled = False
            component.on_destroy()
        entity._clear_components()

    def tick_entity_components(self, entity: Any) -> None:
        for component in entity.components:
            if component.enabled_in_hierarchy:
                component.on_tick()

    def dispose(self) -> None:
        self._factories.clear()