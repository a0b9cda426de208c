"""Component that draws a texture resource at its entity's transform."""

from __future__ import annotations

import weakref
from typing import Any, Optional

from .component import Component, ComponentType
from .drawing import draw_texture_ex
from .resources import TextureResource
from .vecmath import Vec2


class Texture2dRendererComponent(Component):
    """Queues its texture, centred on the entity, for the 2D renderer each tick."""

    component_type = ComponentType.TEXTURE_2D_RENDERER
    type_name = "Texture2dRenderer"

    def __init__(self, entity: Any) -> None:
        super().__init__(entity)
        self._texture_ref: Optional[weakref.ref] = None

    @property
    def texture(self) -> Optional[TextureResource]:
        if self._texture_ref is None:
            return None
        return self._texture_ref()

    def set_texture(self, texture: Optional[TextureResource]) -> None:
        self._texture_ref = weakref.ref(texture) if texture is not None else None

    def on_tick(self) -> None:
        resource = self.texture
        if resource is None or resource.texture is None:
            return
        app = self.app
        if app is None:
            return
        rendering = getattr(app, "rendering", None)
        if rendering is None:
            return
        entity = self.entity
        if entity is None:
            return
        transform = entity.transform
        if transform is None:
            return

        surface_texture = resource.texture
        rotation = transform.rotation_euler_degrees_z
        scale = transform.scale_xy
        position = transform.position_xy - Vec2(
            resource.width * 0.5 * scale.x, resource.height * 0.5 * scale.y
        )

        def draw(surface) -> None:
            draw_texture_ex(
                surface, surface_texture, (position.x, position.y), rotation, (scale.x, scale.y)
            )

        rendering.renderer_2d.add(0, draw)