"""Component that draws a red square at its entity's transform."""

from __future__ import annotations

from .component import Component, ComponentType
from .drawing import RED, draw_rectangle_pro

_BASE_SIZE = 20.0


class Shape2dRendererComponent(Component):
    """Queues a rotated, scaled square for the 2D renderer each tick."""

    component_type = ComponentType.SHAPE_2D_RENDERER
    type_name = "Shape2dRenderer"

    def on_tick(self) -> None:
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

        position_x = transform.position.x
        position_y = -transform.position.y
        rotation = -transform.rotation_euler_degrees_z
        scale = transform.scale_xy

        def draw(surface) -> None:
            width = _BASE_SIZE * scale.x
            height = _BASE_SIZE * scale.y
            draw_rectangle_pro(
                surface,
                (position_x, position_y, width, height),
                (width * 0.5, height * 0.5),
                rotation,
                RED,
            )

        rendering.renderer_2d.add(0, draw)

    def on_destroy(self) -> None:
        pass