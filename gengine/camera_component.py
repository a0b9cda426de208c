"""Component that drives a scene camera from its entity's transform."""

from __future__ import annotations

from typing import Any, Optional

from .camera import Camera
from .component import Component, ComponentType


class CameraComponent(Component):
    """Owns a camera while enabled and keeps it at the entity's transform."""

    component_type = ComponentType.CAMERA
    type_name = "Camera"

    def __init__(self, entity: Any) -> None:
        super().__init__(entity)
        self._camera: Optional[Camera] = None

    @property
    def camera(self) -> Optional[Camera]:
        return self._camera

    def _camera_module(self) -> Optional[Any]:
        app = self.app
        if app is None:
            return None
        return getattr(app, "camera", None)

    def on_enable(self) -> None:
        camera_module = self._camera_module()
        if camera_module is None:
            return
        self._camera = camera_module.create_camera()

    def on_tick(self) -> None:
        camera = self._camera
        if camera is None:
            return
        entity = self.entity
        if entity is None:
            return
        transform = entity.transform
        if transform is None:
            return
        camera.position = transform.position
        camera.rotation = transform.rotation

    def on_disable(self) -> None:
        camera_module = self._camera_module()
        if camera_module is None:
            return
        camera_module.remove_camera(self._camera)
        self._camera = None