"""Scene cameras and the raw view description handed to the renderer."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .vecmath import FORWARD, RIGHT, UP, Quat, Vec3


class CameraProjection(enum.IntEnum):
    PERSPECTIVE = 0
    ORTHOGRAPHIC = 1


@dataclass(frozen=True)
class RawCamera:
    """View description in renderer space (y axis pointing down)."""

    position: Vec3
    target: Vec3
    up: Vec3
    fovy: float
    projection: CameraProjection


@dataclass(eq=False)
class Camera:
    """A camera placed in the world by position and rotation."""

    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, -100.0))
    rotation: Quat = field(default_factory=Quat.identity)
    projection: CameraProjection = CameraProjection.PERSPECTIVE
    perspective_fov: float = 45.0
    orthographic_plane: float = 200.0

    @property
    def forward_direction(self) -> Vec3:
        return self.rotation * FORWARD

    @property
    def up_direction(self) -> Vec3:
        return self.rotation * UP

    @property
    def right_direction(self) -> Vec3:
        return self.rotation * RIGHT

    @property
    def raw_camera(self) -> RawCamera:
        """Build the renderer's view of this camera, flipping the y axis."""
        forward = self.forward_direction
        position = Vec3(self.position.x, -self.position.y, self.position.z)
        actual_forward = Vec3(forward.x, -forward.y, forward.z)

        if self.projection == CameraProjection.ORTHOGRAPHIC:
            fovy = -self.orthographic_plane
        else:
            fovy = -self.perspective_fov

        return RawCamera(
            position=position,
            target=position - actual_forward,
            up=self.up_direction,
            fovy=fovy,
            projection=self.projection,
        )