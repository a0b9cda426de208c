"""Position, rotation and scale of an entity within the hierarchy."""

from __future__ import annotations

import math
from typing import Any, Iterable, Union

import numpy as np

from .component import Component, ComponentType
from .vecmath import Quat, Vec2, Vec3, compose_matrix, decompose_matrix

_DEG2RAD = math.pi / 180.0

VecLike = Union[Vec3, Iterable[float]]


def _as_vec3(value: VecLike) -> Vec3:
    if isinstance(value, Vec3):
        return value
    return Vec3(*(float(c) for c in value))


def _degrees(vector: Vec3) -> Vec3:
    return Vec3(math.degrees(vector.x), math.degrees(vector.y), math.degrees(vector.z))


class TransformComponent(Component):
    """Keeps local and world transforms of an entity in step."""

    component_type = ComponentType.TRANSFORM
    type_name = "Transform"

    def __init__(self, entity: Any) -> None:
        super().__init__(entity)
        self._world_position = Vec3()
        self._world_rotation = Quat.identity()
        self._world_rotation_euler = Vec3()
        self._world_scale = Vec3(1.0, 1.0, 1.0)
        self._world_matrix = np.identity(4)

        self._local_position = Vec3()
        self._local_rotation = Quat.identity()
        self._local_rotation_euler = Vec3()
        self._local_scale = Vec3(1.0, 1.0, 1.0)
        self._local_matrix = np.identity(4)

    def set_position(self, position: VecLike) -> None:
        position = _as_vec3(position)
        if self._world_position == position:
            return
        self._world_position = position
        self._recalculate_local_position()
        self._compose_local_matrix()
        self._recalculate_children_hierarchy_world_matrices()

    def set_local_position(self, position: VecLike) -> None:
        position = _as_vec3(position)
        if self._local_position == position:
            return
        self._local_position = position
        self._compose_local_matrix()
        self._recalculate_children_hierarchy_world_matrices()

    def set_rotation(self, rotation: Quat) -> None:
        if self._world_rotation == rotation:
            return
        self._world_rotation = rotation
        self._recalculate_local_rotation()
        self._compose_local_matrix()
        self._recalculate_children_hierarchy_world_matrices()

    def set_local_rotation(self, rotation: Quat) -> None:
        if self._local_rotation == rotation:
            return
        self._local_rotation = rotation
        self._compose_local_matrix()
        self._recalculate_children_hierarchy_world_matrices()

    def set_local_rotation_euler(self, rotation: VecLike) -> None:
        """Set the local rotation from euler angles in radians; needs an application."""
        if self.app is None:
            return
        rotation = _as_vec3(rotation)
        if self._local_rotation_euler == rotation:
            return
        self._local_rotation_euler = rotation
        self.set_local_rotation(Quat.from_euler(rotation))

    def set_local_rotation_euler_degrees(self, rotation: VecLike) -> None:
        rotation = _as_vec3(rotation)
        self.set_local_rotation_euler(
            Vec3(math.radians(rotation.x), math.radians(rotation.y), math.radians(rotation.z))
        )

    def set_local_rotation_euler_degrees_z(self, rotation_z: float) -> None:
        euler = self._local_rotation_euler
        self.set_local_rotation_euler(Vec3(euler.x, euler.y, rotation_z * _DEG2RAD))

    def set_local_scale(self, scale: VecLike) -> None:
        clamped = _as_vec3(scale).clamped_min(0.0)
        if self._local_scale == clamped:
            return
        self._local_scale = clamped
        self._compose_local_matrix()
        self._recalculate_children_hierarchy_world_matrices()

    @property
    def position(self) -> Vec3:
        return self._world_position

    @property
    def position_xy(self) -> Vec2:
        return Vec2(self._world_position.x, self._world_position.y)

    @property
    def local_position(self) -> Vec3:
        return self._local_position

    @property
    def rotation(self) -> Quat:
        return self._world_rotation

    @property
    def rotation_euler(self) -> Vec3:
        return self._world_rotation_euler

    @property
    def rotation_euler_degrees(self) -> Vec3:
        return _degrees(self._world_rotation_euler)

    @property
    def rotation_euler_z(self) -> float:
        return self._world_rotation_euler.z

    @property
    def rotation_euler_degrees_z(self) -> float:
        return math.degrees(self._world_rotation_euler.z)

    @property
    def local_rotation(self) -> Quat:
        return self._local_rotation

    @property
    def local_rotation_euler(self) -> Vec3:
        return self._local_rotation_euler

    @property
    def local_rotation_euler_degrees(self) -> Vec3:
        return _degrees(self._local_rotation_euler)

    @property
    def local_rotation_euler_z(self) -> float:
        return self._local_rotation_euler.z

    @property
    def local_rotation_euler_degrees_z(self) -> float:
        return math.degrees(self._local_rotation_euler.z)

    @property
    def scale(self) -> Vec3:
        return self._world_scale

    @property
    def scale_xy(self) -> Vec2:
        return Vec2(self._world_scale.x, self._world_scale.y)

    @property
    def local_scale(self) -> Vec3:
        return self._local_scale

    def _parent_transform(self) -> "TransformComponent | None":
        entity = self.entity
        if entity is None:
            return None
        parent = entity.parent
        if parent is None:
            return None
        return parent.transform

    def set_local_position_as_world_position(self) -> None:
        """Make the local position reproduce the current world position under the parent."""
        if self.entity is None:
            return
        self._recalculate_local_position()
        self._compose_local_matrix()

    def _recalculate_local_position(self) -> None:
        if self.entity is None:
            return
        parent = self._parent_transform()
        parent_position = parent._world_position if parent is not None else Vec3()
        self._local_position = self._world_position - parent_position

    def _recalculate_local_rotation(self) -> None:
        if self.entity is None:
            return
        parent = self._parent_transform()
        parent_rotation = parent._world_rotation if parent is not None else Quat.identity()
        self._local_rotation = parent_rotation * self._world_rotation
        self._local_rotation_euler = self._local_rotation.to_euler()

    def _recalculate_children_hierarchy_world_matrices(self) -> None:
        entity = self.entity
        if entity is None:
            return

        def visit(checking: Any) -> bool:
            transform = checking.transform
            if transform is None:
                return False
            transform.recalculate_world_matrix()
            return True

        entity.for_each_entity_in_child_hierarchy(True, visit)

    def _compose_local_matrix(self) -> None:
        if self.entity is None:
            return
        self._local_matrix = compose_matrix(
            self._local_position, self._local_rotation, self._local_scale
        )

    def recalculate_world_matrix(self) -> None:
        """Rebuild the world matrix from the parent's and refresh world values."""
        if self.entity is None:
            return
        parent = self._parent_transform()
        if parent is not None:
            parent_matrix = parent._world_matrix
            parent_scale = parent._world_scale
        else:
            parent_matrix = np.identity(4)
            parent_scale = Vec3(1.0, 1.0, 1.0)

        self._world_matrix = parent_matrix @ self._local_matrix

        decomposed = decompose_matrix(self._world_matrix)
        if decomposed is not None:
            translation, rotation, _ = decomposed
            self._world_position = translation
            self._world_rotation = rotation
            self._world_rotation_euler = rotation.to_euler()

        self._world_scale = parent_scale * self._local_scale