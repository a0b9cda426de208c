"""Small vector, quaternion and matrix helpers used by the engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

import numpy as np

_EPSILON = 1e-6


@dataclass(frozen=True)
class Vec2:
    """Immutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: Union[float, "Vec2"]) -> "Vec2":
        if isinstance(scalar, Vec2):
            return Vec2(self.x * scalar.x, self.y * scalar.y)
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Vec3:
    """Immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: Union[float, "Vec3"]) -> "Vec3":
        if isinstance(scalar, Vec3):
            return Vec3(self.x * scalar.x, self.y * scalar.y, self.z * scalar.z)
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def clamped_min(self, minimum: float) -> "Vec3":
        """Return the vector with every component raised to at least ``minimum``."""
        return Vec3(max(self.x, minimum), max(self.y, minimum), max(self.z, minimum))


@dataclass(frozen=True)
class Quat:
    """Immutable rotation quaternion stored as (w, x, y, z)."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def identity(cls) -> "Quat":
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_euler(cls, euler: Vec3) -> "Quat":
        """Build a quaternion from pitch (x), yaw (y) and roll (z) in radians."""
        cx, cy, cz = (math.cos(a * 0.5) for a in euler)
        sx, sy, sz = (math.sin(a * 0.5) for a in euler)
        return cls(
            cx * cy * cz + sx * sy * sz,
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
        )

    def to_euler(self) -> Vec3:
        """Return pitch (x), yaw (y) and roll (z) in radians."""
        w, x, y, z = self.w, self.x, self.y, self.z
        roll = math.atan2(2.0 * (x * y + w * z), w * w + x * x - y * y - z * z)

        pitch_y = 2.0 * (y * z + w * x)
        pitch_x = w * w - x * x - y * y + z * z
        if abs(pitch_y) < _EPSILON and abs(pitch_x) < _EPSILON:
            pitch = 2.0 * math.atan2(x, w)
        else:
            pitch = math.atan2(pitch_y, pitch_x)

        yaw = math.asin(max(-1.0, min(1.0, -2.0 * (x * z - w * y))))
        return Vec3(pitch, yaw, roll)

    def normalized(self) -> "Quat":
        length = math.sqrt(self.w ** 2 + self.x ** 2 + self.y ** 2 + self.z ** 2)
        if length <= 0.0:
            return Quat.identity()
        return Quat(self.w / length, self.x / length, self.y / length, self.z / length)

    def rotate(self, vector: Vec3) -> Vec3:
        """Rotate ``vector`` by this quaternion."""
        qv = np.array([self.x, self.y, self.z])
        v = np.array([vector.x, vector.y, vector.z])
        uv = np.cross(qv, v)
        uuv = np.cross(qv, uv)
        result = v + (uv * self.w + uuv) * 2.0
        return Vec3(*(float(c) for c in result))

    def __mul__(self, other: Union["Quat", Vec3]) -> Union["Quat", Vec3]:
        if isinstance(other, Vec3):
            return self.rotate(other)
        p, q = self, other
        return Quat(
            p.w * q.w - p.x * q.x - p.y * q.y - p.z * q.z,
            p.w * q.x + p.x * q.w + p.y * q.z - p.z * q.y,
            p.w * q.y + p.y * q.w + p.z * q.x - p.x * q.z,
            p.w * q.z + p.z * q.w + p.x * q.y - p.y * q.x,
        )

    def _matrix3(self) -> np.ndarray:
        w, x, y, z = self.w, self.x, self.y, self.z
        return np.array(
            [
                [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
                [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
                [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
            ]
        )


RIGHT = Vec3(1.0, 0.0, 0.0)
UP = Vec3(0.0, 1.0, 0.0)
FORWARD = Vec3(0.0, 0.0, -1.0)


def compose_matrix(translation: Vec3, rotation: Quat, scale: Vec3) -> np.ndarray:
    """Return the 4x4 matrix translation * rotation * scale (column vectors)."""
    matrix = np.identity(4)
    rotation_matrix = rotation.normalized()._matrix3()
    matrix[:3, :3] = rotation_matrix * np.array([scale.x, scale.y, scale.z])
    matrix[:3, 3] = [translation.x, translation.y, translation.z]
    return matrix


def _quat_from_rotation_matrix(r: np.ndarray) -> Quat:
    trace = r[0, 0] + r[1, 1] + r[2, 2]
    if trace > 0.0:
        s = 0.5 / math.sqrt(trace + 1.0)
        return Quat(0.25 / s, (r[2, 1] - r[1, 2]) * s, (r[0, 2] - r[2, 0]) * s, (r[1, 0] - r[0, 1]) * s)
    if r[0, 0] > r[1, 1] and r[0, 0] > r[2, 2]:
        s = 2.0 * math.sqrt(1.0 + r[0, 0] - r[1, 1] - r[2, 2])
        return Quat((r[2, 1] - r[1, 2]) / s, 0.25 * s, (r[0, 1] + r[1, 0]) / s, (r[0, 2] + r[2, 0]) / s)
    if r[1, 1] > r[2, 2]:
        s = 2.0 * math.sqrt(1.0 + r[1, 1] - r[0, 0] - r[2, 2])
        return Quat((r[0, 2] - r[2, 0]) / s, (r[0, 1] + r[1, 0]) / s, 0.25 * s, (r[1, 2] + r[2, 1]) / s)
    s = 2.0 * math.sqrt(1.0 + r[2, 2] - r[0, 0] - r[1, 1])
    return Quat((r[1, 0] - r[0, 1]) / s, (r[0, 2] + r[2, 0]) / s, (r[1, 2] + r[2, 1]) / s, 0.25 * s)


def decompose_matrix(matrix) -> Optional[Tuple[Vec3, Quat, Vec3]]:
    """Split a 4x4 matrix into (translation, rotation, scale), or None if degenerate."""
    m = np.asarray(matrix, dtype=float)
    if abs(m[3, 3]) < _EPSILON:
        return None
    m = m / m[3, 3]

    translation = Vec3(*(float(c) for c in m[:3, 3]))
    col0, col1, col2 = (m[:3, i].copy() for i in range(3))

    sx = float(np.linalg.norm(col0))
    if sx < _EPSILON:
        return None
    col0 /= sx

    col1 = col1 - np.dot(col0, col1) * col0
    sy = float(np.linalg.norm(col1))
    if sy < _EPSILON:
        return None
    col1 /= sy

    col2 = col2 - np.dot(col0, col2) * col0
    col2 = col2 - np.dot(col1, col2) * col1
    sz = float(np.linalg.norm(col2))
    if sz < _EPSILON:
        return None
    col2 /= sz

    if np.dot(col0, np.cross(col1, col2)) < 0:
        sx, sy, sz = -sx, -sy, -sz
        col0, col1, col2 = -col0, -col1, -col2

    rotation = _quat_from_rotation_matrix(np.column_stack([col0, col1, col2]))
    return translation, rotation, Vec3(sx, sy, sz)


def rotate_point_around_pivot(point: Vec2, pivot: Vec2, radians: float) -> Vec2:
    """Rotate ``point`` by ``radians`` around ``pivot``."""
    offset = point - pivot
    cos_a = math.cos(radians)
    sin_a = math.sin(radians)
    return Vec2(
        pivot.x + offset.x * cos_a - offset.y * sin_a,
        pivot.y + offset.x * sin_a + offset.y * cos_a,
    )