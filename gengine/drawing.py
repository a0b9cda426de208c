"""Textured and rotated rectangle drawing on pygame surfaces."""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import pygame

RED = pygame.Color(230, 41, 55, 255)
WHITE = pygame.Color(255, 255, 255, 255)


def _rotate(x: float, y: float, degrees: float) -> Tuple[float, float]:
    """Rotate a point clockwise on screen (y pointing down) by ``degrees``."""
    radians = math.radians(degrees)
    cos_a = math.cos(radians)
    sin_a = math.sin(radians)
    return x * cos_a - y * sin_a, x * sin_a + y * cos_a


def draw_texture_ex(
    surface: pygame.Surface,
    texture: pygame.Surface,
    position: Sequence[float],
    rotation: float = 0.0,
    scale: Sequence[float] = (1.0, 1.0),
    source: Optional[Sequence[float]] = None,
) -> Optional[pygame.Rect]:
    """Draw ``texture`` (or its ``source`` region) scaled, with its top-left at ``position``.

    The image is rotated by ``rotation`` degrees clockwise around that corner.
    Returns the area drawn, or None if the scaled image is empty.
    """
    px, py = float(position[0]), float(position[1])
    sx, sy = float(scale[0]), float(scale[1])

    bounds = texture.get_rect()
    if source is None:
        src = bounds
    else:
        src = pygame.Rect(int(source[0]), int(source[1]), int(source[2]), int(source[3])).clip(bounds)

    dest_w = round(src.width * abs(sx))
    dest_h = round(src.height * abs(sy))
    if dest_w <= 0 or dest_h <= 0:
        return None

    image = texture if src == bounds else texture.subsurface(src)
    if image.get_size() != (dest_w, dest_h):
        image = pygame.transform.scale(image, (dest_w, dest_h))
    if sx < 0 or sy < 0:
        image = pygame.transform.flip(image, sx < 0, sy < 0)

    if rotation % 360 == 0:
        return surface.blit(image, (round(px), round(py)))

    rotated = pygame.transform.rotate(image, -rotation)
    offset_x, offset_y = _rotate(-dest_w / 2, -dest_h / 2, rotation)
    center = (round(px - offset_x), round(py - offset_y))
    return surface.blit(rotated, rotated.get_rect(center=center))


def draw_rectangle_pro(
    surface: pygame.Surface,
    rectangle: Sequence[float],
    origin: Sequence[float],
    rotation: float,
    color,
) -> pygame.Rect:
    """Fill a rectangle whose ``origin`` point sits at its (x, y), rotated around it.

    ``rotation`` is in degrees, clockwise on screen. Returns the bounding area.
    """
    x, y, width, height = (float(v) for v in rectangle)
    origin_x, origin_y = float(origin[0]), float(origin[1])
    corners = ((0.0, 0.0), (width, 0.0), (width, height), (0.0, height))
    points = []
    for corner_x, corner_y in corners:
        rx, ry = _rotate(corner_x - origin_x, corner_y - origin_y, rotation)
        points.append((x + rx, y + ry))
    return pygame.draw.polygon(surface, color, points)