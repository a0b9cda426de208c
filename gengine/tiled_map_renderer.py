"""Component that draws a Tiled map's tile layers at its entity's transform."""

from __future__ import annotations

import weakref
from typing import Any, Optional, Tuple

from .component import Component, ComponentType
from .drawing import draw_texture_ex
from .resources import TextureResource, TiledMapResource
from .tmx import Layer, LayerType, TiledMap
from .vecmath import Vec2, rotate_point_around_pivot


def layer_grid_to_world(
    layer: Layer,
    tile_size: Tuple[int, int],
    position: Vec2,
    rotation: float,
    scale: Vec2,
    x: int,
    y: int,
) -> Vec2:
    """Return where grid cell (x, y) of ``layer`` lands for a map centred on ``position``.

    The layer is scaled by ``scale`` and rotated by ``rotation`` radians around its centre.
    """
    tile_width, tile_height = tile_size
    if tile_width == 0 or tile_height == 0:
        return Vec2()

    layer_width, layer_height = layer.size
    scaled_width = layer_width * tile_width * scale.x
    scaled_height = layer_height * tile_height * scale.y

    start = Vec2(position.x - scaled_width * 0.5, position.y - scaled_height * 0.5)
    centre = Vec2(start.x + scaled_width * 0.5, start.y + scaled_height * 0.5)

    tile = Vec2(
        start.x + float(x) * tile_width * scale.x,
        start.y + float(y) * tile_height * scale.y,
    )
    return rotate_point_around_pivot(tile, centre, rotation)


class TiledMap2dRendererComponent(Component):
    """Queues every tile of its map's tile layers for the 2D renderer each tick."""

    component_type = ComponentType.TILED_MAP_2D_RENDERER
    type_name = "TiledMap2dRenderer"

    def __init__(self, entity: Any) -> None:
        super().__init__(entity)
        self._tiled_map_ref: Optional[weakref.ref] = None

    @property
    def tiled_map(self) -> Optional[TiledMapResource]:
        if self._tiled_map_ref is None:
            return None
        return self._tiled_map_ref()

    def set_tiled_map(self, resource: Optional[TiledMapResource]) -> None:
        self._tiled_map_ref = weakref.ref(resource) if resource is not None else None

    def _raw_map(self) -> Optional[TiledMap]:
        resource = self.tiled_map
        if resource is None:
            return None
        return resource.raw_map

    def _transform(self) -> Optional[Any]:
        entity = self.entity
        if entity is None:
            return None
        return entity.transform

    @staticmethod
    def _layer_at(tiled_map: TiledMap, layer_index: int) -> Optional[Layer]:
        if not 0 <= layer_index < len(tiled_map.layers):
            return None
        return tiled_map.layers[layer_index]

    def layer_grid_size(self, layer_index: int) -> Tuple[int, int]:
        """Return the layer's size in tiles, or (0, 0) if there is no such layer."""
        tiled_map = self._raw_map()
        if tiled_map is None:
            return (0, 0)
        layer = self._layer_at(tiled_map, layer_index)
        if layer is None:
            return (0, 0)
        width, height = layer.size
        return (width, height)

    def grid_position_to_world_position(self, layer_index: int, x: int, y: int) -> Vec2:
        """Return the world position of a tile layer's grid cell, or (0, 0) if unavailable."""
        tiled_map = self._raw_map()
        if tiled_map is None:
            return Vec2()
        layer = self._layer_at(tiled_map, layer_index)
        if layer is None or layer.type is not LayerType.TILE:
            return Vec2()
        transform = self._transform()
        if transform is None:
            return Vec2()
        if tiled_map.tile_size[0] == 0 or tiled_map.tile_size[1] == 0:
            return Vec2()
        return layer_grid_to_world(
            layer,
            tiled_map.tile_size,
            transform.position_xy,
            transform.rotation_euler_z,
            transform.scale_xy,
            x,
            y,
        )

    def on_tick(self) -> None:
        tiled_map = self._raw_map()
        if tiled_map is None:
            return
        app = self.app
        if app is None:
            return
        rendering = getattr(app, "rendering", None)
        if rendering is None:
            return
        resources = getattr(app, "resources", None)
        if resources is None:
            return
        transform = self._transform()
        if transform is None:
            return

        position = transform.position_xy
        rotation = transform.rotation_euler_z
        rotation_degrees = transform.rotation_euler_degrees_z
        scale = transform.scale_xy

        def draw(surface) -> None:
            tile_width, tile_height = tiled_map.tile_size
            if tile_width == 0 or tile_height == 0:
                return

            for layer in tiled_map.layers:
                if layer.type is not LayerType.TILE:
                    continue
                layer_width, layer_height = layer.size
                cells = layer.tiles[: layer_width * layer_height]

                for tileset in tiled_map.tilesets:
                    relative = resources.full_path_to_relative(tileset.image_path)
                    texture = resources.get_resource(relative, TextureResource)
                    if texture is None or texture.texture is None:
                        continue

                    columns = (texture.width - 2 * tileset.margin + tileset.spacing) // (
                        tile_width + tileset.spacing
                    )
                    if columns <= 0:
                        continue

                    for index, tile in enumerate(cells):
                        if not tileset.has_tile(tile.id):
                            continue
                        y, x = divmod(index, layer_width)
                        row, column = divmod(tile.id - tileset.first_gid, columns)
                        source = (
                            tileset.margin + column * (tile_width + tileset.spacing),
                            tileset.margin + row * (tile_height + tileset.spacing),
                            tile_width,
                            tile_height,
                        )
                        final = layer_grid_to_world(
                            layer, tiled_map.tile_size, position, rotation, scale, x, y
                        )
                        draw_texture_ex(
                            surface,
                            texture.texture,
                            (final.x, final.y),
                            rotation_degrees,
                            (scale.x, scale.y),
                            source,
                        )

        rendering.renderer_2d.add(0, draw)