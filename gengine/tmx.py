"""Reader for Tiled TMX maps (orthogonal, finite, tile/object/image/group layers)."""

from __future__ import annotations

import base64
import binascii
import enum
import gzip
import os
import struct
import xml.etree.ElementTree as ET
import zlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

PathLike = Union[str, "os.PathLike[str]"]

_FLIP_MASK = 0xF0000000


class TmxError(Exception):
    """Raised when a TMX map or tileset cannot be read."""


class LayerType(enum.Enum):
    TILE = "tile"
    OBJECT = "object"
    IMAGE = "image"
    GROUP = "group"


_LAYER_TAGS = {
    "layer": LayerType.TILE,
    "objectgroup": LayerType.OBJECT,
    "imagelayer": LayerType.IMAGE,
    "group": LayerType.GROUP,
}


@dataclass(frozen=True)
class Tile:
    """One cell of a tile layer: global tile id plus flip flags."""

    id: int
    flip_flags: int = 0

    @classmethod
    def from_gid(cls, gid: int) -> "Tile":
        return cls(gid & ~_FLIP_MASK & 0xFFFFFFFF, (gid & _FLIP_MASK) >> 28)


@dataclass
class Tileset:
    first_gid: int
    name: str
    tile_size: Tuple[int, int]
    tile_count: int
    columns: int = 0
    margin: int = 0
    spacing: int = 0
    image_path: str = ""
    image_size: Tuple[int, int] = (0, 0)

    def has_tile(self, gid: int) -> bool:
        return self.first_gid <= gid < self.first_gid + self.tile_count


@dataclass
class Layer:
    name: str
    type: LayerType
    size: Tuple[int, int] = (0, 0)
    tiles: List[Tile] = field(default_factory=list)
    layers: List["Layer"] = field(default_factory=list)
    visible: bool = True
    opacity: float = 1.0


@dataclass
class TiledMap:
    orientation: str
    size: Tuple[int, int]
    tile_size: Tuple[int, int]
    tilesets: List[Tileset] = field(default_factory=list)
    layers: List[Layer] = field(default_factory=list)


def _int(elem: ET.Element, name: str, default: int = 0) -> int:
    value = elem.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise TmxError(f"bad integer for {name!r}: {value!r}") from exc


def _float(elem: ET.Element, name: str, default: float) -> float:
    value = elem.get(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise TmxError(f"bad number for {name!r}: {value!r}") from exc


def _parse_xml(text: str) -> ET.Element:
    try:
        return ET.fromstring(text)
    except ET.ParseError as exc:
        raise TmxError(f"invalid XML: {exc}") from exc


def _resolve(base_dir: Path, source: str) -> str:
    return os.path.normpath(str(base_dir / source))


def _parse_tileset(elem: ET.Element, base_dir: Path) -> Tileset:
    first_gid = _int(elem, "firstgid", 1)
    source = elem.get("source")
    if source:
        tsx_path = base_dir / source
        try:
            text = tsx_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TmxError(f"cannot read tileset {tsx_path}: {exc}") from exc
        data = _parse_xml(text)
        if data.tag != "tileset":
            raise TmxError(f"{tsx_path} is not a tileset")
        image_base = tsx_path.parent
    else:
        data = elem
        image_base = base_dir

    tile_size = (_int(data, "tilewidth"), _int(data, "tileheight"))
    margin = _int(data, "margin")
    spacing = _int(data, "spacing")
    columns = _int(data, "columns")

    image_path = ""
    image_size = (0, 0)
    image = data.find("image")
    if image is not None and image.get("source"):
        image_path = _resolve(image_base, image.get("source", ""))
        image_size = (_int(image, "width"), _int(image, "height"))

    derived_count = 0
    if image_size[0] > 0 and tile_size[0] > 0 and tile_size[1] > 0:
        derived_columns = (image_size[0] - 2 * margin + spacing) // (tile_size[0] + spacing)
        rows = (image_size[1] - 2 * margin + spacing) // (tile_size[1] + spacing)
        if columns == 0:
            columns = derived_columns
        derived_count = max(0, derived_columns * rows)

    return Tileset(
        first_gid=first_gid,
        name=data.get("name", ""),
        tile_size=tile_size,
        tile_count=_int(data, "tilecount", derived_count),
        columns=columns,
        margin=margin,
        spacing=spacing,
        image_path=image_path,
        image_size=image_size,
    )


def _parse_data(data: ET.Element) -> List[Tile]:
    if data.find("chunk") is not None:
        raise TmxError("infinite maps are not supported")

    encoding = data.get("encoding")
    compression = data.get("compression")
    text = (data.text or "").strip()

    if encoding is None:
        gids = [_int(tile, "gid") for tile in data.findall("tile")]
    elif encoding == "csv":
        try:
            gids = [int(v) for v in text.replace("\n", "").split(",") if v.strip()]
        except ValueError as exc:
            raise TmxError(f"bad CSV tile data: {exc}") from exc
    elif encoding == "base64":
        try:
            raw = base64.b64decode(text, validate=False)
        except binascii.Error as exc:
            raise TmxError(f"bad base64 tile data: {exc}") from exc
        try:
            if compression == "zlib":
                raw = zlib.decompress(raw)
            elif compression == "gzip":
                raw = gzip.decompress(raw)
            elif compression:
                raise TmxError(f"unsupported compression {compression!r}")
        except (zlib.error, OSError, EOFError) as exc:
            raise TmxError(f"cannot decompress tile data: {exc}") from exc
        if len(raw) % 4:
            raise TmxError("tile data length is not a multiple of 4")
        gids = list(struct.unpack(f"<{len(raw) // 4}I", raw))
    else:
        raise TmxError(f"unsupported encoding {encoding!r}")

    return [Tile.from_gid(gid) for gid in gids]


def _parse_layer(elem: ET.Element) -> Layer:
    layer_type = _LAYER_TAGS[elem.tag]
    layer = Layer(
        name=elem.get("name", ""),
        type=layer_type,
        visible=elem.get("visible", "1") != "0",
        opacity=_float(elem, "opacity", 1.0),
    )
    if layer_type is LayerType.TILE:
        layer.size = (_int(elem, "width"), _int(elem, "height"))
        data = elem.find("data")
        if data is not None:
            layer.tiles = _parse_data(data)
    elif layer_type is LayerType.GROUP:
        layer.layers = [_parse_layer(child) for child in elem if child.tag in _LAYER_TAGS]
    return layer


def parse_tmx(text: str, base_dir: Optional[PathLike] = ".") -> TiledMap:
    """Parse TMX text; relative file references resolve against ``base_dir``."""
    root = _parse_xml(text)
    if root.tag != "map":
        raise TmxError(f"expected a <map> root, found <{root.tag}>")

    base = Path(base_dir if base_dir is not None else ".")
    return TiledMap(
        orientation=root.get("orientation", "orthogonal"),
        size=(_int(root, "width"), _int(root, "height")),
        tile_size=(_int(root, "tilewidth"), _int(root, "tileheight")),
        tilesets=[_parse_tileset(elem, base) for elem in root.findall("tileset")],
        layers=[_parse_layer(child) for child in root if child.tag in _LAYER_TAGS],
    )


def load_tmx(path: PathLike) -> TiledMap:
    """Read and parse a TMX file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TmxError(f"cannot read {path}: {exc}") from exc
    return parse_tmx(text, path.parent)