"""Resources loaded from the resources folder."""

from __future__ import annotations

import enum
import os
from abc import abstractmethod
from pathlib import Path
from typing import Any, Optional, Union

from .objects import EngineObject, EngineObjectType
from .tmx import TiledMap

PathLike = Union[str, "os.PathLike[str]"]


class ResourceType(enum.IntEnum):
    TEXTURE = 0
    TILED_MAP = 1


class Resource(EngineObject):
    """A loaded asset known by its full path and its path inside the resources folder."""

    def __init__(self, full_path: PathLike, resources_path: PathLike) -> None:
        self._full_path = Path(full_path)
        self._resources_path = Path(resources_path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._resources_path)!r})"

    @property
    def object_type(self) -> EngineObjectType:
        return EngineObjectType.RESOURCE

    @property
    @abstractmethod
    def resource_type(self) -> ResourceType:
        """The kind of this resource."""

    @property
    @abstractmethod
    def type_name(self) -> str:
        """A display name for the kind of this resource."""

    @property
    def full_path(self) -> Path:
        return self._full_path

    @property
    def resources_path(self) -> Path:
        return self._resources_path

    def dispose(self) -> None:
        """Release whatever the resource holds."""


class TextureResource(Resource):
    """An image loaded as a drawable surface."""

    def __init__(self, full_path: PathLike, resources_path: PathLike, texture: Any) -> None:
        super().__init__(full_path, resources_path)
        self._texture: Optional[Any] = texture

    @property
    def resource_type(self) -> ResourceType:
        return ResourceType.TEXTURE

    @property
    def type_name(self) -> str:
        return "Texture"

    @property
    def texture(self) -> Optional[Any]:
        return self._texture

    @property
    def width(self) -> int:
        return self._texture.get_width() if self._texture is not None else 0

    @property
    def height(self) -> int:
        return self._texture.get_height() if self._texture is not None else 0

    def dispose(self) -> None:
        self._texture = None


class TiledMapResource(Resource):
    """A parsed Tiled map."""

    def __init__(self, full_path: PathLike, resources_path: PathLike, tiled_map: TiledMap) -> None:
        super().__init__(full_path, resources_path)
        self._tiled_map = tiled_map

    @property
    def resource_type(self) -> ResourceType:
        return ResourceType.TILED_MAP

    @property
    def type_name(self) -> str:
        return "Tiled Map"

    @property
    def raw_map(self) -> TiledMap:
        return self._tiled_map