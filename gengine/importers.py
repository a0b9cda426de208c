"""Importers that turn files in the resources folder into resources."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple, Union

import pygame

from .resources import Resource, TextureResource, TiledMapResource
from .tmx import TmxError, load_tmx

PathLike = Union[str, "os.PathLike[str]"]


class ResourceImporter(ABC):
    """Loads files with certain extensions into resources."""

    def __init__(self) -> None:
        self._supported_extensions: List[str] = []

    @property
    def supported_extensions(self) -> Tuple[str, ...]:
        return tuple(self._supported_extensions)

    def _add_supported_extension(self, extension: str) -> None:
        self._supported_extensions.append(extension)

    @abstractmethod
    def import_resource(self, full_path: PathLike, resources_path: PathLike) -> Optional[Resource]:
        """Load the file, or return None if it cannot be loaded."""


class TextureResourceImporter(ResourceImporter):
    """Loads PNG and JPEG images."""

    def __init__(self) -> None:
        super().__init__()
        self._add_supported_extension(".png")
        self._add_supported_extension(".jpg")

    def import_resource(
        self, full_path: PathLike, resources_path: PathLike
    ) -> Optional[TextureResource]:
        try:
            surface = pygame.image.load(os.fspath(full_path))
        except (pygame.error, OSError):
            return None
        if surface.get_width() == 0 or surface.get_height() == 0:
            return None
        return TextureResource(full_path, resources_path, surface)


class TiledMapImporter(ResourceImporter):
    """Loads Tiled TMX maps."""

    def __init__(self) -> None:
        super().__init__()
        self._add_supported_extension(".tmx")

    def import_resource(
        self, full_path: PathLike, resources_path: PathLike
    ) -> Optional[TiledMapResource]:
        try:
            tiled_map = load_tmx(full_path)
        except TmxError:
            return None
        return TiledMapResource(full_path, resources_path, tiled_map)