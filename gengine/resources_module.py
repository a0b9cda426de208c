"""Finds files in the resources folder and imports them as resources."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePath
from typing import Dict, List, Optional, Tuple, Type, TypeVar, Union

from .importers import ResourceImporter, TextureResourceImporter, TiledMapImporter
from .resources import Resource

PathLike = Union[str, "os.PathLike[str]"]
R = TypeVar("R", bound=Resource)

logger = logging.getLogger(__name__)


def _key(path: PathLike) -> str:
    return PurePath(path).as_posix()


class ResourcesModule:
    """Imports every supported file under the resources folder and looks them up by path."""

    def __init__(self, resources_path: Optional[PathLike] = None) -> None:
        if resources_path is None:
            self._resources_path = Path.cwd() / "resources"
        else:
            self._resources_path = Path(resources_path)

        self._importers: List[ResourceImporter] = []
        self._importers_by_extension: Dict[str, ResourceImporter] = {}
        self._resources: List[Resource] = []
        self._resources_by_path: Dict[str, Resource] = {}

        self.register_importer(TextureResourceImporter())
        self.register_importer(TiledMapImporter())

    @property
    def resources_path(self) -> Path:
        return self._resources_path

    def init(self) -> None:
        self._import_all_resources()

    def dispose(self) -> None:
        for resource in self._resources:
            resource.dispose()
        self._resources.clear()
        self._resources_by_path.clear()

    @property
    def resources(self) -> Tuple[Resource, ...]:
        return tuple(self._resources)

    def get_resource(self, path: PathLike, kind: Optional[Type[R]] = None) -> Optional[R]:
        """Return the resource at ``path`` (relative to the folder), optionally of ``kind``."""
        resource = self._resources_by_path.get(_key(path))
        if resource is None:
            return None
        if kind is not None and not isinstance(resource, kind):
            return None
        return resource  # type: ignore[return-value]

    def full_path_to_relative(self, path: PathLike) -> Path:
        return Path(os.path.relpath(os.fspath(path), os.fspath(self._resources_path)))

    def relative_to_full_path(self, path: PathLike) -> Path:
        return self._resources_path / path

    def register_importer(self, importer: ResourceImporter) -> None:
        """Use ``importer`` for each extension it supports, replacing earlier ones."""
        self._importers.append(importer)
        for extension in importer.supported_extensions:
            self._importers_by_extension[extension] = importer

    def importer_for_extension(self, extension: str) -> Optional[ResourceImporter]:
        return self._importers_by_extension.get(extension)

    def _import_all_resources(self) -> None:
        for full_path in self._paths_to_import():
            importer = self.importer_for_extension(full_path.suffix.lower())
            if importer is None:
                continue

            relative = self.full_path_to_relative(full_path)
            resource = importer.import_resource(full_path, relative)
            if resource is None:
                continue

            self._resources.append(resource)
            self._resources_by_path[_key(relative)] = resource

    def _paths_to_import(self) -> List[Path]:
        if not self._resources_path.is_dir():
            logger.error(
                "Could not get resources to import, because resources folder does not exist"
            )
            return []
        return sorted(path for path in self._resources_path.rglob("*") if path.is_file())