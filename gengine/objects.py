"""Base type for objects the editor can select and inspect."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod


class EngineObjectType(enum.IntEnum):
    ENTITY = 0
    RESOURCE = 1


class EngineObject(ABC):
    """An engine object that reports its kind."""

    @property
    @abstractmethod
    def object_type(self) -> EngineObjectType:
        """The kind of this object."""