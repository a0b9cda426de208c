"""Per-frame systems and the module that ticks them."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple


class System(ABC):
    """Logic that runs once per frame across the scene."""

    @abstractmethod
    def tick(self) -> None:
        """Run the system for one frame."""


class TickShapeRenderer2dComponentsSystem(System):
    """Frame hook for shape renderers.

    Shape renderer components queue their own drawing from their tick, so this
    system has no per-frame work of its own.
    """

    def __init__(self, app: Any) -> None:
        self._app_ref = weakref.ref(app) if app is not None else None

    @property
    def app(self) -> Optional[Any]:
        if self._app_ref is None:
            return None
        return self._app_ref()

    def tick(self) -> None:
        """Shape renderers draw themselves; there is nothing to do here."""
        return None


class SystemsModule:
    """Holds the registered systems and ticks them in registration order."""

    def __init__(self) -> None:
        self._systems: List[System] = []

    @property
    def systems(self) -> Tuple[System, ...]:
        return tuple(self._systems)

    def init(self, app: Any) -> None:
        self.add_system(TickShapeRenderer2dComponentsSystem(app))

    def tick(self) -> None:
        for system in list(self._systems):
            system.tick()

    def dispose(self) -> None:
        self._systems.clear()

    def add_system(self, system: System) -> None:
        self._systems.append(system)