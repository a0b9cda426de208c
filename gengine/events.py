"""Simple multicast events and an id-based event bus."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, TypeVar

E = TypeVar("E")


class Event:
    """A list of handlers invoked together with the same arguments."""

    def __init__(self) -> None:
        self._handlers: List[Callable[..., Any]] = []

    def add(self, handler: Callable[..., Any]) -> None:
        self._handlers.append(handler)

    def remove(self, handler: Callable[..., Any]) -> None:
        """Remove every registration equal to ``handler``."""
        self._handlers = [h for h in self._handlers if h != handler]

    def clear(self) -> None:
        self._handlers.clear()

    def invoke(self, *args: Any) -> None:
        for handler in list(self._handlers):
            handler(*args)

    def __call__(self, *args: Any) -> None:
        self.invoke(*args)

    def __len__(self) -> int:
        return len(self._handlers)


class EventBus(Generic[E]):
    """Delivers events of one kind to handlers registered under numeric ids."""

    def __init__(self) -> None:
        self._handlers: Dict[int, Callable[[E], Any]] = {}
        self._next_handler_id = 0

    def subscribe(self, handler: Callable[[E], Any]) -> int:
        handler_id = self._next_handler_id
        self._next_handler_id += 1
        self._handlers[handler_id] = handler
        return handler_id

    def unsubscribe(self, handler_id: int) -> bool:
        """Remove a handler; return whether it was registered."""
        return self._handlers.pop(handler_id, None) is not None

    def emit(self, event: E) -> None:
        for handler in list(self._handlers.values()):
            handler(event)


@dataclass
class EntityDestroyedEvent:
    """Raised when an entity is destroyed."""

    entity: Any


@dataclass
class ModuleEvent:
    """Base payload for module events."""


@dataclass
class EventBuses:
    """The engine's shared event buses."""

    entity_destroyed: EventBus[EntityDestroyedEvent] = field(default_factory=EventBus)