"""Deferred draw-call queues."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, DefaultDict, List

DrawCall = Callable[..., Any]


class LayeredRenderQueue:
    """Draw calls grouped by layer; lower layers run first, newest first within a layer."""

    def __init__(self) -> None:
        self._queue: DefaultDict[int, List[DrawCall]] = defaultdict(list)

    def add(self, layer: int, func: DrawCall) -> None:
        self._queue[layer].append(func)

    def execute(self, *args: Any) -> None:
        """Run and clear every queued call, passing ``args`` to each."""
        queue, self._queue = self._queue, defaultdict(list)
        for layer in sorted(queue):
            for func in reversed(queue[layer]):
                func(*args)


class SimpleRenderQueue:
    """Draw calls run in the order they were added."""

    def __init__(self) -> None:
        self._queue: List[DrawCall] = []

    def add(self, func: DrawCall) -> None:
        self._queue.append(func)

    def execute(self, *args: Any) -> None:
        """Run and clear every queued call, passing ``args`` to each."""
        queue, self._queue = self._queue, []
        for func in queue:
            func(*args)


class Renderer2d:
    """Collects layered 2D draw calls for one frame."""

    def __init__(self) -> None:
        self._render_queue = LayeredRenderQueue()

    def add(self, layer: int, func: DrawCall) -> None:
        self._render_queue.add(layer, func)

    def render(self, *args: Any) -> None:
        self._render_queue.execute(*args)