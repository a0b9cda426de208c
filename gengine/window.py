"""The application window: creation, frame pacing and close requests."""

from __future__ import annotations

from typing import Optional

import pygame

from .input import InputModule

DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 850
DEFAULT_FPS = 60


class WindowModule:
    """Opens the display, presents each frame and watches for close requests.

    Each tick collects the frame's events and hands them to the input module.
    Closing the window or pressing Escape ends the run.
    """

    def __init__(
        self,
        input_module: Optional[InputModule] = None,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        title: str = "GEngine",
        target_fps: int = DEFAULT_FPS,
    ) -> None:
        self._input = input_module
        self._size = (width, height)
        self._title = title
        self._target_fps = target_fps
        self._surface: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._should_close = False
        self._frame_time = 0.0

    @property
    def surface(self) -> Optional[pygame.Surface]:
        return self._surface

    @property
    def frame_time(self) -> float:
        """Seconds the last frame took."""
        return self._frame_time

    def init(self) -> None:
        pygame.display.init()
        self._surface = pygame.display.set_mode(self._size)
        pygame.display.set_caption(self._title)
        self._clock = pygame.time.Clock()
        self._should_close = False

    def can_run(self) -> bool:
        return not self._should_close

    def tick(self) -> None:
        if self._surface is None or self._clock is None:
            return
        pygame.display.flip()
        self._frame_time = self._clock.tick(self._target_fps) / 1000.0

        events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                self._should_close = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self._should_close = True
        if self._input is not None:
            self._input.process_events(events)

    def dispose(self) -> None:
        pygame.display.quit()
        self._surface = None
        self._clock = None