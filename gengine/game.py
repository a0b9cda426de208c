"""Games that run on the engine and the module that hosts the current one."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from typing import Any, Optional


class Game(ABC):
    """Game logic driven by the engine: set up, initialised, ticked and disposed."""

    def __init__(self) -> None:
        self._app_ref: Optional[weakref.ref] = None

    def setup(self, app: Any) -> None:
        self._app_ref = weakref.ref(app) if app is not None else None

    @property
    def app(self) -> Optional[Any]:
        if self._app_ref is None:
            return None
        return self._app_ref()

    @abstractmethod
    def init(self) -> None:
        """Build the game's initial scene."""

    @abstractmethod
    def tick(self) -> None:
        """Advance the game by one frame."""

    @abstractmethod
    def dispose(self) -> None:
        """Release what the game holds."""


class GameModule:
    """Runs at most one game at a time."""

    def __init__(self) -> None:
        self._app_ref: Optional[weakref.ref] = None
        self._current_game: Optional[Game] = None

    @property
    def current_game(self) -> Optional[Game]:
        return self._current_game

    def init(self, app: Any) -> None:
        self._app_ref = weakref.ref(app) if app is not None else None

    def tick(self) -> None:
        if self._current_game is not None:
            self._current_game.tick()

    def dispose(self) -> None:
        if self._current_game is None:
            return
        self._current_game.dispose()
        self._current_game = None

    def load_game(self, game: Game) -> None:
        """Dispose the running game, if any, and start ``game``."""
        if self._current_game is not None:
            self._current_game.dispose()

        self._current_game = game
        app = self._app_ref() if self._app_ref is not None else None
        game.setup(app)
        game.init()