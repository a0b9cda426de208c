"""The engine application: owns every module and drives the frame loop."""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

from .camera_module import CameraModule
from .components_module import ComponentsModule
from .entities_module import EntitiesModule
from .game import GameModule
from .input import InputModule
from .rendering_module import RenderingModule
from .resources_module import ResourcesModule
from .systems import SystemsModule
from .window import WindowModule

PathLike = Union[str, "os.PathLike[str]"]

logger = logging.getLogger(__name__)


class EngineApplication:
    """Creates the engine modules and runs them in a fixed order each frame."""

    def __init__(self, resources_path: Optional[PathLike] = None) -> None:
        logger.info("Welcome to GEngine :)")

        self.input = InputModule()
        self.components = ComponentsModule()
        self.entities = EntitiesModule()
        self.game = GameModule()
        self.camera = CameraModule(self.input)
        self.window = WindowModule(self.input)
        self.rendering = RenderingModule(self.camera)
        self.resources = ResourcesModule(resources_path)
        self.systems = SystemsModule()

    def init(self) -> None:
        logger.info("GEngine init")
        self.entities.init(self)
        self.window.init()
        self.rendering.init()
        self.resources.init()
        self.systems.init(self)
        self.game.init(self)

    def can_run(self) -> bool:
        return self.window.can_run()

    def tick(self) -> None:
        delta_time = self.window.frame_time

        self.game.tick()
        self.entities.tick()
        self.systems.tick()
        self.camera.tick(delta_time)
        self.rendering.tick()
        self.window.tick()

    def dispose(self) -> None:
        logger.info("GEngine dispose")
        self.systems.dispose()
        self.game.dispose()
        self.entities.dispose()
        self.resources.dispose()
        self.rendering.dispose()
        self.window.dispose()
        logger.info("Bye :)")