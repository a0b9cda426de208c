import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import math
from unittest import mock

import pygame
import pytest

from gengine import test_game as demo
from gengine.application import EngineApplication
from gengine.camera_component import CameraComponent
from gengine.resources import TiledMapResource
from gengine.tiled_map_renderer import TiledMap2dRendererComponent

_TMX = """<?xml version="1.0" encoding="UTF-8"?>
<map version="1.10" orientation="orthogonal" width="2" height="3" tilewidth="16" tileheight="16">
 <layer id="1" name="Ground" width="2" height="3">
  <data encoding="csv">1,0,0,1,1,0</data>
 </layer>
</map>
"""


@pytest.fixture
def app(tmp_path):
    application = EngineApplication(resources_path=tmp_path)
    application.init()
    yield application
    application.dispose()


@pytest.fixture
def game(app):
    running = demo.TestGame()
    app.game.load_game(running)
    return running


def _by_name(app, name):
    return next(e for e in app.entities.all_entities if e.name == name)


def test_scene_roots(app, game):
    names = [e.name for e in app.entities.root_entities]
    assert names == ["Camera", "Tilemap", "Entity: 3"]
    assert game.rotating_entity is app.entities.root_entities[2]


def test_child_keeps_distance_from_parent(app, game):
    parent = game.rotating_entity
    child = parent.children[0]
    offset = child.transform.position - parent.transform.position
    assert math.hypot(offset.x, offset.y) == pytest.approx(100.0, rel=1e-4)


def test_initial_rotation(app, game):
    transform = game.rotating_entity.transform
    assert transform.local_rotation_euler_degrees_z == pytest.approx(30.0, abs=1e-3)


def test_camera_component_owns_current_camera(app, game):
    camera_entity = _by_name(app, "Camera")
    component = camera_entity.get_component(CameraComponent)
    assert component.camera is app.camera.current_camera
    app.entities.tick()
    assert component.camera.position.z == pytest.approx(-320.0)


def test_right_key_turns_entity(app, game):
    before = game.rotating_entity.transform.local_rotation_euler_degrees_z
    app.input.process_events([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT)])
    game.tick()
    after = game.rotating_entity.transform.local_rotation_euler_degrees_z
    assert after == pytest.approx(before + 2.0, abs=1e-3)


def test_left_key_turns_back(app, game):
    before = game.rotating_entity.transform.local_rotation_euler_degrees_z
    app.input.process_events([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT)])
    game.tick()
    after = game.rotating_entity.transform.local_rotation_euler_degrees_z
    assert after == pytest.approx(before - 2.0, abs=1e-3)


def test_missing_tilemap_leaves_component_empty(app, game):
    component = _by_name(app, "Tilemap").get_component(TiledMap2dRendererComponent)
    assert component.tiled_map is None
    assert component.layer_grid_size(0) == (0, 0)


def test_tilemap_resource_is_attached(tmp_path):
    maps = tmp_path / "Tiled" / "maps"
    maps.mkdir(parents=True)
    (maps / "test-map.tmx").write_text(_TMX, encoding="utf-8")

    application = EngineApplication(resources_path=tmp_path)
    application.init()
    try:
        application.game.load_game(demo.TestGame())
        component = _by_name(application, "Tilemap").get_component(TiledMap2dRendererComponent)
        resource = application.resources.get_resource("Tiled/maps/test-map.tmx", TiledMapResource)
        assert component.tiled_map is resource
        assert component.layer_grid_size(0) == (2, 3)
    finally:
        application.dispose()


def test_dispose_forgets_entity(app, game):
    game.dispose()
    assert game.rotating_entity is None


def test_main_runs_until_quit(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        result = demo.main([])
    assert result == 0
    assert pygame.display.get_surface() is None