import pytest

from gengine.camera_component import CameraComponent
from gengine.component import Component, ComponentType
from gengine.components_module import ComponentsModule
from gengine.entity import Entity
from gengine.shape_renderer import Shape2dRendererComponent
from gengine.texture_renderer import Texture2dRendererComponent
from gengine.tiled_map_renderer import TiledMap2dRendererComponent
from gengine.transform import TransformComponent


class _Recorder(Component):
    component_type = ComponentType.CAMERA
    type_name = "Recorder"

    def __init__(self, entity):
        super().__init__(entity)
        self.calls = []

    def on_enable(self):
        self.calls.append("enable")

    def on_tick(self):
        self.calls.append("tick")

    def on_disable(self):
        self.calls.append("disable")

    def on_destroy(self):
        self.calls.append("destroy")


class _App:
    def __init__(self, components):
        self.components = components


@pytest.fixture
def app():
    return _App(ComponentsModule())


@pytest.fixture
def entity(app):
    created = Entity(app, 1)
    created.set_active(True)
    return created


@pytest.mark.parametrize(
    "kind, cls",
    [
        (ComponentType.TRANSFORM, TransformComponent),
        (ComponentType.CAMERA, CameraComponent),
        (ComponentType.SHAPE_2D_RENDERER, Shape2dRendererComponent),
        (ComponentType.TEXTURE_2D_RENDERER, Texture2dRendererComponent),
        (ComponentType.TILED_MAP_2D_RENDERER, TiledMap2dRendererComponent),
    ],
)
def test_default_factories_create_their_class(app, entity, kind, cls):
    factory = app.components.component_factory(kind)
    created = factory.create(entity)
    assert isinstance(created, cls)
    assert created.entity is entity


def test_add_enables_and_attaches(app, entity):
    component = app.components.add_entity_component(entity, ComponentType.SHAPE_2D_RENDERER)
    assert entity.components == (component,)
    assert component.enabled
    assert component.enabled_in_hierarchy


def test_add_accepts_class(app, entity):
    component = app.components.add_entity_component(entity, Shape2dRendererComponent)
    assert entity.get_component(ComponentType.SHAPE_2D_RENDERER) is component


def test_second_component_of_single_kind_refused(app, entity):
    first = app.components.add_entity_component(entity, ComponentType.SHAPE_2D_RENDERER)
    second = app.components.add_entity_component(entity, ComponentType.SHAPE_2D_RENDERER)
    assert second is None
    assert entity.components == (first,)


def test_add_without_entity_returns_none():
    module = ComponentsModule()
    assert module.add_entity_component(None, ComponentType.TRANSFORM) is None


def test_entity_add_component_goes_through_module(entity):
    component = entity.add_component(ComponentType.SHAPE_2D_RENDERER)
    assert entity.components == (component,)


def test_multiple_allowed_when_registered(app, entity):
    app.components.register_component(_Recorder, True)
    first = app.components.add_entity_component(entity, ComponentType.CAMERA)
    second = app.components.add_entity_component(entity, ComponentType.CAMERA)
    assert len(entity.components) == 2
    assert first is not second


def test_remove_by_instance(app, entity):
    app.components.register_component(_Recorder, False)
    component = app.components.add_entity_component(entity, ComponentType.CAMERA)
    assert app.components.remove_component_from_entity(entity, component) is True
    assert entity.components == ()
    assert component.calls[-1] == "destroy"
    assert app.components.remove_component_from_entity(entity, component) is False


def test_remove_by_type(app, entity):
    app.components.add_entity_component(entity, ComponentType.SHAPE_2D_RENDERER)
    assert app.components.remove_component_from_entity(entity, ComponentType.SHAPE_2D_RENDERER)
    assert entity.components == ()
    assert not app.components.remove_component_from_entity(entity, ComponentType.SHAPE_2D_RENDERER)


def test_remove_all_disables_and_destroys(app, entity):
    app.components.register_component(_Recorder, False)
    component = app.components.add_entity_component(entity, ComponentType.CAMERA)
    app.components.remove_all_components_from_entity(entity)
    assert entity.components == ()
    assert component.calls == ["enable", "disable", "destroy"]


def test_tick_only_enabled_components(app, entity):
    app.components.register_component(_Recorder, False)
    component = app.components.add_entity_component(entity, ComponentType.CAMERA)
    app.components.tick_entity_components(entity)
    assert component.calls == ["enable", "tick"]

    entity.set_active(False)
    app.components.tick_entity_components(entity)
    assert component.calls == ["enable", "tick", "disable"]


def test_dispose_clears_factories(app, entity):
    app.components.dispose()
    assert app.components.component_factory(ComponentType.TRANSFORM) is None
    assert app.components.add_entity_component(entity, ComponentType.TRANSFORM) is None