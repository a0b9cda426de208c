import pygame

from gengine.drawing import RED
from gengine.entity import Entity
from gengine.render_queue import Renderer2d
from gengine.shape_renderer import Shape2dRendererComponent
from gengine.transform import TransformComponent
from gengine.vecmath import Vec3

BLACK = (0, 0, 0, 255)


class FakeRendering:
    def __init__(self):
        self.renderer_2d = Renderer2d()


class FakeApp:
    def __init__(self):
        self.rendering = FakeRendering()


def make_entity(app, with_transform=True):
    entity = Entity(app, 1)
    transform = None
    if with_transform:
        transform = TransformComponent(entity)
        entity._attach_component(transform)
        entity._bind_transform(transform)
    entity.set_active(True)
    return entity, transform


def test_tick_queues_square_centered_on_flipped_position():
    app = FakeApp()
    entity, transform = make_entity(app)
    transform.set_position(Vec3(50.0, -50.0, 0.0))
    component = Shape2dRendererComponent(entity)
    component.on_tick()
    surface = pygame.Surface((100, 100))
    app.rendering.renderer_2d.render(surface)
    assert surface.get_at((50, 50)) == RED
    assert surface.get_at((10, 10)) == BLACK
    assert surface.get_at((65, 65)) == BLACK


def test_scale_grows_square():
    app = FakeApp()
    entity, transform = make_entity(app)
    transform.set_position(Vec3(50.0, -50.0, 0.0))
    transform.set_local_scale(Vec3(2.0, 2.0, 1.0))
    component = Shape2dRendererComponent(entity)
    component.on_tick()
    surface = pygame.Surface((100, 100))
    app.rendering.renderer_2d.render(surface)
    assert surface.get_at((65, 65)) == RED


def test_no_transform_queues_nothing():
    app = FakeApp()
    entity, _ = make_entity(app, with_transform=False)
    component = Shape2dRendererComponent(entity)
    component.on_tick()
    surface = pygame.Surface((20, 20))
    app.rendering.renderer_2d.render(surface)
    assert surface.get_at((0, 0)) == BLACK
    assert pygame.mask.from_threshold(surface, (0, 0, 0), (1, 1, 1, 255)).count() == 400