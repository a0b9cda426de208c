import math

import pytest

from gengine.component import ComponentType
from gengine.entity import Entity
from gengine.transform import TransformComponent
from gengine.vecmath import Quat, Vec2, Vec3


class _App:
    pass


@pytest.fixture
def app():
    return _App()


def _make(app, entity_id):
    entity = Entity(app, entity_id)
    transform = TransformComponent(entity)
    entity._attach_component(transform)
    entity._bind_transform(transform)
    entity.set_active(True)
    return entity, transform


def _attach(child_entity, parent_entity):
    child_entity._attach_to(parent_entity)
    child_entity.transform.recalculate_world_matrix()


def test_kind_and_name(app):
    entity, transform = _make(app, 1)
    assert transform.component_type == ComponentType.TRANSFORM
    assert transform.type_name == "Transform"
    assert entity.transform is transform


def test_defaults(app):
    _, transform = _make(app, 1)
    assert transform.position == Vec3(0, 0, 0)
    assert transform.scale == Vec3(1, 1, 1)
    assert transform.rotation == Quat.identity()
    assert transform.local_rotation == Quat.identity()


def test_set_position_on_root(app):
    _, transform = _make(app, 1)
    transform.set_position((3, 4, 5))
    assert tuple(transform.position) == pytest.approx((3, 4, 5))
    assert transform.local_position == Vec3(3, 4, 5)
    assert transform.position_xy == Vec2(transform.position.x, transform.position.y)


def test_set_local_position_on_root(app):
    _, transform = _make(app, 1)
    transform.set_local_position(Vec3(-2, 8, 1))
    assert tuple(transform.position) == pytest.approx((-2, 8, 1))


def test_local_scale_is_clamped(app):
    _, transform = _make(app, 1)
    transform.set_local_scale((-1, 2, 3))
    assert transform.local_scale == Vec3(0, 2, 3)
    assert transform.scale == Vec3(0, 2, 3)
    assert transform.scale_xy == Vec2(0, 2)


def test_rotation_degrees_z_round_trip(app):
    _, transform = _make(app, 1)
    transform.set_local_rotation_euler_degrees_z(30)
    assert transform.local_rotation_euler_degrees_z == pytest.approx(30)
    assert transform.rotation_euler_degrees_z == pytest.approx(30)
    assert transform.rotation_euler_z == pytest.approx(math.radians(30))


def test_rotation_degrees_vector_round_trip(app):
    _, transform = _make(app, 1)
    transform.set_local_rotation_euler_degrees((0, 0, 45))
    assert tuple(transform.local_rotation_euler_degrees) == pytest.approx((0, 0, 45))
    assert tuple(transform.rotation_euler_degrees) == pytest.approx((0, 0, 45), abs=1e-6)


def test_euler_rotation_needs_app():
    entity = Entity(None, 1)
    transform = TransformComponent(entity)
    entity._bind_transform(transform)
    transform.set_local_rotation_euler((0, 0, 1))
    assert transform.local_rotation == Quat.identity()
    assert transform.local_rotation_euler == Vec3(0, 0, 0)


def test_child_inherits_parent_position(app):
    parent, parent_t = _make(app, 1)
    child, child_t = _make(app, 2)
    parent_t.set_position((10, 0, 0))
    _attach(child, parent)
    child_t.set_local_position((0, 5, 0))
    assert tuple(child_t.position) == pytest.approx((10, 5, 0))


def test_moving_parent_moves_child(app):
    parent, parent_t = _make(app, 1)
    child, child_t = _make(app, 2)
    _attach(child, parent)
    child_t.set_local_position((1, 0, 0))
    parent_t.set_position((5, 0, 0))
    assert tuple(child_t.position) == pytest.approx((6, 0, 0))
    assert child_t.local_position == Vec3(1, 0, 0)


def test_child_rotates_around_parent(app):
    parent, parent_t = _make(app, 1)
    child, child_t = _make(app, 2)
    parent_t.set_local_rotation_euler_degrees_z(90)
    _attach(child, parent)
    child_t.set_local_position((1, 0, 0))
    assert tuple(child_t.position) == pytest.approx((0, 1, 0), abs=1e-6)
    assert child_t.rotation_euler_degrees_z == pytest.approx(90)


def test_world_position_stays_when_reparented(app):
    parent, parent_t = _make(app, 1)
    child, child_t = _make(app, 2)
    parent_t.set_position((10, 0, 0))
    child_t.set_position((3, 4, 0))
    child._attach_to(parent)
    child_t.set_local_position_as_world_position()
    child_t.recalculate_world_matrix()
    assert tuple(child_t.local_position) == pytest.approx((-7, 4, 0))
    assert tuple(child_t.position) == pytest.approx((3, 4, 0))


def test_world_scale_multiplies_down_the_hierarchy(app):
    parent, parent_t = _make(app, 1)
    child, child_t = _make(app, 2)
    parent_t.set_local_scale((2, 2, 2))
    _attach(child, parent)
    child_t.set_local_scale((3, 1, 1))
    assert child_t.scale == Vec3(6, 2, 2)
    assert child_t.local_scale == Vec3(3, 1, 1)