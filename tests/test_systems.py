import pytest

from gengine.systems import System, SystemsModule, TickShapeRenderer2dComponentsSystem


class _App:
    pass


class _RecordingSystem(System):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def tick(self):
        self.log.append(self.name)


def test_system_is_abstract():
    with pytest.raises(TypeError):
        System()


def test_init_registers_shape_system():
    app = _App()
    module = SystemsModule()
    module.init(app)
    assert len(module.systems) == 1
    system = module.systems[0]
    assert isinstance(system, TickShapeRenderer2dComponentsSystem)
    assert system.app is app


def test_tick_runs_systems_in_order():
    log = []
    module = SystemsModule()
    module.add_system(_RecordingSystem("a", log))
    module.add_system(_RecordingSystem("b", log))
    module.tick()
    module.tick()
    assert log == ["a", "b", "a", "b"]


def test_shape_system_tick_with_other_systems():
    log = []
    app = _App()
    module = SystemsModule()
    module.init(app)
    module.add_system(_RecordingSystem("after", log))
    module.tick()
    assert log == ["after"]


def test_dispose_clears_systems():
    log = []
    module = SystemsModule()
    module.add_system(_RecordingSystem("a", log))
    module.dispose()
    module.tick()
    assert module.systems == ()
    assert log == []