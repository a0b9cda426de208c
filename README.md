# gengine

A small 2D entity-component game engine built on pygame and numpy.

- **Entities** (`gengine.entity.Entity`) form a parent/child hierarchy. Each
  entity has an id, a name and an active state. Setting an entity inactive
  makes its whole subtree inactive.
- **Components** (`gengine.component.Component`) attach to entities and have
  the hooks `on_awake`, `on_enable`, `on_tick`, `on_disable` and `on_destroy`.
  A component is enabled in the hierarchy only while it is enabled itself and
  its entity is active. The built-in components are:
  - `TransformComponent`
  - `CameraComponent`
  - `Shape2dRendererComponent`, which draws a red 20×20 square
  - `Texture2dRendererComponent`
  - `TiledMap2dRendererComponent`

  `gengine.components_module.ComponentsModule` registers each kind and allows
  at most one of a kind per entity.
- **Hierarchical transforms** (`gengine.transform.TransformComponent`) keep
  local and world position, rotation (as quaternions and as Euler angles) and
  scale consistent with each other. Changing a parent recomputes the world
  values of all its children.
- **Cameras**:
  - `gengine.camera.Camera` holds a position, a rotation and a projection.
  - `gengine.camera_module.CameraModule` keeps the game cameras and a
    free-flying editor camera.
  - Setting `using_editor_camera = True` renders through the editor camera.
    It moves with W/A/S/D (Shift moves faster) and looks around while the
    right mouse button is held.
- **Resources** (`gengine.resources_module.ResourcesModule`) are imported on
  `init` from a resources folder. By default this is `./resources`. Images
  (`.png`, `.jpg`) become `TextureResource` and Tiled maps (`.tmx`) become
  `TiledMapResource`. Look them up by their path relative to the folder, for
  example `get_resource("Tiled/maps/test-map.tmx", TiledMapResource)`.
- **Layered 2D rendering**:
  - Components queue draw callbacks on `RenderingModule.renderer_2d`.
  - Each frame the callbacks paint onto a canvas in world units. Lower layers
    are drawn first.
  - The canvas is then zoomed and centred on the current rendering camera.

## Installation

```
pip install .
```

With test dependencies:

```
pip install .[test]
```

## Running the sample game

```
gengine-test-game [--resources PATH]
```

This opens a 1200×850 window and builds the following scene:

- a camera entity;
- a tile-map entity that shows `Tiled/maps/test-map.tmx` from the resources
  folder (`./resources` unless `--resources` is given);
- a parent entity with one child.

Hold the left or right arrow key to rotate the parent; the child turns with it.
Close the window or press Escape to quit.

## Writing a game

Subclass `gengine.game.Game`. Build your scene in `init`, update it every frame
in `tick`, and release it in `dispose`:

```python
from gengine.application import EngineApplication
from gengine.game import Game
from gengine.shape_renderer import Shape2dRendererComponent
from gengine.vecmath import Vec3


class MyGame(Game):
    def init(self):
        entities = self.app.entities
        self.box = entities.add_entity()
        self.box.add_component(Shape2dRendererComponent)
        self.box.transform.set_position(Vec3(0, 50, 0))

    def tick(self):
        transform = self.box.transform
        transform.set_local_rotation_euler_degrees_z(
            transform.local_rotation_euler_degrees_z + 1.0
        )

    def dispose(self):
        pass


app = EngineApplication("resources")
app.init()
app.game.load_game(MyGame())
while app.can_run():
    app.tick()
app.dispose()
```

`EngineApplication` exposes its modules as attributes: `input`, `components`,
`entities`, `game`, `camera`, `window`, `rendering`, `resources` and `systems`.
Each `tick` runs them in this order: game, entities, systems, camera,
rendering, window.

## Building blocks

These lower-level pieces can be used on their own:

- `gengine.vecmath`:
  - `Vec2`, `Vec3` and `Quat`;
  - `compose_matrix` and `decompose_matrix`;
  - `rotate_point_around_pivot`.
- `gengine.events`:
  - `Event`, a multicast delegate;
  - `EventBus`, which keys subscriptions by handler id.
- `gengine.pointers`: `PointersList`, a slot table that hands out
  generation-checked `PointerRef` handles.
- `gengine.render_queue`: `LayeredRenderQueue`, `SimpleRenderQueue` and
  `Renderer2d`.
- `gengine.tmx`: `load_tmx` and `parse_tmx` read Tiled maps into `TiledMap`,
  `Tileset` and `Layer` objects. They handle XML, CSV and base64 tile data
  (uncompressed, zlib or gzip) and external `.tsx` tilesets. They raise
  `TmxError` on bad input.
- `gengine.drawing`: `draw_texture_ex` and `draw_rectangle_pro` draw rotated,
  scaled images and rectangles onto pygame surfaces.

## What it does not do

- The package has no editor interface: no hierarchy, inspector or resource
  panels and no menu bar. The editor camera is switched on only through
  `CameraModule.using_editor_camera`.
- Rendering is 2D only. It draws no text, and it plays no audio.
- Infinite (chunked) Tiled maps are not supported.

## Tests

The tests in `tests/` run under pytest. Install the `test` extra to get it.