from pathlib import Path

import pygame
import pytest

from gengine.importers import ResourceImporter, TextureResourceImporter, TiledMapImporter
from gengine.resources import Resource, ResourceType, TextureResource, TiledMapResource
from gengine.resources_module import ResourcesModule

TMX = (
    '<map orientation="orthogonal" width="2" height="1" tilewidth="8" tileheight="8">'
    '<tileset firstgid="1" name="t" tilewidth="8" tileheight="8" tilecount="4" columns="2"/>'
    '<layer name="g" width="2" height="1"><data encoding="csv">1,2</data></layer>'
    "</map>"
)


@pytest.fixture
def resources_dir(tmp_path):
    root = tmp_path / "resources"
    (root / "Tiled" / "maps").mkdir(parents=True)
    (root / "Tiled" / "maps" / "test-map.tmx").write_text(TMX, encoding="utf-8")
    surface = pygame.Surface((4, 3))
    surface.fill((0, 0, 255))
    pygame.image.save(surface, str(root / "image.png"))
    (root / "notes.txt").write_text("not a resource", encoding="utf-8")
    return root


def test_init_imports_supported_files(resources_dir):
    module = ResourcesModule(resources_dir)
    module.init()
    kinds = sorted(r.resource_type for r in module.resources)
    assert kinds == [ResourceType.TEXTURE, ResourceType.TILED_MAP]


def test_get_resource_by_relative_path(resources_dir):
    module = ResourcesModule(resources_dir)
    module.init()
    tiled = module.get_resource("Tiled/maps/test-map.tmx", TiledMapResource)
    assert isinstance(tiled, TiledMapResource)
    assert tiled.raw_map.size == (2, 1)
    assert tiled.resources_path == Path("Tiled/maps/test-map.tmx")


def test_get_resource_with_wrong_kind_or_missing(resources_dir):
    module = ResourcesModule(resources_dir)
    module.init()
    assert module.get_resource("Tiled/maps/test-map.tmx", TextureResource) is None
    assert module.get_resource("missing.png") is None


def test_texture_resource_size(resources_dir):
    module = ResourcesModule(resources_dir)
    module.init()
    texture = module.get_resource("image.png", TextureResource)
    assert (texture.width, texture.height) == (4, 3)


def test_uppercase_extension_is_imported(tmp_path):
    root = tmp_path / "res"
    root.mkdir()
    pygame.image.save(pygame.Surface((2, 2)), str(root / "IMG.png"))
    (root / "IMG.png").rename(root / "BIG.PNG")
    module = ResourcesModule(root)
    module.init()
    resource = module.get_resource("BIG.PNG")
    assert resource.resource_type == ResourceType.TEXTURE
    assert (resource.width, resource.height) == (2, 2)
    assert resource.resources_path == Path("BIG.PNG")


def test_dispose_releases_resources(resources_dir):
    module = ResourcesModule(resources_dir)
    module.init()
    texture = module.get_resource("image.png", TextureResource)
    module.dispose()
    assert texture.texture is None
    assert module.resources == ()
    assert module.get_resource("image.png") is None


def test_missing_folder_logs_error(tmp_path, caplog):
    module = ResourcesModule(tmp_path / "nothing")
    with caplog.at_level("ERROR"):
        module.init()
    assert module.resources == ()
    assert "resources folder does not exist" in caplog.text


def test_default_importers_by_extension(tmp_path):
    module = ResourcesModule(tmp_path)
    assert isinstance(module.importer_for_extension(".png"), TextureResourceImporter)
    assert isinstance(module.importer_for_extension(".jpg"), TextureResourceImporter)
    assert isinstance(module.importer_for_extension(".tmx"), TiledMapImporter)
    assert module.importer_for_extension(".txt") is None


def test_path_conversion_round_trip(tmp_path):
    module = ResourcesModule(tmp_path / "resources")
    full = module.relative_to_full_path(Path("a") / "b.png")
    assert full == tmp_path / "resources" / "a" / "b.png"
    assert module.full_path_to_relative(full) == Path("a") / "b.png"


def test_default_path_is_resources_under_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert ResourcesModule().resources_path == tmp_path / "resources"


class _NoteResource(Resource):
    @property
    def resource_type(self):
        return ResourceType.TEXTURE

    @property
    def type_name(self):
        return "Note"


class _NoteImporter(ResourceImporter):
    def __init__(self):
        super().__init__()
        self._add_supported_extension(".txt")

    def import_resource(self, full_path, resources_path):
        return _NoteResource(full_path, resources_path)


def test_registered_importer_is_used(resources_dir):
    module = ResourcesModule(resources_dir)
    importer = _NoteImporter()
    module.register_importer(importer)
    module.init()
    assert module.importer_for_extension(".txt") is importer
    assert isinstance(module.get_resource("notes.txt", _NoteResource), _NoteResource)