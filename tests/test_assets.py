import pygame
import pytest

from ecsengine.assets import AssetError, AssetManager, get_asset_manager


@pytest.fixture
def image_path(tmp_path):
    surface = pygame.Surface((7, 5))
    surface.fill((200, 10, 10))
    path = tmp_path / "img.bmp"
    pygame.image.save(surface, str(path))
    return str(path)


@pytest.fixture
def assets():
    manager = AssetManager()
    yield manager
    manager.clean()


def test_load_and_get_texture(assets, image_path):
    assets.load_texture("hero", image_path)
    texture = assets.get_texture("hero")
    assert texture.get_size() == (7, 5)


def test_missing_texture_is_none(assets):
    assert assets.get_texture("nothing") is None


def test_bad_texture_path_raises(assets, tmp_path):
    with pytest.raises(AssetError):
        assets.load_texture("x", str(tmp_path / "missing.png"))
    assert assets.get_texture("x") is None


def test_existing_texture_id_is_kept(assets, image_path, tmp_path):
    assets.load_texture("hero", image_path)
    first = assets.get_texture("hero")
    assets.load_texture("hero", str(tmp_path / "missing.png"))
    assert assets.get_texture("hero") is first


def test_load_default_font(assets):
    assets.load_font("ui", None, 16)
    assert assets.get_font("ui").get_height() > 0


def test_bad_font_path_raises(assets, tmp_path):
    with pytest.raises(AssetError):
        assets.load_font("ui", str(tmp_path / "missing.ttf"), 12)
    assert assets.get_font("ui") is None


def test_clean_drops_everything(image_path):
    manager = AssetManager()
    manager.load_texture("hero", image_path)
    manager.load_font("ui", None, 12)
    manager.clean()
    assert manager.get_texture("hero") is None
    assert manager.get_font("ui") is None


def test_shared_manager_is_single(image_path):
    first = get_asset_manager()
    try:
        first.load_texture("shared", image_path)
        second = get_asset_manager()
        assert isinstance(second, AssetManager)
        assert second.get_texture("shared").get_size() == (7, 5)
        assert second is first
    finally:
        first.clean()
    assert get_asset_manager().get_texture("shared") is None