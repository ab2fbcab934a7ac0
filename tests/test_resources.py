import pygame
import pytest

from towerdefence.resources import TEXTURE_FILES, ResID, ResourceError, Resources


def _write_textures(directory):
    for name in TEXTURE_FILES.values():
        surface = pygame.Surface((6, 4))
        surface.fill((10, 20, 30))
        pygame.image.save(surface, str(directory / name))


def test_missing_texture_raises():
    with pytest.raises(ResourceError):
        Resources().texture(ResID.TEX_COIN)


def test_missing_font_raises():
    with pytest.raises(ResourceError):
        Resources().font(ResID.FONT_MAIN)


def test_missing_music_raises():
    with pytest.raises(ResourceError):
        Resources().music(ResID.MUSIC_BGM)


def test_play_sound_without_sound_returns_false():
    assert Resources().play_sound(ResID.SOUND_COIN) is False


def test_load_empty_directory_names_first_texture(tmp_path):
    with pytest.raises(ResourceError, match="tileset.png"):
        Resources().load(tmp_path)


def test_load_reads_every_texture_before_failing_on_sounds(tmp_path):
    _write_textures(tmp_path)
    resources = Resources()
    with pytest.raises(ResourceError):
        resources.load(tmp_path)
    texture_ids = [res_id for res_id in ResID if res_id.name.startswith("TEX_")]
    assert set(texture_ids) == set(TEXTURE_FILES)
    for res_id in texture_ids:
        assert resources.texture(res_id).get_size() == (6, 4)


def test_injected_texture_is_returned():
    resources = Resources()
    surface = pygame.Surface((3, 3))
    resources.textures[ResID.TEX_HOME] = surface
    assert resources.texture(ResID.TEX_HOME) is surface