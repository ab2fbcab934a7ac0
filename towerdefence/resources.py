"""Textures, sounds, music and fonts loaded from the resource directory."""

from __future__ import annotations

from enum import Enum, auto
from pathlib import Path

import pygame

FONT_SIZE = 32


class ResourceError(Exception):
    """Raised when a resource cannot be loaded or is not available."""


class ResID(Enum):
    TEX_TILESET = auto()

    TEX_PLAYER = auto()
    TEX_ARCHER = auto()
    TEX_AXEMAN = auto()
    TEX_GUNNER = auto()

    TEX_SLIME = auto()
    TEX_KING_SLIME = auto()
    TEX_SKELETON = auto()
    TEX_GOBLIN = auto()
    TEX_GOBLIN_PRIEST = auto()
    TEX_SLIME_SKETCH = auto()
    TEX_KING_SLIME_SKETCH = auto()
    TEX_SKELETON_SKETCH = auto()
    TEX_GOBLIN_SKETCH = auto()
    TEX_GOBLIN_PRIEST_SKETCH = auto()

    TEX_BULLET_ARROW = auto()
    TEX_BULLET_AXE = auto()
    TEX_BULLET_SHELL = auto()

    TEX_COIN = auto()
    TEX_HOME = auto()

    TEX_EFFECT_FLASH_UP = auto()
    TEX_EFFECT_FLASH_DOWN = auto()
    TEX_EFFECT_FLASH_LEFT = auto()
    TEX_EFFECT_FLASH_RIGHT = auto()
    TEX_EFFECT_IMPACT_UP = auto()
    TEX_EFFECT_IMPACT_DOWN = auto()
    TEX_EFFECT_IMPACT_LEFT = auto()
    TEX_EFFECT_IMPACT_RIGHT = auto()
    TEX_EFFECT_EXPLODE = auto()

    TEX_UI_SELECT_CURSOR = auto()
    TEX_UI_PLACE_IDLE = auto()
    TEX_UI_PLACE_HOVERED_TOP = auto()
    TEX_UI_PLACE_HOVERED_LEFT = auto()
    TEX_UI_PLACE_HOVERED_RIGHT = auto()
    TEX_UI_UPGRADE_IDLE = auto()
    TEX_UI_UPGRADE_HOVERED_TOP = auto()
    TEX_UI_UPGRADE_HOVERED_LEFT = auto()
    TEX_UI_UPGRADE_HOVERED_RIGHT = auto()
    TEX_UI_HOME_AVATAR = auto()
    TEX_UI_PLAYER_AVATAR = auto()
    TEX_UI_HEART = auto()
    TEX_UI_COIN = auto()
    TEX_UI_GAME_OVER_BAR = auto()
    TEX_UI_WIN_TEXT = auto()
    TEX_UI_LOSS_TEXT = auto()

    SOUND_ARROW_FIRE_1 = auto()
    SOUND_ARROW_FIRE_2 = auto()
    SOUND_AXE_FIRE = auto()
    SOUND_SHELL_FIRE = auto()
    SOUND_ARROW_HIT_1 = auto()
    SOUND_ARROW_HIT_2 = auto()
    SOUND_ARROW_HIT_3 = auto()
    SOUND_AXE_HIT_1 = auto()
    SOUND_AXE_HIT_2 = auto()
    SOUND_AXE_HIT_3 = auto()
    SOUND_SHELL_HIT = auto()

    SOUND_FLASH = auto()
    SOUND_IMPACT = auto()

    SOUND_COIN = auto()
    SOUND_HOME_HURT = auto()
    SOUND_PLACE_TOWER = auto()
    SOUND_TOWER_LEVEL_UP = auto()

    SOUND_WIN = auto()
    SOUND_LOSS = auto()

    MUSIC_BGM = auto()

    FONT_MAIN = auto()


TEXTURE_FILES = {
    ResID.TEX_TILESET: "tileset.png",
    ResID.TEX_PLAYER: "player.png",
    ResID.TEX_ARCHER: "tower_archer.png",
    ResID.TEX_AXEMAN: "tower_axeman.png",
    ResID.TEX_GUNNER: "tower_gunner.png",
    ResID.TEX_SLIME: "enemy_slime.png",
    ResID.TEX_KING_SLIME: "enemy_king_slime.png",
    ResID.TEX_SKELETON: "enemy_skeleton.png",
    ResID.TEX_GOBLIN: "enemy_goblin.png",
    ResID.TEX_GOBLIN_PRIEST: "enemy_goblin_priest.png",
    ResID.TEX_SLIME_SKETCH: "enemy_slime_sketch.png",
    ResID.TEX_KING_SLIME_SKETCH: "enemy_king_slime_sketch.png",
    ResID.TEX_SKELETON_SKETCH: "enemy_skeleton_sketch.png",
    ResID.TEX_GOBLIN_SKETCH: "enemy_goblin_sketch.png",
    ResID.TEX_GOBLIN_PRIEST_SKETCH: "enemy_goblin_priest_sketch.png",
    ResID.TEX_BULLET_ARROW: "bullet_arrow.png",
    ResID.TEX_BULLET_AXE: "bullet_axe.png",
    ResID.TEX_BULLET_SHELL: "bullet_shell.png",
    ResID.TEX_COIN: "coin.png",
    ResID.TEX_HOME: "home.png",
    ResID.TEX_EFFECT_FLASH_UP: "effect_flash_up.png",
    ResID.TEX_EFFECT_FLASH_DOWN: "effect_flash_down.png",
    ResID.TEX_EFFECT_FLASH_LEFT: "effect_flash_left.png",
    ResID.TEX_EFFECT_FLASH_RIGHT: "effect_flash_right.png",
    ResID.TEX_EFFECT_IMPACT_UP: "effect_impact_up.png",
    ResID.TEX_EFFECT_IMPACT_DOWN: "effect_impact_down.png",
    ResID.TEX_EFFECT_IMPACT_LEFT: "effect_impact_left.png",
    ResID.TEX_EFFECT_IMPACT_RIGHT: "effect_impact_right.png",
    ResID.TEX_EFFECT_EXPLODE: "effect_explode.png",
    ResID.TEX_UI_SELECT_CURSOR: "ui_select_cursor.png",
    ResID.TEX_UI_PLACE_IDLE: "ui_place_idle.png",
    ResID.TEX_UI_PLACE_HOVERED_TOP: "ui_place_hovered_top.png",
    ResID.TEX_UI_PLACE_HOVERED_LEFT: "ui_place_hovered_left.png",
    ResID.TEX_UI_PLACE_HOVERED_RIGHT: "ui_place_hovered_right.png",
    ResID.TEX_UI_UPGRADE_IDLE: "ui_upgrade_idle.png",
    ResID.TEX_UI_UPGRADE_HOVERED_TOP: "ui_upgrade_hovered_top.png",
    ResID.TEX_UI_UPGRADE_HOVERED_LEFT: "ui_upgrade_hovered_left.png",
    ResID.TEX_UI_UPGRADE_HOVERED_RIGHT: "ui_upgrade_hovered_right.png",
    ResID.TEX_UI_HOME_AVATAR: "ui_home_avatar.png",
    ResID.TEX_UI_PLAYER_AVATAR: "ui_player_avatar.png",
    ResID.TEX_UI_HEART: "ui_heart.png",
    ResID.TEX_UI_COIN: "ui_coin.png",
    ResID.TEX_UI_GAME_OVER_BAR: "ui_game_over_bar.png",
    ResID.TEX_UI_WIN_TEXT: "ui_win_text.png",
    ResID.TEX_UI_LOSS_TEXT: "ui_loss_text.png",
}

SOUND_FILES = {
    ResID.SOUND_ARROW_FIRE_1: "sound_arrow_fire_1.mp3",
    ResID.SOUND_ARROW_FIRE_2: "sound_arrow_fire_2.mp3",
    ResID.SOUND_AXE_FIRE: "sound_axe_fire.wav",
    ResID.SOUND_SHELL_FIRE: "sound_shell_fire.wav",
    ResID.SOUND_ARROW_HIT_1: "sound_arrow_hit_1.mp3",
    ResID.SOUND_ARROW_HIT_2: "sound_arrow_hit_2.mp3",
    ResID.SOUND_ARROW_HIT_3: "sound_arrow_hit_3.mp3",
    ResID.SOUND_AXE_HIT_1: "sound_axe_hit_1.mp3",
    ResID.SOUND_AXE_HIT_2: "sound_axe_hit_2.mp3",
    ResID.SOUND_AXE_HIT_3: "sound_axe_hit_3.mp3",
    ResID.SOUND_SHELL_HIT: "sound_shell_hit.mp3",
    ResID.SOUND_FLASH: "sound_flash.wav",
    ResID.SOUND_IMPACT: "sound_impact.wav",
    ResID.SOUND_COIN: "sound_coin.mp3",
    ResID.SOUND_HOME_HURT: "sound_home_hurt.wav",
    ResID.SOUND_PLACE_TOWER: "sound_place_tower.mp3",
    ResID.SOUND_TOWER_LEVEL_UP: "sound_tower_level_up.mp3",
    ResID.SOUND_WIN: "sound_win.wav",
    ResID.SOUND_LOSS: "sound_loss.mp3",
}

MUSIC_FILES = {
    ResID.MUSIC_BGM: "music_bgm.mp3",
}

FONT_FILES = {
    ResID.FONT_MAIN: "ipix.ttf",
}


class Resources:
    """Pools of loaded game assets, keyed by :class:`ResID`."""

    def __init__(self) -> None:
        self.textures: dict[ResID, pygame.Surface] = {}
        self.sounds: dict[ResID, pygame.mixer.Sound] = {}
        self.music_paths: dict[ResID, Path] = {}
        self.fonts: dict[ResID, pygame.font.Font] = {}

    def load(self, directory) -> None:
        """Load every asset from ``directory``; raise :class:`ResourceError` on the first failure."""
        base = Path(directory)

        for res_id, name in TEXTURE_FILES.items():
            self.textures[res_id] = _load_texture(base / name)

        if not pygame.mixer.get_init():
            raise ResourceError("audio mixer is not initialised; cannot load sounds")
        for res_id, name in SOUND_FILES.items():
            path = base / name
            try:
                self.sounds[res_id] = pygame.mixer.Sound(str(path))
            except (pygame.error, OSError) as exc:
                raise ResourceError(f"cannot load sound {path}: {exc}") from exc

        for res_id, name in MUSIC_FILES.items():
            path = base / name
            if not path.is_file():
                raise ResourceError(f"cannot find music {path}")
            self.music_paths[res_id] = path

        if not pygame.font.get_init():
            pygame.font.init()
        for res_id, name in FONT_FILES.items():
            path = base / name
            try:
                self.fonts[res_id] = pygame.font.Font(str(path), FONT_SIZE)
            except (pygame.error, OSError) as exc:
                raise ResourceError(f"cannot load font {path}: {exc}") from exc

    def texture(self, res_id: ResID) -> pygame.Surface:
        try:
            return self.textures[res_id]
        except KeyError:
            raise ResourceError(f"texture {res_id.name} is not loaded") from None

    def font(self, res_id: ResID) -> pygame.font.Font:
        try:
            return self.fonts[res_id]
        except KeyError:
            raise ResourceError(f"font {res_id.name} is not loaded") from None

    def music(self, res_id: ResID) -> Path:
        """Path of a music track, to be streamed by the mixer."""
        try:
            return self.music_paths[res_id]
        except KeyError:
            raise ResourceError(f"music {res_id.name} is not loaded") from None

    def play_sound(self, res_id: ResID) -> bool:
        """Play a sound effect once; return whether it was played."""
        sound = self.sounds.get(res_id)
        if sound is None or not pygame.mixer.get_init():
            return False
        sound.play()
        return True


def _load_texture(path: Path) -> pygame.Surface:
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        raise ResourceError(f"cannot load texture {path}: {exc}") from exc
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image