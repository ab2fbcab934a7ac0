from towerdefence.config import Config
from towerdefence.home import HomeManager
from towerdefence.resources import Resources


def test_initial_hp_comes_from_config():
    assert HomeManager(Config(), Resources()).num_hp == Config.INITIAL_HP


def test_decrease_hp_subtracts():
    home = HomeManager(Config(), Resources())
    home.decrease_hp(3)
    assert home.num_hp == Config.INITIAL_HP - 3


def test_decrease_hp_clamps_at_zero():
    home = HomeManager(Config(), Resources())
    home.decrease_hp(Config.INITIAL_HP + 4)
    assert home.num_hp == 0
    home.decrease_hp(1)
    assert home.num_hp == 0