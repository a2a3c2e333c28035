from hexbattle.hexcoord import HexCoord
from hexbattle.unit import SimUnit, Team


def test_max_hp_defaults_to_hp():
    unit = SimUnit(id=0, team=Team.RED, hp=4)
    assert unit.max_hp == 4


def test_explicit_max_hp_kept():
    unit = SimUnit(id=0, team=Team.RED, hp=2, max_hp=5)
    assert unit.max_hp == 5


def test_tick_decrements_cooldown():
    unit = SimUnit(id=0, team=Team.BLUE, hp=3, attack_cooldown=2)
    unit.tick()
    assert unit.attack_cooldown == 1
    unit.tick()
    unit.tick()
    assert unit.attack_cooldown == 0


def test_tick_dead_unit_keeps_cooldown():
    unit = SimUnit(id=0, team=Team.BLUE, hp=0, attack_cooldown=2, is_alive=False)
    unit.tick()
    assert unit.attack_cooldown == 2


def test_is_in_range():
    unit = SimUnit(id=0, team=Team.RED, hp=3, grid_pos=HexCoord(0, 0))
    assert unit.is_in_range(HexCoord(1, 0), 1)
    assert not unit.is_in_range(HexCoord(2, 0), 1)
    assert unit.is_in_range(HexCoord(2, 0), 2)
    assert unit.is_in_range(HexCoord(0, 0), 0)