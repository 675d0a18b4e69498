from swbattle.behaviors import (
    AttackCloseBehavior,
    AttackFarBehavior,
    HealthBehavior,
    MarchBehavior,
)
from swbattle.units import HunterUnit, SwordsmanUnit
from swbattle.world import GameWorld


def _world():
    world = GameWorld()
    world.create_map(10, 10)
    return world


def test_spawn_swordsman():
    world = _world()
    world.add_unit(SwordsmanUnit(world, 0, 1, 2, 1, 1))
    unit = world.get_unit_by_id(0)
    assert unit.type_name == "Swordsman"
    assert isinstance(unit, SwordsmanUnit)
    assert (unit.unit_id, unit.x, unit.y) == (0, 1, 2)


def test_swordsman_capabilities():
    world = _world()
    world.add_unit(SwordsmanUnit(world, 0, 1, 2, 7, 3))
    unit = world.get_unit_by_id(0)
    assert isinstance(unit, MarchBehavior)
    assert isinstance(unit, HealthBehavior)
    assert isinstance(unit, AttackCloseBehavior)
    assert not isinstance(unit, AttackFarBehavior)
    assert unit.health == 7
    assert unit.strength == 3
    assert unit.max_close_enemies == 1
    assert unit.speed == 1


def test_spawn_hunter():
    world = _world()
    world.add_unit(HunterUnit(world, 0, 1, 2, 1, 1, 1, 1))
    unit = world.get_unit_by_id(0)
    assert unit.type_name == "Hunter"
    assert isinstance(unit, HunterUnit)
    assert (unit.unit_id, unit.x, unit.y) == (0, 1, 2)


def test_hunter_capabilities():
    world = _world()
    world.add_unit(HunterUnit(world, 2, 9, 0, 10, 5, 1, 4))
    unit = world.get_unit_by_id(2)
    assert isinstance(unit, MarchBehavior)
    assert isinstance(unit, HealthBehavior)
    assert isinstance(unit, AttackCloseBehavior)
    assert isinstance(unit, AttackFarBehavior)
    assert unit.health == 10
    assert unit.agility == 5
    assert unit.strength == 1
    assert unit.range == 4
    assert unit.max_close_enemies == 1
    assert unit.max_far_enemies == 1


def test_event_spawn_swordsman(capsys):
    world = _world()
    capsys.readouterr()
    world.add_unit(SwordsmanUnit(world, 0, 1, 2, 1, 1))
    assert capsys.readouterr().out == "[1] UNIT_SPAWNED unitId=0 unitType=Swordsman x=1 y=2 \n"


def test_event_spawn_hunter(capsys):
    world = _world()
    capsys.readouterr()
    world.add_unit(HunterUnit(world, 0, 1, 2, 1, 1, 1, 1))
    assert capsys.readouterr().out == "[1] UNIT_SPAWNED unitId=0 unitType=Hunter x=1 y=2 \n"


def test_multiple_units_check_ids():
    world = _world()
    world.add_unit(HunterUnit(world, 0, 0, 0, 1, 1, 1, 1))
    world.add_unit(SwordsmanUnit(world, 1, 0, 1, 1, 1))
    world.add_unit(HunterUnit(world, 2, 1, 1, 1, 1, 1, 1))
    names = [world.get_unit_by_id(i).type_name for i in range(3)]
    assert names == ["Hunter", "Swordsman", "Hunter"]