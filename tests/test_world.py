import io

import pytest

from swbattle.units import HunterUnit, SwordsmanUnit
from swbattle.world import GameWorld, WorldError


def _world():
    world = GameWorld()
    world.create_map(10, 10)
    return world


def test_create_map_logs_event():
    out = io.StringIO()
    world = GameWorld(out)
    world.create_map(10, 8)
    assert (world.width, world.height) == (10, 8)
    assert out.getvalue() == "[1] MAP_CREATED width=10 height=8 \n"


def test_get_unit_empty_world():
    world = _world()
    with pytest.raises(WorldError):
        world.get_unit_by_id(0)


def test_get_unit_incorrect_id():
    world = _world()
    world.add_unit(SwordsmanUnit(world, 0, 1, 2, 1, 1))
    with pytest.raises(WorldError):
        world.get_unit_by_id(10)


def test_spawn_same_position():
    world = _world()
    world.add_unit(HunterUnit(world, 0, 0, 0, 1, 1, 1, 1))
    with pytest.raises(WorldError):
        world.add_unit(SwordsmanUnit(world, 1, 0, 0, 1, 1))
    assert world.next_id == 1


def test_spawn_same_id():
    world = _world()
    world.add_unit(HunterUnit(world, 0, 0, 0, 1, 1, 1, 1))
    with pytest.raises(WorldError):
        world.add_unit(SwordsmanUnit(world, 0, 0, 1, 1, 1))
    assert world.get_unit_by_id(0).type_name == "Hunter"


def test_next_id_counts_units():
    world = _world()
    assert world.next_id == 0
    world.add_unit(SwordsmanUnit(world, 5, 1, 1, 1, 1))
    assert world.next_id == 1


def test_exist_unit_at_pos():
    world = _world()
    world.add_unit(SwordsmanUnit(world, 0, 1, 2, 1, 1))
    assert world.exist_unit_at_pos(1, 2) is True
    assert world.exist_unit_at_pos(3, 3) is False
    assert world.exist_unit_at_pos(11, 2) is False


def test_tick_hunter_cant_reach(capsys):
    world = _world()
    hunter = HunterUnit(world, 2, 5, 0, 10, 5, 1, 4)
    world.add_unit(hunter)
    hunter.march_to(0, 0)
    swordsman = SwordsmanUnit(world, 3, 0, 4, 10, 2)
    world.add_unit(swordsman)
    swordsman.march_to(0, 0)
    capsys.readouterr()

    world.next_tick()
    assert capsys.readouterr().out == (
        "[2] UNIT_MOVED unitId=2 x=4 y=0 \n"
        "[2] UNIT_MOVED unitId=3 x=0 y=3 \n"
    )


def test_tick_hunter_attack_far(capsys):
    world = _world()
    hunter = HunterUnit(world, 2, 3, 0, 10, 5, 1, 4)
    world.add_unit(hunter)
    hunter.march_to(0, 0)
    swordsman = SwordsmanUnit(world, 3, 0, 2, 10, 2)
    world.add_unit(swordsman)
    swordsman.march_to(0, 0)
    capsys.readouterr()

    world.next_tick()
    assert capsys.readouterr().out == (
        "[2] UNIT_ATTACKED attackerUnitId=2 targetUnitId=3 damage=5 targetHp=5 \n"
        "[2] UNIT_MOVED unitId=3 x=0 y=1 \n"
    )


def test_tick_removes_dead_units(capsys):
    world = _world()
    world.add_unit(SwordsmanUnit(world, 0, 0, 0, 5, 5))
    world.add_unit(SwordsmanUnit(world, 1, 1, 0, 3, 1))
    capsys.readouterr()

    assert world.next_tick() is True
    assert capsys.readouterr().out == (
        "[2] UNIT_ATTACKED attackerUnitId=0 targetUnitId=1 damage=5 targetHp=0 \n"
        "[2] UNIT_DIED unitId=1 \n"
    )
    with pytest.raises(WorldError):
        world.get_unit_by_id(1)
    assert world.get_unit_by_id(0).health == 5
    assert world.next_tick() is False
    assert world.tick == 3


def test_march_until_arrival():
    out = io.StringIO()
    world = GameWorld(out)
    world.create_map(10, 10)
    unit = SwordsmanUnit(world, 0, 0, 0, 1, 1)
    world.add_unit(unit)
    unit.march_to(2, 0)

    assert world.next_tick() is True
    assert world.next_tick() is False
    assert (unit.x, unit.y) == (2, 0)
    assert out.getvalue().splitlines()[-2:] == [
        "[3] UNIT_MOVED unitId=0 x=2 y=0 ",
        "[3] MARCH_ENDED unitId=0 x=2 y=0 ",
    ]


def test_tick_with_no_units_is_idle():
    world = _world()
    assert world.next_tick() is False
    assert world.tick == 2