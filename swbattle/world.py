"""The game world: the map, its units and the tick loop."""

from __future__ import annotations

from typing import TextIO

from swbattle.behaviors import (
    AttackCloseBehavior,
    AttackFarBehavior,
    BaseUnit,
    HealthBehavior,
    MarchBehavior,
)
from swbattle.events import EventLog, MapCreated, UnitSpawned


class WorldError(RuntimeError):
    """Raised for invalid spawns and failed unit lookups."""


def _is_dead(unit: BaseUnit) -> bool:
    return isinstance(unit, HealthBehavior) and unit.health <= 0


class GameWorld:
    """Holds the map and units and advances the simulation tick by tick."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.event_log = EventLog(stream)
        self._units: dict[int, BaseUnit] = {}
        self._width = 0
        self._height = 0
        self._tick = 1

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def tick(self) -> int:
        return self._tick

    @property
    def next_id(self) -> int:
        return len(self._units)

    def create_map(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self.event_log.log(self._tick, MapCreated(width, height))

    def add_unit(self, unit: BaseUnit) -> None:
        if unit.unit_id in self._units:
            raise WorldError("Unit with this id already exists")
        if any((u.x, u.y) == (unit.x, unit.y) for u in self._units.values()):
            raise WorldError("A unit already occupies this position")

        self.event_log.log(
            self._tick, UnitSpawned(unit.unit_id, unit.type_name, unit.x, unit.y)
        )
        self._units[unit.unit_id] = unit

    def exist_unit_at_pos(self, x: int, y: int) -> bool:
        if x > self._width or y > self._height:
            return False
        return any((u.x, u.y) == (x, y) for u in self._units.values())

    def get_unit_at_pos(self, x: int, y: int) -> BaseUnit:
        for unit in self._units.values():
            if (unit.x, unit.y) == (x, y):
                return unit
        raise WorldError("No unit exists at given position")

    def get_unit_by_id(self, unit_id: int) -> BaseUnit:
        try:
            return self._units[unit_id]
        except KeyError:
            raise WorldError(f"No unit with id {unit_id}") from None

    def next_tick(self) -> bool:
        """Let every living unit act once; true while anything still happens."""
        self._tick += 1
        action = False
        for unit in list(self._units.values()):
            if _is_dead(unit):
                continue
            if isinstance(unit, AttackCloseBehavior) and unit.do_attack_close():
                action = True
                continue
            if isinstance(unit, AttackFarBehavior) and unit.do_attack_far():
                action = True
                continue
            if isinstance(unit, MarchBehavior) and unit.do_march():
                action = True

        self._units = {uid: u for uid, u in self._units.items() if not _is_dead(u)}
        return action and bool(self._units)