"""The unit base class and the behaviours units are composed of."""

from __future__ import annotations

import math
import random
from typing import TYPE_CHECKING, Any, ClassVar, Iterator

from swbattle.events import (
    MarchEnded,
    MarchStarted,
    UnitAttacked,
    UnitDied,
    UnitMoved,
)

if TYPE_CHECKING:
    from swbattle.world import GameWorld


class MarchError(ValueError):
    """Raised when a march destination lies outside the map."""


def distance_to(unit: Any, target_x: int, target_y: int) -> int:
    """Euclidean distance from ``unit`` to a cell, truncated to an integer."""
    return math.isqrt((unit.x - target_x) ** 2 + (unit.y - target_y) ** 2)


def _emit(unit: Any, event: Any) -> None:
    unit.world.event_log.log(unit.world.tick, event)


def _square_around(unit: Any, radius: int) -> Iterator[tuple[int, int]]:
    """Cells of the square of ``radius`` around ``unit``, its own cell excluded."""
    for x in range(max(unit.x - radius, 0), unit.x + radius + 1):
        for y in range(max(unit.y - radius, 0), unit.y + radius + 1):
            if (x, y) != (unit.x, unit.y):
                yield x, y


def _living_units_at(world: Any, cells: Iterator[tuple[int, int]]) -> list[Any]:
    targets = []
    for x, y in cells:
        if world.exist_unit_at_pos(x, y):
            other = world.get_unit_at_pos(x, y)
            if isinstance(other, HealthBehavior) and other.health > 0:
                targets.append(other)
    return targets


def _strike(attacker: Any, targets: list[Any], damage: int, max_enemies: int) -> bool:
    """Hit up to ``max_enemies`` randomly chosen targets; report whether any was hit."""
    attacked = False
    for _ in range(max_enemies):
        if not targets:
            break
        target = targets.pop(random.randrange(len(targets)))
        new_health = max(target.health - damage, 0)
        _emit(attacker, UnitAttacked(attacker.unit_id, target.unit_id, damage, new_health))
        target.health = new_health
        attacked = True
    return attacked


def _step(delta: int) -> int:
    return (delta > 0) - (delta < 0)


class BaseUnit:
    """A unit placed in a world at a cell, known by its id."""

    type_name: ClassVar[str] = "Unit"

    def __init__(self, world: GameWorld, unit_id: int, x: int, y: int) -> None:
        self.world = world
        self.unit_id = unit_id
        self.x = x
        self.y = y


class HealthBehavior:
    """Hit points; reaching zero announces the unit's death."""

    _health: int

    def _init_health(self, health: int) -> None:
        self._health = health

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: int) -> None:
        self._health = value
        # Removal from the world happens at the end of the tick.
        if value == 0:
            _emit(self, UnitDied(self.unit_id))  # type: ignore[attr-defined]


class MarchBehavior:
    """Moves the unit one cell per step towards a chosen destination."""

    speed: int
    target_x: int | None
    target_y: int | None

    def _init_march(self, speed: int) -> None:
        self.speed = speed
        self.target_x = None
        self.target_y = None

    def march_to(self, target_x: int, target_y: int) -> None:
        world = self.world  # type: ignore[attr-defined]
        if target_x >= world.width or target_y >= world.height:
            raise MarchError("March destination is beyond the map!")
        self.target_x = target_x
        self.target_y = target_y
        _emit(
            self,
            MarchStarted(self.unit_id, self.x, self.y, target_x, target_y),  # type: ignore[attr-defined]
        )

    def do_march(self) -> bool:
        """Take one step; true while the destination is still ahead."""
        if self.target_x is None or self.target_y is None:
            return False
        unit: Any = self
        if (unit.x, unit.y) == (self.target_x, self.target_y):
            return False

        unit.x += _step(self.target_x - unit.x)
        unit.y += _step(self.target_y - unit.y)
        _emit(self, UnitMoved(unit.unit_id, unit.x, unit.y))

        if (unit.x, unit.y) == (self.target_x, self.target_y):
            _emit(self, MarchEnded(unit.unit_id, unit.x, unit.y))
            return False
        return True


class AttackCloseBehavior:
    """Melee attack against living units in the adjacent cells."""

    strength: int
    max_close_enemies: int

    def _init_attack_close(self, strength: int, max_enemies: int) -> None:
        self.strength = strength
        self.max_close_enemies = max_enemies

    def do_attack_close(self) -> bool:
        targets = _living_units_at(self.world, _square_around(self, 1))  # type: ignore[attr-defined]
        return _strike(self, targets, self.strength, self.max_close_enemies)


class AttackFarBehavior:
    """Ranged attack against living units within range but not adjacent."""

    agility: int
    range: int
    max_far_enemies: int

    def _init_attack_far(self, agility: int, range_: int, max_enemies: int) -> None:
        self.agility = agility
        self.range = range_
        self.max_far_enemies = max_enemies

    def do_attack_far(self) -> bool:
        cells = (
            (x, y)
            for x, y in _square_around(self, self.range)
            if distance_to(self, x, y) not in (1,) and distance_to(self, x, y) <= self.range
        )
        targets = _living_units_at(self.world, cells)  # type: ignore[attr-defined]
        return _strike(self, targets, self.agility, self.max_far_enemies)