"""The unit types that can be spawned."""

from __future__ import annotations

from typing import TYPE_CHECKING

from swbattle.behaviors import (
    AttackCloseBehavior,
    AttackFarBehavior,
    BaseUnit,
    HealthBehavior,
    MarchBehavior,
)

if TYPE_CHECKING:
    from swbattle.world import GameWorld


class SwordsmanUnit(BaseUnit, HealthBehavior, MarchBehavior, AttackCloseBehavior):
    """A melee unit that marches and strikes one neighbour at a time."""

    type_name = "Swordsman"

    def __init__(
        self,
        world: GameWorld,
        unit_id: int,
        x: int,
        y: int,
        health: int,
        strength: int,
    ) -> None:
        super().__init__(world, unit_id, x, y)
        self._init_health(health)
        self._init_march(1)
        self._init_attack_close(strength, 1)


class HunterUnit(
    BaseUnit, HealthBehavior, MarchBehavior, AttackCloseBehavior, AttackFarBehavior
):
    """A unit that fights in melee and shoots at range."""

    type_name = "Hunter"

    def __init__(
        self,
        world: GameWorld,
        unit_id: int,
        x: int,
        y: int,
        health: int,
        agility: int,
        strength: int,
        range_: int,
    ) -> None:
        super().__init__(world, unit_id, x, y)
        self._init_health(health)
        self._init_march(1)
        self._init_attack_close(strength, 1)
        self._init_attack_far(agility, range_, 1)