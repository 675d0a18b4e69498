# swbattle

A small tick-based battle simulation. Units stand on a rectangular grid and
take one action per tick, in order of preference: a close attack on a
neighbouring unit, then a ranged attack, then a step towards their march
target. A unit whose health drops to zero dies and is removed at the end of
that tick. The simulation stops when a tick passes in which no unit acted, or
when no units are left.

Every event is written as one line, stamped with its tick:

```
[1] MAP_CREATED width=10 height=10 
[1] UNIT_SPAWNED unitId=1 unitType=Swordsman x=0 y=0 
[2] UNIT_MOVED unitId=1 x=1 y=0 
```

Events caused by the command file are stamped with tick 1; the first
simulated tick is 2. Units act in the order they were spawned.

## Units

- **Swordsman**: has health and strength. Each tick it hits one living unit
  in one of the eight surrounding cells, chosen at random, for `strength`
  damage. Otherwise it takes one step towards its march target.
- **Hunter**: has health, agility, strength and range. It first tries a close
  attack like a swordsman, using its strength. If nothing is adjacent, it
  shoots one living unit whose distance (Euclidean, rounded down) is at most
  `range` and more than 1, for `agility` damage. Otherwise it marches.

A march moves a unit one cell per tick, diagonally when both coordinates
differ. Health never goes below zero.

## Installing

```
pip install .
```

## Running

Write a command file. Each line holds one command. Blank lines and lines
starting with `//` are skipped.

```
CREATE_MAP 10 10
SPAWN_SWORDSMAN 1 0 0 5 2
SPAWN_HUNTER 2 9 0 10 5 1 4
MARCH 1 9 0
MARCH 2 0 0
SPAWN_SWORDSMAN 3 0 9 10 2
MARCH 3 0 0
```

| Command           | Arguments                                   |
|-------------------|---------------------------------------------|
| `CREATE_MAP`      | width height                                |
| `SPAWN_SWORDSMAN` | unitId x y hp strength                      |
| `SPAWN_HUNTER`    | unitId x y hp agility strength range        |
| `MARCH`           | unitId targetX targetY                      |

Missing arguments default to 0; reading a line's arguments stops at the first
one that is not an integer.

Then run it:

```
swbattle commands.txt
```

The program prints `Commands:`, then the events the commands cause, then
`Events:` followed by the events of every tick. After 10000 ticks it prints a
note that the simulation probably could not converge and stops.

If no file is given, or the file does not exist, an error is printed to
standard error and the exit status is 1.

Errors in the scenario are raised as exceptions:

- `swbattle.commands.CommandError` for an unknown command name (and for
  registering the same command twice on a parser);
- `swbattle.world.WorldError` for spawning a unit with an id already in use
  or on an occupied cell, and for looking up a unit that does not exist;
- `swbattle.behaviors.MarchError` for a march target outside the map.

## Using it from Python

Run a whole scenario with `swbattle.cli.run(stream, out, max_ticks)`. It
returns the world in its final state.

```python
import io
import sys

from swbattle.cli import run

commands = io.StringIO("CREATE_MAP 10 10\nSPAWN_SWORDSMAN 1 0 0 5 2\n")
world = run(commands, sys.stdout, 10000)
```

Or build a world directly:

```python
from swbattle.units import HunterUnit, SwordsmanUnit
from swbattle.world import GameWorld

world = GameWorld()          # events go to standard output
world.create_map(10, 10)

hunter = HunterUnit(world, 2, 3, 0, 10, 5, 1, 4)
world.add_unit(hunter)
hunter.march_to(0, 0)

swordsman = SwordsmanUnit(world, 3, 0, 2, 10, 2)
world.add_unit(swordsman)
swordsman.march_to(0, 0)

while world.next_tick():
    pass
```

The modules:

- `swbattle.world`: `GameWorld` holds the map and units and runs ticks
  (`next_tick`, `add_unit`, `get_unit_by_id`, `get_unit_at_pos`).
- `swbattle.units`: `SwordsmanUnit` and `HunterUnit`.
- `swbattle.behaviors`: `BaseUnit` and the behaviours units are made of
  (`HealthBehavior`, `MarchBehavior`, `AttackCloseBehavior`,
  `AttackFarBehavior`), and `distance_to`.
- `swbattle.commands`: the command records and `CommandParser`, which maps
  command names to handlers; `cli.build_parser(world)` gives one wired to a
  world.
- `swbattle.events`: the event records, `EventLog`, `format_fields` and
  `print_debug`.

## What it does not do

The simulation is text only: it draws no map and keeps no state between runs.
Unit positions given in spawn commands are not checked against the map size.

## Tests

```
pip install ".[test]"
pytest
```