"""Command-line entry point: read a scenario file and run the battle."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from swbattle.commands import CommandParser, CreateMap, March, SpawnHunter, SpawnSwordsman
from swbattle.units import HunterUnit, SwordsmanUnit
from swbattle.world import GameWorld

DEFAULT_MAX_TICKS = 10000


def build_parser(world: GameWorld) -> CommandParser:
    """Create a command parser whose handlers act on ``world``."""

    def create_map(command: CreateMap) -> None:
        world.create_map(command.width, command.height)

    def spawn_swordsman(command: SpawnSwordsman) -> None:
        world.add_unit(
            SwordsmanUnit(
                world, command.unit_id, command.x, command.y, command.hp, command.strength
            )
        )

    def spawn_hunter(command: SpawnHunter) -> None:
        world.add_unit(
            HunterUnit(
                world,
                command.unit_id,
                command.x,
                command.y,
                command.hp,
                command.agility,
                command.strength,
                command.range,
            )
        )

    def march(command: March) -> None:
        unit = world.get_unit_by_id(command.unit_id)
        unit.march_to(command.target_x, command.target_y)  # type: ignore[attr-defined]

    return (
        CommandParser()
        .add(CreateMap, create_map)
        .add(SpawnSwordsman, spawn_swordsman)
        .add(SpawnHunter, spawn_hunter)
        .add(March, march)
    )


def run(
    stream: TextIO, out: TextIO | None = None, max_ticks: int = DEFAULT_MAX_TICKS
) -> GameWorld:
    """Parse a scenario from ``stream`` and simulate it until nothing happens.

    Output goes to ``out``, or to standard output when it is not given.
    Returns the world in its final state.
    """
    world = GameWorld(out)

    def write(text: str) -> None:
        target = out if out is not None else sys.stdout
        target.write(text)
        target.flush()

    write("Commands:\n")
    build_parser(world).parse(stream)
    write("\n\nEvents:\n")

    ticks = 1
    while world.next_tick():
        ticks += 1
        if ticks > max_ticks:
            write(f"Simulation is on for {max_ticks}. It probably couldn't converge.\n")
            break
    return world


def main(argv: list[str] | None = None) -> int:
    """Run the scenario file named on the command line."""
    arg_parser = argparse.ArgumentParser(
        prog="swbattle", description="Simulate a battle described by a command file."
    )
    arg_parser.add_argument("file", nargs="?", help="scenario command file")
    args = arg_parser.parse_args(sys.argv[1:] if argv is None else argv)

    if args.file is None:
        print("Error: No file specified in command line argument", file=sys.stderr)
        return 1

    try:
        with open(args.file, encoding="utf-8") as scenario:
            run(scenario)
    except FileNotFoundError:
        print(f"Error: File not found - {args.file}", file=sys.stderr)
        return 1
    return 0