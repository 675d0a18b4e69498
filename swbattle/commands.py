"""Scenario commands and the line-oriented parser that dispatches them."""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, ClassVar, Iterable, TextIO

_UINT32 = 2**32


def _named(name: str) -> Any:
    """Declare a numeric command field, printed under ``name``, defaulting to 0."""
    return dataclasses.field(default=0, metadata={"name": name})


@dataclasses.dataclass(frozen=True)
class CreateMap:
    NAME: ClassVar[str] = "CREATE_MAP"

    width: int = _named("width")
    height: int = _named("height")


@dataclasses.dataclass(frozen=True)
class March:
    NAME: ClassVar[str] = "MARCH"

    unit_id: int = _named("unitId")
    target_x: int = _named("targetX")
    target_y: int = _named("targetY")


@dataclasses.dataclass(frozen=True)
class SpawnHunter:
    NAME: ClassVar[str] = "SPAWN_HUNTER"

    unit_id: int = _named("unitId")
    x: int = _named("x")
    y: int = _named("y")
    hp: int = _named("hp")
    agility: int = _named("agility")
    strength: int = _named("strength")
    range: int = _named("range")


@dataclasses.dataclass(frozen=True)
class SpawnSwordsman:
    NAME: ClassVar[str] = "SPAWN_SWORDSMAN"

    unit_id: int = _named("unitId")
    x: int = _named("x")
    y: int = _named("y")
    hp: int = _named("hp")
    strength: int = _named("strength")


class CommandError(RuntimeError):
    """Raised for duplicate registrations and unknown commands."""


def _read_values(tokens: Iterable[str], count: int) -> list[int]:
    """Read up to ``count`` unsigned values; reading stops at the first bad token."""
    values: list[int] = []
    for token in tokens:
        if len(values) == count:
            break
        try:
            value = int(token)
        except ValueError:
            break
        values.append(value % _UINT32 if value < 0 else value)
    return values


class CommandParser:
    """Maps command names to handlers and feeds parsed commands to them."""

    def __init__(self) -> None:
        self._commands: dict[str, Callable[[list[str]], None]] = {}

    def add(self, command_type: type, handler: Callable[[Any], Any]) -> CommandParser:
        name = command_type.NAME
        if name in self._commands:
            raise CommandError(f"Command already exists: {name}")

        field_count = len(dataclasses.fields(command_type))

        def dispatch(tokens: list[str]) -> None:
            handler(command_type(*_read_values(tokens, field_count)))

        self._commands[name] = dispatch
        return self

    def parse(self, stream: TextIO) -> None:
        for raw in stream:
            line = raw.rstrip("\n")
            if not line or line.startswith("//"):
                continue
            tokens = line.split()
            if not tokens:
                continue
            name, args = tokens[0], tokens[1:]
            try:
                dispatch = self._commands[name]
            except KeyError:
                raise CommandError(f"Unknown command: {name}") from None
            dispatch(args)