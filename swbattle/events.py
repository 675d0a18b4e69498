"""Events emitted by the simulation and their one-line text form."""

from __future__ import annotations

import dataclasses
import sys
from typing import Any, ClassVar, TextIO


def _named(name: str) -> Any:
    """Declare a dataclass field that prints under ``name``."""
    return dataclasses.field(metadata={"name": name})


def format_fields(record: Any) -> str:
    """Render every field of a dataclass record as ``name=value `` pairs."""
    return "".join(
        f"{field.metadata.get('name', field.name)}={getattr(record, field.name)} "
        for field in dataclasses.fields(record)
    )


def print_debug(stream: TextIO, record: Any) -> None:
    """Write a record (event or command) as ``NAME fields`` on its own line."""
    stream.write(f"{record.NAME} {format_fields(record)}\n")


@dataclasses.dataclass(frozen=True)
class MapCreated:
    NAME: ClassVar[str] = "MAP_CREATED"

    width: int = _named("width")
    height: int = _named("height")


@dataclasses.dataclass(frozen=True)
class MarchStarted:
    NAME: ClassVar[str] = "MARCH_STARTED"

    unit_id: int = _named("unitId")
    x: int = _named("x")
    y: int = _named("y")
    target_x: int = _named("targetX")
    target_y: int = _named("targetY")


@dataclasses.dataclass(frozen=True)
class MarchEnded:
    NAME: ClassVar[str] = "MARCH_ENDED"

    unit_id: int = _named("unitId")
    x: int = _named("x")
    y: int = _named("y")


@dataclasses.dataclass(frozen=True)
class UnitMoved:
    NAME: ClassVar[str] = "UNIT_MOVED"

    unit_id: int = _named("unitId")
    x: int = _named("x")
    y: int = _named("y")


@dataclasses.dataclass(frozen=True)
class UnitSpawned:
    NAME: ClassVar[str] = "UNIT_SPAWNED"

    unit_id: int = _named("unitId")
    unit_type: str = _named("unitType")
    x: int = _named("x")
    y: int = _named("y")


@dataclasses.dataclass(frozen=True)
class UnitAttacked:
    NAME: ClassVar[str] = "UNIT_ATTACKED"

    attacker_unit_id: int = _named("attackerUnitId")
    target_unit_id: int = _named("targetUnitId")
    damage: int = _named("damage")
    target_hp: int = _named("targetHp")


@dataclasses.dataclass(frozen=True)
class UnitDied:
    NAME: ClassVar[str] = "UNIT_DIED"

    unit_id: int = _named("unitId")


class EventLog:
    """Writes events, stamped with their tick, to a text stream.

    Without a stream the log writes to whatever ``sys.stdout`` is at the
    moment of logging.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def log(self, tick: int, event: Any) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"[{tick}] {event.NAME} {format_fields(event)}\n")
        stream.flush()