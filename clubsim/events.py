"""Events read from a club file and the events the club produces."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from .timefmt import format_time


class EventKind(IntEnum):
    """Numeric event codes as they appear in input and output."""

    CAME = 1
    SAT = 2
    WAITING = 3
    LEFT = 4
    KICKED = 11
    SEATED = 12
    ERROR = 13


@dataclass(frozen=True)
class Event:
    """Something that happened at a given minute of the day."""

    time: int
    kind: ClassVar[EventKind]

    def _details(self) -> str:
        raise NotImplementedError

    def to_line(self) -> str:
        """Render the event as a line of the club log."""
        return f"{format_time(self.time)} {int(self.kind)} {self._details()}"


@dataclass(frozen=True)
class ClientCame(Event):
    client: str
    kind: ClassVar[EventKind] = EventKind.CAME

    def _details(self) -> str:
        return self.client


@dataclass(frozen=True)
class ClientSat(Event):
    """A client takes a table; ``table`` is numbered from 1."""

    client: str
    table: int
    kind: ClassVar[EventKind] = EventKind.SAT

    def _details(self) -> str:
        return f"{self.client} {self.table}"


@dataclass(frozen=True)
class ClientWaiting(Event):
    client: str
    kind: ClassVar[EventKind] = EventKind.WAITING

    def _details(self) -> str:
        return self.client


@dataclass(frozen=True)
class ClientLeft(Event):
    client: str
    kind: ClassVar[EventKind] = EventKind.LEFT

    def _details(self) -> str:
        return self.client


@dataclass(frozen=True)
class ClientKicked(Event):
    client: str
    kind: ClassVar[EventKind] = EventKind.KICKED

    def _details(self) -> str:
        return self.client


@dataclass(frozen=True)
class ClientSeated(Event):
    """A waiting client is given a table; ``table`` is numbered from 1."""

    client: str
    table: int
    kind: ClassVar[EventKind] = EventKind.SEATED

    def _details(self) -> str:
        return f"{self.client} {self.table}"


@dataclass(frozen=True)
class ClubError(Event):
    message: str
    kind: ClassVar[EventKind] = EventKind.ERROR

    def _details(self) -> str:
        return self.message