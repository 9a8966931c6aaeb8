"""Reading a club description and simulating a day of its tables."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

from .events import (
    ClientCame,
    ClientKicked,
    ClientLeft,
    ClientSat,
    ClientSeated,
    ClientWaiting,
    ClubError,
    Event,
)
from .timefmt import format_time, parse_count, parse_time

_NAME_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz0123456789_-")


class FormatError(ValueError):
    """A line of the input could not be understood."""

    def __init__(self, line: str) -> None:
        super().__init__(f"malformed line: {line!r}")
        self.line = line


@dataclass
class Configuration:
    """Table count, opening hours, hourly price and the incoming events."""

    tables: int = 0
    opening: int = 0
    closing: int = 0
    hour_cost: int = 0
    events: list[Event] = field(default_factory=list)


@dataclass
class TableStats:
    """Money earned by a table and minutes it was occupied."""

    revenue: int = 0
    busy_minutes: int = 0


def _single(tokens: list[str]) -> int:
    if len(tokens) != 1:
        raise ValueError("expected one field")
    return parse_count(tokens[0])


def _parse_event(tokens: list[str], tables: int) -> Event:
    if len(tokens) < 3:
        raise ValueError("too few fields")
    time = parse_time(tokens[0])
    kind = parse_count(tokens[1])
    if not 1 <= kind <= 4:
        raise ValueError("unknown event kind")
    if len(tokens) != (4 if kind == 2 else 3):
        raise ValueError("wrong number of fields")
    name = tokens[2]
    if not set(name) <= _NAME_CHARS:
        raise ValueError("bad client name")
    if kind == 2:
        table = parse_count(tokens[3])
        if not 1 <= table <= tables:
            raise ValueError("no such table")
        return ClientSat(time, name, table)
    return {1: ClientCame, 3: ClientWaiting, 4: ClientLeft}[kind](time, name)


def parse_config(lines: Iterable[str]) -> Configuration:
    """Parse the lines of a club file, raising FormatError at the first bad line."""
    config = Configuration()
    for number, raw in enumerate(lines, 1):
        line = raw.removesuffix("\n")
        tokens = line.split(" ")
        try:
            if number == 1:
                config.tables = _single(tokens)
            elif number == 2:
                if len(tokens) != 2:
                    raise ValueError("expected two times")
                config.opening = parse_time(tokens[0])
                config.closing = parse_time(tokens[1])
            elif number == 3:
                config.hour_cost = _single(tokens)
            else:
                config.events.append(_parse_event(tokens, config.tables))
        except ValueError as exc:
            raise FormatError(line) from exc
    return config


def _hours_started(minutes: int) -> int:
    started = minutes + 59
    return started // 60 if started >= 0 else -(-started // 60)


class Club:
    """Simulates one day of a club from its configuration."""

    def __init__(self, config: Configuration) -> None:
        self.config = config
        self.events: list[Event] = []
        self.stats = [TableStats() for _ in range(config.tables)]
        self._occupant: list[str | None] = [None] * config.tables
        self._since: list[int | None] = [None] * config.tables
        self._present: dict[str, int | None] = {}
        self._queue: deque[str] = deque()
        self._free = config.tables
        self._processed = False

    def process(self) -> None:
        """Run every incoming event, closing the club once time passes closing."""
        if self._processed:
            raise RuntimeError("events have already been processed")
        self._processed = True
        closed = False
        for event in self.config.events:
            if event.time > self.config.closing and not closed:
                self._close()
                closed = True
            self.events.append(event)
            match event:
                case ClientCame():
                    self._came(event)
                case ClientSat():
                    self._sat(event)
                case ClientWaiting():
                    self._waiting(event)
                case ClientLeft():
                    self._left(event)
        if not closed:
            self._close()

    def report(self) -> list[str]:
        """Return the output lines, processing the events first if needed."""
        if not self._processed:
            self.process()
        lines = [format_time(self.config.opening)]
        lines.extend(event.to_line() for event in self.events)
        lines.append(format_time(self.config.closing))
        lines.extend(
            f"{number} {stats.revenue} {format_time(stats.busy_minutes)}"
            for number, stats in enumerate(self.stats, 1)
        )
        return lines

    def _charge(self, minutes: int) -> int:
        return _hours_started(minutes) * self.config.hour_cost

    def _seat(self, table: int, client: str, time: int) -> None:
        self._occupant[table] = client
        self._since[table] = time
        self._present[client] = table

    def _release(self, table: int, time: int) -> None:
        since = self._since[table]
        used = time - (since if since is not None else time)
        self._occupant[table] = None
        self._since[table] = None
        self.stats[table].busy_minutes += used
        self.stats[table].revenue += self._charge(used)

    def _came(self, event: ClientCame) -> None:
        if event.client in self._present:
            self.events.append(ClubError(event.time, "YouShallNotPass"))
        elif not self.config.opening <= event.time <= self.config.closing:
            self.events.append(ClubError(event.time, "NotOpenYet"))
        else:
            self._present[event.client] = None

    def _sat(self, event: ClientSat) -> None:
        table = event.table - 1
        if self._occupant[table] is not None:
            self.events.append(ClubError(event.time, "PlaceIsBusy"))
            return
        if event.client not in self._present:
            self.events.append(ClubError(event.time, "ClientUnknown"))
            return
        old = self._present[event.client]
        if old is not None:
            self._release(old, event.time)
            self._present[event.client] = None
            self._free += 1
        self._seat(table, event.client, event.time)
        self._free -= 1

    def _waiting(self, event: ClientWaiting) -> None:
        if self._free > 0:
            self.events.append(ClubError(event.time, "ICanWaitNoLonger!"))
        elif len(self._queue) >= self.config.tables:
            self.events.append(ClientKicked(event.time, event.client))
        else:
            self._queue.append(event.client)

    def _left(self, event: ClientLeft) -> None:
        if event.client not in self._present:
            self.events.append(ClubError(event.time, "ClientUnknown"))
            return
        table = self._present.pop(event.client)
        if table is not None:
            self._release(table, event.time)
        if not self._queue:
            self._free += 1
            return
        following = self._queue.popleft()
        if table is None:
            # No table was freed: the next client is admitted without a seat.
            self._present[following] = None
            self.events.append(ClientSeated(event.time, following, 0))
        else:
            self._seat(table, following, event.time)
            self.events.append(ClientSeated(event.time, following, table + 1))

    def _close(self) -> None:
        closing = self.config.closing
        for client in sorted(self._present):
            table = self._present[client]
            if table is not None:
                self._release(table, closing)
                self._present[client] = None
            self.events.append(ClientKicked(closing, client))


def run(lines: Iterable[str]) -> list[str]:
    """Simulate a club file and return its output lines.

    A malformed file yields just the first offending line.
    """
    try:
        config = parse_config(lines)
    except FormatError as exc:
        return [exc.line]
    return Club(config).report()