import dataclasses

import pytest

from clubsim.events import (
    ClientCame,
    ClientKicked,
    ClientLeft,
    ClientSat,
    ClientSeated,
    ClientWaiting,
    ClubError,
)
from clubsim.timefmt import format_time, parse_time

T = parse_time("10:25")


@pytest.mark.parametrize(
    "event, rest",
    [
        (ClientCame(T, "client1"), "1 client1"),
        (ClientSat(T, "client2", 2), "2 client2 2"),
        (ClientWaiting(T, "client1"), "3 client1"),
        (ClientLeft(T, "client1"), "4 client1"),
        (ClientKicked(T, "client3"), "11 client3"),
        (ClientSeated(T, "client4", 1), "12 client4 1"),
        (ClubError(T, "PlaceIsBusy"), "13 PlaceIsBusy"),
    ],
)
def test_to_line_layout(event, rest):
    stamp, tail = event.to_line().split(" ", 1)
    assert stamp == format_time(T)
    assert tail == rest


def test_seated_line_from_worked_example():
    event = ClientSeated(parse_time("12:33"), "client4", 1)
    assert event.to_line() == "12:33 12 client4 1"


def test_error_line():
    event = ClubError(parse_time("08:48"), "NotOpenYet")
    assert event.to_line() == "08:48 13 NotOpenYet"


def test_events_are_frozen():
    event = ClientCame(T, "client1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.time = 0
    assert event.time == T
    assert event.to_line() == "10:25 1 client1"


def test_events_compare_by_value():
    assert ClientLeft(T, "a") == ClientLeft(T, "a")
    assert ClientLeft(T, "a") != ClientCame(T, "a")