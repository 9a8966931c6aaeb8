# clubsim

`clubsim` reads the event log of a computer club for one working day. It replays
the log and prints what happened: every input event, the errors the club
reported, the clients moved from the queue to a table, and the clients sent out
at closing time. It then prints the revenue and the occupied time of each table.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Input format

```
3
09:00 19:00
10
08:48 1 client1
09:41 1 client1
09:48 1 client2
09:52 3 client1
09:54 2 client1 1
10:25 2 client2 2
12:33 4 client1
```

- Line 1: the number of tables, a non-negative integer.
- Line 2: the opening and closing times as `HH:MM HH:MM`.
- Line 3: the price of one hour. Every started hour is charged in full.
- Every other line is one event, with fields separated by single spaces:
  `HH:MM <id> <client> [table]`.
  - `1`: the client arrives.
  - `2`: the client sits down at a table, numbered from 1. This is the only
    event with a table number.
  - `3`: the client waits in the queue.
  - `4`: the client leaves.

Client names may hold only `a-z`, `0-9`, `_` and `-`. Events are replayed in the
order they appear in the file.

## Output

The program prints:

1. the opening time;
2. every input event, each followed by the events it produced:
   - `11`: the client was sent away, because the queue was already as long as
     the number of tables, or because the club closed;
   - `12`: a client from the queue took the table that a leaving client freed;
   - `13`: an error, one of `NotOpenYet`, `YouShallNotPass`, `PlaceIsBusy`,
     `ClientUnknown` or `ICanWaitNoLonger!`;
3. at closing time (before the first event after it, or at the end), a `11`
   event for every client still in the club, in alphabetical order;
4. the closing time;
5. one line per table: its number, its revenue, and its occupied time as `HH:MM`.

If a line of the input is malformed, the program prints only that line.

## Command line

```
clubsim events.txt
```

The command takes exactly one file name. With any other number of arguments, or
when the file cannot be read, it writes a message to standard error and exits
with status 1.

## Library use

```python
from clubsim.club import run

with open("events.txt") as fh:
    for line in run(fh.read().splitlines()):
        print(line)
```

- `clubsim.club.parse_config(lines)` returns a `Configuration` (`tables`,
  `opening`, `closing`, `hour_cost`, `events`). It raises
  `clubsim.club.FormatError`, a `ValueError`, at the first malformed line; the
  line is in the exception's `line` attribute.
- `clubsim.club.Club(config)` simulates the day. `process()` replays the events
  and may be called only once; `report()` returns the output lines, processing
  the events first if that has not been done. After processing, `events` holds
  the resulting events and `stats` a `TableStats` (`revenue`, `busy_minutes`)
  per table.
- `clubsim.events` holds the event classes (`ClientCame`, `ClientSat`,
  `ClientWaiting`, `ClientLeft`, `ClientKicked`, `ClientSeated`, `ClubError`),
  each rendered with `to_line()`, and the `EventKind` codes.
- `clubsim.timefmt` has `format_time`, `parse_time` and `parse_count`. Times are
  minutes since midnight.