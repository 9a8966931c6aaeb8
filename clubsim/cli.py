"""Command-line entry point: simulate a club file and print the log."""

from __future__ import annotations

import sys

from .club import run


def _read_lines(path: str) -> list[str]:
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        text = handle.read()
    lines = text.split("\n")
    if text == "" or text.endswith("\n"):
        lines.pop()
    return lines


def main(argv: list[str] | None = None) -> int:
    """Run the simulation for the file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: clubsim <filename>", file=sys.stderr)
        return 1
    try:
        lines = _read_lines(args[0])
    except OSError as exc:
        print(f"clubsim: cannot read {args[0]}: {exc.strerror}", file=sys.stderr)
        return 1
    for line in run(lines):
        sys.stdout.write(line + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())