"""Command line entry: list the guests stored in a comma-separated file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from hotelkeeper.guest import Guest

_FIELD_COUNT = 8


def parse_guest_line(line: str) -> Guest:
    """Build a guest from one ``id,first,last,phone,email,passport,date,points`` line."""
    fields = line.rstrip("\r\n").split(",", _FIELD_COUNT - 1)
    if len(fields) != _FIELD_COUNT:
        raise ValueError(f"expected {_FIELD_COUNT} fields, got {len(fields)}: {line!r}")
    raw_id, first, last, phone, email, raw_passport, date, raw_points = fields
    try:
        guest_id = int(raw_id.strip())
        passport = int(raw_passport.strip())
        points = int(raw_points.strip())
    except ValueError as exc:
        raise ValueError(f"bad number in guest line {line!r}") from exc
    if min(guest_id, passport, points) < 0:
        raise ValueError(f"negative number in guest line {line!r}")
    return Guest(guest_id, first, last, phone, email, passport, date, points)


def load_guests(path: str | Path) -> list[Guest]:
    """Read guests from a file whose first line is a header."""
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        return [parse_guest_line(line) for line in handle if line.strip()]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show every guest in a guest list file.")
    parser.add_argument("path", nargs="?", default="guests.txt", help="guest list file")
    args = parser.parse_args(argv)
    try:
        guests = load_guests(args.path)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for guest in guests:
        guest.show_info()
    return 0


if __name__ == "__main__":
    sys.exit(main())