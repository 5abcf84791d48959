# hotelkeeper

A small toolkit for keeping hotel records in memory.

- **Guests** (`hotelkeeper.guest.Guest`) hold contact details, a passport number, a birth date and loyalty points.
- **Rooms** (`hotelkeeper.room.Room`) hold the guests registered to a room. They also track check-in and check-out, the visit history and notes made during each stay. Every full day of a stay earns the guest 10 loyalty points when they check out.
- **Resources** (`hotelkeeper.resources`) cover anything that can be booked for a span of time. `Resource.reserve` raises `ReservationConflictError` for a booking that overlaps an existing one. `SpaResource` also prices a booking by the hour and counts every started hour as a full hour. `ResourceManager` is a registry of resources keyed by id.
- **DateTime** (`hotelkeeper.dates.DateTime`) is a count of seconds since 1970 with a `DD-MM-YYYY hh:mm:ss` text form. It counts every year as 365 days and every month as 30 days.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Listing guests

Write a guest list file. Its first line is a header and is skipped, and blank lines are ignored. Each other line is a comma-separated record with eight fields:

```
id,first_name,last_name,phone,email,passport,birth_date,loyalty_points
1,Anna,Smirnova,000,anna@example.com,1234567,01-02-1990,150
```

The id, passport and loyalty points must be non-negative whole numbers. The last field takes everything after the seventh comma.

Then run:

```
hotelkeeper guests.txt
```

If you leave out the path, the command reads `guests.txt` in the current directory. It prints a card for each guest, with field labels in Russian. A missing file or a malformed line prints `error: ...` to standard error, and the command exits with status 1.

From Python, `hotelkeeper.cli.load_guests(path)` returns the list of `Guest` objects. `parse_guest_line(line)` reads a single record.

## Using the library

```python
from datetime import datetime

from hotelkeeper.dates import DateTime
from hotelkeeper.guest import Guest
from hotelkeeper.resources import ResourceManager, SpaResource
from hotelkeeper.room import Room

room = Room(101, "Deluxe")
room.add_guest(Guest(1, "Anna", "Smirnova", "000", "anna@example.com",
                     1234567, "01-02-1990", 0))
room.check_in(1, 0)
room.add_interaction(1, "Requested extra towels")
room.check_out(1, 3 * 86400)
print(room.loyalty_points(1))          # 30
print(room.interactions(1))            # ['Requested extra towels']

spa = SpaResource(7, "Sauna", max_slots=4, price_per_hour=20.0)
start = datetime(2024, 6, 15, 10, 0)
end = datetime(2024, 6, 15, 11, 30)
spa.reserve(start, end, guest_id=1)
print(spa.calculate_cost(start, end))  # 40.0

manager = ResourceManager()
manager.add_resource(spa)
print([r.name for r in manager.available_resources()])  # ['Sauna']

print(DateTime.from_parts(15, 6, 2024, 12, 30, 0).to_string())
print(DateTime.parse("15-06-2024 12:30:00").seconds)
```

### Errors

Errors are raised as exceptions:

- `Room.check_in` raises `KeyError` for an unknown guest and `RoomOccupiedError` when someone is already checked in.
- `Room.check_out` and `Room.add_interaction` raise `NoOpenVisitError` when the guest has no stay in progress.
- `Room.add_guest` raises `ValueError` for a guest id that is already registered.
- `Room.remove_guest` and `Room.add_loyalty_points` raise `KeyError` for an unknown guest.
- `Resource.cancel_reservation` raises `KeyError` when no booking starts at the given moment. Otherwise it removes every booking that starts then.
- `SpaResource` raises `ValueError` for a non-positive `max_slots` or a negative price.
- `SpaResource.calculate_cost` raises `OverflowError` when the cost would be too large, and returns `0.0` when the end is not after the start.
- `ResourceManager.remove_resource` raises `KeyError` for an unknown id.
- `DateTime` raises `ValueError` for a date before 1970 or for text it cannot parse.

## What it does not do

Rooms, stays and resource bookings live only in memory. Nothing saves them, and the only file the package reads is the guest list. The `hotelkeeper` command only lists guests. It has no commands for rooms, check-ins or bookings. `SpaResource` stores `max_slots` but does not limit bookings by it.