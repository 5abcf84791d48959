"""Hotel rooms: resident guests, stays and what happened during them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from hotelkeeper.dates import SECONDS_PER_DAY
from hotelkeeper.guest import Guest

POINTS_PER_NIGHT = 10


class RoomError(Exception):
    """Base class for room state errors."""


class RoomOccupiedError(RoomError):
    """The room already has a guest checked in."""


class NoOpenVisitError(RoomError):
    """The guest has no stay in progress in this room."""


@dataclass
class Visit:
    """One stay of a guest in a room; check-out is None while it lasts."""

    check_in_date: int
    guest_id: int
    room_number: int
    check_out_date: int | None = None
    interactions: list[str] = field(default_factory=list)

    @property
    def is_open(self) -> bool:
        return self.check_out_date is None


class Room:
    """A room that holds guests and a history of their visits."""

    def __init__(self, number: int = 0, room_type: str = "Standard") -> None:
        self.number = number
        self.room_type = room_type
        self.occupied = False
        self._guests: dict[int, Guest] = {}
        self._visits: list[Visit] = []

    def add_guest(self, guest: Guest) -> None:
        """Register a guest with the room."""
        if guest is None:
            raise TypeError("guest must not be None")
        if guest.id in self._guests:
            raise ValueError(f"guest {guest.id} is already registered")
        self._guests[guest.id] = guest

    def remove_guest(self, guest_id: int) -> Guest:
        """Unregister a guest and return them."""
        try:
            return self._guests.pop(guest_id)
        except KeyError:
            raise KeyError(f"unknown guest {guest_id}") from None

    def get_guest(self, guest_id: int) -> Guest | None:
        return self._guests.get(guest_id)

    def _open_visit(self, guest_id: int) -> Visit | None:
        return next(
            (v for v in reversed(self._visits) if v.guest_id == guest_id and v.is_open),
            None,
        )

    def check_in(self, guest_id: int, check_in_date: int) -> Visit:
        """Start a stay for a registered guest in an empty room."""
        if guest_id not in self._guests:
            raise KeyError(f"unknown guest {guest_id}")
        if self.occupied:
            raise RoomOccupiedError(f"room {self.number} is occupied")
        visit = Visit(check_in_date, guest_id, self.number)
        self._visits.append(visit)
        self.occupied = True
        return visit

    def check_out(self, guest_id: int, check_out_date: int) -> Visit:
        """End the guest's stay and credit points for each full day."""
        visit = self._open_visit(guest_id) if self.occupied else None
        if visit is None:
            raise NoOpenVisitError(f"guest {guest_id} has no open stay in room {self.number}")
        visit.check_out_date = check_out_date
        elapsed = check_out_date - visit.check_in_date
        days = abs(elapsed) // SECONDS_PER_DAY * (1 if elapsed >= 0 else -1)
        guest = self._guests.get(guest_id)
        if guest is not None and days > 0:
            guest.add_loyalty_points(days * POINTS_PER_NIGHT)
        self.occupied = False
        return visit

    def visit_history(self, guest_id: int) -> list[Visit]:
        """Copies of every visit the guest made, oldest first."""
        return [
            replace(v, interactions=list(v.interactions))
            for v in self._visits
            if v.guest_id == guest_id
        ]

    def add_loyalty_points(self, guest_id: int, points: int) -> None:
        guest = self._guests.get(guest_id)
        if guest is None:
            raise KeyError(f"unknown guest {guest_id}")
        guest.add_loyalty_points(points)

    def loyalty_points(self, guest_id: int) -> int:
        """The guest's points, or 0 for a guest the room does not know."""
        guest = self._guests.get(guest_id)
        return guest.loyal_points if guest is not None else 0

    def add_interaction(self, guest_id: int, interaction: str) -> None:
        """Record something that happened during the guest's current stay."""
        visit = self._open_visit(guest_id)
        if visit is None:
            raise NoOpenVisitError(f"guest {guest_id} has no open stay in room {self.number}")
        visit.interactions.append(interaction)

    def interactions(self, guest_id: int) -> list[str]:
        """All interactions over all of the guest's visits, in order."""
        return [
            item
            for visit in self._visits
            if visit.guest_id == guest_id
            for item in visit.interactions
        ]