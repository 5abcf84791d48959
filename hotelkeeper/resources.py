"""Bookable hotel resources such as spa rooms, and a registry of them."""

from __future__ import annotations

import math
from datetime import datetime

FLOAT32_MAX = 3.4028234663852886e38


class ReservationConflictError(Exception):
    """The requested time range overlaps an existing reservation."""


class Resource:
    """A resource whose time can be reserved in non-overlapping ranges."""

    def __init__(self, resource_id: int, name: str, description: str = "") -> None:
        self.id = resource_id
        self.name = name
        self.description = description
        self.is_available = True
        self.schedule: dict[datetime, list[tuple[datetime, datetime]]] = {}

    def reserve(self, start: datetime, end: datetime, guest_id: int) -> None:
        """Book the range from start to end."""
        if not self.check_availability(start, end):
            raise ReservationConflictError(
                f"{self.name} is already booked between {start} and {end}"
            )
        self.schedule.setdefault(start, []).append((start, end))

    def cancel_reservation(self, start: datetime) -> None:
        """Drop every booking that starts at the given moment."""
        if start not in self.schedule:
            raise KeyError(f"no reservation starts at {start}")
        del self.schedule[start]

    def check_availability(self, start: datetime, end: datetime) -> bool:
        """True when no booking overlaps the range from start to end."""
        return all(
            end <= slot_start or start >= slot_end
            for slots in self.schedule.values()
            for slot_start, slot_end in slots
        )


class SpaResource(Resource):
    """A spa resource charged by the started hour."""

    def __init__(
        self,
        resource_id: int,
        name: str,
        max_slots: int,
        price_per_hour: float,
        description: str = "",
    ) -> None:
        super().__init__(resource_id, name, description)
        if max_slots <= 0:
            raise ValueError("Max slots must be positive")
        if price_per_hour < 0:
            raise ValueError("Price per hour cannot be negative")
        self.max_slots = max_slots
        self.price_per_hour = price_per_hour

    def calculate_cost(self, start: datetime, end: datetime) -> float:
        """Price of the range, every started hour counted in full."""
        if end <= start:
            return 0.0
        whole_seconds = int((end - start).total_seconds())
        hours = math.ceil(whole_seconds / 3600)
        if self.price_per_hour > 0 and hours > FLOAT32_MAX / self.price_per_hour:
            raise OverflowError("Cost calculation overflow")
        return float(hours) * self.price_per_hour


class ResourceManager:
    """A registry of resources keyed by their id."""

    def __init__(self) -> None:
        self._resources: dict[int, Resource] = {}

    def add_resource(self, resource: Resource) -> None:
        """Register a resource, replacing any with the same id."""
        self._resources[resource.id] = resource

    def remove_resource(self, resource_id: int) -> Resource:
        try:
            return self._resources.pop(resource_id)
        except KeyError:
            raise KeyError(f"unknown resource {resource_id}") from None

    def get_resource(self, resource_id: int) -> Resource | None:
        return self._resources.get(resource_id)

    def available_resources(self) -> list[Resource]:
        return [r for r in self._resources.values() if r.is_available]

    def __len__(self) -> int:
        return len(self._resources)

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._resources