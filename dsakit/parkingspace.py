"""A multi-floor parking garage that codes each spot as a slot number."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

Clock = Callable[[], float]

_BASES = {"bike": 1, "car": 2, "heavy": 3}
_RATES = {"bike": 10, "car": 20, "heavy": 30}
_SEPARATOR = "#" * 48


@dataclass(eq=False)
class ParkingSpot:
    """One spot with its per-second rate, number and vehicle kind."""

    rate: int
    number: int
    kind: str
    available: bool = True


@dataclass(frozen=True)
class Vehicle:
    """A vehicle kind ("bike", "car" or "heavy") and its number."""

    kind: str
    number: int


@dataclass(eq=False)
class Floor:
    """A floor holding rows of bike, car and heavy-vehicle spots."""

    number: int
    capacity: int
    bikes: int
    cars: int
    heavy: int
    spots: dict[str, list[ParkingSpot]] = field(init=False)

    def __post_init__(self) -> None:
        counts = {"bike": self.bikes, "car": self.cars, "heavy": self.heavy}
        self.spots = {
            kind: [ParkingSpot(_RATES[kind], i + 1, kind) for i in range(count)]
            for kind, count in counts.items()
        }


@dataclass(frozen=True)
class Ticket:
    """Issued on entry: vehicle details, ticket id, slot code and entry time."""

    kind: str
    vehicle_number: int
    ticket_id: int
    slot: int
    entry_time: float


def decode_slot(slot: int) -> tuple[int, int, int]:
    """Split a slot code into (floor index, kind base, spot index), 0-based
    for floor and spot."""
    return slot // 1000 - 1, slot % 1000 // 100, slot % 100 - 1


class ParkingGarage:
    """Floors of spots; a slot is coded floor*1000 + base*100 + spot."""

    def __init__(
        self,
        floor_count: int,
        capacity: int,
        bikes: int,
        cars: int,
        heavy: int,
        clock: Clock = time.time,
    ) -> None:
        self._clock = clock
        self.floors = [
            Floor(i + 1, capacity, bikes, cars, heavy) for i in range(floor_count)
        ]

    def find_availability(self, kind: str) -> Optional[int]:
        """Occupy the first free spot of ``kind`` and return its slot code,
        or None when there is none."""
        base = _BASES.get(kind)
        if base is None:
            return None
        for floor_index, floor in enumerate(self.floors):
            for spot_index, spot in enumerate(floor.spots[kind]):
                if spot.available:
                    spot.available = False
                    return (floor_index + 1) * 1000 + base * 100 + spot_index + 1
        return None

    def allocate(self, vehicle: Vehicle) -> Optional[Ticket]:
        """Ticket a spot for ``vehicle``; None when the garage has no room."""
        slot = self.find_availability(vehicle.kind)
        if slot is None:
            return None
        return Ticket(
            vehicle.kind, vehicle.number, vehicle.number + slot, slot, self._clock()
        )

    def deallocate(self, ticket: Ticket) -> tuple[int, int]:
        """Free the ticketed spot; return (seconds parked, amount due)."""
        floor_index, base, spot_index = decode_slot(ticket.slot)
        kind = next((k for k, b in _BASES.items() if b == base), None)
        if kind is None or not 0 <= floor_index < len(self.floors):
            raise ValueError(f"invalid slot {ticket.slot}")
        spots = self.floors[floor_index].spots[kind]
        if not 0 <= spot_index < len(spots):
            raise ValueError(f"invalid slot {ticket.slot}")
        spot = spots[spot_index]
        spot.available = True
        duration = int(self._clock() - ticket.entry_time)
        return duration, spot.rate * duration


def format_ticket(ticket: Optional[Ticket]) -> str:
    """A printable ticket, or a notice when no spot was allocated."""
    if ticket is None:
        return "No spot allocated no availablility check later"
    return "\n".join(
        [
            _SEPARATOR,
            f"Vehicle number :  {ticket.vehicle_number}",
            f"vehicle type: {ticket.kind}",
            f"Ticket Number: {ticket.ticket_id}",
            f"Allocated slot: {ticket.slot}",
            f"Entry time: {time.ctime(ticket.entry_time)}",
            _SEPARATOR,
        ]
    )