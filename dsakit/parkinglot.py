"""A single-level parking lot with separate pools of bike and car spots."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

Clock = Callable[[], float]

_SEPARATOR = "#" * 47


@dataclass(frozen=True)
class ParkingTicket:
    """Proof of a booked spot: its number, the vehicle kind and the entry time."""

    spot: int
    kind: str
    entry_time: float

    def describe(self) -> str:
        """Printable ticket framed by separator lines."""
        return "\n".join(
            [
                _SEPARATOR,
                f"Vehicle: {self.kind} spotnumber: {self.spot}",
                f"booking time: {time.ctime(self.entry_time)}",
                _SEPARATOR,
            ]
        )


class SpotPool:
    """A fixed number of spots for one kind of vehicle, charged per minute."""

    def __init__(self, capacity: int, kind: str, price: int, clock: Clock = time.time) -> None:
        self.capacity = capacity
        self.kind = kind
        self.price = price
        self._clock = clock
        self._occupied = [False] * capacity

    def book(self) -> Optional[ParkingTicket]:
        """Occupy the lowest free spot and ticket it; None when all are taken."""
        for spot, taken in enumerate(self._occupied):
            if not taken:
                self._occupied[spot] = True
                return ParkingTicket(spot, self.kind, self._clock())
        return None

    def fee(self, entry_time: float) -> int:
        """Charge for a stay begun at ``entry_time``: free under a minute,
        otherwise the price for each whole minute."""
        seconds = int(self._clock() - entry_time)
        if seconds < 60:
            return 0
        return seconds // 60 * self.price

    def release(self, ticket: ParkingTicket) -> int:
        """Free the ticketed spot and return the fee owed."""
        if not 0 <= ticket.spot < self.capacity or not self._occupied[ticket.spot]:
            raise ValueError(f"spot {ticket.spot} is not occupied")
        self._occupied[ticket.spot] = False
        return self.fee(ticket.entry_time)


class ParkingLot:
    """Bike spots at 10 per minute and car spots at 20 per minute."""

    def __init__(self, bike_capacity: int = 3, car_capacity: int = 3, clock: Clock = time.time) -> None:
        self._pools = {
            "bike": SpotPool(bike_capacity, "bike", 10, clock),
            "car": SpotPool(car_capacity, "car", 20, clock),
        }

    def _pool(self, kind: str) -> SpotPool:
        try:
            return self._pools[kind]
        except KeyError:
            raise ValueError(f"unknown vehicle kind {kind!r}") from None

    def park(self, kind: str) -> Optional[ParkingTicket]:
        """Book a spot for a vehicle of ``kind``; None when the lot is full."""
        return self._pool(kind).book()

    def release(self, kind: str, ticket: ParkingTicket) -> int:
        """Free a spot of ``kind`` and return the fee."""
        return self._pool(kind).release(ticket)


class Vehicle:
    """A vehicle that parks in a lot and pays when it leaves."""

    def __init__(self, kind: str, lot: ParkingLot) -> None:
        self.kind = kind
        self.lot = lot
        self.ticket: Optional[ParkingTicket] = None
        self.cost: Optional[int] = None

    def park(self) -> Optional[ParkingTicket]:
        """Ask the lot for a spot and keep the ticket, if any."""
        self.ticket = self.lot.park(self.kind)
        return self.ticket

    def unpark(self) -> int:
        """Leave the lot and return what must be paid."""
        if self.ticket is None:
            raise RuntimeError("vehicle is not parked")
        self.cost = self.lot.release(self.kind, self.ticket)
        self.ticket = None
        return self.cost