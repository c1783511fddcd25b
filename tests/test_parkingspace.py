import pytest

from dsakit.parkingspace import (
    Floor,
    ParkingGarage,
    Ticket,
    Vehicle,
    decode_slot,
    format_ticket,
)


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


def _garage(clock=None):
    return ParkingGarage(2, 20, 10, 5, 5, clock or FakeClock())


def test_first_bike_gets_slot_1101():
    ticket = _garage().allocate(Vehicle("bike", 123))
    assert ticket.slot == 1101


def test_ticket_id_is_vehicle_number_plus_slot():
    ticket = _garage().allocate(Vehicle("car", 345))
    assert ticket.ticket_id == 345 + ticket.slot


def test_decode_round_trips_allocated_slots():
    garage = _garage()
    for kind in ("bike", "car", "heavy"):
        slot = garage.find_availability(kind)
        floor_index, base, spot_index = decode_slot(slot)
        assert (floor_index + 1) * 1000 + base * 100 + spot_index + 1 == slot


def test_full_floor_moves_to_next_floor():
    garage = _garage()
    slots = [garage.find_availability("car") for _ in range(6)]
    assert decode_slot(slots[4])[0] == 0
    assert decode_slot(slots[5]) == (1, 2, 0)


def test_garage_full_returns_none():
    garage = ParkingGarage(1, 1, 1, 0, 0, FakeClock())
    garage.allocate(Vehicle("bike", 1))
    assert garage.allocate(Vehicle("bike", 2)) is None
    assert garage.allocate(Vehicle("car", 3)) is None


def test_unknown_kind_has_no_spot():
    assert _garage().find_availability("boat") is None


def test_deallocate_charges_rate_per_second_and_frees_spot():
    clock = FakeClock()
    garage = _garage(clock)
    ticket = garage.allocate(Vehicle("bike", 123))
    clock.now += 5
    duration, amount = garage.deallocate(ticket)
    assert duration == 5
    assert amount == 10 * duration
    assert garage.allocate(Vehicle("bike", 7)).slot == ticket.slot


def test_deallocate_bad_slot_raises():
    with pytest.raises(ValueError):
        _garage().deallocate(Ticket("bike", 1, 1, 9901, 0.0))


def test_floor_builds_numbered_spots():
    floor = Floor(1, 20, 3, 2, 1)
    assert [spot.number for spot in floor.spots["bike"]] == [1, 2, 3]
    assert all(spot.available for spot in floor.spots["car"])


def test_format_ticket_lines():
    ticket = Ticket("car", 345, 1546, 1201, 0.0)
    lines = format_ticket(ticket).splitlines()
    assert "Allocated slot: 1201" in lines
    assert "vehicle type: car" in lines


def test_format_without_ticket():
    assert format_ticket(None) == "No spot allocated no availablility check later"