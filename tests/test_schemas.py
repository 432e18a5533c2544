import pytest

from slot_allocator.schemas import AllocationRequest, Point, Slot, parse_point


def _slot(**overrides):
    data = {"id": 1, "slotNumber": "A-01", "floor": "ground", "zone": "A", "type": "regular"}
    data.update(overrides)
    return Slot(**data)


def test_slot_accepts_camel_and_snake_case():
    camel = _slot(isOccupied=True)
    snake = Slot(id=2, slot_number="B-03", floor="first", zone="B", is_occupied=True)
    assert camel.is_occupied and camel.slot_number == "A-01"
    assert snake.is_occupied and snake.slot_number == "B-03"


def test_coordinates_parsed_into_point():
    slot = _slot(coordinates={"x": 3, "y": 4})
    assert slot.coordinates == Point(x=3, y=4)
    assert slot.coordinates.key == "3,4"


@pytest.mark.parametrize(
    "raw",
    [None, {}, {"x": 1}, {"x": "1", "y": 2}, {"x": 1.5, "y": 2}, {"x": True, "y": 0}, "1,2", 7, [1, 2, 3]],
)
def test_malformed_coordinates_become_none(raw):
    assert _slot(coordinates=raw).coordinates is None


def test_pair_coordinates_accepted():
    assert parse_point((2, 5)) == Point(x=2, y=5)
    assert parse_point([0, -1]) == Point(x=0, y=-1)


def test_slot_is_immutable():
    slot = _slot()
    with pytest.raises(Exception):
        slot.is_occupied = True


def test_allocation_request_aliases():
    req = AllocationRequest(availableSlots=[{"id": 1, "slotNumber": "A-01"}], vehicleType="bike", algorithm="astar")
    assert req.vehicle_type == "bike"
    assert req.algorithm.value == "astar"
    assert req.available_slots[0].coordinates is None
