import pytest

from slot_allocator.scoring import (
    ScoreWeights,
    compute_slot_score,
    ev_allocation,
    scored_allocation,
    slot_position,
)
from tests.factories import coords, make_slot

WEIGHTS = ScoreWeights()


# --- EV ---

def test_ev_picks_front_most_charging_slot():
    slots = [
        make_slot(0, 0, slot_type="regular"),
        make_slot(1, 2, slot_type="ev_charging"),
        make_slot(2, 1, slot_type="ev_charging"),
    ]
    result = ev_allocation(slots)
    assert coords(result.slot) == (2, 1)
    assert result.algorithm == "EV"
    assert result.score == 100


def test_ev_ties_keep_input_order():
    slots = [make_slot(4, 1, slot_type="ev_charging", slot_id="a"), make_slot(1, 1, slot_type="ev_charging", slot_id="b")]
    assert ev_allocation(slots).slot.id == "a"


def test_ev_none_without_charging_slots():
    assert ev_allocation([make_slot(0, 0), make_slot(1, 0)]) is None
    assert ev_allocation([make_slot(None, None, slot_type="ev_charging")]) is None
    assert ev_allocation([make_slot(0, 0, slot_type="ev_charging", occupied=True)]) is None
    assert ev_allocation([]) is None


# --- scored heuristic ---

@pytest.mark.parametrize("number,expected", [("A-07", 7), ("C-10", 10), ("B12", 12), ("lobby", None), ("", None)])
def test_slot_position(number, expected):
    assert slot_position(number) == expected


def test_compute_slot_score_adds_every_factor():
    slot = make_slot(0, 0, zone="A", number="A-01", floor="ground")
    assert compute_slot_score(slot, "car", WEIGHTS) == 50 + 30 + 20 + 15 + 19


def test_compute_slot_score_type_match():
    ev_slot = make_slot(0, 0, zone="Z", number="Z-20", floor="first", slot_type="ev_charging")
    regular = make_slot(1, 0, zone="Z", number="Z-20", floor="first")
    assert compute_slot_score(ev_slot, "ev", WEIGHTS) == 80
    assert compute_slot_score(ev_slot, "car", WEIGHTS) == 50
    assert compute_slot_score(regular, "ev", WEIGHTS) == 50
    assert compute_slot_score(regular, "truck", WEIGHTS) == 80


def test_zone_preference_and_position_floor_at_zero():
    def score(zone, number):
        return compute_slot_score(make_slot(0, 0, zone=zone, number=number, floor="first"), "car", WEIGHTS)

    assert score("A", "A-30") > score("B", "B-30") > score("C", "C-30") > score("D", "D-30")
    assert score("D", "D-30") == score("D", "D-99") == 80


def test_occupied_slot_loses_base_credit():
    slot = make_slot(0, 0, zone="D", number="D-40", floor="first", occupied=True)
    assert compute_slot_score(slot, "car", WEIGHTS) == 30


def test_scored_allocation_picks_max():
    slots = [
        make_slot(0, 0, zone="A", number="A-05", slot_id="a5"),
        make_slot(1, 0, zone="A", number="A-01", slot_id="a1"),
        make_slot(2, 0, zone="A", number="A-01", floor="first", slot_id="a1-first"),
    ]
    result = scored_allocation(slots, "car", WEIGHTS)
    assert result.slot.id == "a1"
    assert result.algorithm == "SCORED"
    assert result.score == 134


def test_scored_allocation_ties_keep_first():
    slots = [make_slot(0, 0, zone="B", number="B-03", slot_id="x"), make_slot(5, 5, zone="B", number="B-03", slot_id="y")]
    assert scored_allocation(slots, "suv", WEIGHTS).slot.id == "x"


def test_scored_allocation_ignores_coordinates():
    slots = [make_slot(None, None, number="C-09", zone="C")]
    assert scored_allocation(slots, "bike", WEIGHTS).slot.slot_number == "C-09"


def test_scored_allocation_empty():
    assert scored_allocation([], "car", WEIGHTS) is None


def test_custom_weights_change_the_winner():
    slots = [
        make_slot(0, 0, zone="C", number="C-01", floor="ground", slot_id="ground"),
        make_slot(1, 0, zone="A", number="A-01", floor="first", slot_id="zone-a"),
    ]
    assert scored_allocation(slots, "car", WEIGHTS).slot.id == "ground"
    zone_heavy = ScoreWeights(zones={"A": 100.0})
    assert scored_allocation(slots, "car", zone_heavy).slot.id == "zone-a"
