import random
from typing import Iterable, List, Optional, Sequence

from .schemas import Point, Slot, SlotType


def _is_ev_position(zone: str, position: int) -> bool:
    return (zone == "A" and position <= 2) or (zone == "B" and position == 5) or (zone == "C" and position == 6)


def generate_sample_slots(
    floors: Sequence[str] = ("ground", "first"),
    zones: Sequence[str] = ("A", "B", "C"),
    per_zone: int = 10,
    occupancy: float = 0.3,
    seed: Optional[int] = None,
) -> List[Slot]:
    """Build a demo lot: one row per zone, positions along x, zones along y.

    Every floor reuses the same coordinates, so graph strategies should be fed
    one floor at a time (see ``slots_on_floor``).
    """
    rng = random.Random(seed)
    slots: List[Slot] = []
    next_id = 1
    for floor in floors:
        for row, zone in enumerate(zones):
            for position in range(1, per_zone + 1):
                slot_type = SlotType.EV_CHARGING if _is_ev_position(zone, position) else SlotType.REGULAR
                slots.append(
                    Slot(
                        id=next_id,
                        slot_number=f"{zone}-{position:02d}",
                        floor=floor,
                        zone=zone,
                        type=slot_type.value,
                        is_occupied=rng.random() < occupancy,
                        coordinates=Point(x=position, y=row),
                    )
                )
                next_id += 1
    return slots


def slots_on_floor(slots: Iterable[Slot], floor: str) -> List[Slot]:
    return [s for s in slots if s.floor == floor]


def free_slots(slots: Iterable[Slot]) -> List[Slot]:
    return [s for s in slots if not s.is_occupied]
