import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from .config import settings
from .schemas import AllocationResult, Slot, SlotType, VehicleType

logger = logging.getLogger(__name__)

EV_SCORE = 100.0
_POSITION_RE = re.compile(r"(\d+)\s*$")


@dataclass(frozen=True)
class ScoreWeights:
    base: float = 50.0
    type_match: float = 30.0
    ground_floor: float = 20.0
    zones: Dict[str, float] = field(default_factory=lambda: {"A": 15.0, "B": 10.0, "C": 5.0})
    position_max: float = 20.0
    ground_floors: Tuple[str, ...] = ("ground", "g", "0")

    @classmethod
    def from_settings(cls, s=settings) -> "ScoreWeights":
        return cls(
            base=s.SCORE_BASE,
            type_match=s.SCORE_TYPE_MATCH,
            ground_floor=s.SCORE_GROUND_FLOOR,
            zones={"A": s.SCORE_ZONE_A, "B": s.SCORE_ZONE_B, "C": s.SCORE_ZONE_C},
            position_max=s.SCORE_POSITION_MAX,
            ground_floors=tuple(s.GROUND_FLOORS),
        )


def slot_position(slot_number: str) -> Optional[int]:
    """Trailing integer of a slot number: "A-07" -> 7."""
    match = _POSITION_RE.search(slot_number or "")
    return int(match.group(1)) if match else None


def compute_slot_score(slot: Slot, vehicle_type: str, weights: ScoreWeights) -> float:
    """Weighted preference score for one slot.

    - Free slots earn the base credit.
    - EV vehicles prefer charging slots, everything else prefers regular ones.
    - Ground floor, then zones A > B > C, then low position numbers.
    """
    score = 0.0 if slot.is_occupied else weights.base

    is_ev = vehicle_type == VehicleType.EV.value
    if (is_ev and slot.is_ev_charging) or (not is_ev and slot.type == SlotType.REGULAR.value):
        score += weights.type_match

    if slot.floor.strip().lower() in weights.ground_floors:
        score += weights.ground_floor

    score += weights.zones.get(slot.zone.strip().upper(), 0.0)

    position = slot_position(slot.slot_number)
    if position is not None:
        score += max(0.0, weights.position_max - position)
    return score


def scored_allocation(
    available_slots: Sequence[Slot],
    vehicle_type: str,
    weights: Optional[ScoreWeights] = None,
) -> Optional[AllocationResult]:
    if not available_slots:
        return None
    weights = weights or ScoreWeights.from_settings()
    scores = np.array([compute_slot_score(s, vehicle_type, weights) for s in available_slots], dtype=float)
    # argmax returns the first maximum, so input order breaks ties
    best_idx = int(np.argmax(scores))
    return AllocationResult(slot=available_slots[best_idx], algorithm="SCORED", score=float(scores[best_idx]))


def ev_allocation(available_slots: Sequence[Slot]) -> Optional[AllocationResult]:
    """Front-most free charging slot (lowest y, first one on ties)."""
    front: Optional[Slot] = None
    for slot in available_slots:
        if not slot.is_ev_charging or slot.is_occupied or slot.coordinates is None:
            continue
        if front is None or slot.coordinates.y < front.coordinates.y:
            front = slot
    if front is None:
        logger.debug("ev: no free charging slot with coordinates")
        return None
    return AllocationResult(slot=front, algorithm="EV", score=EV_SCORE)
