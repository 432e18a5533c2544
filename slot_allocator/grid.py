import logging
from typing import Dict, List, Optional, Sequence

from .schemas import Slot

logger = logging.getLogger(__name__)

# up, right, down, left; DFS tie-breaking depends on this order
DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))

GridIndex = Dict[str, Slot]


def build_grid(slots: Sequence[Slot]) -> GridIndex:
    """Index slots by their "x,y" key; slots without coordinates are left out."""
    grid: GridIndex = {}
    for slot in slots:
        if slot.coordinates is not None:
            grid[slot.coordinates.key] = slot
    return grid


def get_neighbors(slot: Slot, grid: GridIndex) -> List[Slot]:
    coords = slot.coordinates
    if coords is None:
        return []
    neighbors: List[Slot] = []
    for dx, dy in DIRECTIONS:
        neighbor = grid.get(f"{coords.x + dx},{coords.y + dy}")
        if neighbor is not None and not neighbor.is_occupied:
            neighbors.append(neighbor)
    return neighbors


def find_entrance(slots: Sequence[Slot]) -> Optional[Slot]:
    # first slot with the smallest y wins ties
    entrance: Optional[Slot] = None
    for slot in slots:
        if slot.coordinates is None:
            continue
        if entrance is None or slot.coordinates.y < entrance.coordinates.y:
            entrance = slot
    if entrance is not None:
        logger.debug("entrance resolved to %s at %s", entrance.slot_number, entrance.coordinates.key)
    return entrance


def manhattan(a: Slot, b: Slot) -> float:
    if a.coordinates is None or b.coordinates is None:
        return float("inf")
    return abs(a.coordinates.x - b.coordinates.x) + abs(a.coordinates.y - b.coordinates.y)
