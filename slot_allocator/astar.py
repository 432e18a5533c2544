import heapq
import itertools
import logging
from typing import Dict, List, Optional, Sequence, Set, Tuple

from .grid import GridIndex, build_grid, find_entrance, get_neighbors, manhattan
from .schemas import AllocationResult, Slot

logger = logging.getLogger(__name__)

BASE_SCORE = 100.0


def shortest_path_cost(start: Slot, goal: Slot, grid: GridIndex) -> Optional[int]:
    """A* over free slots with unit steps and a Manhattan heuristic.

    Returns the number of steps from ``start`` to ``goal`` or None when the
    goal cannot be reached.
    """
    if start.coordinates is None or goal.coordinates is None:
        return None
    goal_key = goal.coordinates.key
    counter = itertools.count()
    start_key = start.coordinates.key
    g_score: Dict[str, int] = {start_key: 0}
    open_heap: List[Tuple[float, int, Slot]] = [(manhattan(start, goal), next(counter), start)]
    closed: Set[str] = set()

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        key = current.coordinates.key
        if key in closed:
            continue
        closed.add(key)
        if key == goal_key:
            return g_score[key]
        neighbors = get_neighbors(current, grid)
        # the entrance is a gate: it can be reached even when its own bay is taken
        if goal.is_occupied and manhattan(current, goal) == 1:
            neighbors.append(goal)
        for neighbor in neighbors:
            n_key = neighbor.coordinates.key
            tentative = g_score[key] + 1
            if tentative < g_score.get(n_key, float("inf")):
                g_score[n_key] = tentative
                heapq.heappush(open_heap, (tentative + manhattan(neighbor, goal), next(counter), neighbor))
    return None


def astar_allocation(available_slots: Sequence[Slot]) -> Optional[AllocationResult]:
    """Pick the free slot with the shortest obstacle-free route to the entrance.

    Every candidate gets its own A* search, so the work is quadratic in the
    number of slots in the worst case. Equal costs keep the earlier candidate.
    """
    if not available_slots:
        return None
    entrance = find_entrance(available_slots)
    if entrance is None:
        logger.debug("astar: no slot carries coordinates")
        return None

    grid = build_grid(available_slots)
    best_slot: Optional[Slot] = None
    best_cost: Optional[int] = None
    for slot in available_slots:
        if slot.coordinates is None or slot.is_occupied:
            continue
        cost = shortest_path_cost(slot, entrance, grid)
        if cost is None:
            continue
        if best_cost is None or cost < best_cost:
            best_slot, best_cost = slot, cost

    if best_slot is None:
        logger.debug("astar: no candidate reaches entrance %s", entrance.slot_number)
        return None
    return AllocationResult(slot=best_slot, algorithm="A*", score=BASE_SCORE - best_cost)
