import logging
from collections import deque
from typing import List, Optional, Sequence, Set

from .grid import build_grid, find_entrance, get_neighbors
from .schemas import AllocationResult, Slot

logger = logging.getLogger(__name__)

FIXED_SCORE = 100.0


def dfs_allocation(available_slots: Sequence[Slot]) -> Optional[AllocationResult]:
    """Push bikes towards the back of the lot.

    Walks depth-first from the entrance, always trying the neighbor with the
    highest y first, and returns the last free slot the walk enters. The
    explicit stack visits slots in exactly the order a recursive walk would.
    """
    if not available_slots:
        return None
    entrance = find_entrance(available_slots)
    if entrance is None:
        logger.debug("dfs: no slot carries coordinates")
        return None

    grid = build_grid(available_slots)
    visited: Set[str] = set()
    stack: List[Slot] = [entrance]
    deepest: Optional[Slot] = None
    while stack:
        slot = stack.pop()
        key = slot.coordinates.key
        if key in visited:
            continue
        visited.add(key)
        if not slot.is_occupied:
            deepest = slot
        neighbors = sorted(get_neighbors(slot, grid), key=lambda n: n.coordinates.y, reverse=True)
        # reversed so the first neighbor is popped first
        stack.extend(n for n in reversed(neighbors) if n.coordinates.key not in visited)

    if deepest is None:
        logger.debug("dfs: entrance %s is occupied and boxed in", entrance.slot_number)
        return None
    return AllocationResult(slot=deepest, algorithm="DFS", score=FIXED_SCORE)


def bfs_allocation(available_slots: Sequence[Slot]) -> Optional[AllocationResult]:
    """Nearest free slot from the entrance outward."""
    if not available_slots:
        return None
    entrance = find_entrance(available_slots)
    if entrance is None:
        logger.debug("bfs: no slot carries coordinates")
        return None

    grid = build_grid(available_slots)
    queue = deque([entrance])
    visited: Set[str] = set()
    while queue:
        slot = queue.popleft()
        key = slot.coordinates.key
        if key in visited:
            continue
        visited.add(key)
        if not slot.is_occupied:
            return AllocationResult(slot=slot, algorithm="BFS", score=FIXED_SCORE)
        queue.extend(get_neighbors(slot, grid))

    logger.debug("bfs: queue exhausted without a free slot")
    return None
