"""Route an allocation request to one strategy.

Callers own the read-candidates -> allocate -> mark-occupied sequence: the
functions here never touch occupancy, so two concurrent bookings fed the same
snapshot will pick the same slot unless the caller runs selection and the
occupancy update as one critical section (a transaction or a per-lot lock).
"""
import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Union

from .astar import astar_allocation
from .schemas import Algorithm, AllocationResult, Slot, VehicleType
from .scoring import ScoreWeights, ev_allocation, scored_allocation
from .traversal import bfs_allocation, dfs_allocation

logger = logging.getLogger(__name__)

VEHICLE_STRATEGIES: Dict[str, Algorithm] = {
    VehicleType.BIKE.value: Algorithm.DFS,
    VehicleType.CAR.value: Algorithm.BFS,
    VehicleType.SUV.value: Algorithm.BFS,
    VehicleType.TRUCK.value: Algorithm.ASTAR,
    VehicleType.EV.value: Algorithm.EV,
}
DEFAULT_STRATEGY = Algorithm.BFS

# strategies that only see charging slots when an EV is parking
_EV_NARROWED = {Algorithm.BFS, Algorithm.DFS, Algorithm.ASTAR, Algorithm.EV}

_GRAPH_STRATEGIES: Dict[Algorithm, Callable[[Sequence[Slot]], Optional[AllocationResult]]] = {
    Algorithm.BFS: bfs_allocation,
    Algorithm.DFS: dfs_allocation,
    Algorithm.ASTAR: astar_allocation,
    Algorithm.EV: ev_allocation,
}


def _normalize(value: Union[str, Enum, None]) -> str:
    if value is None:
        return ""
    return str(getattr(value, "value", value)).strip().lower()


def resolve_strategy(vehicle_type: str, algorithm_override: Union[str, Algorithm, None] = None) -> Algorithm:
    override = _normalize(algorithm_override)
    if override:
        try:
            return Algorithm(override)
        except ValueError:
            logger.warning("ignoring unknown algorithm override %r", algorithm_override)
    return VEHICLE_STRATEGIES.get(_normalize(vehicle_type), DEFAULT_STRATEGY)


def allocate(
    available_slots: Sequence[Slot],
    vehicle_type: Union[str, VehicleType],
    algorithm_override: Union[str, Algorithm, None] = None,
    weights: Optional[ScoreWeights] = None,
) -> Optional[AllocationResult]:
    """Select one slot for a vehicle, or None when nothing fits."""
    vehicle = _normalize(vehicle_type)
    strategy = resolve_strategy(vehicle, algorithm_override)
    logger.debug("allocating for %r with %s over %d candidates", vehicle, strategy.value, len(available_slots))

    if strategy is Algorithm.SCORED:
        return scored_allocation(available_slots, vehicle, weights)

    candidates: List[Slot] = list(available_slots)
    if vehicle == VehicleType.EV.value and strategy in _EV_NARROWED:
        candidates = [s for s in candidates if s.is_ev_charging]

    result = _GRAPH_STRATEGIES[strategy](candidates)
    if result is None:
        logger.debug("%s found no slot for %r", strategy.value, vehicle)
    return result
