from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VehicleType(str, Enum):
    CAR = "car"
    SUV = "suv"
    TRUCK = "truck"
    BIKE = "bike"
    EV = "ev"


class Algorithm(str, Enum):
    BFS = "bfs"
    DFS = "dfs"
    ASTAR = "astar"
    EV = "ev"
    SCORED = "scored"


class SlotType(str, Enum):
    REGULAR = "regular"
    EV_CHARGING = "ev_charging"


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    @property
    def key(self) -> str:
        return f"{self.x},{self.y}"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_point(raw: Any) -> Optional[Point]:
    """Coerce a loosely shaped coordinate value into a Point.

    Accepts a Point, a mapping with integer ``x``/``y`` or an ``(x, y)`` pair.
    Anything else (missing keys, floats, strings, booleans) is treated as no
    coordinates at all.
    """
    if isinstance(raw, Point):
        return raw
    if isinstance(raw, dict):
        x, y = raw.get("x"), raw.get("y")
    elif isinstance(raw, (list, tuple)) and len(raw) == 2:
        x, y = raw
    else:
        return None
    if _is_int(x) and _is_int(y):
        return Point(x=x, y=y)
    return None


class Slot(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Union[int, str]
    slot_number: str = Field(..., alias="slotNumber", description="Zone letter + 2-digit position, e.g. A-07")
    floor: str = ""
    zone: str = ""
    type: str = SlotType.REGULAR.value
    is_occupied: bool = Field(False, alias="isOccupied")
    coordinates: Optional[Point] = None

    @field_validator("coordinates", mode="before")
    @classmethod
    def _coerce_coordinates(cls, value: Any) -> Optional[Point]:
        return parse_point(value)

    @property
    def is_ev_charging(self) -> bool:
        return self.type == SlotType.EV_CHARGING.value


class AllocationResult(BaseModel):
    slot: Slot
    algorithm: str
    score: float


class AllocationRequest(BaseModel):
    available_slots: List[Slot] = Field(default_factory=list, alias="availableSlots")
    vehicle_type: str = Field("car", alias="vehicleType")
    algorithm: Optional[Algorithm] = None

    model_config = ConfigDict(populate_by_name=True)


class AllocationResponse(BaseModel):
    slot: Optional[Slot]
    algorithm: Optional[str]
    score: Optional[float]
