"""
Error types raised by the recommendation engine and the catalog store.

Scoring never raises for incomplete item data; these errors describe caller
input that has to be rejected before any ranking happens.
"""
import math
from typing import Any, Optional


class FurnirankError(Exception):
    """Base class for all furnirank errors"""


class InvalidRoomDimensions(FurnirankError):
    """Room area, room size or a room dimension is not strictly positive"""

    def __init__(self, message: str, area: Optional[float] = None, dimensions: Any = None):
        super().__init__(message)
        self.area = area
        self.dimensions = dimensions


class InvalidBudget(FurnirankError):
    """Spending cap is not strictly positive"""

    def __init__(self, max_budget: Any):
        super().__init__(f"max_budget must be greater than 0, got {max_budget!r}")
        self.max_budget = max_budget


class CatalogError(FurnirankError):
    """Base class for catalog store errors"""


class ItemNotFound(CatalogError):
    def __init__(self, item_id: str):
        super().__init__(f"Furniture item not found: {item_id}")
        self.item_id = item_id


class InvalidCustomItem(CatalogError):
    def __init__(self, item_id: str, reason: str):
        super().__init__(f"Invalid custom furniture item {item_id}: {reason}")
        self.item_id = item_id
        self.reason = reason


def _is_positive(value: Any) -> bool:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number) and number > 0


def validate_room_dimensions(dimensions) -> None:
    """Raise InvalidRoomDimensions unless width, depth and height are all > 0."""
    if dimensions is None:
        raise InvalidRoomDimensions("Room dimensions are required", dimensions=dimensions)

    for axis in ("width", "depth", "height"):
        value = getattr(dimensions, axis, None)
        if not _is_positive(value):
            raise InvalidRoomDimensions(
                f"Room {axis} must be greater than 0, got {value!r}",
                dimensions=dimensions,
            )


def validate_room_size(room_size: Any) -> None:
    """Raise InvalidRoomDimensions unless a floor area is > 0."""
    if not _is_positive(room_size):
        raise InvalidRoomDimensions(f"Room area must be greater than 0, got {room_size!r}", area=room_size)


def validate_room(room) -> None:
    """Check a RoomContext before any size-dependent scoring."""
    validate_room_size(room.area)
    validate_room_dimensions(room.dimensions)


def validate_budget(max_budget: Any) -> None:
    if not _is_positive(max_budget):
        raise InvalidBudget(max_budget)
