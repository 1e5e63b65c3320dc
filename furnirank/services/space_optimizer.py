"""
Space-efficiency ranking for a room's available volume.
"""
import logging
from typing import List, Optional, Sequence

from furnirank.core.exceptions import validate_room_dimensions
from furnirank.schemas.furniture import FunctionalFeature, FurnitureCategory, FurnitureItem
from furnirank.schemas.room import RoomDimensions

logger = logging.getLogger(__name__)

# Multi-functional bonuses
FEATURE_BONUSES = {
    FunctionalFeature.STORAGE: 0.2,
    FunctionalFeature.CONVERTIBLE: 0.3,
    FunctionalFeature.EXTENDABLE: 0.1,
}

# Tall items make use of vertical space
VERTICAL_RATIO = 0.8
VERTICAL_BONUS = 0.1


def space_efficiency_score(item: FurnitureItem, room_dimensions: RoomDimensions) -> float:
    """
    Score an item that fits the room by how little volume it takes up.

    score = 1 - item volume / room volume, plus feature and vertical-use
    bonuses, floored at 0.
    """
    utilization_ratio = item.volume / room_dimensions.volume
    score = 1.0 - utilization_ratio

    features = set(item.functional_features)
    for feature, bonus in FEATURE_BONUSES.items():
        if feature in features:
            score += bonus

    if item.dimensions.height / room_dimensions.height > VERTICAL_RATIO:
        score += VERTICAL_BONUS

    return max(0.0, score)


def space_optimized(
    room_dimensions: RoomDimensions,
    category: Optional[FurnitureCategory],
    items: Sequence[FurnitureItem],
) -> List[FurnitureItem]:
    """
    Every item that fits the room (optionally in one category), most space-efficient first.

    Raises:
        InvalidRoomDimensions: if any room dimension is not greater than 0
    """
    validate_room_dimensions(room_dimensions)

    fitting = [
        item
        for item in items
        if (category is None or item.category == category)
        and item.fits_in_space(room_dimensions.width, room_dimensions.depth, room_dimensions.height)
    ]

    scored = [(item, space_efficiency_score(item, room_dimensions)) for item in fitting]
    scored.sort(key=lambda pair: pair[1], reverse=True)

    logger.debug(
        f"[SPACE] {len(fitting)} of {len(items)} items fit "
        f"{room_dimensions.width:.2f}x{room_dimensions.depth:.2f}x{room_dimensions.height:.2f}m"
    )
    return [item for item, _ in scored]
