"""
Complementary pairing: which items go well next to a primary item.

The category adjacency table is not symmetric (storage lists lighting, lighting does not list storage).
"""
import logging
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from furnirank.core.config import scoring_settings
from furnirank.core.exceptions import validate_room_size
from furnirank.schemas.furniture import (
    ColorFamily,
    FurnitureCategory,
    FurnitureColor,
    FurnitureItem,
)

logger = logging.getLogger(__name__)

COMPLEMENTARY_CATEGORIES: Dict[FurnitureCategory, Tuple[FurnitureCategory, ...]] = {
    FurnitureCategory.SEATING: (FurnitureCategory.TABLES, FurnitureCategory.LIGHTING, FurnitureCategory.STORAGE),
    FurnitureCategory.TABLES: (FurnitureCategory.SEATING, FurnitureCategory.LIGHTING, FurnitureCategory.DECOR),
    FurnitureCategory.STORAGE: (FurnitureCategory.SEATING, FurnitureCategory.DECOR, FurnitureCategory.LIGHTING),
    FurnitureCategory.BEDROOM: (FurnitureCategory.STORAGE, FurnitureCategory.LIGHTING, FurnitureCategory.DECOR),
    FurnitureCategory.LIGHTING: (FurnitureCategory.SEATING, FurnitureCategory.TABLES, FurnitureCategory.DECOR),
    FurnitureCategory.DECOR: (FurnitureCategory.LIGHTING, FurnitureCategory.STORAGE),
    FurnitureCategory.OUTDOOR: (FurnitureCategory.OUTDOOR, FurnitureCategory.LIGHTING),
    FurnitureCategory.OFFICE: (FurnitureCategory.STORAGE, FurnitureCategory.LIGHTING),
    FurnitureCategory.KITCHEN: (FurnitureCategory.SEATING, FurnitureCategory.STORAGE),
    FurnitureCategory.BATHROOM: (FurnitureCategory.STORAGE, FurnitureCategory.DECOR),
}

# Unordered pairs of color families that sit well together; same family also counts
HARMONIOUS_COLOR_PAIRS: Tuple[FrozenSet[ColorFamily], ...] = (
    frozenset({ColorFamily.NEUTRAL, ColorFamily.WARM}),
    frozenset({ColorFamily.NEUTRAL, ColorFamily.COOL}),
    frozenset({ColorFamily.WARM, ColorFamily.EARTH}),
    frozenset({ColorFamily.COOL, ColorFamily.PASTEL}),
    frozenset({ColorFamily.NEUTRAL, ColorFamily.BOLD}),
)

CATEGORY_MATCH = 0.4
SHARED_STYLE = 0.2
COLOR_HARMONY = 0.1

# (max combined footprint / room size, bonus); above the last band adds nothing
FOOTPRINT_BANDS = (
    (0.3, 0.3),
    (0.5, 0.1),
)


def complementary_categories(category: FurnitureCategory) -> Tuple[FurnitureCategory, ...]:
    return COMPLEMENTARY_CATEGORIES.get(category, ())


def has_color_harmony(colors_a: Iterable[FurnitureColor], colors_b: Iterable[FurnitureColor]) -> bool:
    """True when any family of ``colors_a`` harmonizes with any family of ``colors_b``."""
    families_a = {color.color_family for color in colors_a}
    families_b = {color.color_family for color in colors_b}

    for pair in HARMONIOUS_COLOR_PAIRS:
        first, second = tuple(pair)
        if (first in families_a and second in families_b) or (second in families_a and first in families_b):
            return True

    return bool(families_a & families_b)


def _footprint_bonus(primary: FurnitureItem, candidate: FurnitureItem, room_size: float) -> float:
    ratio = (primary.footprint + candidate.footprint) / room_size
    for max_ratio, bonus in FOOTPRINT_BANDS:
        if ratio <= max_ratio:
            return bonus
    return 0.0


def complementary_score(primary: FurnitureItem, candidate: FurnitureItem, room_size: float) -> float:
    """
    How well ``candidate`` complements ``primary`` in a room of ``room_size`` m².

    Raises:
        InvalidRoomDimensions: if room_size is not greater than 0
    """
    validate_room_size(room_size)

    score = 0.0

    if candidate.category in complementary_categories(primary.category):
        score += CATEGORY_MATCH

    score += SHARED_STYLE * len(set(primary.styles) & set(candidate.styles))
    score += _footprint_bonus(primary, candidate, room_size)

    if has_color_harmony(primary.colors, candidate.colors):
        score += COLOR_HARMONY

    return score


def complementary_items(
    item: FurnitureItem,
    items: Sequence[FurnitureItem],
    room_size: float,
    limit: Optional[int] = None,
) -> List[FurnitureItem]:
    """
    Items from complementary categories, best pairing first.

    Args:
        item: Primary item being furnished around
        items: Candidate items
        room_size: Floor area of the room in m²
        limit: Maximum number of results (default 5)
    """
    validate_room_size(room_size)
    if limit is None:
        limit = scoring_settings.complementary_items_limit

    allowed = complementary_categories(item.category)
    scored = []
    for candidate in items:
        if candidate.id == item.id or candidate.category not in allowed:
            continue
        value = complementary_score(item, candidate, room_size)
        if value > 0:
            scored.append((candidate, value))

    scored.sort(key=lambda pair: pair[1], reverse=True)

    logger.debug(f"[COMPLEMENTARY] {len(scored)} candidates for {item.category.value} item {item.id}")
    return [candidate for candidate, _ in scored[:limit]]
