"""
User preference model.

Reduces the user's favorites and recently viewed items into a normalized
UserPreferenceProfile. Every favorite contributes ``favorite_weight`` (2.0)
and every recent item ``recent_weight`` (1.0) to its category, price range,
each of its styles and materials, and its brand. Accumulated weights are then
divided by the total weight mass:

    total = favorite_weight * len(favorites) + recent_weight * len(recent)

With no history the profile is empty and every lookup returns 0.0.
"""
import logging
from collections import defaultdict
from typing import Dict, Iterable, Optional, Sequence

from furnirank.core.config import scoring_settings
from furnirank.schemas.furniture import FurnitureItem
from furnirank.schemas.preferences import UserPreferenceProfile

logger = logging.getLogger(__name__)


def _accumulate(accumulators: Dict[str, defaultdict], items: Iterable[FurnitureItem], weight: float) -> None:
    for item in items:
        accumulators["categories"][item.category] += weight
        accumulators["price_ranges"][item.price_range] += weight

        for style in item.styles:
            accumulators["styles"][style] += weight

        for material in item.materials:
            accumulators["materials"][material] += weight

        if item.brand is not None:
            accumulators["brands"][item.brand] += weight


def compute_profile(
    favorites: Sequence[FurnitureItem],
    recent: Sequence[FurnitureItem],
    *,
    favorite_weight: Optional[float] = None,
    recent_weight: Optional[float] = None,
) -> UserPreferenceProfile:
    """
    Build a preference profile from the user's history.

    Args:
        favorites: Items the user marked as favorite
        recent: Items the user viewed recently
        favorite_weight: Weight per favorite (defaults to scoring settings)
        recent_weight: Weight per recent item (defaults to scoring settings)

    Returns:
        UserPreferenceProfile with every weight divided by the total weight mass
    """
    if favorite_weight is None:
        favorite_weight = scoring_settings.favorite_weight
    if recent_weight is None:
        recent_weight = scoring_settings.recent_weight

    total_weight = favorite_weight * len(favorites) + recent_weight * len(recent)
    if total_weight <= 0:
        logger.debug("[PREFERENCES] No history, returning empty profile")
        return UserPreferenceProfile()

    accumulators = {
        "categories": defaultdict(float),
        "styles": defaultdict(float),
        "materials": defaultdict(float),
        "price_ranges": defaultdict(float),
        "brands": defaultdict(float),
    }
    _accumulate(accumulators, favorites, favorite_weight)
    _accumulate(accumulators, recent, recent_weight)

    normalized = {
        name: {key: value / total_weight for key, value in weights.items()}
        for name, weights in accumulators.items()
    }

    logger.debug(
        f"[PREFERENCES] Profile from {len(favorites)} favorites and {len(recent)} recent items "
        f"(weight mass {total_weight:.1f})"
    )
    return UserPreferenceProfile(**normalized)
