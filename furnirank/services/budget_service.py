"""
Budget-value ranking.

Ranks affordable items in the requested categories by value for money:

    (1 - price / max_budget) * 0.4          cheaper is better
    + min(feature_count * 0.1, 0.3)         functional features
    + min(warranty_years * 0.05, 0.2)       warranty length
    + 0.1 if eco-friendly

Items without a current price never qualify.
"""
import logging
from typing import Iterable, List, Sequence

from furnirank.core.exceptions import validate_budget
from furnirank.schemas.furniture import FurnitureCategory, FurnitureItem

logger = logging.getLogger(__name__)

PRICE_WEIGHT = 0.4
FEATURE_BONUS = 0.1
FEATURE_BONUS_CAP = 0.3
WARRANTY_BONUS_PER_YEAR = 0.05
WARRANTY_BONUS_CAP = 0.2
ECO_FRIENDLY_BONUS = 0.1


def value_score(item: FurnitureItem, max_budget: float) -> float:
    """Value-for-money score of an item under ``max_budget``; 0.0 without a price."""
    price = item.current_price
    if price is None:
        return 0.0

    score = (1.0 - price / max_budget) * PRICE_WEIGHT
    score += min(len(item.functional_features) * FEATURE_BONUS, FEATURE_BONUS_CAP)

    if item.warranty is not None:
        score += min(item.warranty.duration_years * WARRANTY_BONUS_PER_YEAR, WARRANTY_BONUS_CAP)

    if item.sustainability is not None and item.sustainability.eco_friendly:
        score += ECO_FRIENDLY_BONUS

    return score


def budget_recommendations(
    max_budget: float,
    categories: Iterable[FurnitureCategory],
    items: Sequence[FurnitureItem],
) -> List[FurnitureItem]:
    """
    Affordable items in ``categories``, best value first.

    Args:
        max_budget: Spending cap per item
        categories: Categories to consider
        items: Candidate items

    Raises:
        InvalidBudget: if max_budget is not greater than 0
    """
    validate_budget(max_budget)
    wanted = set(categories)

    affordable = [
        item
        for item in items
        if item.category in wanted and item.current_price is not None and item.current_price <= max_budget
    ]

    scored = [(item, value_score(item, max_budget)) for item in affordable]
    scored.sort(key=lambda pair: pair[1], reverse=True)

    logger.info(f"[BUDGET] {len(affordable)} of {len(items)} items within ${max_budget:,.2f}")
    return [item for item, _ in scored]
