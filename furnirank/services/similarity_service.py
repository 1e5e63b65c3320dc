"""
Pairwise item similarity.

Similarity is an additive, symmetric score:
    +0.3   same category
    +0.2   same subcategory
    +0.1   per shared style
    +0.1   per shared material
    +0.1   same price range
    +0.2 * (1 - |vol(a) - vol(b)| / max(vol(a), vol(b)))
"""
import logging
from typing import List, Optional, Sequence

from furnirank.core.config import scoring_settings
from furnirank.schemas.furniture import FurnitureItem

logger = logging.getLogger(__name__)

CATEGORY_MATCH = 0.3
SUBCATEGORY_MATCH = 0.2
SHARED_STYLE = 0.1
SHARED_MATERIAL = 0.1
PRICE_RANGE_MATCH = 0.1
DIMENSION_WEIGHT = 0.2


def dimension_similarity(a: FurnitureItem, b: FurnitureItem) -> float:
    """1.0 for equal volumes, falling towards 0.0 as they diverge."""
    larger = max(a.volume, b.volume)
    if larger <= 0:
        # Two zero-volume items are the same size
        return 1.0
    return 1.0 - abs(a.volume - b.volume) / larger


def similarity(a: FurnitureItem, b: FurnitureItem) -> float:
    """Symmetric similarity between two items."""
    score = 0.0

    if a.category == b.category:
        score += CATEGORY_MATCH

    if a.subcategory == b.subcategory:
        score += SUBCATEGORY_MATCH

    score += SHARED_STYLE * len(set(a.styles) & set(b.styles))
    score += SHARED_MATERIAL * len(set(a.materials) & set(b.materials))

    if a.price_range == b.price_range:
        score += PRICE_RANGE_MATCH

    score += DIMENSION_WEIGHT * dimension_similarity(a, b)

    return score


def similar_items(
    target: FurnitureItem,
    items: Sequence[FurnitureItem],
    threshold: Optional[float] = None,
    limit: Optional[int] = None,
) -> List[FurnitureItem]:
    """
    Items most similar to ``target``.

    Args:
        target: Item to compare against; never returned itself
        items: Candidate items
        threshold: Minimum similarity, exclusive (default 0.3)
        limit: Maximum number of results (default 5)

    Returns:
        Candidates with similarity above the threshold, most similar first
    """
    if threshold is None:
        threshold = scoring_settings.similarity_threshold
    if limit is None:
        limit = scoring_settings.similar_items_limit

    scored = []
    for item in items:
        if item.id == target.id:
            continue
        value = similarity(target, item)
        if value > threshold:
            scored.append((item, value))

    scored.sort(key=lambda pair: pair[1], reverse=True)

    logger.debug(f"[SIMILAR] {len(scored)} of {len(items)} items above {threshold} for {target.id}")
    return [item for item, _ in scored[:limit]]
