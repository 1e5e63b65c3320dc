"""
Trending items: recently added or updated, most popular first.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from furnirank.core.config import scoring_settings
from furnirank.schemas.furniture import FurnitureItem
from furnirank.schemas.room import TrendingTimeframe

logger = logging.getLogger(__name__)


def trending_cutoff(timeframe: TrendingTimeframe, now: Optional[datetime] = None) -> datetime:
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now - timeframe.delta


def trending(
    items: Sequence[FurnitureItem],
    timeframe: TrendingTimeframe = TrendingTimeframe.MONTH,
    *,
    now: Optional[datetime] = None,
    limit: Optional[int] = None,
) -> List[FurnitureItem]:
    """
    Items active within ``timeframe``, by popularity.

    An item is active when it was added or last updated strictly after
    ``now - timeframe``.
    """
    if limit is None:
        limit = scoring_settings.trending_limit
    cutoff = trending_cutoff(timeframe, now)

    active = [item for item in items if item.date_added > cutoff or item.last_updated > cutoff]
    active.sort(key=lambda item: item.popularity_score, reverse=True)

    logger.debug(f"[TRENDING] {len(active)} items active since {cutoff.isoformat()} ({timeframe.value})")
    return active[:limit]
