"""
Room-aware furniture recommendation engine.

Scoring Formula:
    FINAL_SCORE =
        0.25 * room_size       +
        0.20 * style           +
        0.15 * category        +
        0.15 * price_range     +
        0.10 * user_history    +
        0.10 * popularity      +
        0.05 * availability

Room size scoring (item footprint / room area):
    - under 5% of the floor gets 0.7 (too small to anchor the room)
    - 5% to 15% gets 1.0
    - 15% to 30% gets 0.8
    - over 30% gets 0.3

Style uses the item's compatibility with the room style, or a neutral 0.5
when the room has no target style. Category, price range and user history
come from the UserPreferenceProfile; popularity is used as is; availability
is 1.0 in stock and 0.5 otherwise.
"""
import logging
from concurrent.futures import Executor
from dataclasses import dataclass
from datetime import datetime
from itertools import repeat
from typing import Dict, Iterable, List, Optional, Sequence

from furnirank.core.config import ScoringSettings, scoring_settings
from furnirank.core.exceptions import validate_room
from furnirank.schemas.furniture import FurnitureCategory, FurnitureItem
from furnirank.schemas.preferences import UserPreferenceProfile
from furnirank.schemas.room import RoomContext, RoomDimensions, TrendingTimeframe
from furnirank.services import (
    budget_service,
    complementary_service,
    similarity_service,
    space_optimizer,
    trending_service,
)
from furnirank.services.preference_model import compute_profile

logger = logging.getLogger(__name__)


@dataclass
class RecommendationScore:
    """An item with its final score and per-factor breakdown."""

    item: FurnitureItem
    final_score: float
    breakdown: Dict[str, float]


class FurnitureRecommendationEngine:
    """Multi-factor ranking of catalog items for a room and a user."""

    # Scoring weights - must sum to 1.0
    WEIGHTS = {
        "room_size": 0.25,
        "style": 0.20,
        "category": 0.15,
        "price_range": 0.15,
        "user_history": 0.10,
        "popularity": 0.10,
        "availability": 0.05,
    }

    # (upper bound of footprint ratio, score), checked in order
    ROOM_SIZE_BANDS = (
        (0.05, 0.7),  # exclusive: below 5% is too small
        (0.15, 1.0),
        (0.30, 0.8),
    )
    ROOM_SIZE_OVERSIZED = 0.3

    NEUTRAL_STYLE = 0.5
    IN_STOCK = 1.0
    OUT_OF_STOCK = 0.5
    HISTORY_CAP = 1.0

    def __init__(self, settings: Optional[ScoringSettings] = None):
        self.settings = settings or scoring_settings
        logger.info("Furniture recommendation engine initialized")

    # =========================================================================
    # SCORING
    # =========================================================================

    def score(self, item: FurnitureItem, room: RoomContext, profile: UserPreferenceProfile) -> float:
        """
        Final recommendation score of one item.

        Raises:
            InvalidRoomDimensions: if the room area or a dimension is not > 0
        """
        validate_room(room)
        return self._score(item, room, profile).final_score

    def score_breakdown(
        self, item: FurnitureItem, room: RoomContext, profile: UserPreferenceProfile
    ) -> RecommendationScore:
        """Final score plus the raw (unweighted) value of each factor."""
        validate_room(room)
        return self._score(item, room, profile)

    def _score(self, item: FurnitureItem, room: RoomContext, profile: UserPreferenceProfile) -> RecommendationScore:
        scores = {
            "room_size": self._compute_room_size_score(item, room),
            "style": self._compute_style_score(item, room),
            "category": profile.category_weight(item.category),
            "price_range": profile.price_range_weight(item.price_range),
            "user_history": self._compute_history_score(item, profile),
            "popularity": item.popularity_score,
            "availability": self.IN_STOCK if item.in_stock else self.OUT_OF_STOCK,
        }

        final_score = sum(self.WEIGHTS[key] * scores[key] for key in self.WEIGHTS)

        return RecommendationScore(item=item, final_score=final_score, breakdown=scores)

    def _compute_room_size_score(self, item: FurnitureItem, room: RoomContext) -> float:
        """
        Score how the item's footprint fits the room's floor area.

        The lowest band is exclusive (ratio < 0.05), the others inclusive.
        """
        footprint_ratio = item.footprint / room.area

        lower_bound, too_small = self.ROOM_SIZE_BANDS[0]
        if footprint_ratio < lower_bound:
            return too_small

        for upper_bound, band_score in self.ROOM_SIZE_BANDS[1:]:
            if footprint_ratio <= upper_bound:
                return band_score

        return self.ROOM_SIZE_OVERSIZED

    def _compute_style_score(self, item: FurnitureItem, room: RoomContext) -> float:
        if room.style is None:
            return self.NEUTRAL_STYLE
        return item.compatibility_score(room.style)

    def _compute_history_score(self, item: FurnitureItem, profile: UserPreferenceProfile) -> float:
        """Sum of the user's style, material and brand weights for this item, capped at 1.0."""
        score = 0.0

        for style in item.styles:
            score += profile.style_weight(style)

        for material in item.materials:
            score += profile.material_weight(material)

        score += profile.brand_weight(item.brand)

        return min(score, self.HISTORY_CAP)

    # =========================================================================
    # RANKING
    # =========================================================================

    def rank(
        self,
        room: RoomContext,
        items: Sequence[FurnitureItem],
        profile: UserPreferenceProfile,
        limit: Optional[int] = None,
        executor: Optional[Executor] = None,
    ) -> List[RecommendationScore]:
        """
        Score and rank items, keeping catalog order among equal scores.

        Args:
            room: Room being furnished
            items: Candidate items
            profile: Preference profile of the user
            limit: Maximum number of results (default 20)
            executor: Optional thread or process pool used to score items in parallel

        Returns:
            RecommendationScore list sorted by final_score (descending),
            items scoring 0 or less removed
        """
        validate_room(room)
        if limit is None:
            limit = self.settings.max_recommendations

        if executor is not None:
            scored: Iterable[RecommendationScore] = executor.map(
                self._score, items, repeat(room), repeat(profile)
            )
        else:
            scored = (self._score(item, room, profile) for item in items)

        ranked = [entry for entry in scored if entry.final_score > 0]
        ranked.sort(key=lambda entry: entry.final_score, reverse=True)

        return ranked[:limit]

    def recommend(
        self,
        room: RoomContext,
        items: Sequence[FurnitureItem],
        favorites: Sequence[FurnitureItem] = (),
        recent: Sequence[FurnitureItem] = (),
        limit: Optional[int] = None,
        executor: Optional[Executor] = None,
    ) -> List[FurnitureItem]:
        """
        Recommend items for a room from the user's history.

        Raises:
            InvalidRoomDimensions: if the room area or a dimension is not > 0
        """
        validate_room(room)

        logger.debug(
            f"[RECOMMEND] Generating recommendations: area={room.area:.2f}m², "
            f"style={room.style.value if room.style else 'unknown'}, available_items={len(items)}"
        )

        profile = compute_profile(
            favorites,
            recent,
            favorite_weight=self.settings.favorite_weight,
            recent_weight=self.settings.recent_weight,
        )
        ranked = self.rank(room, items, profile, limit=limit, executor=executor)

        logger.info(f"[RECOMMEND] Generated {len(ranked)} recommendations")
        return [entry.item for entry in ranked]

    # =========================================================================
    # RELATED RANKERS
    # =========================================================================

    def similar_items(
        self, target: FurnitureItem, items: Sequence[FurnitureItem], limit: Optional[int] = None
    ) -> List[FurnitureItem]:
        return similarity_service.similar_items(
            target,
            items,
            threshold=self.settings.similarity_threshold,
            limit=self.settings.similar_items_limit if limit is None else limit,
        )

    def complementary_items(
        self, item: FurnitureItem, items: Sequence[FurnitureItem], room_size: float, limit: Optional[int] = None
    ) -> List[FurnitureItem]:
        return complementary_service.complementary_items(
            item,
            items,
            room_size,
            limit=self.settings.complementary_items_limit if limit is None else limit,
        )

    def space_optimized(
        self,
        room_dimensions: RoomDimensions,
        category: Optional[FurnitureCategory],
        items: Sequence[FurnitureItem],
    ) -> List[FurnitureItem]:
        return space_optimizer.space_optimized(room_dimensions, category, items)

    def budget_recommendations(
        self, max_budget: float, categories: Iterable[FurnitureCategory], items: Sequence[FurnitureItem]
    ) -> List[FurnitureItem]:
        return budget_service.budget_recommendations(max_budget, categories, items)

    def trending(
        self,
        items: Sequence[FurnitureItem],
        timeframe: TrendingTimeframe = TrendingTimeframe.MONTH,
        now: Optional[datetime] = None,
    ) -> List[FurnitureItem]:
        return trending_service.trending(items, timeframe, now=now, limit=self.settings.trending_limit)


# Singleton instance
_recommendation_engine: Optional[FurnitureRecommendationEngine] = None


def get_recommendation_engine() -> FurnitureRecommendationEngine:
    """Get or create the recommendation engine singleton."""
    global _recommendation_engine
    if _recommendation_engine is None:
        _recommendation_engine = FurnitureRecommendationEngine()
    return _recommendation_engine
