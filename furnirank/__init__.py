"""
Furnirank: furniture recommendation and catalog ranking engine.

Usage:
    from furnirank import FurnitureRecommendationEngine, RoomContext, RoomDimensions

    engine = FurnitureRecommendationEngine()
    room = RoomContext(area=20.0, dimensions=RoomDimensions(width=5.0, depth=4.0, height=2.7))
    results = engine.recommend(room, items, favorites, recent)
"""
from furnirank.core.exceptions import (
    CatalogError,
    FurnirankError,
    InvalidBudget,
    InvalidCustomItem,
    InvalidRoomDimensions,
    ItemNotFound,
)
from furnirank.schemas.catalog import CatalogSnapshot, CatalogStatistics, FurnitureFilters
from furnirank.schemas.furniture import (
    ColorFamily,
    FunctionalFeature,
    FurnitureCategory,
    FurnitureColor,
    FurnitureDimensions,
    FurnitureItem,
    FurnitureMaterial,
    FurniturePricing,
    FurnitureStyle,
    FurnitureSubcategory,
    PriceRange,
    RoomStyle,
)
from furnirank.schemas.preferences import UserPreferenceProfile
from furnirank.schemas.room import RoomContext, RoomDimensions, TrendingTimeframe
from furnirank.services.catalog_store import CatalogStore
from furnirank.services.preference_model import compute_profile
from furnirank.services.recommendation_engine import (
    FurnitureRecommendationEngine,
    RecommendationScore,
    get_recommendation_engine,
)

__version__ = "1.0.0"

__all__ = [
    "CatalogError",
    "CatalogSnapshot",
    "CatalogStatistics",
    "CatalogStore",
    "ColorFamily",
    "FunctionalFeature",
    "FurnirankError",
    "FurnitureCategory",
    "FurnitureColor",
    "FurnitureDimensions",
    "FurnitureFilters",
    "FurnitureItem",
    "FurnitureMaterial",
    "FurniturePricing",
    "FurnitureRecommendationEngine",
    "FurnitureStyle",
    "FurnitureSubcategory",
    "InvalidBudget",
    "InvalidCustomItem",
    "InvalidRoomDimensions",
    "ItemNotFound",
    "PriceRange",
    "RecommendationScore",
    "RoomContext",
    "RoomDimensions",
    "RoomStyle",
    "TrendingTimeframe",
    "UserPreferenceProfile",
    "compute_profile",
    "get_recommendation_engine",
]
