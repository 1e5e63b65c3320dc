"""
In-memory furniture catalog with the user's favorites and recently viewed items.

The store owns the only mutable state around the engine. Mutations are
serialized with a lock and readers get immutable snapshots, so a preference
computation always sees a consistent favorites/recent pair.
"""
import logging
import threading
from collections import Counter
from typing import Iterable, List, Optional, Tuple

from furnirank.core.config import scoring_settings
from furnirank.core.exceptions import InvalidCustomItem, ItemNotFound
from furnirank.schemas.catalog import CatalogSnapshot, CatalogStatistics, FurnitureFilters
from furnirank.schemas.furniture import (
    ColorFamily,
    FurnitureCategory,
    FurnitureColor,
    FurnitureDimensions,
    FurnitureItem,
    FurnitureMaterial,
    FurniturePricing,
    FurnitureStyle,
    FurnitureSubcategory,
    FunctionalFeature,
    PriceRange,
    RoomStyle,
)

logger = logging.getLogger(__name__)


def _by_popularity(items: Iterable[FurnitureItem]) -> List[FurnitureItem]:
    return sorted(items, key=lambda item: item.popularity_score, reverse=True)


def matches_filters(item: FurnitureItem, filters: FurnitureFilters) -> bool:
    """True when ``item`` passes every active filter."""
    if filters.categories and item.category not in filters.categories:
        return False

    if filters.subcategories and item.subcategory not in filters.subcategories:
        return False

    if filters.price_range is not None and item.price_range != filters.price_range:
        return False

    # Items without a price are not excluded by price bounds
    price = item.current_price
    if price is not None:
        if filters.min_price is not None and price < filters.min_price:
            return False
        if filters.max_price is not None and price > filters.max_price:
            return False

    if filters.materials and not set(item.materials) & set(filters.materials):
        return False

    if filters.color_families and not item.color_families & set(filters.color_families):
        return False

    if filters.styles and not set(item.styles) & set(filters.styles):
        return False

    if filters.features and not set(item.functional_features) & set(filters.features):
        return False

    if filters.brands and item.brand not in filters.brands:
        return False

    dims = item.dimensions
    if filters.max_width is not None and dims.width > filters.max_width:
        return False
    if filters.max_depth is not None and dims.depth > filters.max_depth:
        return False
    if filters.max_height is not None and dims.height > filters.max_height:
        return False

    if filters.assembly_required is not None and item.assembly_required != filters.assembly_required:
        return False

    if filters.in_stock_only and not item.in_stock:
        return False

    if filters.show_custom_only is not None and item.is_custom != filters.show_custom_only:
        return False

    return True


class CatalogStore:
    """Catalog items plus favorites and recent history."""

    def __init__(
        self,
        items: Iterable[FurnitureItem] = (),
        *,
        max_recent_items: Optional[int] = None,
        max_featured_items: Optional[int] = None,
    ):
        self._lock = threading.RLock()
        self._items: List[FurnitureItem] = []
        self._favorites: List[FurnitureItem] = []
        self._recent: List[FurnitureItem] = []
        self.max_recent_items = (
            scoring_settings.max_recent_items if max_recent_items is None else max_recent_items
        )
        self.max_featured_items = (
            scoring_settings.max_featured_items if max_featured_items is None else max_featured_items
        )

        seen = set()
        for item in items:
            if item.id in seen:
                logger.warning(f"[CATALOG] Duplicate item id {item.id} ignored")
                continue
            seen.add(item.id)
            self._items.append(item)

        logger.info(f"[CATALOG] Catalog initialized with {len(self._items)} items")

    # =========================================================================
    # READS
    # =========================================================================

    @property
    def items(self) -> Tuple[FurnitureItem, ...]:
        with self._lock:
            return tuple(self._items)

    @property
    def favorites(self) -> Tuple[FurnitureItem, ...]:
        with self._lock:
            return tuple(self._favorites)

    @property
    def recent(self) -> Tuple[FurnitureItem, ...]:
        with self._lock:
            return tuple(self._recent)

    @property
    def featured(self) -> Tuple[FurnitureItem, ...]:
        with self._lock:
            featured = [item for item in self._items if item.is_featured]
            return tuple(featured[: self.max_featured_items])

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def snapshot(self) -> CatalogSnapshot:
        """Consistent view of items, favorites and recent items."""
        with self._lock:
            return CatalogSnapshot(
                items=tuple(self._items),
                favorites=tuple(self._favorites),
                recent=tuple(self._recent),
            )

    def get_item(self, item_id: str) -> FurnitureItem:
        with self._lock:
            for item in self._items:
                if item.id == item_id:
                    return item
        raise ItemNotFound(item_id)

    def items_in_category(self, category: FurnitureCategory) -> List[FurnitureItem]:
        """Items of one category, most popular first."""
        return _by_popularity(item for item in self.items if item.category == category)

    def items_in_subcategory(self, subcategory: FurnitureSubcategory) -> List[FurnitureItem]:
        return _by_popularity(item for item in self.items if item.subcategory == subcategory)

    def filter_items(self, filters: FurnitureFilters) -> List[FurnitureItem]:
        """Items passing ``filters``, in catalog order."""
        return [item for item in self.items if matches_filters(item, filters)]

    def statistics(self) -> CatalogStatistics:
        with self._lock:
            items = list(self._items)
            favorite_count = len(self._favorites)
            recent_count = len(self._recent)

        by_style: Counter = Counter()
        for item in items:
            by_style.update(item.styles)

        return CatalogStatistics(
            total_items=len(items),
            custom_items=sum(1 for item in items if item.is_custom),
            favorite_items=favorite_count,
            recent_items=recent_count,
            items_by_category=dict(Counter(item.category for item in items)),
            items_by_price_range=dict(Counter(item.price_range for item in items)),
            items_by_style=dict(by_style),
        )

    # =========================================================================
    # FAVORITES AND RECENT
    # =========================================================================

    def is_favorite(self, item: FurnitureItem) -> bool:
        with self._lock:
            return any(favorite.id == item.id for favorite in self._favorites)

    def add_favorite(self, item: FurnitureItem) -> None:
        with self._lock:
            if self.is_favorite(item):
                return
            self._favorites.append(item)
        logger.debug(f"[CATALOG] Added item to favorites: {item.id} ({item.name})")

    def remove_favorite(self, item: FurnitureItem) -> None:
        with self._lock:
            self._favorites = [favorite for favorite in self._favorites if favorite.id != item.id]

    def toggle_favorite(self, item: FurnitureItem) -> bool:
        """Flip the favorite state of ``item`` and return the new state."""
        with self._lock:
            if self.is_favorite(item):
                self.remove_favorite(item)
                return False
            self.add_favorite(item)
            return True

    def add_recent(self, item: FurnitureItem) -> None:
        """Move ``item`` to the front of the recent list, keeping at most max_recent_items."""
        with self._lock:
            recent = [viewed for viewed in self._recent if viewed.id != item.id]
            recent.insert(0, item)
            self._recent = recent[: self.max_recent_items]

    # =========================================================================
    # CUSTOM ITEMS
    # =========================================================================

    def import_custom_item(self, item: FurnitureItem) -> FurnitureItem:
        """
        Add a user-authored item to the catalog.

        Raises:
            InvalidCustomItem: if an item with the same id already exists
        """
        custom_item = item.model_copy(update={"is_custom": True})

        with self._lock:
            if any(existing.id == item.id for existing in self._items):
                raise InvalidCustomItem(item.id, "an item with this id already exists")
            self._items.append(custom_item)

        logger.info(f"[CATALOG] Imported custom furniture item: {custom_item.id} ({custom_item.name})")
        return custom_item

    def delete_custom_item(self, item_id: str) -> None:
        """
        Remove a custom item from the catalog, favorites and recent items.

        Raises:
            ItemNotFound: if no custom item has this id
        """
        with self._lock:
            if not any(item.id == item_id and item.is_custom for item in self._items):
                raise ItemNotFound(item_id)

            self._items = [item for item in self._items if item.id != item_id]
            self._favorites = [item for item in self._favorites if item.id != item_id]
            self._recent = [item for item in self._recent if item.id != item_id]

        logger.info(f"[CATALOG] Deleted custom furniture item: {item_id}")


def load_sample_items() -> List[FurnitureItem]:
    """Built-in items used to seed an empty catalog."""
    modern_sofa = FurnitureItem(
        name="Modern 3-Seat Sofa",
        description="Contemporary three-seater sofa with clean lines and comfortable cushioning",
        category=FurnitureCategory.SEATING,
        subcategory=FurnitureSubcategory.SOFA,
        brand="DesignCo",
        dimensions=FurnitureDimensions(width=2.1, depth=0.9, height=0.8, seat_height=0.45),
        weight=45.0,
        materials=[FurnitureMaterial.FABRIC, FurnitureMaterial.WOOD],
        colors=[FurnitureColor(name="Charcoal Gray", hex_value="#36454F", color_family=ColorFamily.NEUTRAL)],
        styles=[FurnitureStyle.MODERN, FurnitureStyle.CONTEMPORARY],
        assembly_required=True,
        style_compatibility={RoomStyle.MODERN: 1.0, RoomStyle.CONTEMPORARY: 0.9, RoomStyle.MINIMALIST: 0.8},
        functional_features=[FunctionalFeature.MODULAR],
        pricing=FurniturePricing(retail_price=899.99, currency="USD", price_range=PriceRange.MEDIUM),
        tags=["modern", "comfortable", "living room", "gray"],
        is_featured=True,
        popularity_score=0.8,
    )

    dining_table = FurnitureItem(
        name="Oak Dining Table",
        description="Solid oak dining table with natural finish, seats 6 people",
        category=FurnitureCategory.TABLES,
        subcategory=FurnitureSubcategory.DINING_TABLE,
        brand="WoodCraft",
        dimensions=FurnitureDimensions(width=1.8, depth=0.9, height=0.75),
        weight=55.0,
        materials=[FurnitureMaterial.WOOD],
        colors=[FurnitureColor(name="Natural Oak", hex_value="#D2B48C", color_family=ColorFamily.WARM)],
        styles=[FurnitureStyle.TRADITIONAL, FurnitureStyle.RUSTIC],
        style_compatibility={RoomStyle.TRADITIONAL: 1.0, RoomStyle.RUSTIC: 0.9},
        pricing=FurniturePricing(retail_price=1299.99, currency="USD", price_range=PriceRange.MEDIUM),
        tags=["wood", "dining", "oak", "traditional"],
        is_featured=True,
        popularity_score=0.9,
    )

    return [modern_sofa, dining_table]
