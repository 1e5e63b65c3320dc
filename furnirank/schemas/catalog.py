"""
Pydantic schemas for catalog filtering, statistics and snapshots
"""
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from furnirank.schemas.furniture import (
    ColorFamily,
    FunctionalFeature,
    FurnitureCategory,
    FurnitureItem,
    FurnitureMaterial,
    FurnitureStyle,
    FurnitureSubcategory,
    PriceRange,
)


class FurnitureFilters(BaseModel):
    """Catalog browsing filters; empty lists and None mean 'no constraint'"""

    categories: List[FurnitureCategory] = Field(default_factory=list)
    subcategories: List[FurnitureSubcategory] = Field(default_factory=list)
    price_range: Optional[PriceRange] = None
    min_price: Optional[float] = Field(None, ge=0)
    max_price: Optional[float] = Field(None, ge=0)
    materials: List[FurnitureMaterial] = Field(default_factory=list)
    color_families: List[ColorFamily] = Field(default_factory=list)
    styles: List[FurnitureStyle] = Field(default_factory=list)
    features: List[FunctionalFeature] = Field(default_factory=list)
    brands: List[str] = Field(default_factory=list)
    max_width: Optional[float] = None
    max_depth: Optional[float] = None
    max_height: Optional[float] = None
    assembly_required: Optional[bool] = None
    in_stock_only: bool = False
    show_custom_only: Optional[bool] = None

    @property
    def has_active_filters(self) -> bool:
        return self.active_filter_count > 0

    @property
    def active_filter_count(self) -> int:
        checks = [
            bool(self.categories),
            bool(self.subcategories),
            self.price_range is not None,
            self.min_price is not None or self.max_price is not None,
            bool(self.materials),
            bool(self.color_families),
            bool(self.styles),
            bool(self.features),
            bool(self.brands),
            self.max_width is not None or self.max_depth is not None or self.max_height is not None,
            self.assembly_required is not None,
            self.in_stock_only,
            self.show_custom_only is not None,
        ]
        return sum(1 for check in checks if check)


class CatalogStatistics(BaseModel):
    total_items: int
    custom_items: int
    favorite_items: int
    recent_items: int
    items_by_category: Dict[FurnitureCategory, int] = Field(default_factory=dict)
    items_by_price_range: Dict[PriceRange, int] = Field(default_factory=dict)
    items_by_style: Dict[FurnitureStyle, int] = Field(default_factory=dict)


class CatalogSnapshot(BaseModel):
    """Consistent, immutable view of the catalog and the user's history"""

    items: Tuple[FurnitureItem, ...] = ()
    favorites: Tuple[FurnitureItem, ...] = ()
    recent: Tuple[FurnitureItem, ...] = ()

    class Config:
        frozen = True
