"""
User preference profile derived from favorites and recently viewed items
"""
from typing import Dict, Optional

from pydantic import BaseModel, Field

from furnirank.schemas.furniture import (
    FurnitureCategory,
    FurnitureMaterial,
    FurnitureStyle,
    PriceRange,
)


class UserPreferenceProfile(BaseModel):
    """Normalized preference weights, each in [0, 1].

    Lookups for keys the user has never interacted with return 0.0.
    """

    categories: Dict[FurnitureCategory, float] = Field(default_factory=dict)
    styles: Dict[FurnitureStyle, float] = Field(default_factory=dict)
    materials: Dict[FurnitureMaterial, float] = Field(default_factory=dict)
    price_ranges: Dict[PriceRange, float] = Field(default_factory=dict)
    brands: Dict[str, float] = Field(default_factory=dict)

    class Config:
        frozen = True

    @property
    def is_empty(self) -> bool:
        return not (self.categories or self.styles or self.materials or self.price_ranges or self.brands)

    def category_weight(self, category: FurnitureCategory) -> float:
        return self.categories.get(category, 0.0)

    def style_weight(self, style: FurnitureStyle) -> float:
        return self.styles.get(style, 0.0)

    def material_weight(self, material: FurnitureMaterial) -> float:
        return self.materials.get(material, 0.0)

    def price_range_weight(self, price_range: PriceRange) -> float:
        return self.price_ranges.get(price_range, 0.0)

    def brand_weight(self, brand: Optional[str]) -> float:
        if brand is None:
            return 0.0
        return self.brands.get(brand, 0.0)
