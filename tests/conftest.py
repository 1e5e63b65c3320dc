"""
Shared pytest fixtures and configuration for all tests
"""
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add the project root to the path so the package imports without installation
sys.path.insert(0, str(Path(__file__).parent.parent))

from furnirank.schemas.furniture import (  # noqa: E402
    FurnitureAvailability,
    FurnitureCategory,
    FurnitureDimensions,
    FurnitureItem,
    FurniturePricing,
    FurnitureSubcategory,
)
from furnirank.schemas.room import RoomContext, RoomDimensions  # noqa: E402

FIXED_NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def build_item(
    item_id: str,
    *,
    category: FurnitureCategory = FurnitureCategory.SEATING,
    subcategory: FurnitureSubcategory = FurnitureSubcategory.CHAIR,
    width: float = 1.0,
    depth: float = 1.0,
    height: float = 1.0,
    price: float = None,
    in_stock: bool = True,
    **overrides,
) -> FurnitureItem:
    """Build a FurnitureItem with sensible defaults; extra kwargs go straight to the model."""
    fields = dict(
        id=item_id,
        name=f"Item {item_id}",
        category=category,
        subcategory=subcategory,
        dimensions=FurnitureDimensions(width=width, depth=depth, height=height),
        availability=FurnitureAvailability(in_stock=in_stock),
        date_added=FIXED_NOW - timedelta(days=400),
        last_updated=FIXED_NOW - timedelta(days=400),
    )
    if price is not None:
        fields["pricing"] = FurniturePricing(retail_price=price)
    fields.update(overrides)
    return FurnitureItem(**fields)


@pytest.fixture
def make_item():
    """Factory fixture for catalog items."""
    return build_item


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def living_room():
    """20 m² room with no target style."""
    return RoomContext(area=20.0, dimensions=RoomDimensions(width=5.0, depth=4.0, height=2.7))


@pytest.fixture
def sample_catalog():
    """Mixed catalog covering several categories."""
    return [
        build_item(
            "sofa",
            category=FurnitureCategory.SEATING,
            subcategory=FurnitureSubcategory.SOFA,
            width=2.0,
            depth=1.2,
            height=0.8,
            price=900.0,
            popularity_score=0.8,
        ),
        build_item(
            "coffee-table",
            category=FurnitureCategory.TABLES,
            subcategory=FurnitureSubcategory.COFFEE_TABLE,
            width=1.2,
            depth=0.6,
            height=0.45,
            price=300.0,
            popularity_score=0.6,
        ),
        build_item(
            "floor-lamp",
            category=FurnitureCategory.LIGHTING,
            subcategory=FurnitureSubcategory.FLOOR_LAMP,
            width=0.4,
            depth=0.4,
            height=1.6,
            price=150.0,
            popularity_score=0.4,
        ),
        build_item(
            "bookshelf",
            category=FurnitureCategory.STORAGE,
            subcategory=FurnitureSubcategory.BOOKSHELF,
            width=0.9,
            depth=0.35,
            height=2.0,
            price=450.0,
            popularity_score=0.7,
        ),
        build_item(
            "bed",
            category=FurnitureCategory.BEDROOM,
            subcategory=FurnitureSubcategory.BED,
            width=1.6,
            depth=2.1,
            height=1.0,
            price=1800.0,
            popularity_score=0.9,
        ),
    ]
