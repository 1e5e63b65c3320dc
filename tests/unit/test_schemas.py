"""
Unit tests for furniture, room and catalog schemas
"""
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from furnirank.schemas.catalog import FurnitureFilters
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
from furnirank.schemas.room import RoomDimensions


class TestPriceRange:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "amount,expected",
        [
            (0.0, PriceRange.BUDGET),
            (199.99, PriceRange.BUDGET),
            (200.0, PriceRange.LOW),
            (499.0, PriceRange.LOW),
            (500.0, PriceRange.MEDIUM),
            (1500.0, PriceRange.HIGH),
            (3000.0, PriceRange.LUXURY),
            (25000.0, PriceRange.LUXURY),
            (-10.0, PriceRange.BUDGET),
        ],
    )
    def test_for_amount(self, amount, expected):
        assert PriceRange.for_amount(amount) == expected


class TestPricing:
    @pytest.mark.unit
    def test_range_derived_from_retail(self):
        assert FurniturePricing(retail_price=1800.0).price_range == PriceRange.HIGH

    @pytest.mark.unit
    def test_range_derived_from_sale_price(self):
        pricing = FurniturePricing(retail_price=600.0, sale_price=450.0, is_on_sale=True)

        assert pricing.price_range == PriceRange.LOW
        assert pricing.current_price == 450.0
        assert pricing.discount_percentage == pytest.approx(25.0)

    @pytest.mark.unit
    def test_explicit_range_kept(self):
        assert FurniturePricing(retail_price=100.0, price_range=PriceRange.LUXURY).price_range == PriceRange.LUXURY

    @pytest.mark.unit
    def test_unpriced_defaults_to_medium(self):
        pricing = FurniturePricing()

        assert pricing.price_range == PriceRange.MEDIUM
        assert pricing.current_price is None
        assert pricing.discount_percentage is None

    @pytest.mark.unit
    def test_sale_price_ignored_when_not_on_sale(self):
        pricing = FurniturePricing(retail_price=900.0, sale_price=100.0)
        assert pricing.current_price == 900.0


class TestFurnitureItem:
    @pytest.mark.unit
    def test_geometry(self, make_item):
        item = make_item("x", width=2.0, depth=0.5, height=0.8)

        assert item.footprint == pytest.approx(1.0)
        assert item.volume == pytest.approx(0.8)
        assert item.fits_in_space(2.0, 0.5, 0.8)
        assert not item.fits_in_space(1.9, 1.0, 1.0)

    @pytest.mark.unit
    def test_equality_by_id(self, make_item):
        assert make_item("same", popularity_score=0.1) == make_item("same", popularity_score=0.9)
        assert make_item("a") != make_item("b")
        assert len({make_item("a"), make_item("a"), make_item("b")}) == 2

    @pytest.mark.unit
    def test_generated_ids_are_unique(self):
        fields = dict(
            name="Stool",
            category=FurnitureCategory.SEATING,
            subcategory=FurnitureSubcategory.STOOL,
            dimensions=FurnitureDimensions(width=0.4, depth=0.4, height=0.6),
        )
        assert FurnitureItem(**fields).id != FurnitureItem(**fields).id

    @pytest.mark.unit
    def test_naive_timestamps_become_utc(self, make_item):
        item = make_item("x", date_added=datetime(2026, 1, 1, 9, 30))
        assert item.date_added == datetime(2026, 1, 1, 9, 30, tzinfo=timezone.utc)

    @pytest.mark.unit
    def test_compatibility_score(self, make_item):
        item = make_item("x", style_compatibility={RoomStyle.MODERN: 0.9})

        assert item.compatibility_score(RoomStyle.MODERN) == 0.9
        assert item.compatibility_score(RoomStyle.RUSTIC) == 0.0

    @pytest.mark.unit
    def test_color_families(self, make_item):
        item = make_item(
            "x",
            colors=[
                FurnitureColor(name="Sand", color_family=ColorFamily.EARTH),
                FurnitureColor(name="Clay", color_family=ColorFamily.EARTH),
                FurnitureColor(name="White", color_family=ColorFamily.NEUTRAL),
            ],
        )
        assert item.color_families == {ColorFamily.EARTH, ColorFamily.NEUTRAL}

    @pytest.mark.unit
    def test_frozen(self, make_item):
        item = make_item("x")
        with pytest.raises(ValidationError):
            item.popularity_score = 0.5

    @pytest.mark.unit
    @pytest.mark.parametrize("field,value", [("popularity_score", 1.5), ("user_rating", 6.0)])
    def test_score_bounds(self, make_item, field, value):
        with pytest.raises(ValidationError):
            make_item("x", **{field: value})


class TestEnums:
    @pytest.mark.unit
    def test_every_subcategory_has_a_category(self):
        covered = [sub for category in FurnitureCategory for sub in category.subcategories]

        assert sorted(covered) == sorted(FurnitureSubcategory)
        assert len(covered) == len(set(covered))

    @pytest.mark.unit
    def test_display_names(self):
        assert FurnitureCategory.SEATING.display_name == "Seating"
        assert FurnitureStyle.MID_CENTURY.display_name == "Mid-Century"


class TestRoomSchemas:
    @pytest.mark.unit
    def test_room_volume(self):
        assert RoomDimensions(width=5.0, depth=4.0, height=2.5).volume == pytest.approx(50.0)

    @pytest.mark.unit
    def test_room_dimensions_accept_non_positive_values(self):
        # rejected by the engine rather than at construction
        assert RoomDimensions(width=0.0, depth=-1.0, height=2.0).volume == 0.0


class TestPreferenceProfile:
    @pytest.mark.unit
    def test_missing_keys_are_zero(self):
        profile = UserPreferenceProfile(categories={FurnitureCategory.SEATING: 0.5})

        assert profile.category_weight(FurnitureCategory.SEATING) == 0.5
        assert profile.category_weight(FurnitureCategory.TABLES) == 0.0
        assert profile.brand_weight(None) == 0.0
        assert not profile.is_empty
        assert UserPreferenceProfile().is_empty


class TestFilters:
    @pytest.mark.unit
    def test_no_active_filters(self):
        filters = FurnitureFilters()

        assert not filters.has_active_filters
        assert filters.active_filter_count == 0

    @pytest.mark.unit
    def test_price_and_dimension_bounds_count_once(self):
        filters = FurnitureFilters(
            min_price=100.0,
            max_price=500.0,
            max_width=1.0,
            max_depth=1.0,
            categories=[FurnitureCategory.SEATING],
            in_stock_only=True,
        )

        assert filters.has_active_filters
        assert filters.active_filter_count == 4

    @pytest.mark.unit
    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            FurnitureFilters(min_price=-1.0)


class TestSetLikeFields:
    @pytest.mark.unit
    def test_duplicates_dropped_in_order(self, make_item):
        item = make_item(
            "x",
            styles=[FurnitureStyle.RUSTIC, FurnitureStyle.MODERN, FurnitureStyle.RUSTIC],
            materials=[FurnitureMaterial.WOOD, FurnitureMaterial.WOOD],
            functional_features=[FunctionalFeature.STORAGE, FunctionalFeature.STORAGE],
            colors=[
                FurnitureColor(name="Oak", color_family=ColorFamily.WARM),
                FurnitureColor(name="Oak", color_family=ColorFamily.WARM),
            ],
        )

        assert item.styles == [FurnitureStyle.RUSTIC, FurnitureStyle.MODERN]
        assert item.materials == [FurnitureMaterial.WOOD]
        assert item.functional_features == [FunctionalFeature.STORAGE]
        assert len(item.colors) == 1
