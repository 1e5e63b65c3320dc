"""
Unit tests for pairwise similarity and similar-item lookup
"""
import itertools

import pytest

from furnirank.schemas.furniture import (
    FurnitureCategory,
    FurnitureMaterial,
    FurnitureStyle,
    FurnitureSubcategory,
)
from furnirank.services.similarity_service import (
    dimension_similarity,
    similar_items,
    similarity,
)


class TestSimilarity:
    @pytest.mark.unit
    def test_identical_attributes(self, make_item):
        a = make_item(
            "a",
            price=900.0,
            styles=[FurnitureStyle.MODERN, FurnitureStyle.MINIMALIST],
            materials=[FurnitureMaterial.WOOD],
        )
        b = make_item(
            "b",
            price=1000.0,
            styles=[FurnitureStyle.MODERN, FurnitureStyle.MINIMALIST],
            materials=[FurnitureMaterial.WOOD],
        )

        # 0.3 + 0.2 + 2 * 0.1 + 1 * 0.1 + 0.1 + 0.2
        assert similarity(a, b) == pytest.approx(1.1)

    @pytest.mark.unit
    def test_nothing_in_common_but_size(self, make_item):
        a = make_item("a", category=FurnitureCategory.SEATING, subcategory=FurnitureSubcategory.SOFA, price=100.0)
        b = make_item(
            "b",
            category=FurnitureCategory.LIGHTING,
            subcategory=FurnitureSubcategory.FLOOR_LAMP,
            price=5000.0,
        )

        assert similarity(a, b) == pytest.approx(0.2)

    @pytest.mark.unit
    def test_volume_difference(self, make_item):
        small = make_item("small", width=1.0, depth=1.0, height=1.0)
        large = make_item("large", width=2.0, depth=1.0, height=1.0)

        assert dimension_similarity(small, large) == pytest.approx(0.5)

    @pytest.mark.unit
    def test_zero_volumes_count_as_same_size(self, make_item):
        a = make_item("a", width=0.0)
        b = make_item("b", height=0.0)

        assert dimension_similarity(a, b) == 1.0

    @pytest.mark.unit
    def test_symmetric(self, sample_catalog, make_item):
        items = sample_catalog + [
            make_item("styled", styles=[FurnitureStyle.RUSTIC], materials=[FurnitureMaterial.WOOD], price=300.0)
        ]
        for a, b in itertools.permutations(items, 2):
            assert similarity(a, b) == similarity(b, a)


class TestSimilarItems:
    @pytest.mark.unit
    def test_excludes_target(self, make_item):
        target = make_item("target")
        twin = make_item("target")
        other = make_item("other")

        results = similar_items(target, [twin, other])

        assert [item.id for item in results] == ["other"]

    @pytest.mark.unit
    def test_threshold_is_exclusive(self, make_item):
        target = make_item("t", category=FurnitureCategory.SEATING, subcategory=FurnitureSubcategory.SOFA, price=100.0)
        # only the size term matches: exactly 0.2
        unrelated = make_item(
            "u",
            category=FurnitureCategory.LIGHTING,
            subcategory=FurnitureSubcategory.FLOOR_LAMP,
            price=5000.0,
        )

        assert similar_items(target, [unrelated], threshold=0.2) == []
        assert similar_items(target, [unrelated], threshold=0.19) == [unrelated]

    @pytest.mark.unit
    def test_sorted_and_limited(self, make_item):
        target = make_item("t", styles=[FurnitureStyle.MODERN], price=900.0)
        candidates = [
            make_item("weak", category=FurnitureCategory.TABLES, subcategory=FurnitureSubcategory.DESK, price=900.0),
            make_item("strong", styles=[FurnitureStyle.MODERN], price=900.0),
            make_item("medium", price=900.0),
        ]

        results = similar_items(target, candidates, limit=2)

        assert [item.id for item in results] == ["strong", "medium"]

    @pytest.mark.unit
    def test_default_limit_is_five(self, make_item):
        target = make_item("t")
        candidates = [make_item(f"c{i}") for i in range(8)]

        results = similar_items(target, candidates)

        assert [item.id for item in results] == [f"c{i}" for i in range(5)]
