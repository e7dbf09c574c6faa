"""Unit tests for the built-in work catalogue and its module-level queries."""

from __future__ import annotations

from typing import Callable, List

import pytest

from work_catalog.catalog import (
    WorkCatalog,
    WorkCategory,
    build_responsive_variants,
    get_by_slug,
    get_catalog,
    list_3d,
    list_all,
    list_all_slugs,
    list_by_category,
    list_products,
    list_summaries,
    list_uiux,
)

EXPECTED_SLUGS = [
    "corevia-financial-platform",
    "landscapo-architecture-platform",
    "stayli-vacation-rental-platform",
    "elev8-rwanda-website",
    "elev8-moments-event-design",
]


class TestCatalogueContents:
    @pytest.mark.unit
    def test_all_definitions_registered_in_order(self) -> None:
        assert list_all_slugs() == EXPECTED_SLUGS

    @pytest.mark.unit
    def test_list_all_length_matches_keys(self) -> None:
        assert len(list_all()) == len(get_catalog().works) == 5

    @pytest.mark.unit
    def test_slugs_equal_project_ids(self) -> None:
        assert list_all_slugs() == [work.id for work in list_all()]

    @pytest.mark.unit
    def test_every_id_matches_its_key(self) -> None:
        for slug, work in get_catalog().works.items():
            assert work.id == slug

    @pytest.mark.unit
    def test_corevia_example(self) -> None:
        work = get_by_slug("corevia-financial-platform")

        assert work is not None
        assert work.category == "products"
        assert work.external_link == "https://corevias.netlify.app/"
        assert work.about.client == "Corevia Consulting"
        assert work.about.year == "2024"

    @pytest.mark.unit
    def test_stayli_summary_uses_thumbnail(self) -> None:
        summary = next(s for s in list_summaries() if s.id == "stayli-vacation-rental-platform")
        work = get_by_slug("stayli-vacation-rental-platform")

        assert work is not None
        assert summary.image == work.thumbnail_image

    @pytest.mark.unit
    def test_unknown_slug_is_absent(self) -> None:
        assert get_by_slug("does-not-exist") is None

    @pytest.mark.unit
    def test_paragraphs_are_ordered_and_non_empty(self) -> None:
        for work in list_all():
            assert len(work.problem_description) >= 1
            assert len(work.solution_description) >= 1
        corevia = get_by_slug("corevia-financial-platform")
        assert corevia is not None
        assert corevia.problem_description[0].startswith("Corevia Consulting needed")
        assert corevia.problem_description[1].startswith("The website required")


class TestImagesFollowBuilderConvention:
    @pytest.mark.unit
    def test_hero_and_closing_are_large(self) -> None:
        for work in list_all():
            for image in (work.hero_image, work.closing_image):
                assert (image.width, image.height) == (2400, 1600)

    @pytest.mark.unit
    def test_secondary_and_process_have_no_dimensions(self) -> None:
        for work in list_all():
            for image in (work.secondary_image, work.process_image):
                assert image.width is None
                assert image.height is None

    @pytest.mark.unit
    def test_variants_derive_from_source(self) -> None:
        for work in list_all():
            for image in (
                work.hero_image,
                work.secondary_image,
                work.process_image,
                work.closing_image,
            ):
                assert image.responsive_variants == build_responsive_variants(image.source)
                assert image.sizing_hint == "calc(100vw - 24px)"
                assert image.alt_text


class TestCategoryQueries:
    @pytest.mark.unit
    @pytest.mark.parametrize("category", [c.value for c in WorkCategory])
    def test_filter_returns_only_that_category(self, category: str) -> None:
        for work in list_by_category(category):
            assert work.category == category

    @pytest.mark.unit
    def test_categories_partition_catalogue(self) -> None:
        parts = [list_products(), list_uiux(), list_3d()]
        ids = [w.id for part in parts for w in part]

        assert len(ids) == len(set(ids))
        assert set(ids) == set(list_all_slugs())

    @pytest.mark.unit
    def test_built_in_works_are_all_products(self) -> None:
        assert [w.id for w in list_products()] == EXPECTED_SLUGS
        assert list_uiux() == []
        assert list_3d() == []


class TestIdempotence:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "query",
        [
            list_all,
            list_all_slugs,
            list_summaries,
            list_products,
            list_uiux,
            list_3d,
            lambda: list_by_category("products"),
            lambda: get_by_slug("elev8-rwanda-website"),
            lambda: get_by_slug("missing"),
        ],
    )
    def test_repeated_calls_are_equal(self, query: Callable[[], object]) -> None:
        assert query() == query()

    @pytest.mark.unit
    def test_get_catalog_is_cached(self) -> None:
        assert get_catalog() is get_catalog()
        assert isinstance(get_catalog(), WorkCatalog)

    @pytest.mark.unit
    def test_summaries_reuse_cached_objects(self) -> None:
        first: List = list_summaries()
        second: List = list_summaries()

        assert first == second
        assert all(a is b for a, b in zip(first, second))
