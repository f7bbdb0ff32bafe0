"""
Tests for query intent selection and listing filters
"""
from datetime import date

import pytest

from shopapp.pagination import Page, PageRequest
from shopapp.services.shop_queries import ShopFilters, ShopQueryIntent, resolve_intent
from conftest import make_shop


@pytest.mark.unit
class TestResolveIntent:
    """Sort keys win, then the most specific filter combination"""

    @pytest.mark.parametrize("sort_by,expected", [
        ("name", ShopQueryIntent.SORT_BY_NAME),
        ("createdAt", ShopQueryIntent.SORT_BY_CREATED_AT),
        ("nbProducts", ShopQueryIntent.SORT_BY_PRODUCT_COUNT),
        ("whatever", ShopQueryIntent.SORT_BY_PRODUCT_COUNT),
    ])
    def test_sort_by(self, sort_by, expected):
        filters = ShopFilters(in_vacations=True, created_before=date(2024, 6, 1))

        assert resolve_intent(sort_by, filters) == expected

    @pytest.mark.parametrize("filters,expected", [
        (ShopFilters(True, date(2024, 6, 1), date(2024, 1, 1)), ShopQueryIntent.VACATIONS_CREATED_BETWEEN),
        (ShopFilters(False, date(2024, 6, 1), None), ShopQueryIntent.VACATIONS_CREATED_BEFORE),
        (ShopFilters(False, None, date(2024, 1, 1)), ShopQueryIntent.VACATIONS_CREATED_AFTER),
        (ShopFilters(True, None, None), ShopQueryIntent.VACATIONS),
        (ShopFilters(None, date(2024, 6, 1), date(2024, 1, 1)), ShopQueryIntent.CREATED_BETWEEN),
        (ShopFilters(None, date(2024, 6, 1), None), ShopQueryIntent.CREATED_BEFORE),
        (ShopFilters(None, None, date(2024, 1, 1)), ShopQueryIntent.CREATED_AFTER),
        (ShopFilters(), ShopQueryIntent.ALL),
    ])
    def test_filters(self, filters, expected):
        assert resolve_intent(None, filters) == expected

    def test_empty_sort_key_sorts_by_product_count(self):
        assert resolve_intent("", ShopFilters(in_vacations=True)) == ShopQueryIntent.SORT_BY_PRODUCT_COUNT

    def test_false_vacation_flag_counts_as_present(self):
        assert resolve_intent(None, ShopFilters(in_vacations=False)) == ShopQueryIntent.VACATIONS


@pytest.mark.unit
class TestShopFilters:
    def test_parse_iso_dates(self):
        filters = ShopFilters.parse(True, "2024-06-01", "2024-01-01")

        assert filters == ShopFilters(True, date(2024, 6, 1), date(2024, 1, 1))

    def test_parse_invalid_date_raises(self):
        with pytest.raises(ValueError):
            ShopFilters.parse(None, "01/06/2024", None)

    def test_parse_empty_date_raises(self):
        with pytest.raises(ValueError):
            ShopFilters.parse(None, None, "")

    def test_matches_requires_every_filter(self):
        shop = make_shop("Bakery", created_at=date(2024, 3, 1), in_vacations=False)

        assert ShopFilters().matches(shop)
        assert ShopFilters(in_vacations=False).matches(shop)
        assert not ShopFilters(in_vacations=True).matches(shop)
        assert not ShopFilters(in_vacations=False, created_after=date(2024, 4, 1)).matches(shop)
        assert ShopFilters(False, date(2024, 3, 2), date(2024, 2, 29)).matches(shop)

    def test_dates_are_exclusive(self):
        shop = make_shop("Bakery", created_at=date(2024, 3, 1))

        assert not ShopFilters(created_after=date(2024, 3, 1)).matches(shop)
        assert not ShopFilters(created_before=date(2024, 3, 1)).matches(shop)


@pytest.mark.unit
class TestPagination:
    def test_offset_and_total_pages(self):
        pageable = PageRequest(page=2, size=3)
        page = Page.of(["a"], pageable, total=7)

        assert pageable.offset == 6
        assert page.total_pages == 3
        assert page.page == 2 and page.size == 3

    def test_invalid_page_request(self):
        with pytest.raises(ValueError):
            PageRequest(page=-1)
        with pytest.raises(ValueError):
            PageRequest(size=0)
